"""
PLONK 최종 열기 검사 (확장)
===========================

verify()의 기본 계약은 구조 검사만을 결과에 반영한다. 이 모듈은
유도된 챌린지와 Lagrange 값을 받아 snarkjs와 같은 방식으로
KZG 일괄 열기 페어링 검사를 수행하여 프로토콜을 완성한다.
verify_with_opening()에서만 사용된다.

**검증 과정**:
  1. PI(ξ) 계산
  2. r₀ (선형화 다항식의 상수항) 계산
  3. 선형화 커밋먼트 [D]₁ 구성
  4. 결합 커밋먼트 [F]₁, 결합 평가값 [E]₁ 구성
  5. 페어링 검사

**핵심 방정식** (snarkjs plonk_verify):
  r₀ = PI(ξ) - L₁(ξ)·α² - α·(ā+βs̄σ1+γ)(b̄+βs̄σ2+γ)(c̄+γ)·z̄ω

  [D]₁ = ā·b̄·[Qm] + ā·[Ql] + b̄·[Qr] + c̄·[Qo] + [Qc]
       + (α·(ā+βξ+γ)(b̄+βk1ξ+γ)(c̄+βk2ξ+γ) + L₁(ξ)·α² + u)·[Z]
       - α·β·z̄ω·(ā+βs̄σ1+γ)(b̄+βs̄σ2+γ)·[S3]
       - Z_H(ξ)·([T1] + ξⁿ·[T2] + ξ²ⁿ·[T3])

  [F]₁ = [D]₁ + v·[A] + v²·[B] + v³·[C] + v⁴·[S1] + v⁵·[S2]
  [E]₁ = (-r₀ + v·ā + v²·b̄ + v³·c̄ + v⁴·s̄σ1 + v⁵·s̄σ2 + u·z̄ω)·G₁

  e(W_ξ + u·W_ξω, [τ]₂) == e(ξ·W_ξ + u·ξ·ω·W_ξω + [F]₁ - [E]₁, G₂)
"""

from zkverify.plonk.field import (
    FR, G1, G2, ec_mul, ec_add, ec_sub, ec_pairing, to_py_ecc_g1,
)
from zkverify.plonk.lagrange import calculate_pi


def _evals(proof):
    return (
        FR(proof.eval_a), FR(proof.eval_b), FR(proof.eval_c),
        FR(proof.eval_s1), FR(proof.eval_s2), FR(proof.eval_zw),
    )


def calculate_r0(proof, challenges, pi, l1):
    """선형화 다항식의 상수 기여분 r₀."""
    a, b, c, s1, s2, zw = _evals(proof)
    beta, gamma, alpha = challenges.beta, challenges.gamma, challenges.alpha

    e2 = l1 * alpha * alpha
    e3 = (a + beta * s1 + gamma) * (b + beta * s2 + gamma) * (c + gamma)
    e3 = e3 * zw * alpha
    return pi - e2 - e3


def calculate_d(proof, challenges, vk, l1):
    """선형화 커밋먼트 [D]₁ (py_ecc 점)."""
    a, b, c, s1, s2, zw = _evals(proof)
    beta, gamma, alpha = challenges.beta, challenges.gamma, challenges.alpha
    xi, u = challenges.xi, challenges.u

    # 게이트 항
    d1 = ec_mul(to_py_ecc_g1(vk.Qm), a * b)
    d1 = ec_add(d1, ec_mul(to_py_ecc_g1(vk.Ql), a))
    d1 = ec_add(d1, ec_mul(to_py_ecc_g1(vk.Qr), b))
    d1 = ec_add(d1, ec_mul(to_py_ecc_g1(vk.Qo), c))
    d1 = ec_add(d1, to_py_ecc_g1(vk.Qc))

    # 순열 z(x) 항 + 경계 항 + u (W_ξω 열기와 결합)
    betaxi = beta * xi
    d2a = (
        (a + betaxi + gamma)
        * (b + betaxi * vk.k1 + gamma)
        * (c + betaxi * vk.k2 + gamma)
        * alpha
    )
    d2b = l1 * alpha * alpha
    d2 = ec_mul(to_py_ecc_g1(proof.Z), d2a + d2b + u)

    # 순열 S_σ3 항
    d3 = (a + beta * s1 + gamma) * (b + beta * s2 + gamma) * alpha * beta * zw
    d3 = ec_mul(to_py_ecc_g1(vk.S3), d3)

    # 몫 다항식 항
    xin = challenges.xin
    d4 = ec_add(
        to_py_ecc_g1(proof.T1),
        ec_add(
            ec_mul(to_py_ecc_g1(proof.T2), xin),
            ec_mul(to_py_ecc_g1(proof.T3), xin * xin),
        ),
    )
    d4 = ec_mul(d4, challenges.zh)

    return ec_sub(ec_sub(ec_add(d1, d2), d3), d4)


def calculate_f(proof, challenges, vk, d):
    """결합 커밋먼트 [F]₁."""
    v = challenges.v
    v5 = v[4] * v[1]
    f = ec_add(d, ec_mul(to_py_ecc_g1(proof.A), v[1]))
    f = ec_add(f, ec_mul(to_py_ecc_g1(proof.B), v[2]))
    f = ec_add(f, ec_mul(to_py_ecc_g1(proof.C), v[3]))
    f = ec_add(f, ec_mul(to_py_ecc_g1(vk.S1), v[4]))
    f = ec_add(f, ec_mul(to_py_ecc_g1(vk.S2), v5))
    return f


def calculate_e(proof, challenges, r0):
    """결합 평가값 [E]₁."""
    a, b, c, s1, s2, zw = _evals(proof)
    v = challenges.v
    v5 = v[4] * v[1]
    e = FR(0) - r0 + v[1] * a
    e = e + v[2] * b
    e = e + v[3] * c
    e = e + v[4] * s1
    e = e + v5 * s2
    e = e + challenges.u * zw
    return ec_mul(G1, e)


def is_valid_pairing(proof, challenges, vk, e, f):
    """e(A₁, [τ]₂) == e(B₁, G₂) 인지 확인한다."""
    wxi = to_py_ecc_g1(proof.Wxi)
    wxiw = to_py_ecc_g1(proof.Wxiw)
    u, xi = challenges.u, challenges.xi

    a1 = ec_add(wxi, ec_mul(wxiw, u))

    b1 = ec_mul(wxi, xi)
    b1 = ec_add(b1, ec_mul(wxiw, u * xi * vk.omega))
    b1 = ec_add(b1, f)
    b1 = ec_sub(b1, e)

    # e(A₁, [τ]₂) == e(B₁, G₂)
    lhs = ec_pairing(vk.X_2, a1)
    rhs = ec_pairing(G2, b1)
    return lhs == rhs


def check_opening(vk, proof, public_signals, challenges, L):
    """최종 열기 검사 전체를 수행한다.

    Args:
        vk: 열기 데이터(k1, k2, omega, X_2)를 가진 VerificationKey
        proof: 구조 검사를 통과한 Proof
        public_signals: 공개 입력 int 리스트
        challenges: xin, zh까지 채워진 ChallengeBundle
        L: calculate_lagrange_evaluations()의 결과

    Returns:
        bool: 페어링 검사 통과 여부
    """
    pi = calculate_pi(public_signals, L)
    r0 = calculate_r0(proof, challenges, pi, L[1])
    d = calculate_d(proof, challenges, vk, L[1])
    f = calculate_f(proof, challenges, vk, d)
    e = calculate_e(proof, challenges, r0)
    return is_valid_pairing(proof, challenges, vk, e, f)
