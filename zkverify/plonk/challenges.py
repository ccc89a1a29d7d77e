"""
PLONK 챌린지 유도 (Fiat-Shamir 재생)
====================================

Verifier 쪽에서 prover가 썼던 챌린지를 그대로 재구성한다.
라운드마다 새 Transcript를 만들며, 해시 상태는 라운드 사이에 이어지지 않는다.
앞 라운드의 챌린지는 스칼라로 다시 추가될 때만 다음 라운드에 영향을 준다.

  ┌───────┬──────────────────────────────────────────────────┬────────┐
  │ Round │ 트랜스크립트 원소 (순서대로)                      │ 결과   │
  ├───────┼──────────────────────────────────────────────────┼────────┤
  │   1   │ Qm Ql Qr Qo Qc S1 S2 S3, 공개 입력들, A B C       │ β      │
  │   2   │ β                                                │ γ      │
  │   3   │ β γ, Z                                           │ α      │
  │   4   │ α, T1 T2 T3                                      │ ξ      │
  │   5   │ ξ, ā b̄ c̄ s̄σ1 s̄σ2 z̄ω                              │ v[1]   │
  │   6   │ Wxi Wxiw                                         │ u      │
  └───────┴──────────────────────────────────────────────────┴────────┘

  v[0] = 0, v[i] = v[1]·v[i-1] (i = 2, 3, 4)

사용 예시:
    >>> challenges = calculate_challenges(vk, proof, public_signals)
    >>> challenges.beta, challenges.xi
"""

from zkverify.plonk.field import FR
from zkverify.plonk.transcript import Transcript


# v[0] (미사용) ~ v[4]
V_POWERS = 5


class ChallengeBundle:
    """verify() 한 번에서 유도된 챌린지 묶음.

    속성:
        beta, gamma: 순열 인자용
        alpha: 제약 결합용
        xi: 평가 점 ξ
        v: [0, v, v², v³, v⁴] (일괄 열기용)
        u: 두 열기 증명 결합용
        xin: ξ^n (Lagrange 평가 후 채워짐)
        zh: Z_H(ξ) = ξ^n - 1 (Lagrange 평가 후 채워짐)
    """

    def __init__(self):
        self.beta = None
        self.gamma = None
        self.alpha = None
        self.xi = None
        self.v = None
        self.u = None
        self.xin = None
        self.zh = None

    def as_dict(self):
        """챌린지 → {이름: int} (None은 제외)"""
        out = {}
        for name in ("beta", "gamma", "alpha", "xi", "u", "xin", "zh"):
            value = getattr(self, name)
            if value is not None:
                out[name] = int(value)
        if self.v is not None:
            out["v"] = [int(x) for x in self.v]
        return out


def calculate_challenges(vk, proof, public_signals):
    """검증 키, 증명, 공개 입력으로부터 모든 챌린지를 유도한다.

    Args:
        vk: VerificationKey
        proof: Proof (구조 검사를 통과한 것)
        public_signals: 공개 입력 int 리스트

    Returns:
        ChallengeBundle (xin, zh는 아직 None)
    """
    res = ChallengeBundle()

    # ── Round 1: β ──
    transcript = Transcript()
    for _, point in vk.commitments():
        transcript.add_pol_commitment(point)
    for signal in public_signals:
        transcript.add_scalar(signal)
    transcript.add_pol_commitment(proof.A)
    transcript.add_pol_commitment(proof.B)
    transcript.add_pol_commitment(proof.C)
    res.beta = transcript.get_challenge()

    # ── Round 2: γ ──
    transcript = Transcript()
    transcript.add_scalar(res.beta)
    res.gamma = transcript.get_challenge()

    # ── Round 3: α ──
    transcript = Transcript()
    transcript.add_scalar(res.beta)
    transcript.add_scalar(res.gamma)
    transcript.add_pol_commitment(proof.Z)
    res.alpha = transcript.get_challenge()

    # ── Round 4: ξ ──
    transcript = Transcript()
    transcript.add_scalar(res.alpha)
    transcript.add_pol_commitment(proof.T1)
    transcript.add_pol_commitment(proof.T2)
    transcript.add_pol_commitment(proof.T3)
    res.xi = transcript.get_challenge()

    # ── Round 5: v ──
    transcript = Transcript()
    transcript.add_scalar(res.xi)
    for _, value in proof.evaluations():
        transcript.add_scalar(value)
    v1 = transcript.get_challenge()
    res.v = geometric_powers(v1, V_POWERS)

    # ── Round 6: u ──
    transcript = Transcript()
    transcript.add_pol_commitment(proof.Wxi)
    transcript.add_pol_commitment(proof.Wxiw)
    res.u = transcript.get_challenge()

    return res


def geometric_powers(base, count):
    """[0, base, base², ..., base^(count-1)]

    인덱스 0은 자리표시자(0)이다.
    """
    powers = [FR(0), base]
    for _ in range(2, count):
        powers.append(powers[-1] * base)
    return powers
