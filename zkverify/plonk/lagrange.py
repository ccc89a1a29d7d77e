"""
PLONK Lagrange 기저 평가 (Verifier 측)
=======================================

평가 점 ξ에서 소거 다항식과 공개 입력 슬롯의 Lagrange 기저 값을 계산한다.

**공식**:
  n = 2^power,  ξ^n 은 제곱을 power번 반복하여 얻는다.
  Z_H(ξ) = ξ^n - 1
  L_j(ξ) = (ω^(j-1) · Z_H(ξ)) / (n · (ξ - ω^(j-1)))     (j = 1 .. max(1, nPublic))

  L_1(ξ)은 공개 입력이 없어도 항상 계산된다 (순열 경계 제약에 필요).

**ω (도메인 생성자)**:
  검증 키의 omega (snarkjs "w")를 사용한다. 키에 omega가 없으면
  예전 구현의 동작(ω 대신 FR(power)를 곱함)을 그대로 따르고 경고를 남긴다.
  이 경우 nPublic ≥ 2 슬롯의 값은 실제 Lagrange 기저 값이 아니다.

**안전 장치**:
  - power > MAX_POWER 이면 루프에 들어가기 전에 DomainTooLargeError
  - ξ - ω^(j-1) = 0 이면 ChallengeDivisionByZeroError
    (py_ecc는 0의 역원을 0으로 돌려주므로 직접 확인한다)
"""

import logging

from zkverify.plonk.field import FR, MAX_POWER
from zkverify.plonk.errors import ChallengeDivisionByZeroError, DomainTooLargeError


logger = logging.getLogger(__name__)


def domain_generator(vk):
    """Lagrange 루프에서 w를 전진시키는 값."""
    if vk.omega is not None:
        return vk.omega
    logger.warning(
        "검증 키에 root of unity(w)가 없습니다. FR(power=%d)로 대체합니다", vk.power
    )
    return FR(vk.power)


def calculate_lagrange_evaluations(challenges, vk):
    """L_1(ξ) .. L_max(1,nPublic)(ξ) 를 계산한다.

    부수 효과로 challenges.xin, challenges.zh 를 채운다.

    Args:
        challenges: ChallengeBundle (xi가 채워진 것)
        vk: VerificationKey

    Returns:
        list[FR]: 인덱스 0은 FR(0) 자리표시자, 1..max(1, nPublic)은 L_j(ξ)

    Raises:
        DomainTooLargeError: power가 [0, MAX_POWER] 밖일 때
        ChallengeDivisionByZeroError: ξ가 도메인 원소와 같을 때
    """
    power = vk.power
    if not isinstance(power, int) or power < 0 or power > MAX_POWER:
        raise DomainTooLargeError(f"power는 0 이상 {MAX_POWER} 이하여야 합니다: {power!r}")

    xi = challenges.xi
    xin = xi
    domain_size = 1
    for _ in range(power):
        xin = xin * xin
        domain_size *= 2

    challenges.xin = xin
    challenges.zh = xin - FR(1)

    n = FR(domain_size)
    omega = domain_generator(vk)

    L = [FR(0)]
    w = FR(1)
    for j in range(1, max(1, vk.n_public) + 1):
        denominator = n * (xi - w)
        if denominator == FR(0):
            raise ChallengeDivisionByZeroError(f"ξ가 도메인 원소와 충돌합니다 (j={j})")
        L.append(w * challenges.zh / denominator)
        w = w * omega

    return L


def calculate_pi(public_signals, L):
    """공개 입력 다항식 평가: PI(ξ) = -Σ wᵢ · L_{i+1}(ξ)

    snarkjs 규약에 따라 부호가 음수이다.
    """
    pi = FR(0)
    for i, signal in enumerate(public_signals):
        pi = pi - FR(signal) * L[i + 1]
    return pi
