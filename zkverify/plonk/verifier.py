"""
PLONK Verifier
================

snarkjs 형식의 PLONK 증명을 검증한다. 호출자에게는 bool 하나만 돌려준다.

**검증 과정** (verify):
  1. 구조 검사 → 9개 커밋먼트가 곡선 위, 6개 평가값이 [0, r) 안,
     공개 입력 개수 == nPublic
  2. Fiat-Shamir 트랜스크립트 재생 → β, γ, α, ξ, v, u 챌린지 복원
  3. Z_H(ξ), L_j(ξ) 계산

  verify()의 결과는 1단계의 AND이다. 2, 3단계의 값은 계산되지만
  결과를 바꾸지 않는다. 단, 3단계가 실패하면 (ξ가 도메인 원소와 충돌,
  power가 상한 초과) 거부한다. 1단계가 실패하면 2, 3단계는 생략한다.

  최종 페어링 검사까지 포함한 전체 검증은 verify_with_opening()이다.

**예외 정책**:
  어떤 입력에도 예외를 던지지 않는다. 실패 사유는 DEBUG 로그에만 남는다.

사용 예시:
    >>> from zkverify.plonk.verifier import verify
    >>> result = verify(vk, proof, public_signals)
"""

import logging

from zkverify.plonk.challenges import calculate_challenges
from zkverify.plonk.errors import (
    VerificationError,
    CurveMembershipError,
    FieldRangeError,
    PublicInputLengthError,
)
from zkverify.plonk.lagrange import calculate_lagrange_evaluations
from zkverify.plonk.opening import check_opening
from zkverify.plonk.validator import (
    is_on_curve,
    is_in_field,
    check_public_inputs_length,
    validate_key,
    validate_public_signals,
)


logger = logging.getLogger(__name__)


def check_structure(vk, proof, public_signals):
    """구조 검사. 첫 번째 실패를 예외로 알린다.

    Raises:
        CurveMembershipError, FieldRangeError, PublicInputLengthError
    """
    for name, point in proof.commitments():
        if not is_on_curve(point):
            raise CurveMembershipError(f"{name}가 G1 곡선 위의 점이 아닙니다")
    for name, value in proof.evaluations():
        if not is_in_field(value):
            raise FieldRangeError(f"{name}가 스칼라 필드 범위를 벗어났습니다")
    if not check_public_inputs_length(vk.n_public, len(public_signals)):
        raise PublicInputLengthError(
            f"공개 입력 개수 {len(public_signals)} != nPublic {vk.n_public}"
        )


def evaluate(vk, proof, public_signals):
    """구조 검사 후 챌린지와 Lagrange 값을 계산한다.

    Returns:
        (ChallengeBundle, list[FR])

    Raises:
        VerificationError: 어느 단계든 실패했을 때
    """
    check_structure(vk, proof, public_signals)
    challenges = calculate_challenges(vk, proof, public_signals)
    L = calculate_lagrange_evaluations(challenges, vk)
    return challenges, L


def verify(vk, proof, public_signals):
    """PLONK 증명의 구조적 사전 조건을 검증한다.

    Args:
        vk: VerificationKey
        proof: Proof
        public_signals: 공개 입력 int 리스트

    Returns:
        bool: 구조 검사를 모두 통과하고 챌린지/Lagrange 계산이 실패하지 않으면 True
    """
    try:
        evaluate(vk, proof, public_signals)
    except VerificationError as e:
        logger.debug("증명 거부: %s", e)
        return False
    except Exception:
        logger.debug("증명 거부: 입력 형식 오류", exc_info=True)
        return False
    return True


def verify_with_opening(vk, proof, public_signals):
    """최종 KZG 열기 페어링 검사까지 포함한 전체 PLONK 검증 (확장).

    verify()와 달리 검증 키 구조(power 상한, 커밋먼트, root of unity)와
    공개 입력 값의 범위도 검사한다. 검증 키에 k1, k2, w, X_2가 없으면 거부한다.

    Returns:
        bool: 페어링 검사까지 통과하면 True
    """
    try:
        if not vk.has_opening_data():
            logger.debug("증명 거부: 검증 키에 열기 검사 데이터(k1, k2, w, X_2)가 없습니다")
            return False
        if not validate_key(vk):
            logger.debug("증명 거부: 검증 키 구조가 잘못되었습니다")
            return False
        if not validate_public_signals(vk, public_signals):
            logger.debug("증명 거부: 공개 입력이 잘못되었습니다")
            return False
        challenges, L = evaluate(vk, proof, public_signals)
        ok = check_opening(vk, proof, public_signals, challenges, L)
    except VerificationError as e:
        logger.debug("증명 거부: %s", e)
        return False
    except Exception:
        logger.debug("증명 거부: 입력 형식 오류", exc_info=True)
        return False
    if not ok:
        logger.debug("증명 거부: 페어링 검사 실패")
    return ok
