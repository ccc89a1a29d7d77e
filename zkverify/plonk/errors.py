"""
PLONK 검증 예외
================

검증기 내부에서 쓰이는 예외 계층. 모두 ValueError의 하위 클래스이다.

verify()의 경계를 넘어가는 예외는 없다. 검증기는 이 예외들을 잡아
False로 변환한다. 호출자는 어떤 검사가 실패했는지 알 수 없고,
실패 사유는 DEBUG 로그로만 남는다.
"""


class VerificationError(ValueError):
    """검증 실패의 기본 클래스."""


class CurveMembershipError(VerificationError):
    """커밋먼트가 y² = x³ + 3 위의 유효한 G1 점이 아니다."""


class FieldRangeError(VerificationError):
    """스칼라 값이 [0, r) 범위를 벗어났다."""


class PublicInputLengthError(VerificationError):
    """공개 입력 개수가 검증 키의 nPublic과 다르다."""


class ChallengeDivisionByZeroError(VerificationError):
    """Lagrange 평가 중 ξ가 도메인 원소와 충돌하여 분모가 0이 되었다."""


class DomainTooLargeError(VerificationError):
    """검증 키의 power가 허용 상한(MAX_POWER)을 넘는다."""
