"""
PLONK 증명 / 검증 키 구조 검사
===============================

챌린지를 계산하기 전에 입력의 구조적 건전성을 확인하는 술어(predicate) 모음.
모든 함수는 bool을 반환하며, 어떤 입력에도 예외를 던지지 않는다.

**검사 항목**:
  - is_on_curve: G1 점이 y² = x³ + 3 (mod q) 를 만족하는가
  - is_in_field: 스칼라가 0 ≤ v < r 인가
  - check_public_inputs_length: 공개 입력 개수가 nPublic과 같은가

**무한원점**:
  무한원점(None)은 증명 커밋먼트로 인정하지 않는다. 검증 키에서는
  영 셀렉터 다항식의 커밋먼트로 허용한다 (is_key_commitment).
  (py_ecc.bn128.is_on_curve는 None에 대해 True를 반환하므로 먼저 걸러낸다.)

**부분군 검사**:
  bn128 G1의 cofactor는 1이므로 곡선 위의 점이면 곧 위수 r 부분군의 원소이다.
"""

from py_ecc import bn128

from zkverify.plonk.field import FR, CURVE_ORDER, FIELD_MODULUS, MAX_POWER, B, to_py_ecc_g1


def _is_int(v):
    return isinstance(v, int) and not isinstance(v, bool)


def _is_coordinate(v):
    return _is_int(v) and 0 <= v < FIELD_MODULUS


def is_on_curve(point):
    """G1 점이 곡선 위에 있는지 확인한다.

    Args:
        point: (x, y) 정수 쌍 또는 None

    Returns:
        bool: 좌표가 [0, q) 범위이고 y² = x³ + 3 이면 True.
              None(무한원점)이나 형식이 잘못된 값은 False.
    """
    if not isinstance(point, tuple) or len(point) != 2:
        return False
    x, y = point
    if not (_is_coordinate(x) and _is_coordinate(y)):
        return False
    return bn128.is_on_curve(to_py_ecc_g1(point), B)


def is_in_field(value):
    """스칼라가 FR의 정규 표현(0 ≤ v < r)인지 확인한다."""
    return _is_int(value) and 0 <= value < CURVE_ORDER


def check_public_inputs_length(declared, actual):
    """공개 입력 개수 비교."""
    return declared == actual


def is_key_commitment(point):
    """검증 키 커밋먼트: 곡선 위의 점이거나 무한원점.

    영 다항식(예: 상수가 없는 회로의 Qc)의 커밋먼트는 무한원점이다.
    증명 커밋먼트와 달리 검증 키에서는 허용한다.
    """
    return point is None or is_on_curve(point)


def validate_proof(proof):
    """증명의 9개 커밋먼트와 6개 평가값을 검사한다."""
    return (
        all(is_on_curve(point) for _, point in proof.commitments())
        and all(is_in_field(value) for _, value in proof.evaluations())
    )


def validate_public_signals(key, public_signals):
    """공개 입력 개수와 각 값의 범위를 검사한다."""
    return (
        check_public_inputs_length(key.n_public, len(public_signals))
        and all(is_in_field(s) for s in public_signals)
    )


def is_root_of_unity(omega, power):
    """omega가 2^power 차 원시 단위근인지 확인한다.

    ω^(2^power) = 1 이고, power > 0 이면 ω^(2^(power-1)) ≠ 1 이어야 한다.
    """
    if not isinstance(omega, FR):
        return False
    x = omega
    half = FR(1)
    for _ in range(power):
        half = x
        x = x * x
    if x != FR(1):
        return False
    return power == 0 or half != FR(1)


def validate_key(key):
    """검증 키의 구조를 검사한다.

    - 0 ≤ power ≤ MAX_POWER
    - n_public ≥ 0
    - 8개 커밋먼트가 곡선 위의 점 또는 무한원점
    - omega가 있으면 2^power 차 원시 단위근
    """
    if not (_is_int(key.power) and 0 <= key.power <= MAX_POWER):
        return False
    if not (_is_int(key.n_public) and key.n_public >= 0):
        return False
    if not all(is_key_commitment(point) for _, point in key.commitments()):
        return False
    if key.omega is not None and not is_root_of_unity(key.omega, key.power):
        return False
    return True
