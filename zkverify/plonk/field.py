"""
PLONK 검증기 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
==============================================================

검증기 전체에서 사용되는 대수적 도구를 정의한다. 실제 모듈러 산술과
곡선 연산은 py_ecc (bn128 = BN254 = alt_bn128)에 위임한다.

**두 개의 유한체**:
  - FR: bn128 스칼라 필드. 평가값(eval_*), 공개 입력, 챌린지가 사는 곳.
        위수 r = bn128.curve_order ≈ 2^254
  - FQ: bn128 베이스 필드. G1 점의 좌표 (x, y)가 사는 곳.
        위수 q = bn128.field_modulus ≈ 2^254 (r보다 약간 크다)

  snarkjs 검증기 역시 평가값 범위 검사와 트랜스크립트 해시 축소에 r을,
  곡선 방정식에 q를 사용한다.

**G1 점 표현**:
  검증기 데이터 모델에서 G1 점은 정수 쌍 (x, y) 이고, 무한원점은 None 이다.
  py_ecc 점 (FQ, FQ)로의 변환은 to_py_ecc_g1()이 담당한다.
  FQ 생성자는 범위를 벗어난 좌표를 조용히 축소하므로, 범위 검사는
  변환 전에 validator에서 정수 상태로 수행해야 한다.

사용 예시:
    >>> from zkverify.plonk.field import FR, G1, ec_mul
    >>> a = FR(3)
    >>> b = FR(7)
    >>> c = a * b        # FR(21)
    >>> P = ec_mul(G1, 5)  # 5·G1
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.

    주의:
        FR(0)의 역원은 py_ecc에서 예외 없이 FR(0)이 된다.
        0으로 나눌 가능성이 있는 곳에서는 분모를 먼저 확인해야 한다.
    """
    field_modulus = bn128.curve_order


# 스칼라 필드 위수 r
CURVE_ORDER = bn128.curve_order

# 베이스 필드 위수 q (G1 좌표의 범위)
FIELD_MODULUS = bn128.field_modulus

# 트랜스크립트 직렬화에서 필드 원소 하나의 바이트 길이
SCALAR_SIZE = 32

# FR의 2-adicity: r - 1 = 2^28 × m (m은 홀수)
# 평가 도메인 크기 2^power 의 상한이기도 하다.
MAX_POWER = 28


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bn128.G1

# G2 그룹 생성자 (generator)
G2 = bn128.G2

# 곡선 방정식 y² = x³ + b 의 b (= 3)
B = bn128.b



def to_py_ecc_g1(point):
    """정수 쌍 (x, y) → py_ecc G1 점 (FQ, FQ).

    None(무한원점)은 그대로 None으로 반환한다.
    """
    if point is None:
        return None
    x, y = point
    return (FQ(x), FQ(y))


def from_py_ecc_g1(point):
    """py_ecc G1 점 (FQ, FQ) → 정수 쌍 (x, y)."""
    if point is None:
        return None
    return (int(point[0]), int(point[1]))


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: py_ecc 형식의 G1 또는 G2 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점)
    """
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원 (negation): -point."""
    return bn128.neg(point)


def ec_sub(p1, p2):
    """타원곡선 점 뺄셈: p1 - p2."""
    return ec_add(p1, ec_neg(p2))


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
    """
    return bn128.pairing(g2_point, g1_point)
