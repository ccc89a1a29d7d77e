"""
PLONK 검증 키 (Verification Key)
=================================

회로마다 한 번 만들어지는 공개 파라미터. 검증 전에 로드되고,
검증 동안에는 읽기 전용이다.

**필수 필드** (챌린지 유도와 Lagrange 평가에 필요):
  n_public: 공개 입력 개수
  power: 평가 도메인 크기의 log2 (n = 2^power)
  Qm, Ql, Qr, Qo, Qc: 셀렉터 다항식 커밋먼트
  S1, S2, S3: 순열 다항식 커밋먼트

**선택 필드** (최종 열기 검사 확장에만 필요):
  k1, k2: 코셋 식별자
  omega: 2^power 차 원시 단위근 (snarkjs의 "w")
  X_2: [τ]₂ (G2 점)

사용 예시:
    >>> with open("verification_key.json") as f:
    ...     vk = VerificationKey.from_json(json.load(f))
"""

from zkverify.plonk.field import FR
from zkverify.plonk.encoding import (
    parse_int, deserialize_g1, deserialize_g2, serialize_g1, serialize_g2,
)
from zkverify.plonk.validator import is_in_field


# 라운드 1 트랜스크립트에 들어가는 순서 그대로
COMMITMENT_NAMES = ("Qm", "Ql", "Qr", "Qo", "Qc", "S1", "S2", "S3")


def _parse_scalar(data, name):
    """선택 스칼라 필드 → FR 또는 None. 범위 밖의 값은 축소하지 않고 거부한다."""
    if name not in data:
        return None
    value = parse_int(data[name])
    if not is_in_field(value):
        raise ValueError(f"{name}가 스칼라 필드 범위를 벗어났습니다: {value}")
    return FR(value)


class VerificationKey:
    """PLONK 검증 키.

    속성:
        n_public: 공개 입력 개수 (int)
        power: log2(도메인 크기) (int)
        Qm, Ql, Qr, Qo, Qc, S1, S2, S3: G1 점 (int, int)
        k1, k2: FR 또는 None
        omega: FR 또는 None
        X_2: py_ecc G2 점 또는 None
    """

    def __init__(self, n_public, power, Qm, Ql, Qr, Qo, Qc, S1, S2, S3,
                 k1=None, k2=None, omega=None, X_2=None):
        self.n_public = n_public
        self.power = power
        self.Qm = Qm
        self.Ql = Ql
        self.Qr = Qr
        self.Qo = Qo
        self.Qc = Qc
        self.S1 = S1
        self.S2 = S2
        self.S3 = S3
        self.k1 = k1
        self.k2 = k2
        self.omega = omega
        self.X_2 = X_2

    @property
    def domain_size(self):
        """n = 2^power"""
        return 1 << self.power

    def commitments(self):
        """트랜스크립트 순서의 (이름, G1 점) 리스트."""
        return [(name, getattr(self, name)) for name in COMMITMENT_NAMES]

    def has_opening_data(self):
        """최종 열기 검사에 필요한 필드가 모두 있는지."""
        return None not in (self.k1, self.k2, self.omega, self.X_2)

    @classmethod
    def from_json(cls, data):
        """snarkjs verification_key.json (dict) → VerificationKey

        Raises:
            ValueError: 필수 필드가 없거나 형식이 잘못되었을 때
        """
        if not isinstance(data, dict):
            raise ValueError("검증 키 JSON은 객체여야 합니다")
        protocol = data.get("protocol", "plonk")
        if protocol != "plonk":
            raise ValueError(f"지원하지 않는 프로토콜입니다: {protocol}")

        try:
            n_public = parse_int(data["nPublic"])
            power = parse_int(data["power"])
            points = {name: deserialize_g1(data[name]) for name in COMMITMENT_NAMES}
        except KeyError as e:
            raise ValueError(f"검증 키에 필드가 없습니다: {e.args[0]}") from None

        k1 = _parse_scalar(data, "k1")
        k2 = _parse_scalar(data, "k2")
        omega = _parse_scalar(data, "w")
        x_2 = deserialize_g2(data["X_2"]) if "X_2" in data else None

        return cls(n_public, power, k1=k1, k2=k2, omega=omega, X_2=x_2, **points)

    def to_json(self):
        """VerificationKey → snarkjs 형식 dict (없는 선택 필드는 생략)"""
        data = {
            "protocol": "plonk",
            "curve": "bn128",
            "nPublic": self.n_public,
            "power": self.power,
        }
        for name, point in self.commitments():
            data[name] = serialize_g1(point)
        if self.k1 is not None:
            data["k1"] = str(int(self.k1))
        if self.k2 is not None:
            data["k2"] = str(int(self.k2))
        if self.omega is not None:
            data["w"] = str(int(self.omega))
        if self.X_2 is not None:
            data["X_2"] = serialize_g2(self.X_2)
        return data
