"""
PLONK Fiat-Shamir Transcript (snarkjs Keccak256 호환)
=======================================================

비대화식(non-interactive) 변환을 위한 Fiat-Shamir 해싱 구현.

**Fiat-Shamir 변환이란?**
  원래 PLONK는 대화식(interactive) 프로토콜이다. Fiat-Shamir 변환은
  Verifier의 랜덤 챌린지를 "지금까지의 메시지의 해시"로 대체한다.
  Prover와 Verifier가 같은 순서로 같은 바이트를 해싱하면 같은 챌린지를 얻는다.

**snarkjs 규약**:
  - 트랜스크립트는 원소(커밋먼트 또는 스칼라)의 순서 있는 리스트이다.
  - 챌린지 = Keccak256(원소 인코딩들의 연결) mod r
  - 레이블, 길이 접두어, 도메인 분리 태그가 없다.
  - 라운드마다 새 트랜스크립트를 쓴다. 이전 라운드의 챌린지는
    스칼라로 다시 추가해야만 다음 라운드에 반영된다.

  이 바이트 배열은 외부 prover와의 호환 계약이다.
  인코딩은 zkverify.plonk.encoding 참고.

사용 예시:
    >>> t = Transcript()
    >>> t.add_pol_commitment(proof.A)
    >>> t.add_scalar(FR(42))
    >>> beta = t.get_challenge()
"""

from Crypto.Hash import keccak

from zkverify.plonk.field import FR, CURVE_ORDER
from zkverify.plonk.encoding import encode_scalar, encode_g1


def keccak256(data):
    """Keccak-256 (SHA3 표준화 이전 패딩, 이더리움/snarkjs와 동일)"""
    return keccak.new(digest_bits=256, data=data).digest()


class PointCommitment:
    """트랜스크립트 원소: G1 커밋먼트 (64바이트)"""

    __slots__ = ("point",)

    def __init__(self, point):
        self.point = point

    def encode(self):
        return encode_g1(self.point)

    def __eq__(self, other):
        return isinstance(other, PointCommitment) and self.point == other.point

    def __repr__(self):
        return f"PointCommitment({self.point!r})"


class ScalarValue:
    """트랜스크립트 원소: 스칼라 (32바이트)"""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def encode(self):
        return encode_scalar(self.value)

    def __eq__(self, other):
        return isinstance(other, ScalarValue) and int(self.value) == int(other.value)

    def __repr__(self):
        return f"ScalarValue({int(self.value)})"


class Transcript:
    """snarkjs 호환 Keccak256 트랜스크립트.

    속성:
        elements: 추가된 순서대로의 PointCommitment / ScalarValue 리스트
    """

    def __init__(self):
        self.elements = []

    def add_pol_commitment(self, point):
        """다항식 커밋먼트(G1 점)를 추가한다."""
        self.elements.append(PointCommitment(point))

    def add_scalar(self, value):
        """스칼라(FR 원소 또는 int)를 추가한다."""
        self.elements.append(ScalarValue(value))

    def reset(self):
        """원소를 모두 지운다."""
        self.elements = []

    def serialize(self):
        """해시 입력 바이트열: 원소 인코딩을 추가 순서대로 연결."""
        return b"".join(element.encode() for element in self.elements)

    def get_challenge(self):
        """트랜스크립트로부터 챌린지 스칼라를 생성한다.

        Returns:
            FR: Keccak256(serialize()) 를 빅엔디안 정수로 읽고 r로 축소한 값
        """
        digest = keccak256(self.serialize())
        return FR(int.from_bytes(digest, "big") % CURVE_ORDER)
