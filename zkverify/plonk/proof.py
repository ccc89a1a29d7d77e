"""
PLONK 증명 데이터 컨테이너
===========================

snarkjs PLONK 증명 한 개. verify() 호출 하나 동안만 존재한다.

  Round 1 (배선 커밋먼트):       A, B, C
  Round 2 (순열 누적자):         Z
  Round 3 (몫 다항식):           T1, T2, T3
  Round 4 (평가값):              eval_a, eval_b, eval_c, eval_s1, eval_s2, eval_zw
  Round 5 (열기 증명):           Wxi, Wxiw

평가값은 검증 전까지 int 그대로 보관한다. FR로 바꾸면 범위를 벗어난
값이 조용히 축소되어 범위 검사가 무의미해지기 때문이다.
"""

from zkverify.plonk.encoding import parse_int, deserialize_g1, serialize_g1


COMMITMENT_NAMES = ("A", "B", "C", "Z", "T1", "T2", "T3", "Wxi", "Wxiw")

EVALUATION_NAMES = ("eval_a", "eval_b", "eval_c", "eval_s1", "eval_s2", "eval_zw")


class Proof:
    """PLONK 증명.

    속성:
        A, B, C, Z, T1, T2, T3, Wxi, Wxiw: G1 점 (int, int) 또는 None
        eval_a, eval_b, eval_c, eval_s1, eval_s2, eval_zw: int
    """

    def __init__(self, A, B, C, Z, T1, T2, T3, Wxi, Wxiw,
                 eval_a, eval_b, eval_c, eval_s1, eval_s2, eval_zw):
        self.A = A
        self.B = B
        self.C = C
        self.Z = Z
        self.T1 = T1
        self.T2 = T2
        self.T3 = T3
        self.Wxi = Wxi
        self.Wxiw = Wxiw
        self.eval_a = eval_a
        self.eval_b = eval_b
        self.eval_c = eval_c
        self.eval_s1 = eval_s1
        self.eval_s2 = eval_s2
        self.eval_zw = eval_zw

    def commitments(self):
        return [(name, getattr(self, name)) for name in COMMITMENT_NAMES]

    def evaluations(self):
        return [(name, getattr(self, name)) for name in EVALUATION_NAMES]

    @classmethod
    def from_json(cls, data):
        """snarkjs proof.json (dict) → Proof

        Raises:
            ValueError: 필드가 없거나 형식이 잘못되었을 때
        """
        if not isinstance(data, dict):
            raise ValueError("증명 JSON은 객체여야 합니다")
        try:
            fields = {name: deserialize_g1(data[name]) for name in COMMITMENT_NAMES}
            fields.update(
                {name: parse_int(data[name]) for name in EVALUATION_NAMES}
            )
        except KeyError as e:
            raise ValueError(f"증명에 필드가 없습니다: {e.args[0]}") from None
        return cls(**fields)

    def to_json(self):
        """Proof → snarkjs 형식 dict"""
        data = {"protocol": "plonk", "curve": "bn128"}
        for name, point in self.commitments():
            data[name] = serialize_g1(point)
        for name, value in self.evaluations():
            data[name] = str(value)
        return data


def load_public_signals(data):
    """snarkjs public.json (list) → list[int]"""
    if not isinstance(data, (list, tuple)):
        raise ValueError("공개 입력 JSON은 배열이어야 합니다")
    return [parse_int(s) for s in data]
