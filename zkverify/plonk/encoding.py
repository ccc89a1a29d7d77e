"""
PLONK 검증기 인코딩 헬퍼
=========================

두 가지 일을 한다.

**1. 해싱용 고정 폭 인코딩** (트랜스크립트가 사용)
  - 스칼라: 32바이트 빅엔디안 (int(v) mod r)
  - G1 점: x 32바이트 ‖ y 32바이트, 빅엔디안 (총 64바이트)
  - 무한원점(None): 64바이트의 0. snarkjs가 쓰는 ffjavascript의
    toRprUncompressed도 영점을 아핀 (0, 0)으로 내보낸다. 증명 커밋먼트로는
    거부되지만, 검증 키의 영 셀렉터(예: 상수가 없는 회로의 Qc)는
    이 값으로 라운드 1 트랜스크립트에 들어간다.

  이 바이트 배열은 snarkjs Keccak256Transcript와의 호환 계약이다.
  순서나 폭이 달라지면 아무 오류 없이 모든 실제 증명을 거부하게 된다.

**2. snarkjs JSON 값 파싱** (keys / proof 로더가 사용)
  - 정수: 10진 문자열, "0x" 16진 문자열, 또는 int
  - G1: [x, y] 또는 사영좌표 [x, y, "1"]; [.., .., "0"]은 무한원점
  - G2: [[x0, x1], [y0, y1]] 또는 [[x0, x1], [y0, y1], ["1", "0"]]

  파싱 단계에서는 범위를 축소하지 않는다. 범위 검사는 validator의 몫이다.
"""

from py_ecc import bn128

from zkverify.plonk.field import CURVE_ORDER, SCALAR_SIZE


# ─── 해싱용 인코딩 ───

def encode_scalar(value):
    """스칼라 → 32바이트 빅엔디안."""
    return (int(value) % CURVE_ORDER).to_bytes(SCALAR_SIZE, "big")


def encode_g1(point):
    """G1 점 (x, y) → 64바이트 빅엔디안 (x ‖ y).

    Raises:
        OverflowError: 좌표가 256비트를 넘을 때 (검증 전의 값일 때만 가능)
    """
    if point is None:
        return b"\x00" * (2 * SCALAR_SIZE)
    x, y = point
    return int(x).to_bytes(SCALAR_SIZE, "big") + int(y).to_bytes(SCALAR_SIZE, "big")


# ─── snarkjs JSON 파싱 ───

def parse_int(data):
    """10진/16진 문자열 또는 int → int (축소하지 않음)"""
    if isinstance(data, bool):
        raise ValueError(f"정수가 아닙니다: {data!r}")
    if isinstance(data, int):
        return data
    if isinstance(data, str):
        s = data.strip().lower()
        if s.startswith("0x"):
            return int(s, 16)
        return int(s, 10)
    raise ValueError(f"정수가 아닙니다: {data!r}")


def deserialize_g1(data):
    """[x, y] 또는 [x, y, z] → (int, int) 또는 None (무한원점)

    snarkjs는 G1 점을 사영좌표 [x, y, "1"]로 내보낸다.
    z = 0은 무한원점, z = 1은 아핀 좌표 그대로이다.
    """
    if data is None:
        return None
    if not isinstance(data, (list, tuple)) or len(data) not in (2, 3):
        raise ValueError(f"G1 점은 [x, y] 또는 [x, y, z] 형식이어야 합니다: {data!r}")
    if len(data) == 3:
        z = parse_int(data[2])
        if z == 0:
            return None
        if z != 1:
            raise ValueError(f"정규화되지 않은 G1 사영좌표입니다 (z={z})")
    return (parse_int(data[0]), parse_int(data[1]))


def deserialize_g2(data):
    """[[x0,x1],[y0,y1]] (선택적으로 [z0,z1]) → py_ecc G2 점 또는 None"""
    if data is None:
        return None
    if not isinstance(data, (list, tuple)) or len(data) not in (2, 3):
        raise ValueError(f"G2 점 형식이 잘못되었습니다: {data!r}")
    if len(data) == 3:
        z = [parse_int(c) for c in data[2]]
        if z == [0, 0]:
            return None
        if z != [1, 0]:
            raise ValueError(f"정규화되지 않은 G2 사영좌표입니다 (z={z})")
    x0, x1 = (parse_int(c) for c in data[0])
    y0, y1 = (parse_int(c) for c in data[1])
    return (bn128.FQ2([x0, x1]), bn128.FQ2([y0, y1]))


def serialize_g1(point):
    """(int, int) → [str, str, "1"] (snarkjs 형식) 또는 ["0", "1", "0"]"""
    if point is None:
        return ["0", "1", "0"]
    return [str(int(point[0])), str(int(point[1])), "1"]


def serialize_g2(point):
    """py_ecc G2 점 → [[x0, x1], [y0, y1], ["1", "0"]] (snarkjs 형식)"""
    if point is None:
        return [["0", "0"], ["1", "0"], ["0", "0"]]
    x, y = point
    return [
        [str(int(c)) for c in x.coeffs],
        [str(int(c)) for c in y.coeffs],
        ["1", "0"],
    ]
