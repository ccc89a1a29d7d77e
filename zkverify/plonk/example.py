"""
PLONK 검증 데모: snarkjs 산출물 검증
=====================================

snarkjs로 만든 verification_key.json, proof.json, public.json을 읽어
구조 검사, 챌린지 유도, Lagrange 평가, (가능하면) 페어링 검사를 시연한다.

실행:
    python -m zkverify.plonk.example verification_key.json proof.json public.json

흐름:
    1. JSON 로드
    2. 구조 검사 (verify)
    3. 챌린지 출력 (β, γ, α, ξ, v, u)
    4. Lagrange 값 출력
    5. 최종 페어링 검사 (verify_with_opening)
"""

import json
import logging
import sys

from zkverify.plonk.keys import VerificationKey
from zkverify.plonk.proof import Proof, load_public_signals
from zkverify.plonk.verifier import verify, verify_with_opening, evaluate


def _load(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 3:
        print("사용법: python -m zkverify.plonk.example <vk.json> <proof.json> <public.json>")
        return 2

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  PLONK Proof Verification Demo (snarkjs)")
    print("=" * 60)

    # ── 1. 로드 ──
    print("\n[1] JSON 로드...")
    vk = VerificationKey.from_json(_load(argv[0]))
    proof = Proof.from_json(_load(argv[1]))
    public_signals = load_public_signals(_load(argv[2]))
    print(f"    nPublic: {vk.n_public}, power: {vk.power} (n = {vk.domain_size})")
    print(f"    공개 입력: {public_signals}")

    # ── 2. 구조 검사 ──
    print("\n[2] 구조 검사...")
    result = verify(vk, proof, public_signals)
    print(f"    결과: {'통과 ✓' if result else '실패 ✗'}")
    if not result:
        return 1

    # ── 3, 4. 챌린지 / Lagrange ──
    challenges, L = evaluate(vk, proof, public_signals)
    print("\n[3] 챌린지...")
    for name, value in challenges.as_dict().items():
        print(f"    {name} = {value}")
    print("\n[4] Lagrange 평가값...")
    for j in range(1, len(L)):
        print(f"    L_{j}(ξ) = {int(L[j])}")

    # ── 5. 페어링 검사 ──
    print("\n[5] 최종 페어링 검사...")
    if not vk.has_opening_data():
        print("    검증 키에 k1, k2, w, X_2가 없어 생략")
        return 0
    full = verify_with_opening(vk, proof, public_signals)
    print(f"    결과: {'성공 ✓' if full else '실패 ✗'}")
    return 0 if full else 1


if __name__ == "__main__":
    sys.exit(main())
