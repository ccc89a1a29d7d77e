"""
Tests for Fiat-Shamir challenge derivation: challenges.py

기대값은 snarkjs Keccak256Transcript와 같은 방식으로 바이트를 직접 이어 붙여
Keccak-256으로 계산한다. 인코딩 순서/폭이 바뀌면 이 테스트가 깨진다.
"""

import pytest
from Crypto.Hash import keccak

from zkverify.plonk.field import FR, CURVE_ORDER
from zkverify.plonk.challenges import ChallengeBundle, calculate_challenges, geometric_powers

from builders import point, make_vk, make_proof


# ─────────────────────────────────────────────────────────────────────
# 참조 구현 (바이트 직접 연결)
# ─────────────────────────────────────────────────────────────────────

def _g1(p):
    if p is None:
        return bytes(64)
    return p[0].to_bytes(32, "big") + p[1].to_bytes(32, "big")


def _fr(v):
    return (int(v) % CURVE_ORDER).to_bytes(32, "big")


def _hash(buf):
    digest = keccak.new(digest_bits=256, data=buf).digest()
    return int.from_bytes(digest, "big") % CURVE_ORDER


def reference_challenges(vk, proof, public_signals):
    buf = b"".join(_g1(p) for p in (vk.Qm, vk.Ql, vk.Qr, vk.Qo, vk.Qc, vk.S1, vk.S2, vk.S3))
    buf += b"".join(_fr(s) for s in public_signals)
    buf += _g1(proof.A) + _g1(proof.B) + _g1(proof.C)
    beta = _hash(buf)

    gamma = _hash(_fr(beta))
    alpha = _hash(_fr(beta) + _fr(gamma) + _g1(proof.Z))
    xi = _hash(_fr(alpha) + _g1(proof.T1) + _g1(proof.T2) + _g1(proof.T3))
    v1 = _hash(
        _fr(xi)
        + _fr(proof.eval_a) + _fr(proof.eval_b) + _fr(proof.eval_c)
        + _fr(proof.eval_s1) + _fr(proof.eval_s2) + _fr(proof.eval_zw)
    )
    u = _hash(_g1(proof.Wxi) + _g1(proof.Wxiw))
    return {"beta": beta, "gamma": gamma, "alpha": alpha, "xi": xi, "v1": v1, "u": u}


# ─────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def signals():
    return [7, 11, 13]


@pytest.fixture
def vk3():
    return make_vk(n_public=3, power=3)


@pytest.fixture
def challenges(vk3, proof, signals):
    return calculate_challenges(vk3, proof, signals)


# ─────────────────────────────────────────────────────────────────────
# Tests
# ─────────────────────────────────────────────────────────────────────

class TestReferenceEncoding:
    """트랜스크립트 바이트 계약 고정."""

    def test_matches_reference(self, vk3, proof, signals, challenges):
        ref = reference_challenges(vk3, proof, signals)
        assert int(challenges.beta) == ref["beta"]
        assert int(challenges.gamma) == ref["gamma"]
        assert int(challenges.alpha) == ref["alpha"]
        assert int(challenges.xi) == ref["xi"]
        assert int(challenges.v[1]) == ref["v1"]
        assert int(challenges.u) == ref["u"]

    def test_matches_reference_without_public_inputs(self, proof):
        vk = make_vk(n_public=0)
        res = calculate_challenges(vk, proof, [])
        ref = reference_challenges(vk, proof, [])
        assert int(res.beta) == ref["beta"]
        assert int(res.xi) == ref["xi"]

    def test_zero_selector_hashed_as_zero_bytes(self, proof, signals):
        vk = make_vk(n_public=3, Qc=None)
        res = calculate_challenges(vk, proof, signals)
        assert int(res.beta) == reference_challenges(vk, proof, signals)["beta"]
        assert res.beta != calculate_challenges(make_vk(n_public=3), proof, signals).beta

    def test_gamma_depends_only_on_beta(self, challenges):
        assert int(challenges.gamma) == _hash(_fr(challenges.beta))

    def test_u_independent_of_earlier_rounds(self, vk3, proof, signals, challenges):
        other = calculate_challenges(make_vk(n_public=3, Qm=point(99)), proof, [1, 2, 3])
        assert other.beta != challenges.beta
        assert other.u == challenges.u


class TestChallengeBundle:
    def test_all_challenges_are_fr(self, challenges):
        for name in ("beta", "gamma", "alpha", "xi", "u"):
            assert isinstance(getattr(challenges, name), FR)

    def test_xin_zh_not_yet_computed(self, challenges):
        assert challenges.xin is None
        assert challenges.zh is None

    def test_v_length(self, challenges):
        assert len(challenges.v) == 5

    def test_v_zero_placeholder(self, challenges):
        assert challenges.v[0] == FR(0)

    def test_v_geometric_progression(self, challenges):
        v = challenges.v
        assert v[2] == v[1] * v[1]
        assert v[3] == v[1] * v[2]
        assert v[4] == v[1] * v[3]

    def test_deterministic(self, vk3, proof, signals, challenges):
        again = calculate_challenges(vk3, proof, signals)
        assert again.as_dict() == challenges.as_dict()

    def test_as_dict(self, challenges):
        d = challenges.as_dict()
        assert set(d) == {"beta", "gamma", "alpha", "xi", "u", "v"}
        assert d["v"][0] == 0

    def test_empty_bundle_as_dict(self):
        assert ChallengeBundle().as_dict() == {}


class TestSensitivity:
    """각 라운드 입력이 해당 챌린지에 반영되는지."""

    def test_public_signal_changes_beta(self, vk3, proof, challenges):
        other = calculate_challenges(vk3, proof, [7, 11, 14])
        assert other.beta != challenges.beta

    def test_public_signal_order_changes_beta(self, vk3, proof, challenges):
        other = calculate_challenges(vk3, proof, [11, 7, 13])
        assert other.beta != challenges.beta

    def test_z_changes_alpha_not_beta(self, vk3, signals, challenges):
        other = calculate_challenges(vk3, make_proof(Z=point(55)), signals)
        assert other.beta == challenges.beta
        assert other.alpha != challenges.alpha

    def test_t_changes_xi(self, vk3, signals, challenges):
        other = calculate_challenges(vk3, make_proof(T2=point(56)), signals)
        assert other.alpha == challenges.alpha
        assert other.xi != challenges.xi

    def test_evaluation_changes_v(self, vk3, signals, challenges):
        other = calculate_challenges(vk3, make_proof(eval_s2=999), signals)
        assert other.xi == challenges.xi
        assert other.v[1] != challenges.v[1]

    def test_opening_commitment_changes_u(self, vk3, signals, challenges):
        other = calculate_challenges(vk3, make_proof(Wxiw=point(57)), signals)
        assert other.v == challenges.v
        assert other.u != challenges.u


class TestGeometricPowers:
    def test_small(self):
        assert geometric_powers(FR(3), 5) == [FR(0), FR(3), FR(9), FR(27), FR(81)]

    def test_two(self):
        assert geometric_powers(FR(3), 2) == [FR(0), FR(3)]
