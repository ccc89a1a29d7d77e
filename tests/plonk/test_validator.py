"""
Tests for the structural validator: validator.py

Covers:
- is_on_curve (valid points, y+1, infinity, out-of-range / malformed coordinates)
- is_in_field (boundaries 0, r-1, r; non-int inputs)
- check_public_inputs_length
- validate_proof / validate_public_signals / validate_key
- is_root_of_unity
"""

import pytest

from zkverify.plonk.field import FR, CURVE_ORDER, FIELD_MODULUS, MAX_POWER
from zkverify.plonk.validator import (
    is_on_curve,
    is_in_field,
    check_public_inputs_length,
    validate_proof,
    validate_public_signals,
    validate_key,
    is_root_of_unity,
    is_key_commitment,
)

from builders import point, make_vk, make_proof
from polynomial import get_root_of_unity


# ─────────────────────────────────────────────────────────────────────
# is_on_curve
# ─────────────────────────────────────────────────────────────────────

class TestIsOnCurve:
    """y² = x³ + 3 검사."""

    @pytest.mark.parametrize("k", [1, 2, 7, 123456789, CURVE_ORDER - 1])
    def test_multiples_of_generator(self, k):
        assert is_on_curve(point(k)) is True

    @pytest.mark.parametrize("k", [1, 2, 7, 123456789])
    def test_y_plus_one_is_off_curve(self, k):
        x, y = point(k)
        assert is_on_curve((x, (y + 1) % FIELD_MODULUS)) is False

    def test_infinity_is_rejected(self):
        assert is_on_curve(None) is False

    def test_zero_zero_is_off_curve(self):
        assert is_on_curve((0, 0)) is False

    def test_coordinate_equal_to_modulus(self):
        # (1, 2 + q)는 mod q로 보면 생성자와 같지만 정규 표현이 아니다
        assert is_on_curve((1, 2 + FIELD_MODULUS)) is False

    def test_negative_coordinate(self):
        assert is_on_curve((1, 2 - FIELD_MODULUS)) is False

    @pytest.mark.parametrize("bad", [
        [1, 2],              # list, not tuple
        (1, 2, 1),
        (1,),
        ("1", "2"),
        (1.0, 2.0),
        (True, 2),
        "12",
        42,
    ])
    def test_malformed_input(self, bad):
        assert is_on_curve(bad) is False

    def test_negated_point_is_on_curve(self):
        x, y = point(5)
        assert is_on_curve((x, FIELD_MODULUS - y)) is True


# ─────────────────────────────────────────────────────────────────────
# is_in_field
# ─────────────────────────────────────────────────────────────────────

class TestIsInField:
    def test_zero(self):
        assert is_in_field(0) is True

    def test_modulus_minus_one(self):
        assert is_in_field(CURVE_ORDER - 1) is True

    def test_modulus(self):
        assert is_in_field(CURVE_ORDER) is False

    def test_base_field_modulus(self):
        assert is_in_field(FIELD_MODULUS - 1) is False

    def test_negative(self):
        assert is_in_field(-1) is False

    def test_huge(self):
        assert is_in_field(1 << 300) is False

    @pytest.mark.parametrize("bad", ["1", 1.0, None, True, FR(1), [1]])
    def test_non_int(self, bad):
        assert is_in_field(bad) is False


# ─────────────────────────────────────────────────────────────────────
# check_public_inputs_length
# ─────────────────────────────────────────────────────────────────────

class TestPublicInputsLength:
    def test_equal(self):
        assert check_public_inputs_length(3, 3) is True

    def test_different(self):
        assert check_public_inputs_length(3, 4) is False

    def test_zero(self):
        assert check_public_inputs_length(0, 0) is True


# ─────────────────────────────────────────────────────────────────────
# validate_proof
# ─────────────────────────────────────────────────────────────────────

class TestValidateProof:
    def test_valid(self, proof):
        assert validate_proof(proof) is True

    @pytest.mark.parametrize("name", ["A", "B", "C", "Z", "T1", "T2", "T3", "Wxi", "Wxiw"])
    def test_off_curve_commitment(self, name):
        x, y = point(3)
        proof = make_proof(**{name: (x, y + 1)})
        assert validate_proof(proof) is False

    @pytest.mark.parametrize("name", ["A", "Wxiw"])
    def test_infinity_commitment(self, name):
        assert validate_proof(make_proof(**{name: None})) is False

    @pytest.mark.parametrize(
        "name", ["eval_a", "eval_b", "eval_c", "eval_s1", "eval_s2", "eval_zw"]
    )
    def test_out_of_range_evaluation(self, name):
        assert validate_proof(make_proof(**{name: CURVE_ORDER})) is False

    def test_boundary_evaluation(self):
        assert validate_proof(make_proof(eval_zw=CURVE_ORDER - 1)) is True


# ─────────────────────────────────────────────────────────────────────
# validate_public_signals
# ─────────────────────────────────────────────────────────────────────

class TestValidatePublicSignals:
    def test_valid(self):
        assert validate_public_signals(make_vk(n_public=2), [1, 2]) is True

    def test_wrong_length(self):
        assert validate_public_signals(make_vk(n_public=2), [1]) is False

    def test_out_of_range(self):
        assert validate_public_signals(make_vk(n_public=1), [CURVE_ORDER]) is False


# ─────────────────────────────────────────────────────────────────────
# validate_key / is_root_of_unity
# ─────────────────────────────────────────────────────────────────────

class TestValidateKey:
    def test_valid(self, vk):
        assert validate_key(vk) is True

    def test_valid_with_opening(self):
        assert validate_key(make_vk(power=3, with_opening=True)) is True

    def test_power_at_ceiling(self):
        assert validate_key(make_vk(power=MAX_POWER)) is True

    def test_power_above_ceiling(self):
        assert validate_key(make_vk(power=MAX_POWER + 1)) is False

    def test_negative_power(self):
        assert validate_key(make_vk(power=-1)) is False

    def test_negative_n_public(self):
        assert validate_key(make_vk(n_public=-1)) is False

    @pytest.mark.parametrize("name", ["Qm", "Ql", "Qr", "Qo", "Qc", "S1", "S2", "S3"])
    def test_zero_polynomial_commitment_allowed(self, name):
        assert validate_key(make_vk(power=2, with_opening=True, **{name: None})) is True

    def test_off_curve_key_commitment(self):
        x, y = point(18)
        assert validate_key(make_vk(S3=(x, y + 1))) is False

    def test_wrong_root_of_unity(self):
        vk = make_vk(power=3, with_opening=True, omega=get_root_of_unity(4))
        assert validate_key(vk) is False


class TestIsRootOfUnity:
    @pytest.mark.parametrize("power", [0, 1, 2, 5, 10])
    def test_primitive_roots(self, power):
        assert is_root_of_unity(get_root_of_unity(1 << power), power) is True

    def test_non_primitive(self):
        # ω₄² = ω₂ 는 4차 단위근이지만 원시 단위근이 아니다
        assert is_root_of_unity(get_root_of_unity(2), 2) is False

    def test_not_a_root(self):
        assert is_root_of_unity(FR(5), 3) is False

    def test_legacy_exponent_value(self):
        # 도메인 지수 자체는 단위근이 아니다
        assert is_root_of_unity(FR(3), 3) is False

    def test_non_fr(self):
        assert is_root_of_unity(1, 0) is False


class TestIsKeyCommitment:
    def test_point(self):
        assert is_key_commitment(point(3)) is True

    def test_infinity_allowed(self):
        assert is_key_commitment(None) is True

    def test_off_curve(self):
        x, y = point(3)
        assert is_key_commitment((x, y + 1)) is False

    def test_malformed(self):
        assert is_key_commitment([1, 2]) is False
