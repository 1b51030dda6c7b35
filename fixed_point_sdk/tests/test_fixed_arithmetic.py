"""Tests for fixed-point construction, arithmetic and integer conversion."""

import copy
import pickle

import pytest

from fixed_point_sdk import Fixed8_4, Fixed16_8, Fixed32_16, Fixed64_32, FixedPoint, fixed
from fixed_point_sdk.core.errors import PrecisionError, UnsupportedWidthError

HALF = Fixed32_16.from_raw(1 << 15)


def test_factory_returns_cached_class():
    assert fixed(32, 16) is Fixed32_16
    assert fixed(32, 16) is fixed(bits=32, precision=16)
    assert Fixed32_16.__name__ == "Fixed32_16"
    assert Fixed32_16.BITS == 32
    assert Fixed32_16.PRECISION == 16


@pytest.mark.parametrize("bits, precision", [(8, 8), (16, 20), (32, -1), (64, 64)])
def test_invalid_precision_raises(bits, precision):
    with pytest.raises(PrecisionError):
        fixed(bits, precision)


def test_unsupported_width_raises():
    with pytest.raises(UnsupportedWidthError):
        fixed(24, 8)


def test_subclass_declaration():
    class Angle(FixedPoint, bits=16, precision=12):
        __slots__ = ()

    assert Angle.INTERMEDIATE.bits == 32
    assert int(Angle(3) * Angle(2)) == 6


def test_base_class_has_no_format():
    with pytest.raises(TypeError):
        FixedPoint(1)
    with pytest.raises(TypeError):
        FixedPoint.from_raw(1)


def test_default_construction_is_zero():
    assert Fixed32_16().raw == 0


def test_integer_construction_upscales():
    assert Fixed32_16(3).raw == 3 << 16
    assert Fixed16_8(-2).raw == -512


@pytest.mark.parametrize("n", [-32768, -1, 0, 1, 12345, 32767])
def test_integer_round_trip(n):
    assert int(Fixed32_16(n)) == n


def test_integer_construction_wraps_out_of_range():
    # 40000 << 16 does not fit in int32
    value = Fixed32_16(40000)
    assert value.raw == (40000 << 16) - (1 << 32)
    assert int(value) == 40000 - 65536


def test_non_integer_argument_rejected():
    with pytest.raises(TypeError):
        Fixed32_16(1.5)


def test_values_are_immutable():
    value = Fixed32_16(1)
    with pytest.raises(AttributeError):
        value.raw = 5


def test_copies_share_the_immutable_value():
    value = Fixed32_16(3)
    assert copy.copy(value) is value
    assert copy.deepcopy([value])[0] == value


def test_pickle_rebuilds_from_stored_bits():
    value = Fixed32_16.from_raw(-12345)
    restored = pickle.loads(pickle.dumps(value))
    assert type(restored) is Fixed32_16
    assert restored.raw == -12345


def test_integer_conversion_floors():
    assert int(Fixed32_16.from_raw(-1)) == -1
    assert int(-HALF) == -1
    assert int(HALF) == 0
    assert int(Fixed32_16(2) + HALF) == 2


@pytest.mark.parametrize("raw", [0, 1, -1, 12345678, -(1 << 31), (1 << 31) - 1])
def test_additive_inverse(raw):
    a = Fixed32_16.from_raw(raw)
    assert a + (-a) == Fixed32_16(0)


def test_additive_inverse_at_minimum_wraps():
    a = Fixed8_4.from_raw(-128)
    assert (-a).raw == -128
    assert a + (-a) == Fixed8_4(0)


def test_add_and_subtract():
    assert Fixed32_16(2) + Fixed32_16(3) == Fixed32_16(5)
    assert Fixed32_16(2) - Fixed32_16(3) == Fixed32_16(-1)
    assert (Fixed32_16(2) + HALF).raw == (2 << 16) + (1 << 15)


@pytest.mark.parametrize("fmt", [Fixed16_8, Fixed32_16, fixed(16, 8), fixed(64, 8)])
def test_multiplicative_scaling(fmt):
    assert fmt(2) * fmt(3) == fmt(6)


def test_multiply_rescales_fraction():
    assert Fixed32_16(3) * HALF == Fixed32_16.from_raw(3 << 15)
    assert Fixed32_16(-3) * HALF == Fixed32_16.from_raw(-3 << 15)


def test_multiply_shift_is_arithmetic():
    epsilon = Fixed32_16.from_raw(1)
    assert (epsilon * epsilon).raw == 0
    assert (-epsilon * epsilon).raw == -1


def test_divide_keeps_fraction():
    assert Fixed32_16(3) / Fixed32_16(2) == Fixed32_16.from_raw(3 << 15)
    assert Fixed32_16(1) / Fixed32_16(4) == Fixed32_16.from_raw(1 << 14)


def test_negative_division_then_integer_conversion_floors():
    quotient = Fixed32_16(-3, 0) / Fixed32_16(2, 0)
    assert quotient.raw == -(3 << 15)
    # -1.5 converts to -2 (arithmetic shift), not -1
    assert int(quotient) == -2


def test_division_truncates_toward_zero():
    # Zero precision: the divide itself truncates -1.5 toward zero
    whole = fixed(32, 0)
    assert int(whole(-3) / whole(2)) == -1
    assert (Fixed32_16.from_raw(-1) / Fixed32_16(2)).raw == 0


def test_division_by_zero_is_not_caught():
    with pytest.raises(ZeroDivisionError):
        Fixed32_16(1) / Fixed32_16(0)
    with pytest.raises(ZeroDivisionError):
        Fixed32_16(1) / 0


def test_scalar_add_and_subtract_upscale():
    assert Fixed32_16(5) + 2 == Fixed32_16(7)
    assert 2 + Fixed32_16(5) == Fixed32_16(7)
    assert Fixed32_16(3) - 10 == Fixed32_16(-7)
    assert 10 - Fixed32_16(3) == Fixed32_16(7)
    assert 1 - HALF == HALF


def test_scalar_multiply_does_not_rescale():
    one_and_half = Fixed32_16.from_raw(3 << 15)
    assert one_and_half * 3 == Fixed32_16.from_raw(9 << 15)
    assert 3 * one_and_half == Fixed32_16.from_raw(9 << 15)


def test_scalar_divide_does_not_rescale():
    assert Fixed32_16(7) / 2 == Fixed32_16.from_raw(7 << 15)
    # Stored bits divide toward zero
    assert (Fixed32_16.from_raw(-7) / 2).raw == -3


def test_scalar_on_left_divide_upscales_scalar():
    assert 12 / Fixed32_16(4) == Fixed32_16(3)
    assert 1 / Fixed32_16(4) == Fixed32_16.from_raw(1 << 14)


def test_compound_assignment_keeps_copies_independent():
    a = Fixed32_16(1)
    b = a
    a += 2
    assert a == 3
    assert b == 1

    a -= Fixed32_16(1)
    a *= Fixed32_16(3)
    a /= 2
    assert a == 3
    a *= 2
    a /= Fixed32_16(4)
    assert a == Fixed32_16.from_raw(3 << 15)


def test_add_overflow_wraps():
    result = Fixed8_4(7) + Fixed8_4(1)
    assert result.raw == -128
    assert int(result) == -8


def test_multiply_overflow_wraps():
    near_max = Fixed16_8.from_raw(0x7FFF)
    # (2**30 - 2**16 + 1) >> 8 narrows to -256
    assert (near_max * near_max).raw == -256


def test_64_bit_multiply_wraps_in_64_bits():
    # No wider tier exists, so the raw product 6 << 64 wraps to zero
    assert Fixed64_32(2) * Fixed64_32(3) == Fixed64_32(0)
    assert Fixed64_32.from_raw(1 << 31) * Fixed64_32.from_raw(1 << 31) == Fixed64_32.from_raw(1 << 30)


def test_mixed_formats_are_rejected():
    with pytest.raises(TypeError):
        Fixed32_16(1) + Fixed16_8(1)
    with pytest.raises(TypeError):
        Fixed32_16(1) * Fixed16_8(1)
    assert (Fixed32_16(1) == Fixed16_8(1)) is False


def test_non_integer_scalars_are_rejected():
    with pytest.raises(TypeError):
        Fixed32_16(1) + 1.5
    with pytest.raises(TypeError):
        "2" * Fixed32_16(1)


def test_unary_operators():
    assert -Fixed32_16(3) == Fixed32_16(-3)
    assert +Fixed32_16(3) == Fixed32_16(3)
    assert abs(Fixed32_16(-3)) == Fixed32_16(3)
    assert abs(Fixed8_4.from_raw(-128)).raw == -128
