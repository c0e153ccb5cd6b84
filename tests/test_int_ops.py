import pytest

from modmath.errors import ArithmeticOverflow
from modmath.int_ops import absolute_value, is_even, swap_values
from modmath.widths import INT8, INT16, INT32, UINT16, UINT32, parse_width


def test_width_ranges():
    assert (UINT16.min_value, UINT16.max_value) == (0, 65535)
    assert (INT16.min_value, INT16.max_value) == (-32768, 32767)
    assert UINT32.max_value == 0xFFFFFFFF
    assert INT32.widened().bits == 64 and INT32.widened().signed


def test_checked_arithmetic_raises_instead_of_wrapping():
    with pytest.raises(ArithmeticOverflow) as excinfo:
        UINT16.mul(60490, 60490)
    assert excinfo.value.value == 60490 * 60490
    assert excinfo.value.width == UINT16
    with pytest.raises(OverflowError):
        INT8.add(127, 1)
    with pytest.raises(ArithmeticOverflow):
        UINT32.sub(0, 1)


def test_wrapping_policy_matches_native_types():
    assert UINT16.wrapping().mul(60490, 60490) == (60490 * 60490) & 0xFFFF
    assert INT8.wrapping().add(127, 1) == -128
    assert UINT32.wrapping().sub(0, 1) == 0xFFFFFFFF
    assert str(UINT16.wrapping()) == "uint16 (wrapping)"


def test_parse_width():
    assert parse_width("UInt16") == UINT16
    assert parse_width(" int32 ") == INT32
    with pytest.raises(ValueError):
        parse_width("int24")


def test_absolute_value_signed_and_unsigned():
    assert absolute_value(-5, INT32) == 5
    assert absolute_value(5, INT32) == 5
    assert absolute_value(0, INT32) == 0
    assert absolute_value(40000, UINT16) == 40000


def test_absolute_value_of_minimum_overflows():
    with pytest.raises(ArithmeticOverflow):
        absolute_value(INT32.min_value, INT32)
    assert absolute_value(INT8.min_value, INT8.wrapping()) == INT8.min_value


def test_is_even_matches_modulo_for_negative_values():
    for x in range(-10, 11):
        assert is_even(x) == (x % 2 == 0)
    assert is_even(INT32.min_value)
    assert not is_even(UINT32.max_value)


def test_swap_values():
    assert swap_values(1, 2) == (2, 1)
    assert swap_values("a", None) == (None, "a")
