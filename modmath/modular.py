"""Modular multiplication and square-and-multiply exponentiation."""
from __future__ import annotations

from modmath.int_ops import absolute_value, is_even
from modmath.inverse import modular_inverse
from modmath.widths import DEFAULT_WIDTH, IntWidth


def mod_multiply(a: int, b: int, m: int, width: IntWidth = DEFAULT_WIDTH) -> int:
    """Return ``(a * b) mod m``.

    The product is formed in *width* itself, so operands near ``m`` need a
    width of at least twice the bits of ``m``.  A product that does not fit
    raises ``ArithmeticOverflow`` instead of wrapping silently.
    """

    return width.mul(a, b) % m


def mod_pow(base: int, exponent: int, modulus: int, width: IntWidth = DEFAULT_WIDTH) -> int:
    """Return ``base ** exponent mod modulus`` by repeated squaring.

    ``exponent == 0`` yields ``1`` for every base and modulus, ``0 ** 0 mod 0``
    included.  A negative exponent exponentiates the inverse of the base and
    raises ``NoInverseExists`` when there is none.  The base power is squared
    after every exponent bit, the last one included.
    """

    base = width.check(base, "base")
    exponent = width.check(exponent, "exponent")
    modulus = width.check(modulus, "modulus")
    if exponent == 0:
        return 1

    power = base % modulus
    if exponent < 0:
        power = modular_inverse(power, modulus, width)
    remaining = absolute_value(exponent, width)

    result = 1
    while remaining:
        if not is_even(remaining):
            result = mod_multiply(result, power, modulus, width)
        power = mod_multiply(power, power, modulus, width)
        remaining >>= 1
    return result


def multiplication_count(exponent: int) -> int:
    """Number of ``mod_multiply`` calls :func:`mod_pow` makes for *exponent*."""

    magnitude = abs(exponent)
    return magnitude.bit_length() + bin(magnitude).count("1")


__all__ = ["mod_multiply", "mod_pow", "multiplication_count"]
