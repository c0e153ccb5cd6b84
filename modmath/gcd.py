"""Euclid's algorithm on fixed-width operands."""
from __future__ import annotations

from modmath.int_ops import absolute_value, swap_values
from modmath.widths import DEFAULT_WIDTH, IntWidth


def gcd(a: int, b: int, width: IntWidth = DEFAULT_WIDTH) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|``; ``gcd(0, 0) == 0``."""

    ta = absolute_value(width.check(a, "gcd operand"), width)
    tb = absolute_value(width.check(b, "gcd operand"), width)
    if ta < tb:
        ta, tb = swap_values(ta, tb)
    while tb:
        ta %= tb
        ta, tb = swap_values(ta, tb)
    return ta


def is_coprime(a: int, b: int, width: IntWidth = DEFAULT_WIDTH) -> bool:
    return gcd(a, b, width) == 1


__all__ = ["gcd", "is_coprime"]
