"""Fixed-width modular arithmetic primitives behind the toy RSA demo."""
from __future__ import annotations

from .errors import ArithmeticOverflow, NoInverseExists, NoValidExponentFound, RsaMathError
from .gcd import gcd, is_coprime
from .int_ops import absolute_value, is_even, swap_values
from .inverse import modular_inverse
from .modular import mod_multiply, mod_pow, multiplication_count
from .widths import DEFAULT_WIDTH, IntWidth, parse_width

__all__ = [
    "ArithmeticOverflow",
    "NoInverseExists",
    "NoValidExponentFound",
    "RsaMathError",
    "gcd",
    "is_coprime",
    "absolute_value",
    "is_even",
    "swap_values",
    "modular_inverse",
    "mod_multiply",
    "mod_pow",
    "multiplication_count",
    "DEFAULT_WIDTH",
    "IntWidth",
    "parse_width",
]
