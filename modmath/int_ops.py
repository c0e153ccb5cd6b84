"""Small integer helpers shared by the modular arithmetic routines."""
from __future__ import annotations

from typing import Any, Tuple

from modmath.widths import DEFAULT_WIDTH, IntWidth


def absolute_value(x: int, width: IntWidth = DEFAULT_WIDTH) -> int:
    """Return ``|x|`` within *width*.

    Unsigned widths short-circuit to the identity without attempting a
    negation.  For signed widths ``x`` must not be ``width.min_value``: its
    negation is not representable and raises ``ArithmeticOverflow`` (or wraps
    back to ``min_value`` under the wrapping policy, as the native type does).
    """

    if not width.signed:
        return x
    return width.neg(x) if x < 0 else x


def is_even(x: int) -> bool:
    # Two's complement low bit, so negative values work too.
    return not (x & 1)


def swap_values(a: Any, b: Any) -> Tuple[Any, Any]:
    return b, a


__all__ = ["absolute_value", "is_even", "swap_values"]
