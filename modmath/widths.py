"""Fixed-width integer model.

Python integers never overflow, so the width of the native type the
arithmetic pretends to run on is carried explicitly.  Every intermediate
result passes through :meth:`IntWidth.check`, which either raises
:class:`ArithmeticOverflow` or, under the wrapping policy, reduces the value
the way the hardware would (two's complement for signed widths).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict

from modmath.errors import ArithmeticOverflow


@dataclass(frozen=True)
class IntWidth:
    bits: int
    signed: bool
    wrap: bool = False

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError("Integer width must be at least 2 bits")

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def __str__(self) -> str:
        return self.name + (" (wrapping)" if self.wrap else "")

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap_value(self, value: int) -> int:
        """Reduce *value* modulo ``2**bits`` into the representable range."""
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return value

    def check(self, value: int, operation: str = "value") -> int:
        if self.contains(value):
            return value
        if self.wrap:
            return self.wrap_value(value)
        raise ArithmeticOverflow(operation, value, self)

    def add(self, a: int, b: int) -> int:
        return self.check(a + b, f"{a} + {b}")

    def sub(self, a: int, b: int) -> int:
        return self.check(a - b, f"{a} - {b}")

    def mul(self, a: int, b: int) -> int:
        return self.check(a * b, f"{a} * {b}")

    def neg(self, a: int) -> int:
        return self.check(-a, f"-({a})")

    def widened(self) -> "IntWidth":
        """Signed width of twice the bits, used for wider accumulators."""
        return IntWidth(self.bits * 2, True, self.wrap)

    def wrapping(self, enabled: bool = True) -> "IntWidth":
        return replace(self, wrap=enabled)


INT8 = IntWidth(8, True)
UINT8 = IntWidth(8, False)
INT16 = IntWidth(16, True)
UINT16 = IntWidth(16, False)
INT32 = IntWidth(32, True)
UINT32 = IntWidth(32, False)
INT64 = IntWidth(64, True)
UINT64 = IntWidth(64, False)

WIDTHS: Dict[str, IntWidth] = {
    width.name: width
    for width in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64)
}

# Widest signed type; negative operands and exponents are representable.
DEFAULT_WIDTH = INT64


def parse_width(name: str) -> IntWidth:
    """Resolve a width name such as ``"uint16"`` (case-insensitive)."""

    key = name.strip().lower()
    try:
        return WIDTHS[key]
    except KeyError as exc:
        choices = ", ".join(sorted(WIDTHS))
        raise ValueError(f"Unknown integer width '{name}' (choose from {choices})") from exc


__all__ = [
    "IntWidth",
    "INT8",
    "UINT8",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    "WIDTHS",
    "DEFAULT_WIDTH",
    "parse_width",
]
