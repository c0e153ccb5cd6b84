"""Modular multiplicative inverse via the Extended Euclidean Algorithm."""
from __future__ import annotations

from modmath.errors import NoInverseExists
from modmath.int_ops import absolute_value
from modmath.widths import DEFAULT_WIDTH, IntWidth


def modular_inverse(b: int, a: int, width: IntWidth = DEFAULT_WIDTH) -> int:
    """Return ``d`` in ``[0, |a|)`` with ``b * d ≡ 1 (mod a)``.

    Only the Bézout coefficient of ``b`` is tracked.  The coefficients are
    kept in ``width.widened()`` since their magnitude can reach ``|a|``,
    which need not fit a signed type of the working width.  Raises
    :class:`NoInverseExists` when ``gcd(|a|, |b|) != 1``; a legitimate zero
    (any value modulo 1) is returned as ``0``.
    """

    b = width.check(b, "inverse operand")
    a = width.check(a, "inverse modulus")
    acc = width.widened()

    abs_a = absolute_value(a, width)
    r0, r1 = abs_a, absolute_value(b, width)
    y, y1 = 0, 1
    while r1:
        q = r0 // r1
        r0, r1 = r1, r0 % r1
        y, y1 = y1, acc.sub(y, acc.mul(y1, q))

    if r0 != 1:
        raise NoInverseExists(b, a)

    if y < 0:
        y = acc.add(y, abs_a)
    if b < 0:
        y = acc.neg(y)
    if abs_a:
        y %= abs_a
    return width.check(y, "inverse")


__all__ = ["modular_inverse"]
