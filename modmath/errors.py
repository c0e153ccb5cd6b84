"""Exception taxonomy shared by the fixed-width arithmetic and key generation."""
from __future__ import annotations

from typing import Any


class RsaMathError(ArithmeticError):
    """Base class for every failure raised by the arithmetic core."""


class ArithmeticOverflow(RsaMathError, OverflowError):
    """Raised when a value or intermediate result leaves the working width."""

    def __init__(self, operation: str, value: int, width: Any) -> None:
        self.operation = operation
        self.value = value
        self.width = width
        super().__init__(f"{operation} overflows {width}: {value}")


class NoInverseExists(RsaMathError, ValueError):
    """Raised when ``value`` has no multiplicative inverse modulo ``modulus``."""

    def __init__(self, value: int, modulus: int) -> None:
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value} has no inverse modulo {modulus}")


class NoValidExponentFound(RsaMathError):
    """Raised when the public exponent search exhausts its probe budget."""

    def __init__(self, totient: int, probes: int) -> None:
        self.totient = totient
        self.probes = probes
        super().__init__(
            f"no public exponent coprime to {totient} found after {probes} probes"
        )


__all__ = [
    "RsaMathError",
    "ArithmeticOverflow",
    "NoInverseExists",
    "NoValidExponentFound",
]
