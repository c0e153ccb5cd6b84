"""Randomness collaborators consumed by the key generator.

Neither source makes the resulting keys secure: with at most 54 primes to
choose from the key space can be enumerated by hand.
"""
from __future__ import annotations

import random
from typing import Optional, Protocol

from Crypto.Random import random as crypto_random


class RandomSource(Protocol):
    def uniform(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``."""
        ...


def _check_range(low: int, high: int) -> None:
    if high <= low:
        raise ValueError(f"Empty sampling range [{low}, {high})")


class SystemRandomSource:
    """Draws from the operating system CSPRNG via pycryptodome."""

    def uniform(self, low: int, high: int) -> int:
        _check_range(low, high)
        return crypto_random.randrange(low, high)


class SeededRandomSource:
    """Reproducible draws from a seeded Mersenne Twister."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._rng.randrange(low, high)


__all__ = ["RandomSource", "SystemRandomSource", "SeededRandomSource"]
