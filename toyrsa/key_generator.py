"""Toy RSA key generation on a fixed-width integer type.

Generation runs three phases in order and never goes back:

1. select two primes from :data:`PRIME_TABLE`;
2. derive the modulus ``n = p*q`` and totient ``phi = (p-1)*(q-1)``;
3. pick an odd public exponent coprime to ``phi`` and invert it.

Any failure aborts the whole generation, so callers either receive a complete
:class:`KeyMaterial` or an exception from :mod:`modmath.errors`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from modmath.errors import NoValidExponentFound
from modmath.gcd import is_coprime
from modmath.inverse import modular_inverse
from modmath.widths import UINT32, IntWidth
from toyrsa.primes import PRIME_TABLE
from toyrsa.random_source import RandomSource, SystemRandomSource

# Probing stops well before it could run away; an odd coprime candidate is
# normally found within a handful of steps.
DEFAULT_MAX_PROBES = 1 << 16


@dataclass(frozen=True)
class KeyPair:
    public_exponent: int
    private_exponent: int
    modulus: int


@dataclass(frozen=True)
class ExponentSelection:
    public_exponent: int
    private_exponent: int
    probes: int


@dataclass(frozen=True)
class KeyMaterial:
    """Everything derived while generating one key pair."""

    p: int
    q: int
    modulus: int
    totient: int
    keypair: KeyPair
    probes: int = 0

    @property
    def degenerate(self) -> bool:
        # n = p**2 and phi is not Euler's totient of n.
        return self.p == self.q


def select_primes(
    rng: RandomSource,
    table: Sequence[int] = PRIME_TABLE,
    *,
    distinct: bool = False,
) -> Tuple[int, int]:
    """Draw ``p`` and ``q`` uniformly from *table*.

    Draws are independent and with replacement, so ``p == q`` can happen.
    Pass ``distinct=True`` to redraw ``q`` until it differs from ``p``.
    """

    if not table:
        raise ValueError("Prime table is empty")
    p = table[rng.uniform(0, len(table))]
    q = table[rng.uniform(0, len(table))]
    if distinct:
        if len(set(table)) < 2:
            raise ValueError("Prime table needs two different primes")
        while q == p:
            q = table[rng.uniform(0, len(table))]
    return p, q


def derive_modulus(p: int, q: int, width: IntWidth = UINT32) -> Tuple[int, int]:
    """Return ``(n, phi)``, raising ``ArithmeticOverflow`` if either leaves *width*."""

    n = width.mul(p, q)
    totient = width.mul(width.sub(p, 1), width.sub(q, 1))
    return n, totient


def select_exponents(
    totient: int,
    rng: RandomSource,
    width: IntWidth = UINT32,
    max_probes: int = DEFAULT_MAX_PROBES,
) -> ExponentSelection:
    """Pick ``e`` coprime to *totient* and derive ``d = e^-1 mod totient``.

    The candidate is drawn from ``[1, phi)``, forced odd and then probed
    upwards in steps of two without wrapping modulo ``phi``, so ``e`` may end
    up above ``phi``.  More than *max_probes* steps raise
    :class:`NoValidExponentFound`.
    """

    candidate = width.check(rng.uniform(1, max(totient, 2)) | 1, "public exponent")
    probes = 0
    while not is_coprime(candidate, totient, width):
        if probes >= max_probes:
            raise NoValidExponentFound(totient, probes)
        candidate = width.add(candidate, 2)
        probes += 1
    private = modular_inverse(candidate, totient, width)
    return ExponentSelection(candidate, private, probes)


@dataclass
class KeyGenerator:
    rng: RandomSource
    width: IntWidth = UINT32
    distinct_primes: bool = False
    max_probes: int = DEFAULT_MAX_PROBES
    table: Sequence[int] = PRIME_TABLE

    def generate(self) -> KeyMaterial:
        p, q = select_primes(self.rng, self.table, distinct=self.distinct_primes)
        return self.from_primes(p, q)

    def from_primes(self, p: int, q: int) -> KeyMaterial:
        """Run the derivation phases on caller-chosen primes."""

        n, totient = derive_modulus(p, q, self.width)
        selection = select_exponents(totient, self.rng, self.width, self.max_probes)
        keypair = KeyPair(
            public_exponent=selection.public_exponent,
            private_exponent=selection.private_exponent,
            modulus=n,
        )
        return KeyMaterial(
            p=p,
            q=q,
            modulus=n,
            totient=totient,
            keypair=keypair,
            probes=selection.probes,
        )


def generate_key(
    rng: Optional[RandomSource] = None,
    width: IntWidth = UINT32,
    *,
    distinct_primes: bool = False,
    max_probes: int = DEFAULT_MAX_PROBES,
) -> KeyMaterial:
    """Generate one toy key pair with :class:`SystemRandomSource` by default."""

    generator = KeyGenerator(
        rng if rng is not None else SystemRandomSource(),
        width,
        distinct_primes=distinct_primes,
        max_probes=max_probes,
    )
    return generator.generate()


__all__ = [
    "DEFAULT_MAX_PROBES",
    "KeyPair",
    "ExponentSelection",
    "KeyMaterial",
    "KeyGenerator",
    "select_primes",
    "derive_modulus",
    "select_exponents",
    "generate_key",
]
