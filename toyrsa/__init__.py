"""Toy RSA on fixed-width integers: key generation and one round-trip session."""
from __future__ import annotations

from .key_generator import (
    DEFAULT_MAX_PROBES,
    KeyGenerator,
    KeyMaterial,
    KeyPair,
    generate_key,
)
from .primes import PRIME_TABLE
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .session import SessionTranscript, decrypt, encrypt, run_session

__all__ = [
    "DEFAULT_MAX_PROBES",
    "KeyGenerator",
    "KeyMaterial",
    "KeyPair",
    "generate_key",
    "PRIME_TABLE",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "SessionTranscript",
    "decrypt",
    "encrypt",
    "run_session",
]
