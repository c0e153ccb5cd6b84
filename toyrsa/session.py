"""One textbook RSA round trip over a generated key pair."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from modmath.modular import mod_pow
from modmath.widths import UINT32, IntWidth
from toyrsa.key_generator import KeyMaterial, KeyPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionTranscript:
    p: int
    q: int
    modulus: int
    totient: int
    public_exponent: int
    private_exponent: int
    message: int
    ciphertext: int
    recovered: int

    @property
    def ok(self) -> bool:
        return self.recovered == self.message

    def fields(self) -> List[Tuple[str, int]]:
        """Report lines in console order."""
        return [
            ("P", self.p),
            ("Q", self.q),
            ("N", self.modulus),
            ("Phi(N)", self.totient),
            ("e", self.public_exponent),
            ("d", self.private_exponent),
            ("C", self.ciphertext),
            ("M", self.recovered),
        ]


def _check_representative(value: int, keypair: KeyPair, what: str) -> None:
    if not (0 <= value < keypair.modulus):
        raise ValueError(f"{what} representative out of range [0, {keypair.modulus})")


def encrypt(message: int, keypair: KeyPair, width: IntWidth = UINT32) -> int:
    _check_representative(message, keypair, "Message")
    return mod_pow(message, keypair.public_exponent, keypair.modulus, width)


def decrypt(ciphertext: int, keypair: KeyPair, width: IntWidth = UINT32) -> int:
    _check_representative(ciphertext, keypair, "Ciphertext")
    return mod_pow(ciphertext, keypair.private_exponent, keypair.modulus, width)


def run_session(message: int, material: KeyMaterial, width: IntWidth = UINT32) -> SessionTranscript:
    """Encrypt *message* (reduced modulo ``n``) and decrypt it again."""

    keypair = material.keypair
    if material.degenerate:
        logger.warning("p == q == %d: n is a perfect square, decryption may not round-trip", material.p)

    reduced = message % keypair.modulus
    if reduced != message:
        logger.warning("Message %d reduced modulo n=%d to %d", message, keypair.modulus, reduced)

    logger.info("Encrypting M=%d with e=%d, n=%d", reduced, keypair.public_exponent, keypair.modulus)
    ciphertext = encrypt(reduced, keypair, width)
    recovered = decrypt(ciphertext, keypair, width)
    logger.debug("C=%d decrypted to %d", ciphertext, recovered)

    return SessionTranscript(
        p=material.p,
        q=material.q,
        modulus=material.modulus,
        totient=material.totient,
        public_exponent=keypair.public_exponent,
        private_exponent=keypair.private_exponent,
        message=reduced,
        ciphertext=ciphertext,
        recovered=recovered,
    )


__all__ = ["SessionTranscript", "encrypt", "decrypt", "run_session"]
