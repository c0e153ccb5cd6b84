from math import gcd

import pytest

from modmath.errors import ArithmeticOverflow, NoValidExponentFound
from modmath.widths import INT16, UINT16, UINT32
from toyrsa.key_generator import (
    KeyGenerator,
    KeyPair,
    derive_modulus,
    generate_key,
    select_exponents,
    select_primes,
)
from toyrsa.primes import PRIME_TABLE
from toyrsa.random_source import SeededRandomSource, SystemRandomSource
from toyrsa.session import decrypt, encrypt


class ScriptedRandom:
    """Returns queued values, checking each lies in the requested range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, low, high):
        value = self.values.pop(0)
        self.calls.append((low, high))
        assert low <= value < high
        return value


def test_prime_table():
    assert len(PRIME_TABLE) == 54
    assert PRIME_TABLE[0] == 2 and PRIME_TABLE[-1] == 251
    assert list(PRIME_TABLE) == sorted(set(PRIME_TABLE))


def test_select_primes_samples_with_replacement():
    rng = ScriptedRandom([0, 0])
    assert select_primes(rng) == (2, 2)
    assert rng.calls == [(0, 54), (0, 54)]


def test_select_primes_distinct_redraws_q():
    rng = ScriptedRandom([40, 40, 40, 50])
    assert select_primes(rng, distinct=True) == (179, 233)


def test_derive_modulus():
    assert derive_modulus(179, 233) == (41707, 41296)
    assert derive_modulus(251, 241, UINT16) == (60491, 60000)
    with pytest.raises(ArithmeticOverflow):
        derive_modulus(251, 251, INT16)


def test_textbook_scenario_exponents():
    rng = ScriptedRandom([17230])
    selection = select_exponents(41296, rng)
    assert (selection.public_exponent, selection.private_exponent) == (17231, 27295)
    assert selection.probes == 0
    assert rng.calls == [(1, 41296)]


def test_exponent_probing_skips_common_factors():
    # 29 divides 41296, 31 does not.
    selection = select_exponents(41296, ScriptedRandom([28]))
    assert selection.public_exponent == 31
    assert selection.probes == 1
    assert (31 * selection.private_exponent) % 41296 == 1


def test_exponent_probing_is_bounded():
    # 15015 = 3 * 5 * 7 * 11 * 13, so 3, 5, 7 and 9 all share a factor.
    with pytest.raises(NoValidExponentFound) as excinfo:
        select_exponents(15015, ScriptedRandom([2]), max_probes=3)
    assert excinfo.value.probes == 3
    with pytest.raises(NoValidExponentFound):
        select_exponents(15015, ScriptedRandom([2]), max_probes=0)
    assert select_exponents(15015, ScriptedRandom([2]), max_probes=7).public_exponent == 17


def test_from_primes_builds_immutable_keypair():
    material = KeyGenerator(ScriptedRandom([17230])).from_primes(179, 233)
    assert material.keypair == KeyPair(public_exponent=17231, private_exponent=27295, modulus=41707)
    assert (material.p, material.q, material.modulus, material.totient) == (179, 233, 41707, 41296)
    assert not material.degenerate
    with pytest.raises(AttributeError):
        material.keypair.modulus = 1


def test_generated_keys_are_coprime_and_round_trip():
    generator = KeyGenerator(SeededRandomSource(2024), UINT32, distinct_primes=True)
    for _ in range(200):
        material = generator.generate()
        keypair = material.keypair
        phi = material.totient
        assert material.p != material.q
        assert gcd(keypair.public_exponent, phi) == 1
        assert (keypair.public_exponent * keypair.private_exponent) % phi == 1 % phi
        n = keypair.modulus
        for message in {0, 1, n // 2, n - 1}:
            assert decrypt(encrypt(message, keypair), keypair) == message


def test_seeded_generation_is_reproducible():
    first = KeyGenerator(SeededRandomSource(7)).generate()
    second = KeyGenerator(SeededRandomSource(7)).generate()
    assert first == second


def test_generate_key_with_system_randomness():
    material = generate_key(SystemRandomSource(), distinct_primes=True)
    assert material.p in PRIME_TABLE and material.q in PRIME_TABLE
    assert gcd(material.keypair.public_exponent, material.totient) == 1


def test_narrow_width_keys_overflow_on_encryption():
    material = KeyGenerator(ScriptedRandom([6]), UINT16).from_primes(251, 241)
    assert material.keypair.modulus == 60491
    assert material.keypair.public_exponent == 7
    with pytest.raises(ArithmeticOverflow):
        encrypt(12345, material.keypair, UINT16)


def test_random_sources_reject_empty_ranges():
    with pytest.raises(ValueError):
        SeededRandomSource(1).uniform(5, 5)
    with pytest.raises(ValueError):
        SystemRandomSource().uniform(3, 1)
    assert 10 <= SystemRandomSource().uniform(10, 12) < 12


def test_exhausted_probe_budget_aborts_generation():
    # Draws P=179, Q=233, then e=29, which divides phi=41296.
    generator = KeyGenerator(ScriptedRandom([40, 50, 28]), UINT32, max_probes=0)
    with pytest.raises(NoValidExponentFound) as excinfo:
        generator.generate()
    assert excinfo.value.totient == 41296
    assert excinfo.value.probes == 0
