#!/usr/bin/env python3
"""
Toy RSA CLI – generate a key from the small prime table and run one
encrypt/decrypt round trip on a fixed-width integer type.

Usage:
  Interactive (prompts for the message):
    python toyrsa_cli.py

  Non-interactive:
    python toyrsa_cli.py --message 1234 --seed 7
    python toyrsa_cli.py --p 179 --q 233 --message 12345
    python toyrsa_cli.py --width uint16 --p 251 --q 241 --message 12345
    python toyrsa_cli.py --run dashboard --width uint16
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
import textwrap
from typing import Optional, Sequence

# Ensure relative repo imports work even if executed from another directory.
sys.path.insert(0, str(pathlib.Path(__file__).parent.resolve()))

from modmath.errors import RsaMathError
from modmath.modular import multiplication_count
from modmath.widths import WIDTHS, IntWidth, parse_width
from reports.overflow_dashboard import make_overflow_dashboard, overflow_matrix, summarize
from toyrsa.key_generator import DEFAULT_MAX_PROBES, KeyGenerator, KeyMaterial
from toyrsa.primes import PRIME_TABLE
from toyrsa.random_source import RandomSource, SeededRandomSource, SystemRandomSource
from toyrsa.session import run_session
from utils import console_ui
from utils.plotting import HAS_MPL, ensure_out_dir

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ARITHMETIC = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Toy RSA on fixed-width integers: one key, one round trip.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          python toyrsa_cli.py --message 42
          python toyrsa_cli.py --width uint16 --wrap --seed 3 --message 42
          python toyrsa_cli.py --run dashboard --out Visualizations
        """),
    )
    ap.add_argument(
        "--run",
        choices=["session", "dashboard"],
        default="session",
        help="What to run (default: session).",
    )
    ap.add_argument("--message", type=int, help="Plaintext integer M; prompted for when omitted.")
    ap.add_argument("--seed", type=int, help="Seed a reproducible random source instead of the system one.")
    ap.add_argument(
        "--width",
        default="uint32",
        choices=sorted(WIDTHS),
        help="Integer type the arithmetic runs on (default: uint32).",
    )
    ap.add_argument(
        "--wrap",
        action="store_true",
        help="Wrap on overflow like native integers instead of failing.",
    )
    ap.add_argument(
        "--distinct-primes",
        action="store_true",
        help="Redraw Q until it differs from P.",
    )
    ap.add_argument(
        "--max-probes",
        type=int,
        default=DEFAULT_MAX_PROBES,
        help=f"Cap on public exponent probes (default: {DEFAULT_MAX_PROBES}).",
    )
    ap.add_argument("--p", type=int, help="Use this prime for P instead of drawing one.")
    ap.add_argument("--q", type=int, help="Use this prime for Q instead of drawing one.")
    ap.add_argument(
        "--out",
        type=pathlib.Path,
        default=pathlib.Path("Visualizations"),
        help="Output directory for --run dashboard.",
    )
    ap.add_argument(
        "--plain",
        action="store_true",
        help="Disable colors/banners; print plain ASCII.",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging verbosity (DEBUG, INFO, WARNING, ...)",
    )
    args = ap.parse_args(argv)
    if (args.p is None) != (args.q is None):
        ap.error("--p and --q must be given together")
    for flag, value in (("--p", args.p), ("--q", args.q)):
        if value is not None and value not in PRIME_TABLE:
            ap.error(f"{flag} must be a prime from the table (2..251), got {value}")
    if args.max_probes < 0:
        ap.error("--max-probes must not be negative")
    return args


def configure_logging(log_level: int | str) -> None:
    if isinstance(log_level, str):
        level_value = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level_value = log_level
    logging.basicConfig(
        level=level_value,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _make_rng(seed: Optional[int]) -> RandomSource:
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)


def _read_message(modulus: int) -> int:
    text = input(f"\nEnter 1 < M < {modulus}: ").strip()
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"Not an integer: {text!r}") from exc


def _key_fields(material: KeyMaterial):
    keypair = material.keypair
    return [
        ("P", material.p),
        ("Q", material.q),
        ("N", material.modulus),
        ("Phi(N)", material.totient),
        ("e", keypair.public_exponent),
        ("d", keypair.private_exponent),
    ]


def run_console_session(args: argparse.Namespace, width: IntWidth) -> int:
    console_ui.banner("Toy RSA")
    console_ui.bullet(f"Working integer type: {width}")

    generator = KeyGenerator(
        _make_rng(args.seed),
        width,
        distinct_primes=args.distinct_primes,
        max_probes=args.max_probes,
    )
    try:
        if args.p is not None:
            material = generator.from_primes(args.p, args.q)
        else:
            material = generator.generate()
    except RsaMathError as exc:
        console_ui.error(f"Key generation failed: {exc}")
        return EXIT_ARITHMETIC

    console_ui.section("Key")
    console_ui.fields(_key_fields(material), align=6)
    if material.degenerate:
        console_ui.warning("P == Q: the modulus is a perfect square.")

    message = args.message
    if message is None:
        try:
            message = _read_message(material.modulus)
        except (ValueError, EOFError) as exc:
            console_ui.error(f"Invalid message: {exc}")
            return EXIT_BAD_INPUT

    try:
        transcript = run_session(message, material, width)
    except RsaMathError as exc:
        console_ui.error(f"Round trip failed: {exc}")
        return EXIT_ARITHMETIC

    console_ui.section("Round trip")
    console_ui.fields(transcript.fields()[6:], align=6)
    console_ui.bullet(
        f"Modular multiplications: {multiplication_count(transcript.public_exponent)} to encrypt, "
        f"{multiplication_count(transcript.private_exponent)} to decrypt"
    )
    if transcript.ok:
        console_ui.success(f"Recovered M = {transcript.message}.")
    else:
        console_ui.warning(f"Decryption gave {transcript.recovered}, expected {transcript.message}.")
    return EXIT_OK


def run_dashboard(width: IntWidth, out_dir: pathlib.Path) -> int:
    console_ui.section(f"Overflow analysis ({width.name})")
    counts = summarize(overflow_matrix(width))
    for status, count in counts.items():
        console_ui.kv(f"{status:<8}", count)

    if not HAS_MPL:
        console_ui.warning("matplotlib not installed; skipping the PNG dashboard.")
        return EXIT_OK

    target = ensure_out_dir(out_dir) / f"overflow_{width.name}.png"
    path = make_overflow_dashboard(target, width)
    logger.info("Dashboard written to %s", path)
    console_ui.success(f"Saved dashboard: {path.resolve()}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    console_ui.init(plain=args.plain)

    width = parse_width(args.width).wrapping(args.wrap)
    logger.debug("Using %s, seed=%s", width, args.seed)

    if args.run == "dashboard":
        return run_dashboard(width, args.out)
    return run_console_session(args, width)


if __name__ == "__main__":
    sys.exit(main())
