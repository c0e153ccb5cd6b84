"""Which prime pairs survive a given integer width, and how long exponent probing takes."""
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Sequence

from modmath.errors import ArithmeticOverflow
from modmath.widths import UINT16, UINT32, IntWidth
from toyrsa.key_generator import KeyGenerator, derive_modulus
from toyrsa.primes import PRIME_TABLE
from toyrsa.random_source import SeededRandomSource
from utils.plotting import HAS_MPL, nice_axes, save, status_colormap, wide_grid

STATUS_OK = "ok"
STATUS_PRODUCT = "product"
STATUS_MODULUS = "modulus"
STATUSES = (STATUS_OK, STATUS_PRODUCT, STATUS_MODULUS)

_STATUS_COLORS = ("#59a14f", "#f28e2b", "#e15759")


def classify_pair(p: int, q: int, width: IntWidth) -> str:
    """Classify the key derived from ``(p, q)`` under *width*.

    ``"modulus"`` means ``n`` or ``phi`` does not fit, ``"product"`` means the
    key derives but ``(n-1)**2`` does not fit so encryption can overflow in
    ``mod_multiply``.
    """

    strict = width.wrapping(False)
    try:
        n, _ = derive_modulus(p, q, strict)
    except ArithmeticOverflow:
        return STATUS_MODULUS
    if not strict.contains((n - 1) * (n - 1)):
        return STATUS_PRODUCT
    return STATUS_OK


def overflow_matrix(width: IntWidth, table: Sequence[int] = PRIME_TABLE) -> List[List[str]]:
    return [[classify_pair(p, q, width) for q in table] for p in table]


def summarize(matrix: List[List[str]]) -> Dict[str, int]:
    counts = Counter(status for row in matrix for status in row)
    return {status: counts.get(status, 0) for status in STATUSES}


def probe_histogram(trials: int = 500, seed: int = 0, width: IntWidth = UINT32) -> Dict[int, int]:
    """Count exponent probes over *trials* seeded generations.

    Draws whose modulus does not fit *width* are left out.
    """

    generator = KeyGenerator(SeededRandomSource(seed), width.wrapping(False), distinct_primes=True)
    counts: Counter = Counter()
    for _ in range(trials):
        try:
            material = generator.generate()
        except ArithmeticOverflow:
            continue
        counts[material.probes] += 1
    return dict(sorted(counts.items()))


def make_overflow_dashboard(
    save_path: str | Path,
    width: IntWidth = UINT16,
    *,
    trials: int = 500,
    seed: int = 0,
) -> Path:
    """Render the width analysis to *save_path* and return the file path."""

    target = Path(save_path)
    if not HAS_MPL:
        target.parent.mkdir(parents=True, exist_ok=True)
        return target

    matrix = overflow_matrix(width)
    counts = summarize(matrix)
    histogram = probe_histogram(trials, seed, width)

    fig, axes = wide_grid(1, 2)
    fig.suptitle(f"Toy RSA on {width.name}", fontsize=15)

    ax_map = nice_axes(axes[0][0], "Prime pairs by overflow status", xlabel="q", ylabel="p")
    grid = [[STATUSES.index(status) for status in row] for row in matrix]
    ax_map.imshow(grid, cmap=status_colormap(_STATUS_COLORS), vmin=0, vmax=len(STATUSES) - 1)
    ticks = list(range(0, len(PRIME_TABLE), 6))
    ax_map.set_xticks(ticks)
    ax_map.set_xticklabels([str(PRIME_TABLE[i]) for i in ticks])
    ax_map.set_yticks(ticks)
    ax_map.set_yticklabels([str(PRIME_TABLE[i]) for i in ticks])
    for status, color in zip(STATUSES, _STATUS_COLORS):
        ax_map.scatter([], [], color=color, marker="s", label=f"{status} ({counts[status]})")
    ax_map.legend(loc="upper left", fontsize=8)

    ax_probe = nice_axes(
        axes[0][1],
        f"Exponent probes per key ({sum(histogram.values())} keys)",
        xlabel="Probes (e += 2)",
        ylabel="Keys",
    )
    if histogram:
        ax_probe.bar(list(histogram.keys()), list(histogram.values()), color="#4e79a7")
    else:
        ax_probe.text(0.5, 0.5, "no key fits this width", ha="center", va="center")
    ax_probe.grid(True, alpha=0.3)

    fig.tight_layout(rect=[0, 0, 1, 0.94])
    return save(fig, target)


__all__ = [
    "STATUS_OK",
    "STATUS_PRODUCT",
    "STATUS_MODULUS",
    "classify_pair",
    "overflow_matrix",
    "summarize",
    "probe_histogram",
    "make_overflow_dashboard",
]
