from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

HAS_MPL = False
plt = None  # type: ignore[assignment]

try:  # pragma: no cover - optional dependency
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.colors import ListedColormap

    HAS_MPL = True
except Exception:  # pragma: no cover - optional dependency missing
    plt = None  # type: ignore[assignment]


def ensure_out_dir(pathlike) -> Path:
    """Create *pathlike* (and parents) if needed and return it as a Path."""
    path = Path(pathlike)
    path.mkdir(parents=True, exist_ok=True)
    return path


def wide_grid(rows: int, cols: int):
    """Return ``(fig, axes)`` sized for a dashboard, or ``(None, None)`` without matplotlib."""
    if not HAS_MPL:
        return None, None
    return plt.subplots(rows, cols, figsize=(cols * 6.5, rows * 5.0), squeeze=False)


def nice_axes(ax, title: str, xlabel: Optional[str] = None, ylabel: Optional[str] = None):
    if ax is None:
        return ax
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    return ax


def status_colormap(colors: Sequence[str]):
    """Discrete colormap with one colour per status index."""
    if not HAS_MPL:
        return None
    return ListedColormap(list(colors))


def save(fig, path) -> Path:
    """Write *fig* to *path* as PNG; only creates the directory when *fig* is None."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if fig is None:
        return target
    fig.savefig(str(target), bbox_inches="tight")
    plt.close(fig)
    return target


__all__ = [
    "HAS_MPL",
    "ensure_out_dir",
    "wide_grid",
    "nice_axes",
    "status_colormap",
    "save",
]
