"""Console presentation for the toy RSA session, degrading to plain ASCII."""
from __future__ import annotations

import os
import shutil
import sys
from typing import Iterable, Optional, Tuple

try:  # optional dependency
    import colorama
    from colorama import Fore, Style
except Exception:  # pragma: no cover - optional dep
    colorama = None
    Fore = None  # type: ignore[assignment]
    Style = None  # type: ignore[assignment]

try:  # optional dependency
    import pyfiglet
except Exception:  # pragma: no cover - optional dep
    pyfiglet = None

__all__ = [
    "init",
    "banner",
    "section",
    "kv",
    "fields",
    "bullet",
    "success",
    "warning",
    "error",
    "line",
]

_width = 80
_plain = True
_styles = {"success": "", "warning": "", "error": "", "heading": ""}
_marks = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}


def _stdout_is_tty() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:  # closed stream
        return False


def init(plain: bool = False) -> None:
    """Choose between coloured and plain output.

    Plain mode is forced by ``plain=True``, the ``NO_COLOR`` environment
    variable, a non-terminal stdout or a missing colorama install.
    """

    global _width, _plain, _styles, _marks

    _width = shutil.get_terminal_size(fallback=(80, 24)).columns or 80
    _plain = plain or bool(os.environ.get("NO_COLOR")) or not _stdout_is_tty() or colorama is None

    if _plain:
        _styles = {"success": "", "warning": "", "error": "", "heading": ""}
        _marks = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}
        return

    colorama.init(autoreset=True)
    _styles = {
        "success": Fore.GREEN + Style.BRIGHT,
        "warning": Fore.YELLOW + Style.BRIGHT,
        "error": Fore.RED + Style.BRIGHT,
        "heading": Fore.CYAN + Style.BRIGHT,
    }
    _marks = {"success": "✓", "warning": "!", "error": "✗", "bullet": "•"}


def _styled(kind: str, message: str) -> str:
    style = _styles.get(kind, "")
    if not style:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def line(char: str = "-") -> None:
    """Print a separator spanning the console width."""

    print(char * max(1, _width))


def banner(title: str) -> None:
    """Display a figlet banner, or a plain heading without pyfiglet."""

    if _plain or pyfiglet is None:
        print(f"=== {title} ===")
        return
    print(pyfiglet.figlet_format(title, width=_width))


def section(title: str) -> None:
    """Display a section divider with the given title."""

    line("=")
    print(_styled("heading", f" {title.upper()}"))
    line("=")


def kv(key: str, value: object) -> None:
    """Print a ``key = value`` line."""

    print(f"{key} = {value}")


def fields(pairs: Iterable[Tuple[str, object]], *, align: Optional[int] = None) -> None:
    """Print ``key = value`` lines with the keys padded to a common width."""

    pairs = list(pairs)
    if not pairs:
        return
    pad = align if align is not None else max(len(key) for key, _ in pairs)
    for key, value in pairs:
        kv(key.ljust(pad), value)


def bullet(msg: str) -> None:
    """Print a bullet-point line."""

    print(f"{_marks['bullet']} {msg}")


def success(msg: str) -> None:
    """Highlight a success message."""

    print(_styled("success", f"{_marks['success']} {msg}"))


def warning(msg: str) -> None:
    """Highlight a warning message."""

    print(_styled("warning", f"{_marks['warning']} {msg}"))


def error(msg: str) -> None:
    """Highlight an error message on stderr."""

    print(_styled("error", f"{_marks['error']} {msg}"), file=sys.stderr)
