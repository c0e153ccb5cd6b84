from __future__ import annotations

from .overflow_dashboard import make_overflow_dashboard, overflow_matrix, probe_histogram

__all__ = ["make_overflow_dashboard", "overflow_matrix", "probe_histogram"]
