"""
Date/time helpers — framework-agnostic.
"""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return the current wall-clock time as Unix epoch milliseconds."""
    return time.time_ns() // 1_000_000
