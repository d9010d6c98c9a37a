"""Compact decimal byte formatting for status bar output."""
from __future__ import annotations

from typing import Tuple

DECIMAL_BASE = 1000
UNITS: Tuple[str, ...] = ("B", "K", "M", "G", "T", "P")
MAX_WIDTH = 15


def format_bytes(num_bytes: int) -> str:
    """
    Format a byte count with decimal (SI) scaling.

    Values below 1000 are printed as an integer with a `B` suffix. Larger
    values are divided by 1000 until they drop below 1000 or the `P` unit
    is reached, then printed with one decimal place: 1500000 -> "1.5M".
    """
    if num_bytes < DECIMAL_BASE:
        return f"{num_bytes}{UNITS[0]}"[:MAX_WIDTH]

    value = float(num_bytes)
    unit_idx = 0
    while value >= DECIMAL_BASE and unit_idx < len(UNITS) - 1:
        value /= 1000.0
        unit_idx += 1

    return f"{value:.1f}{UNITS[unit_idx]}"[:MAX_WIDTH]
