"""Aggregate throughput between two counter snapshots."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from models import COUNTER_MASK, Snapshot


@dataclass(frozen=True)
class RateTotals:
    """Aggregate bytes-per-second over all matched interfaces."""
    rx_rate: int = 0
    tx_rate: int = 0
    matched: int = 0
    """Number of interfaces present in both snapshots."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rx_rate": self.rx_rate,
            "tx_rate": self.tx_rate,
            "matched": self.matched,
        }


def counter_delta(current: int, previous: int) -> int:
    """Unsigned 64-bit difference; a counter reset wraps to a huge value."""
    return (current - previous) & COUNTER_MASK


def compute_rates(previous: Snapshot, current: Snapshot, interval_seconds: int) -> RateTotals:
    """
    Sum per-interface rates of every interface present in both snapshots.

    Interfaces are matched by exact name (first match in `previous` wins).
    An interface that only exists in `current` contributes nothing.
    """
    if interval_seconds < 1:
        raise ValueError(f"interval_seconds must be >= 1, got {interval_seconds}")

    total_rx = 0
    total_tx = 0
    matched = 0
    for sample in current:
        prev = previous.find(sample.name)
        if prev is None:
            continue
        total_rx += counter_delta(sample.rx_bytes, prev.rx_bytes) // interval_seconds
        total_tx += counter_delta(sample.tx_bytes, prev.tx_bytes) // interval_seconds
        matched += 1

    return RateTotals(
        rx_rate=total_rx & COUNTER_MASK,
        tx_rate=total_tx & COUNTER_MASK,
        matched=matched,
    )
