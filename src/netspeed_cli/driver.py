"""Polling loop: sample, diff against the previous snapshot, emit."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from analysis.rates import RateTotals, compute_rates
from counters.counter_source import ICounterSource
from counters.exceptions import BaselineError, SourceUnavailableError
from models import Snapshot
from .output import StatusWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollingConfig:
    interval: int = 1
    """Seconds between snapshots, always >= 1."""


class PollingDriver:
    """
    Owns the previous snapshot and the sleep/sample/emit cycle.

    prime() must succeed before step() is meaningful; run() does both and
    never returns.
    """

    def __init__(self,
                 source: ICounterSource,
                 config: PollingConfig,
                 writer: StatusWriter,
                 sleep: Optional[Callable[[float], None]] = None):
        self.source = source
        self.config = config
        self.writer = writer
        self.sleep = sleep or time.sleep
        self.previous: Optional[Snapshot] = None
        self.has_baseline = False

    def _take_snapshot(self) -> Optional[Snapshot]:
        try:
            snapshot = self.source.read_snapshot()
        except SourceUnavailableError as e:
            logger.warning("%s", e)
            self.writer.error("Error", f"Cannot open {e.path}")
            return None
        if not snapshot:
            logger.info("No matching interfaces in %s", self.source.location)
            return None
        return snapshot

    def prime(self) -> Snapshot:
        snapshot = self._take_snapshot()
        if snapshot is None:
            raise BaselineError(f"No usable initial sample from {self.source.location}")
        self.previous = snapshot
        self.has_baseline = True
        logger.debug("Baseline taken: %s", snapshot.names)
        return snapshot

    def step(self) -> Optional[RateTotals]:
        """One cycle after the sleep. Returns None when the cycle was skipped."""
        if not self.has_baseline:
            raise RuntimeError("Driver not primed. Call prime() first.")

        current = self._take_snapshot()
        if current is None:
            logger.debug("Skipping cycle, keeping previous snapshot")
            return None

        totals = compute_rates(self.previous, current, self.config.interval)
        if totals.matched < len(current):
            logger.debug("%d of %d interfaces had no previous sample", len(current) - totals.matched, len(current))
        logger.debug("Cycle totals: %s", totals.to_dict())
        self.writer.sample(totals)
        self.previous = current
        return totals

    def run(self) -> None:
        self.prime()
        while True:
            self.sleep(self.config.interval)
            self.step()
