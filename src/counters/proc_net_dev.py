"""Reader for the Linux /proc/net/dev statistics table."""
from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, Tuple

from models import InterfaceSample, Snapshot
from utils.interface_filter import InterfaceFilter
from .counter_source import ICounterSource
from .exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "/proc/net/dev"

HEADER_LINES = 2
FIELD_COUNT = 16
RX_BYTES_FIELD = 0
TX_BYTES_FIELD = 8


def parse_counters(data: str) -> Optional[Tuple[int, int]]:
    """Parse the numeric part of a table row into (rx_bytes, tx_bytes).

    Returns None unless the first 16 fields are all unsigned integers.
    """
    fields = data.split()
    if len(fields) < FIELD_COUNT:
        return None
    values = fields[:FIELD_COUNT]
    if not all(value.isascii() and value.isdigit() for value in values):
        return None
    return int(values[RX_BYTES_FIELD]), int(values[TX_BYTES_FIELD])


def parse_net_dev(lines: Iterable[str], interface_filter: InterfaceFilter,
                  snapshot: Optional[Snapshot] = None) -> Snapshot:
    """
    Build a Snapshot from the lines of a /proc/net/dev style table.

    The first two lines are headers. Rows without a colon or with too few
    numeric fields are skipped, as are names rejected by the filter.
    Parsing stops as soon as the snapshot is full.
    """
    if snapshot is None:
        snapshot = Snapshot()

    for lineno, line in enumerate(lines, start=1):
        if lineno <= HEADER_LINES:
            continue
        if snapshot.is_full:
            logger.debug("Snapshot full at %d interfaces, ignoring remaining rows", len(snapshot))
            break

        name, sep, data = line.partition(":")
        if not sep:
            logger.debug("Skipping line %d: no colon", lineno)
            continue
        name = name.lstrip()

        if not interface_filter.matches(name):
            continue

        counters = parse_counters(data)
        if counters is None:
            logger.debug("Skipping line %d (%s): malformed counter fields", lineno, name)
            continue

        rx_bytes, tx_bytes = counters
        snapshot.add(InterfaceSample.create(name, rx_bytes, tx_bytes))

    return snapshot


class ProcNetDevReader(ICounterSource):
    """Counter source backed by /proc/net/dev (or a file in the same format)."""

    def __init__(self, interface_filter: InterfaceFilter, path: str = DEFAULT_SOURCE):
        super().__init__(interface_filter)
        self.path = path

    @property
    def location(self) -> str:
        return self.path

    def read_snapshot(self) -> Snapshot:
        try:
            # names are raw bytes, decoded like sysfs paths
            f = open(self.path, "r", encoding=sys.getfilesystemencoding(),
                     errors="surrogateescape")
        except OSError as e:
            raise SourceUnavailableError(self.path, e.strerror or str(e)) from e

        with f:
            try:
                snapshot = parse_net_dev(f, self.interface_filter)
            except OSError as e:
                raise SourceUnavailableError(self.path, e.strerror or str(e)) from e

        logger.debug("Read %d interfaces from %s: %s", len(snapshot), self.path, snapshot.names)
        return snapshot
