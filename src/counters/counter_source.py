"""
ICounterSource Interface

This is the CONTRACT that all counter sources must follow.

A counter source produces one Snapshot per call to read_snapshot().
Implementations must:
1. Read the whole table in a single pass (one open, one iteration)
2. Apply the interface filter before storing a sample
3. Stop at the Snapshot capacity
4. Raise SourceUnavailableError when the source cannot be opened
"""

from abc import ABC, abstractmethod

from models import Snapshot
from utils.interface_filter import InterfaceFilter


class ICounterSource(ABC):
    """
    Abstract base class for per-interface byte counter sources.

    Example implementations:
    - ProcNetDevReader (reads /proc/net/dev)
    - StaticCounterSource in the test suite (replays canned snapshots)
    """

    def __init__(self, interface_filter: InterfaceFilter):
        self.interface_filter = interface_filter

    @abstractmethod
    def read_snapshot(self) -> Snapshot:
        """
        Take a snapshot of the current counters.

        Returns:
            Snapshot with at most MAX_INTERFACES samples, possibly empty.

        Raises:
            SourceUnavailableError: If the source cannot be opened.
        """
        pass

    @property
    @abstractmethod
    def location(self) -> str:
        """Human readable location of the source, used in error tooltips."""
        pass
