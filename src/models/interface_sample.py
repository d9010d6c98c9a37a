# Interface counter data model
"""
Counter sample models for netspeed.

SAMPLES ARE IMMUTABLE - a sample describes one interface at one instant.
A Snapshot collects the samples of a single read of the counter source and
is bounded: it never holds more than MAX_INTERFACES entries.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

MAX_INTERFACES = 32
MAX_NAME_LEN = 15
COUNTER_MASK = (1 << 64) - 1


@dataclass(frozen=True)  # IMMUTABLE: samples are compared across cycles
class InterfaceSample:
    """
    Cumulative byte counters of one interface.

    Counters are unsigned 64-bit values maintained by the kernel since the
    interface was initialised.
    """
    name: str
    """Interface name, truncated to MAX_NAME_LEN characters."""

    rx_bytes: int
    """Received bytes (1st column of /proc/net/dev)."""

    tx_bytes: int
    """Transmitted bytes (9th column of /proc/net/dev)."""

    @classmethod
    def create(cls, name: str, rx_bytes: int, tx_bytes: int) -> "InterfaceSample":
        """Build a sample, applying name truncation and 64-bit counter width."""
        return cls(
            name=name[:MAX_NAME_LEN],
            rx_bytes=rx_bytes & COUNTER_MASK,
            tx_bytes=tx_bytes & COUNTER_MASK,
        )


@dataclass
class Snapshot:
    """
    Samples taken from one read of the counter source.

    Capacity-checked: add() refuses new samples once `capacity` is reached,
    so readers stop at the cap instead of growing without bound.
    """
    capacity: int = MAX_INTERFACES
    _samples: List[InterfaceSample] = field(default_factory=list, repr=False)

    def add(self, sample: InterfaceSample) -> bool:
        """Append a sample. Returns False (and drops it) when full."""
        if self.is_full:
            return False
        self._samples.append(sample)
        return True

    def find(self, name: str) -> Optional[InterfaceSample]:
        """First sample with exactly this name, or None."""
        for sample in self._samples:
            if sample.name == name:
                return sample
        return None

    @property
    def is_full(self) -> bool:
        return len(self._samples) >= self.capacity

    @property
    def names(self) -> List[str]:
        return [s.name for s in self._samples]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[InterfaceSample]:
        return iter(self._samples)

    def __bool__(self) -> bool:
        return bool(self._samples)
