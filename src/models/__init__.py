"""
Interface counter data models.
"""

from .interface_sample import (
    COUNTER_MASK,
    MAX_INTERFACES,
    MAX_NAME_LEN,
    InterfaceSample,
    Snapshot,
)

__all__ = [
    'COUNTER_MASK',
    'MAX_INTERFACES',
    'MAX_NAME_LEN',
    'InterfaceSample',
    'Snapshot',
]
