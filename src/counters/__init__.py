"""
Network byte counter sources.
"""

from .counter_source import ICounterSource
from .proc_net_dev import DEFAULT_SOURCE, ProcNetDevReader, parse_net_dev
from .sysfs import DEFAULT_SYSFS_ROOT, interface_exists, validate_interfaces
from .exceptions import (
    NetspeedError,
    ConfigurationError,
    InvalidIntervalError,
    UnknownInterfaceError,
    CounterSourceError,
    SourceUnavailableError,
    BaselineError,
)

__all__ = [
    'ICounterSource',
    'ProcNetDevReader',
    'parse_net_dev',
    'DEFAULT_SOURCE',
    'DEFAULT_SYSFS_ROOT',
    'interface_exists',
    'validate_interfaces',
    'NetspeedError',
    'ConfigurationError',
    'InvalidIntervalError',
    'UnknownInterfaceError',
    'CounterSourceError',
    'SourceUnavailableError',
    'BaselineError',
]
