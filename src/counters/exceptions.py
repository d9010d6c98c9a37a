# Custom exceptions

"""
Custom exceptions for netspeed.

Configuration errors carry a short `token` and a human readable `tooltip`
so the CLI can render them in the status bar error form.
"""

from typing import Optional


class NetspeedError(Exception):
    """Base exception for all netspeed errors."""
    pass

class ConfigurationError(NetspeedError):
    """Raised when the command line configuration is unusable."""

    tooltip = "Invalid configuration"

    def __init__(self, token: str, tooltip: Optional[str] = None):
        self.token = token
        if tooltip is not None:
            self.tooltip = tooltip
        super().__init__(f"{self.tooltip}: {token}")

class InvalidIntervalError(ConfigurationError):
    """Raised when the polling interval is not a whole number >= 1."""

    tooltip = "Invalid polling interval"

class UnknownInterfaceError(ConfigurationError):
    """Raised when an explicitly requested interface is not present on the host."""

    tooltip = "Interface does not exist"

class CounterSourceError(NetspeedError):
    """Base exception for counter source failures."""
    pass

class SourceUnavailableError(CounterSourceError):
    """Raised when the counter source cannot be opened."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot open {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

class BaselineError(CounterSourceError):
    """Raised when the very first snapshot yields nothing to diff against."""
    pass
