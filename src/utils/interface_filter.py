"""Interface selection: explicit allow-list or name-prefix heuristic."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

# Traditional wired/wireless and systemd predictable wired/wireless names.
AUTO_PREFIXES = ("eth", "wlan", "enp", "wlp")


def compile_auto_pattern(prefixes: Iterable[str] = AUTO_PREFIXES) -> re.Pattern:
    alternatives = "|".join(re.escape(p) for p in prefixes)
    return re.compile(f"^(?:{alternatives})")


@dataclass(frozen=True)
class InterfaceFilter:
    """
    Immutable interface selection policy.

    Exactly one of `allowed` / `pattern` is set: an explicit allow-list is
    matched exactly (case-sensitive, no wildcards), otherwise the compiled
    prefix pattern decides.
    """
    allowed: Optional[FrozenSet[str]] = None
    pattern: Optional[re.Pattern] = None

    @classmethod
    def auto(cls) -> "InterfaceFilter":
        return cls(pattern=compile_auto_pattern())

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "InterfaceFilter":
        """Allow-list filter; an empty list falls back to auto-detection."""
        allowed = frozenset(names)
        if not allowed:
            return cls.auto()
        return cls(allowed=allowed)

    @property
    def is_explicit(self) -> bool:
        return self.allowed is not None

    def matches(self, name: str) -> bool:
        if self.allowed is not None:
            return name in self.allowed
        if self.pattern is None:
            return False
        return self.pattern.match(name) is not None


def should_include(name: str, interface_filter: InterfaceFilter) -> bool:
    return interface_filter.matches(name)
