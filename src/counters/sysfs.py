"""Interface existence checks against /sys/class/net."""
from __future__ import annotations

import logging
import os
from typing import Iterable, List

from .exceptions import UnknownInterfaceError

logger = logging.getLogger(__name__)

DEFAULT_SYSFS_ROOT = "/sys/class/net"


def interface_exists(name: str, root: str = DEFAULT_SYSFS_ROOT) -> bool:
    """True if `root/<name>` exists (the kernel creates one entry per interface)."""
    if not name or "/" in name:
        return False
    return os.path.exists(os.path.join(root, name))


def validate_interfaces(names: Iterable[str], root: str = DEFAULT_SYSFS_ROOT) -> List[str]:
    """Return the names unchanged, raising on the first one missing from the host."""
    validated = []
    for name in names:
        if not interface_exists(name, root):
            raise UnknownInterfaceError(name)
        logger.debug("Interface %s found under %s", name, root)
        validated.append(name)
    return validated
