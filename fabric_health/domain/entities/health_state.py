"""
Health state domain values.

``HealthState`` is the severity reported for a single entity.
``HealthStateFilterFlags`` is the bitmask vocabulary used by filters to
select entities by severity. The two are deliberately separate types: a
health state is one value, a filter is a set of values packed into an int.
"""

from __future__ import annotations

from enum import Enum
from functools import reduce
from typing import Optional


class HealthState(str, Enum):
    """Aggregated severity of a cluster entity."""

    INVALID = "invalid"
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"
    UNKNOWN = "unknown"


class HealthStateFilterFlags:
    """Bit constants for ``health_state_filter`` fields.

    The values are fixed by the wire protocol. ``ALL`` is a sentinel that
    matches every state; it is not ``OK | WARNING | ERROR | NONE`` (15).
    """

    DEFAULT = 0
    NONE = 1
    OK = 2
    WARNING = 4
    ERROR = 8
    ALL = 65535

    @staticmethod
    def contains(mask: Optional[int], flag: int) -> bool:
        """Return whether ``flag`` is selected by ``mask``."""
        if not mask:
            return False
        return (mask & flag) != 0

    @staticmethod
    def combine(*flags: int) -> int:
        """OR the given flags into a single mask."""
        return reduce(lambda acc, flag: acc | flag, flags, HealthStateFilterFlags.DEFAULT)


_STATE_TO_FLAG = {
    HealthState.OK: HealthStateFilterFlags.OK,
    HealthState.WARNING: HealthStateFilterFlags.WARNING,
    HealthState.ERROR: HealthStateFilterFlags.ERROR,
}


def to_filter_flag(state: HealthState) -> int:
    """Map a health state to its filter bit; unfilterable states map to DEFAULT."""
    return _STATE_TO_FLAG.get(state, HealthStateFilterFlags.DEFAULT)
