"""World-clock ticks.

The controller stamps job starts and durations in world-clock ticks.  The
monitor approximates the same clock from wall time; every component that
needs "now" accepts a ``Clock`` so tests can pin it.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from quarrywatch.core.timefmt import TICKS_PER_SECOND

Clock = Callable[[], int]


def world_ticks() -> int:
    """Current world-clock tick derived from the system clock."""
    return int(time.time() * TICKS_PER_SECOND)


def fixed_clock(tick: int) -> Clock:
    """Return a clock frozen at *tick*."""

    def _clock() -> int:
        return tick

    return _clock
