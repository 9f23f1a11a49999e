"""Core epoch service — scale a clock reading into a time unit.

The service depends on a :class:`~epoch_get.core.protocols.ClockSource`
injected at construction time, which keeps the core free of any
direct clock access.

Guarantees
----------
* Integer arithmetic only; the value is truncated, never rounded.
* Python integers do not overflow, so nanosecond values stay exact
  well past the year 2262 where a signed 64-bit counter would wrap.
* Only :class:`~epoch_get.exceptions.EpochGetError` subclasses escape.
"""

from __future__ import annotations

from epoch_get.core.models import TimeUnit
from epoch_get.core.protocols import ClockSource


class EpochService:
    """Reads the clock and expresses the time since the epoch in a unit.

    Parameters
    ----------
    clock:
        Any object satisfying the :class:`ClockSource` protocol.
    """

    def __init__(self, clock: ClockSource) -> None:
        self._clock: ClockSource = clock

    def elapsed(self, unit: TimeUnit) -> int:
        """Return the whole number of *unit* elapsed since the epoch.

        Raises
        ------
        ClockUnavailableError
            Propagated from the clock when it reads before the epoch.
        """
        return to_unit(self._clock.now_ns(), unit)


def to_unit(nanoseconds: int, unit: TimeUnit) -> int:
    """Convert a non-negative nanosecond count to *unit*, truncating."""
    return nanoseconds // unit.nanoseconds
