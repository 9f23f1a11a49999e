"""Infrastructure: the process wall clock.

Production implementation of :class:`~epoch_get.core.protocols.ClockSource`.
Tests inject a fake clock into the core instead of patching this one.

Rules
-----
* Reads via :func:`time.time_ns` only, so no float precision is lost.
* No user-facing output.
"""

from __future__ import annotations

import time

from epoch_get.exceptions import ClockUnavailableError


class SystemClock:
    """Wall-clock adapter reporting nanoseconds since the Unix epoch."""

    def now_ns(self) -> int:
        """Return ``time.time_ns()``, rejecting pre-epoch readings.

        Raises
        ------
        ClockUnavailableError
            When the system clock is set before 1970-01-01 00:00:00 UTC.
        """
        now = time.time_ns()
        if now < 0:
            raise ClockUnavailableError(
                "Unable to get system time!",
                hint="The system clock reports a time before the Unix epoch.",
            )
        return now
