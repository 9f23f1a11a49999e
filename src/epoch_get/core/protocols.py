"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts, never on a concrete clock,
so tests can inject a fixed reading.
"""

from __future__ import annotations

from typing import Protocol


class ClockSource(Protocol):
    """Contract for wall-clock backends."""

    def now_ns(self) -> int:
        """Return the current time as whole nanoseconds since the Unix epoch.

        The result is never negative.

        Raises
        ------
        ClockUnavailableError
            When the clock reports a time before the epoch.
        """
        ...  # pragma: no cover
