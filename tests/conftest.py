"""Shared pytest fixtures and configuration for the epoch-get test suite.

Guidelines
----------
* The wall clock is faked everywhere except in the system-clock tests.
* Output is captured with ``capsys``; Rich must render plain text.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

FIXED_NS: int = 1_700_000_123_456_789_012
"""2023-11-14T22:15:23.456789012Z, in nanoseconds since the epoch."""


@dataclass
class FixedClock:
    """ClockSource double that always returns the same reading."""

    ns: int = FIXED_NS

    def now_ns(self) -> int:
        return self.ns


@pytest.fixture()
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture(autouse=True)
def _plain_rich_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop the environment from forcing colour codes into captured output."""
    for var in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)
