"""Custom exception hierarchy for epoch-get.

Every error that reaches the CLI error boundary must inherit from
:class:`EpochGetError` so it can be rendered as a clean one-line
message instead of a stack trace.

Hierarchy
---------
EpochGetError
└── ClockUnavailableError
"""

from __future__ import annotations


class EpochGetError(Exception):
    """Base exception for all epoch-get errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Clock -----------------------------------------------------------------

class ClockUnavailableError(EpochGetError):
    """Raised when the system clock reports a time before the Unix epoch."""
