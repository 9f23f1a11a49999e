"""Domain models for epoch-get.

Three closed enumerations select what the program does and how it
phrases the result; :class:`Settings` bundles one member of each.  All
of them are immutable and free of I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Verbosity(Enum):
    """Output phrasing: bare value or descriptive sentence."""

    VERBOSE = "verbose"
    QUIET = "quiet"


class TimeUnit(Enum):
    """Scale used to express the time elapsed since the epoch.

    Each member's value is its size in nanoseconds.
    """

    SECONDS = 1_000_000_000
    MILLISECONDS = 1_000_000
    MICROSECONDS = 1_000
    NANOSECONDS = 1

    @property
    def nanoseconds(self) -> int:
        """Number of nanoseconds in one of this unit."""
        return self.value

    @property
    def suffix(self) -> str:
        """Text appended to the value in verbose output (``" seconds"``)."""
        return f" {self.name.lower()}"


class Action(Enum):
    """Top-level behaviour selected on the command line."""

    HELP = "help"
    PRINT = "print"
    VERSION = "version"


# ---------------------------------------------------------------------------
# Resolved invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Settings:
    """The outcome of argument resolution for one invocation."""

    verbosity: Verbosity = Verbosity.QUIET
    """Output phrasing.  Quiet unless ``-v`` / ``--verbose`` is given."""

    unit: TimeUnit = TimeUnit.SECONDS
    """Scale of the printed timestamp."""

    action: Action = Action.PRINT
    """What the program does."""
