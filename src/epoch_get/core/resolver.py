"""Argument resolution — turn raw CLI tokens into :class:`Settings`.

Resolution is a left-to-right fold over the tokens.  Each recognised
flag overwrites one field of the running :class:`Settings`, so the last
flag of a category wins.  Anything unrecognised is skipped without
complaint; there is no "bad argument" error.

Matching is exact and case-sensitive.  Short flags are never combined
(``-vn`` is a single unknown token) and long flags are never
abbreviated.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from epoch_get.core.models import Action, Settings, TimeUnit, Verbosity


# ---------------------------------------------------------------------------
# Flag table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagGroup:
    """A set of synonymous flags that all set the same field."""

    flags: tuple[str, ...]
    """Every accepted spelling, short forms first."""

    field: str
    """Name of the :class:`Settings` field this group sets."""

    value: Verbosity | TimeUnit | Action
    """Value assigned to :attr:`field` when any flag matches."""

    description: tuple[str, ...]
    """Help text, one line per entry."""

    default: bool = False
    """Whether :attr:`value` is already the default for :attr:`field`."""


FLAG_GROUPS: tuple[FlagGroup, ...] = (
    FlagGroup(
        flags=("-h", "--help"),
        field="action",
        value=Action.HELP,
        description=("Print this help menu.",),
    ),
    FlagGroup(
        flags=("-V", "--version"),
        field="action",
        value=Action.VERSION,
        description=("Print the program version.",),
    ),
    FlagGroup(
        flags=("-v", "--verbose"),
        field="verbosity",
        value=Verbosity.VERBOSE,
        description=(
            "Be verbose when printing the time or version.",
            "Can be combined with any of the following.",
        ),
    ),
    FlagGroup(
        flags=("-s", "--seconds"),
        field="unit",
        value=TimeUnit.SECONDS,
        description=("Print the value in seconds.",),
        default=True,
    ),
    FlagGroup(
        flags=("-m", "-ms", "--milliseconds"),
        field="unit",
        value=TimeUnit.MILLISECONDS,
        description=("Print the value in milliseconds.",),
    ),
    FlagGroup(
        flags=("-u", "-us", "--microseconds"),
        field="unit",
        value=TimeUnit.MICROSECONDS,
        description=("Print the value in microseconds.",),
    ),
    FlagGroup(
        flags=("-n", "-ns", "--nanoseconds"),
        field="unit",
        value=TimeUnit.NANOSECONDS,
        description=("Print the value in nanoseconds.",),
    ),
)
"""Every recognised flag, in the order the help menu lists them."""

_FLAG_LOOKUP: dict[str, FlagGroup] = {
    flag: group for group in FLAG_GROUPS for flag in group.flags
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def match_flag(token: str) -> FlagGroup | None:
    """Return the group *token* belongs to, or ``None`` if unrecognised."""
    return _FLAG_LOOKUP.get(token)


def resolve_arguments(
    args: Iterable[str],
    initial: Settings | None = None,
) -> Settings:
    """Fold *args* into a :class:`Settings`.

    Parameters
    ----------
    args:
        Command-line tokens, **without** the program name.
    initial:
        Starting settings.  Defaults to ``Settings()`` (quiet, seconds,
        print).

    Returns
    -------
    Settings
        The settings after applying every recognised flag in order.
    """
    settings = initial if initial is not None else Settings()
    for token in args:
        group = match_flag(token)
        if group is None:
            continue
        settings = dataclasses.replace(settings, **{group.field: group.value})
    return settings
