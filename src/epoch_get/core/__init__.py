"""Core / service layer — pure logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No clock or other OS access except through :class:`ClockSource`.
* No imports from ``cli`` or ``infra``.
"""

from epoch_get.core.epoch_service import EpochService
from epoch_get.core.models import Action, Settings, TimeUnit, Verbosity
from epoch_get.core.protocols import ClockSource
from epoch_get.core.resolver import FLAG_GROUPS, FlagGroup, resolve_arguments

__all__: list[str] = [
    "FLAG_GROUPS",
    "Action",
    "ClockSource",
    "EpochService",
    "FlagGroup",
    "Settings",
    "TimeUnit",
    "Verbosity",
    "resolve_arguments",
]
