"""Smoke tests — package wiring.

These tests prove that:
* Version is accessible and semver-like.
* The exception hierarchy is correctly structured.
* Exit codes are defined.
"""

from __future__ import annotations

from epoch_get import __version__
from epoch_get.cli import exit_codes
from epoch_get.exceptions import ClockUnavailableError, EpochGetError


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    def test_clock_error_inherits_from_base(self) -> None:
        assert issubclass(ClockUnavailableError, EpochGetError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(EpochGetError, Exception)

    def test_hint_is_stored(self) -> None:
        err = EpochGetError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ClockUnavailableError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
