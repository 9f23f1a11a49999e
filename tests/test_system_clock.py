"""Tests for the wall-clock adapter (infra/system_clock.py)."""

from __future__ import annotations

import time
from unittest.mock import patch

import pytest

from epoch_get.exceptions import ClockUnavailableError
from epoch_get.infra.system_clock import SystemClock


class TestSystemClock:
    def test_reading_is_after_epoch(self) -> None:
        assert SystemClock().now_ns() > 0

    def test_reading_tracks_time_module(self) -> None:
        before = time.time_ns()
        reading = SystemClock().now_ns()
        after = time.time_ns()
        assert before <= reading <= after

    def test_successive_readings_are_non_decreasing(self) -> None:
        clock = SystemClock()
        first = clock.now_ns()
        time.sleep(0.001)
        second = clock.now_ns()
        assert second >= first

    def test_epoch_itself_is_accepted(self) -> None:
        with patch("epoch_get.infra.system_clock.time.time_ns", return_value=0):
            assert SystemClock().now_ns() == 0

    def test_pre_epoch_raises(self) -> None:
        with patch("epoch_get.infra.system_clock.time.time_ns", return_value=-1):
            with pytest.raises(ClockUnavailableError) as exc_info:
                SystemClock().now_ns()
        assert "system time" in str(exc_info.value)
        assert exc_info.value.hint is not None
