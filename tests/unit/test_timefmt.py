"""Tests for duration formatting."""

from __future__ import annotations

import pytest

from quarrywatch.core.timefmt import TICKS_PER_SECOND, format_duration, format_seconds


class TestFormatSeconds:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0s"),
            (45, "45s"),
            (59, "59s"),
            (60, "01:00"),
            (65, "01:05"),
            (3599, "59:59"),
            (3600, "1:00:00"),
            (3661, "1:01:01"),
            (36061, "10:01:01"),
        ],
    )
    def test_formats(self, seconds: int, expected: str):
        assert format_seconds(seconds) == expected

    def test_negative(self):
        assert format_seconds(-45) == "-45s"
        assert format_seconds(-65) == "-01:05"


class TestFormatDuration:
    def test_tick_rate(self):
        assert TICKS_PER_SECOND == 20

    def test_converts_ticks_to_seconds(self):
        assert format_duration(45 * 20) == "45s"
        assert format_duration(65 * 20) == "01:05"
        assert format_duration(3661 * 20) == "1:01:01"

    def test_truncates_partial_seconds(self):
        assert format_duration(39) == "1s"
        assert format_duration(19) == "0s"
        assert format_duration(1219.5) == "01:00"

    def test_negative_ticks(self):
        assert format_duration(-45 * 20) == "-45s"
        assert format_duration(-39) == "-1s"
