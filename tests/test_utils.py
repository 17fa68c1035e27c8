"""Tests for date and duration helpers."""

from datetime import date, datetime

import pytest

from sleeptrack.utils import (
    format_clock,
    format_duration,
    format_duration_detailed,
    format_duration_short,
    minutes_since_midnight,
    previous_month_bounds,
    week_bounds,
)


class TestDurations:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "0h 0m"), (45, "0h 45m"), (450, "7h 30m"), (480.7, "8h 0m")],
    )
    def test_format_duration(self, minutes, expected):
        assert format_duration(minutes) == expected

    @pytest.mark.parametrize(
        "minutes,expected",
        [(45, "45m"), (120, "2h"), (450, "7h 30m")],
    )
    def test_format_duration_short(self, minutes, expected):
        assert format_duration_short(minutes) == expected

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (1, "1 minute"),
            (30, "30 minutes"),
            (60, "1 hour"),
            (65, "1 hour 5 minutes"),
            (121, "2 hours 1 minute"),
        ],
    )
    def test_format_duration_detailed(self, minutes, expected):
        assert format_duration_detailed(minutes) == expected


class TestCalendar:
    def test_week_bounds_from_wednesday(self):
        assert week_bounds(date(2025, 1, 15)) == (date(2025, 1, 13), date(2025, 1, 19))

    def test_week_bounds_from_sunday(self):
        assert week_bounds(date(2025, 1, 19)) == (date(2025, 1, 13), date(2025, 1, 19))

    def test_previous_month_bounds(self):
        assert previous_month_bounds(date(2025, 3, 31)) == (date(2025, 2, 1), date(2025, 2, 28))

    def test_clock(self):
        assert minutes_since_midnight(datetime(2025, 1, 15, 23, 30)) == 1410
        assert format_clock(1410) == "23:30"
        assert format_clock(1440 + 75) == "01:15"
