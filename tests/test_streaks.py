"""Tests for streak calculation."""

from datetime import date, timedelta

import pytest

from sleeptrack.goals import calculate_streak
from sleeptrack.goals.streaks import longest_run


@pytest.fixture
def three_nights(make_sleep):
    return [make_sleep(date(2025, 1, d)) for d in (3, 4, 5)]


class TestCalculateStreak:
    def test_empty(self):
        result = calculate_streak([])
        assert (result.current, result.best) == (0, 0)
        assert result.start_date is None

    def test_broken_streak_keeps_best(self, three_nights):
        result = calculate_streak(three_nights, today=date(2025, 1, 10))
        assert result.current == 0
        assert result.best == 3
        assert result.start_date is None
        assert result.last_date == date(2025, 1, 5)

    def test_counts_through_today(self, three_nights):
        result = calculate_streak(three_nights, today=date(2025, 1, 5))
        assert result.current == 3
        assert result.start_date == date(2025, 1, 3)

    def test_unlogged_today_counts_from_yesterday(self, three_nights):
        result = calculate_streak(three_nights, today=date(2025, 1, 6))
        assert result.current == 3
        assert result.start_date == date(2025, 1, 3)

    def test_two_day_gap_breaks_current(self, three_nights):
        assert calculate_streak(three_nights, today=date(2025, 1, 7)).current == 0

    def test_duplicate_dates_count_once(self, make_sleep, three_nights):
        records = three_nights + [make_sleep(date(2025, 1, 5), duration=60)]
        result = calculate_streak(records, today=date(2025, 1, 5))
        assert result.current == 3
        assert result.best == 3

    def test_order_does_not_matter(self, three_nights):
        result = calculate_streak(list(reversed(three_nights)), today=date(2025, 1, 6))
        assert (result.current, result.best) == (3, 3)

    def test_current_shorter_than_best(self, make_sleep, today):
        old_run = [make_sleep(today - timedelta(days=d)) for d in range(20, 10, -1)]
        recent = [make_sleep(today - timedelta(days=d)) for d in (2, 1)]
        result = calculate_streak(old_run + recent, today=today)
        assert result.current == 2
        assert result.best == 10


class TestLongestRun:
    def test_gaps_start_new_runs(self):
        days = [date(2025, 1, d) for d in (1, 2, 3, 5, 6)]
        assert longest_run(days) == 3

    def test_empty(self):
        assert longest_run([]) == 0
