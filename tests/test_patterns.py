"""Tests for descriptive sleep patterns."""

from datetime import date

import pytest

from sleeptrack.analytics import (
    bedtime_wake_time_patterns,
    detect_seasonality,
    sleep_phase_distribution,
    weekly_sleep_comparison,
)

MONDAY = date(2025, 1, 13)
SATURDAY = date(2025, 1, 11)
SUNDAY = date(2025, 1, 12)


class TestPhaseDistribution:
    def test_shares(self, make_sleep):
        result = sleep_phase_distribution([make_sleep(MONDAY)])
        assert result.deep_sleep == pytest.approx(20)
        assert result.rem_sleep == pytest.approx(25)
        assert result.light_sleep == pytest.approx(55)

    def test_no_phase_data(self):
        result = sleep_phase_distribution([])
        assert (result.deep_sleep, result.rem_sleep, result.light_sleep) == (0, 0, 0)


class TestSchedulePatterns:
    def test_defaults_without_records(self):
        result = bedtime_wake_time_patterns([])
        assert result.average_bedtime == "22:00"
        assert result.average_wake_time == "06:00"
        assert result.bedtime_variance == 0

    def test_average_mode_and_spread(self, make_sleep):
        records = [
            make_sleep(date(2025, 1, 10), bedtime="22:00"),
            make_sleep(date(2025, 1, 11), bedtime="23:00"),
            make_sleep(date(2025, 1, 12), bedtime="22:00"),
        ]
        result = bedtime_wake_time_patterns(records)

        assert result.average_bedtime == "22:20"
        assert result.average_wake_time == "06:20"
        assert result.most_common_bedtime == "22:00"
        assert result.most_common_wake_time == "06:00"
        # population stddev of (-20, 40, -20) minutes
        assert result.bedtime_variance == 28
        assert result.wake_time_variance == 28


class TestWeeklyComparison:
    def test_groups_by_weekday(self, make_sleep):
        result = weekly_sleep_comparison(
            [make_sleep(MONDAY, duration=420), make_sleep(date(2025, 1, 6), duration=480)]
        )
        assert result.monday.record_count == 2
        assert result.monday.average_duration == 450
        assert result.tuesday.record_count == 0


class TestSeasonality:
    def test_weekend_catch_up(self, make_sleep):
        records = [
            make_sleep(SATURDAY, duration=600),
            make_sleep(SUNDAY, duration=600),
            make_sleep(MONDAY, duration=420),
            make_sleep(date(2025, 1, 14), duration=420),
        ]
        result = detect_seasonality(records)

        assert result.weekend_average == 600
        assert result.weekday_average == 420
        assert result.difference == 180
        assert result.significance == "significant"

    @pytest.mark.parametrize("weekend,expected", [(465, "moderate"), (440, "minimal")])
    def test_significance_buckets(self, make_sleep, weekend, expected):
        records = [make_sleep(SATURDAY, duration=weekend), make_sleep(MONDAY, duration=420)]
        assert detect_seasonality(records).significance == expected

    def test_no_records(self):
        assert detect_seasonality([]).significance == "minimal"
