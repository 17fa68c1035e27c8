"""Tests for linear trend analysis."""

from datetime import date, timedelta

import pytest

from sleeptrack.analytics import analyze_trend, sleep_duration_trend, sleep_efficiency_trend
from sleeptrack.models import TrendDirection

START = date(2025, 1, 1)


def _dates(count: int, step: int = 1) -> list[date]:
    return [START + timedelta(days=i * step) for i in range(count)]


class TestAnalyzeTrend:
    @pytest.mark.parametrize("values", [[], [5.0]])
    def test_fewer_than_two_points_is_stable(self, values):
        result = analyze_trend(values, _dates(len(values)))
        assert result.direction == TrendDirection.STABLE
        assert result.significance == 0
        assert result.start_value == 0
        assert result.end_value == 0
        assert result.slope is None

    def test_perfect_increase(self):
        result = analyze_trend([1, 2, 3, 4, 5], _dates(5))
        assert result.direction == TrendDirection.INCREASING
        assert result.significance == pytest.approx(1.0)
        assert result.slope == pytest.approx(1.0)
        assert result.start_value == 1
        assert result.end_value == 5

    def test_perfect_decrease(self):
        result = analyze_trend([50, 40, 30, 20], _dates(4))
        assert result.direction == TrendDirection.DECREASING
        assert result.slope == pytest.approx(-10.0)

    def test_small_slope_is_stable(self):
        result = analyze_trend([100, 100.05, 100.1], _dates(3))
        assert result.direction == TrendDirection.STABLE

    def test_flat_series_has_zero_significance(self):
        result = analyze_trend([7, 7, 7, 7], _dates(4))
        assert result.direction == TrendDirection.STABLE
        assert result.significance == 0

    def test_noisy_series_has_partial_significance(self):
        result = analyze_trend([1, 5, 2, 6, 3, 7], _dates(6))
        assert 0 < result.significance < 1


class TestPeriodLabel:
    @pytest.mark.parametrize(
        "span,label",
        [(1, "week"), (7, "week"), (8, "weekly"), (30, "weekly"), (31, "monthly")],
    )
    def test_label_from_span(self, span, label):
        result = analyze_trend([1, 2], [START, START + timedelta(days=span)])
        assert result.period == label


class TestSleepTrends:
    def test_no_records(self):
        result = sleep_duration_trend([])
        assert result.direction == TrendDirection.STABLE
        assert result.period == "daily"

    def test_records_sorted_by_date(self, make_sleep):
        records = [make_sleep(START + timedelta(days=i), duration=400 + i * 20) for i in range(5)]
        result = sleep_duration_trend(list(reversed(records)))
        assert result.direction == TrendDirection.INCREASING
        assert result.start_value == 400
        assert result.end_value == 480

    def test_efficiency_trend(self, make_sleep):
        records = [make_sleep(START + timedelta(days=i), efficiency=95 - i * 5) for i in range(5)]
        assert sleep_efficiency_trend(records).direction == TrendDirection.DECREASING
