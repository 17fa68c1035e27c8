"""Tests for Pearson correlation."""

from datetime import date, timedelta

import pytest

from sleeptrack.analytics import calculate_correlation, sleep_workout_correlation
from sleeptrack.models import CorrelationStrength, IntensityLevel

START = date(2025, 1, 1)
INTENSITIES = [
    IntensityLevel.LOW,
    IntensityLevel.MODERATE,
    IntensityLevel.HIGH,
    IntensityLevel.VERY_HIGH,
]


class TestCalculateCorrelation:
    def test_empty_input(self):
        result = calculate_correlation([], [])
        assert result.correlation == 0
        assert result.strength == CorrelationStrength.NONE
        assert result.interpretation == "Insufficient data"

    def test_mismatched_lengths(self):
        result = calculate_correlation([1, 2, 3], [1, 2])
        assert result.correlation == 0
        assert result.strength == CorrelationStrength.NONE

    def test_perfect_positive(self):
        result = calculate_correlation([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        assert result.correlation == pytest.approx(1.0)
        assert result.strength == CorrelationStrength.STRONG
        assert "positive" in result.interpretation

    def test_perfect_negative(self):
        result = calculate_correlation([1, 2, 3, 4, 5], [10, 8, 6, 4, 2])
        assert result.correlation == pytest.approx(-1.0)
        assert result.strength == CorrelationStrength.STRONG
        assert "negative" in result.interpretation

    def test_zero_spread(self):
        result = calculate_correlation([3, 3, 3], [1, 2, 3])
        assert result.correlation == 0
        assert result.strength == CorrelationStrength.NONE
        assert result.interpretation == "No clear relationship detected."

    def test_result_stays_in_range(self):
        result = calculate_correlation([0.1, 0.2, 0.3], [0.3, 0.6, 0.9])
        assert -1 <= result.correlation <= 1


class TestSleepWorkoutCorrelation:
    def test_needs_five_aligned_days(self, make_sleep, make_workout):
        sleep = [make_sleep(START + timedelta(days=i)) for i in range(10)]
        workouts = [make_workout(START + timedelta(days=i)) for i in range(4)]

        result = sleep_workout_correlation(sleep, workouts)
        assert result.strength == CorrelationStrength.NONE
        assert result.interpretation == "Need more data to analyze correlation."

    def test_quality_against_intensity(self, make_sleep, make_workout):
        scores = [1, 2, 3, 4, 1, 2]
        days = [START + timedelta(days=i) for i in range(len(scores))]
        sleep = [make_sleep(d, quality_score=30 + 10 * s) for d, s in zip(days, scores)]
        workouts = [make_workout(d, intensity=INTENSITIES[s - 1]) for d, s in zip(days, scores)]

        result = sleep_workout_correlation(sleep, workouts)
        assert result.correlation == pytest.approx(1.0)
        assert result.strength == CorrelationStrength.STRONG
        assert len(result.data_points) == 6
        assert result.data_points[0].x == 1
        assert result.data_points[0].y == 40
        assert result.data_points[0].day == days[0]

    def test_same_day_workouts_are_averaged(self, make_sleep, make_workout):
        days = [START + timedelta(days=i) for i in range(5)]
        sleep = [make_sleep(d) for d in days]
        workouts = [make_workout(d) for d in days[1:]]
        workouts += [
            make_workout(days[0], intensity=IntensityLevel.LOW),
            make_workout(days[0], intensity=IntensityLevel.HIGH),
        ]

        result = sleep_workout_correlation(sleep, workouts)
        first = next(p for p in result.data_points if p.day == days[0])
        assert first.x == 2

    def test_sleep_without_workout_is_skipped(self, make_sleep, make_workout):
        sleep = [make_sleep(START + timedelta(days=i)) for i in range(8)]
        workouts = [make_workout(START + timedelta(days=i)) for i in range(5)]

        result = sleep_workout_correlation(sleep, workouts)
        assert len(result.data_points) == 5
