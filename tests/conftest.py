"""Pytest configuration and fixtures for sleeptrack tests."""

from datetime import date, datetime, time, timedelta

import pytest

from sleeptrack.models import (
    IntensityLevel,
    MoodEnergyRecord,
    SleepRecord,
    WorkoutRecord,
    WorkoutType,
)

# A Wednesday; the previous full week is Mon 2025-01-06 to Sun 2025-01-12
TODAY = date(2025, 1, 15)


@pytest.fixture
def today():
    """Fixed reference day injected into date-dependent functions."""
    return TODAY


@pytest.fixture
def make_sleep():
    """Factory for sleep records.

    Phases default to an ideal 20% deep / 25% REM split, so a default
    8 hour, 90% efficient night scores 94.
    """

    def _make(
        day: date,
        duration: float = 480,
        bedtime: str = "23:00",
        efficiency: float = 90,
        deep_share: float = 0.20,
        rem_share: float = 0.25,
        quality_score: int | None = None,
    ) -> SleepRecord:
        start = datetime.combine(day, time.fromisoformat(bedtime))
        deep = duration * deep_share
        rem = duration * rem_share
        return SleepRecord(
            date=day,
            bedtime=start,
            wake_time=start + timedelta(minutes=duration),
            duration=duration,
            deep_sleep=deep,
            rem_sleep=rem,
            light_sleep=duration - deep - rem,
            efficiency=efficiency,
            quality_score=quality_score,
        )

    return _make


@pytest.fixture
def make_workout():
    """Factory for workout records."""

    def _make(
        day: date,
        duration: float = 45,
        intensity: IntensityLevel = IntensityLevel.MODERATE,
        workout_type: WorkoutType = WorkoutType.RUNNING,
    ) -> WorkoutRecord:
        return WorkoutRecord(date=day, duration=duration, intensity=intensity, type=workout_type)

    return _make


@pytest.fixture
def make_mood():
    """Factory for mood/energy check-ins."""

    def _make(day: date, mood: int = 3) -> MoodEnergyRecord:
        return MoodEnergyRecord(date=day, mood=mood)

    return _make


@pytest.fixture
def nights(make_sleep, today):
    """Fourteen ordinary nights ending yesterday."""
    return [make_sleep(today - timedelta(days=i)) for i in range(14, 0, -1)]
