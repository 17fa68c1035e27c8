"""Sleep, workout and mood/energy records."""

import re
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any

from pydantic import Field, TypeAdapter, model_validator

from sleeptrack.models.base import TrackerModel, new_id

_CLOCK_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_DATETIME = TypeAdapter(datetime)


class WorkoutType(str, Enum):
    """Workout categories."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    HIIT = "hiit"
    YOGA = "yoga"
    PILATES = "pilates"
    CYCLING = "cycling"
    RUNNING = "running"
    SWIMMING = "swimming"
    WALKING = "walking"
    OTHER = "other"


class IntensityLevel(str, Enum):
    """Ordinal workout intensity."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"

    @property
    def score(self) -> int:
        """Numeric rank used when correlating intensity with other metrics."""
        return _INTENSITY_SCORES[self]


_INTENSITY_SCORES = {
    IntensityLevel.LOW: 1,
    IntensityLevel.MODERATE: 2,
    IntensityLevel.HIGH: 3,
    IntensityLevel.VERY_HIGH: 4,
}


def _parse_clock(value: Any) -> time | None:
    if isinstance(value, str):
        match = _CLOCK_PATTERN.match(value.strip())
        if match:
            return time(int(match.group(1)), int(match.group(2)))
    return None


class SleepRecord(TrackerModel):
    """A single night of sleep.

    ``bedtime`` and ``wake_time`` may be given as full timestamps or as bare
    ``HH:MM`` clock times, which are anchored to ``date`` (a wake time that is
    not after the bedtime falls on the following day). ``quality_score`` is
    computed from the other fields when not supplied.
    """

    id: str = Field(default_factory=new_id)
    date: date
    bedtime: datetime
    wake_time: datetime
    duration: float = Field(ge=0, le=1440)  # minutes
    deep_sleep: float = Field(default=0, ge=0, le=1440)
    rem_sleep: float = Field(default=0, ge=0, le=1440)
    light_sleep: float = Field(default=0, ge=0, le=1440)
    efficiency: float = Field(default=85, ge=0, le=100)
    quality_score: int | None = Field(default=None, ge=0, le=100)
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def _anchor_clock_times(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("date") is None:
            return data

        day = data["date"]
        if isinstance(day, str):
            day = date.fromisoformat(day)
        if isinstance(day, datetime):
            day = day.date()

        data = dict(data)
        bed_clock = _parse_clock(data.get("bedtime"))
        if bed_clock is not None:
            data["bedtime"] = datetime.combine(day, bed_clock)

        wake_key = "wakeTime" if "wakeTime" in data else "wake_time"
        wake_clock = _parse_clock(data.get(wake_key))
        if wake_clock is not None:
            wake = datetime.combine(day, wake_clock)
            bedtime = data.get("bedtime")
            if isinstance(bedtime, str):
                bedtime = _DATETIME.validate_python(bedtime)
            if isinstance(bedtime, datetime) and wake <= bedtime.replace(tzinfo=None):
                wake += timedelta(days=1)
            data[wake_key] = wake
        return data

    @model_validator(mode="after")
    def _fill_quality_score(self) -> "SleepRecord":
        if self.quality_score is None:
            from sleeptrack.analytics.scoring import calculate_sleep_quality_score

            self.quality_score = calculate_sleep_quality_score(self)
        return self


class PerformanceMetrics(TrackerModel):
    """Optional measurements captured with a workout."""

    calories_burned: float | None = None
    distance: float | None = None  # km or miles
    heart_rate_avg: float | None = None
    heart_rate_max: float | None = None
    reps: int | None = None
    sets: int | None = None
    weight: float | None = None  # kg or lbs


class WorkoutRecord(TrackerModel):
    """A single workout session."""

    id: str = Field(default_factory=new_id)
    date: date
    time: str = "00:00"
    type: WorkoutType = WorkoutType.OTHER
    duration: float = Field(ge=0)  # minutes
    intensity: IntensityLevel = IntensityLevel.MODERATE
    performance_metrics: PerformanceMetrics = Field(default_factory=PerformanceMetrics)
    perceived_exertion: int = Field(default=5, ge=1, le=10)  # Borg scale
    energy_level: int = Field(default=5, ge=1, le=10)
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class MoodEnergyRecord(TrackerModel):
    """Daily mood and energy check-in."""

    id: str = Field(default_factory=new_id)
    date: date
    mood: int = Field(ge=1, le=5)
    morning_energy: int = Field(default=5, ge=1, le=10)
    afternoon_energy: int = Field(default=5, ge=1, le=10)
    evening_energy: int = Field(default=5, ge=1, le=10)
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
