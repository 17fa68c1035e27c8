"""Result models produced by the analytics engine."""

from datetime import date
from enum import Enum
from typing import Literal

from pydantic import Field

from sleeptrack.models.base import TrackerModel
from sleeptrack.models.records import SleepRecord


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class CorrelationStrength(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    NONE = "none"


class TrendData(TrackerModel):
    """Linear trend over an ordered series.

    ``significance`` is the R-squared of the fit, used as a confidence proxy.
    """

    kind: Literal["trend"] = "trend"
    direction: TrendDirection = TrendDirection.STABLE
    significance: float = Field(default=0, ge=0, le=1)
    period: str = "week"
    start_value: float = 0
    end_value: float = 0
    slope: float | None = None


class DataPoint(TrackerModel):
    x: float
    y: float
    day: date = Field(alias="date")


class CorrelationData(TrackerModel):
    """Pearson correlation between two aligned series."""

    kind: Literal["correlation"] = "correlation"
    correlation: float = 0
    strength: CorrelationStrength = CorrelationStrength.NONE
    data_points: list[DataPoint] = Field(default_factory=list)
    interpretation: str = "Insufficient data"


class Anomaly(TrackerModel):
    """A sleep record flagged as an outlier on one metric."""

    type: Literal["duration", "quality", "efficiency"]
    record: SleepRecord
    severity: Literal["low", "medium", "high"]
    message: str
    z_score: float


class AnomalyList(TrackerModel):
    kind: Literal["anomaly"] = "anomaly"
    anomalies: list[Anomaly] = Field(default_factory=list)


class AlertData(TrackerModel):
    kind: Literal["alert"] = "alert"
    metric: Literal["duration", "quality"]
    average: float
    threshold: float


class PhaseDistribution(TrackerModel):
    """Share of total phase minutes, in percent."""

    deep_sleep: float = 0
    rem_sleep: float = 0
    light_sleep: float = 0


class SchedulePattern(TrackerModel):
    average_bedtime: str = "22:00"
    average_wake_time: str = "06:00"
    bedtime_variance: int = 0  # stddev in minutes
    wake_time_variance: int = 0
    most_common_bedtime: str = "22:00"
    most_common_wake_time: str = "06:00"


class DailyStats(TrackerModel):
    average_duration: float = 0
    average_efficiency: float = 0
    average_quality: float = 0
    record_count: int = 0


class WeeklyComparison(TrackerModel):
    monday: DailyStats = Field(default_factory=DailyStats)
    tuesday: DailyStats = Field(default_factory=DailyStats)
    wednesday: DailyStats = Field(default_factory=DailyStats)
    thursday: DailyStats = Field(default_factory=DailyStats)
    friday: DailyStats = Field(default_factory=DailyStats)
    saturday: DailyStats = Field(default_factory=DailyStats)
    sunday: DailyStats = Field(default_factory=DailyStats)


class SeasonalityData(TrackerModel):
    weekday_average: float = 0
    weekend_average: float = 0
    difference: float = 0
    significance: Literal["significant", "moderate", "minimal"] = "minimal"
