"""Weekly and monthly report models."""

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from sleeptrack.models.analytics import TrendDirection
from sleeptrack.models.base import TrackerModel


class ReportStats(TrackerModel):
    total_records: int = 0
    average_value: float = 0
    best_value: float = 0
    worst_value: float = 0
    trend: TrendDirection = TrendDirection.STABLE


class ReportSummary(TrackerModel):
    highlights: list[str] = Field(default_factory=list)
    overall: str


class WeeklyReport(TrackerModel):
    type: Literal["weekly"] = "weekly"
    start_date: date
    end_date: date
    sleep_stats: ReportStats
    workout_stats: ReportStats
    mood_stats: ReportStats
    summary: ReportSummary
    generated_at: datetime = Field(default_factory=datetime.now)


class MonthlyReport(TrackerModel):
    type: Literal["monthly"] = "monthly"
    start_date: date
    end_date: date
    sleep_stats: ReportStats
    workout_stats: ReportStats
    mood_stats: ReportStats
    weekly_breakdown: list[WeeklyReport] = Field(min_length=4, max_length=4)
    summary: ReportSummary
    generated_at: datetime = Field(default_factory=datetime.now)
