"""Weekly and monthly summary reports."""

import math
from collections.abc import Sequence
from datetime import date, timedelta
from typing import TypeVar

import structlog

from sleeptrack.config import settings
from sleeptrack.models.analytics import TrendDirection
from sleeptrack.models.records import MoodEnergyRecord, SleepRecord, WorkoutRecord
from sleeptrack.models.reports import MonthlyReport, ReportStats, ReportSummary, WeeklyReport
from sleeptrack.utils import format_duration, local_today, previous_month_bounds, week_bounds

logger = structlog.get_logger()

BREAKDOWN_WEEKS = 4
TREND_TOLERANCE = 0.05

MOOD_LABELS = ("Very Bad", "Bad", "Neutral", "Good", "Very Good")

R = TypeVar("R", SleepRecord, WorkoutRecord, MoodEnergyRecord)


def _between(records: Sequence[R], start: date, end: date) -> list[R]:
    return [r for r in records if start <= r.date <= end]


def _basic_stats(values: list[float]) -> ReportStats:
    if not values:
        return ReportStats()
    return ReportStats(
        total_records=len(values),
        average_value=sum(values) / len(values),
        best_value=max(values),
        worst_value=min(values),
    )


def calculate_sleep_stats(records: Sequence[SleepRecord]) -> ReportStats:
    """Duration statistics with a first-half vs second-half trend.

    The second half must differ from the first by more than 5% to count as a
    trend. A single record is always stable.
    """
    durations = [r.duration for r in sorted(records, key=lambda r: r.date)]
    stats = _basic_stats(durations)
    if len(durations) < 2:
        return stats

    middle = len(durations) // 2
    first = sum(durations[:middle]) / middle
    second = sum(durations[middle:]) / (len(durations) - middle)

    if second > first * (1 + TREND_TOLERANCE):
        trend = TrendDirection.INCREASING
    elif second < first * (1 - TREND_TOLERANCE):
        trend = TrendDirection.DECREASING
    else:
        trend = TrendDirection.STABLE
    return stats.model_copy(update={"trend": trend})


def calculate_workout_stats(records: Sequence[WorkoutRecord]) -> ReportStats:
    """Workout duration statistics; the trend is always stable."""
    return _basic_stats([w.duration for w in records])


def calculate_mood_stats(records: Sequence[MoodEnergyRecord]) -> ReportStats:
    """Mood (1-5) statistics; the trend is always stable."""
    return _basic_stats([m.mood for m in records])


def overall_verdict(sleep_stats: ReportStats, workout_stats: ReportStats) -> str:
    """One-line verdict from sleep duration and workout count against their targets."""
    targets = settings.report
    scores = []
    if sleep_stats.total_records:
        scores.append(min(100, sleep_stats.average_value / targets.sleep_target_minutes * 100))
    if workout_stats.total_records:
        scores.append(min(100, workout_stats.total_records / targets.monthly_workout_target * 100))

    if not scores:
        return "Start tracking your data to see insights!"

    score = sum(scores) / len(scores)
    if score >= 80:
        return "Excellent progress! You're doing great."
    if score >= 60:
        return "Good progress, keep it up!"
    if score >= 40:
        return "There's room for improvement."
    return "Focus on building healthy habits."


def _mood_label(average: float) -> str:
    index = math.floor(average + 0.5) - 1
    return MOOD_LABELS[index] if 0 <= index < len(MOOD_LABELS) else "Neutral"


def weekly_summary(
    sleep_stats: ReportStats, workout_stats: ReportStats, mood_stats: ReportStats
) -> ReportSummary:
    highlights: list[str] = []

    if sleep_stats.total_records:
        highlights.append(
            f"Average sleep: {format_duration(sleep_stats.average_value)} "
            f"over {sleep_stats.total_records} nights"
        )
        if sleep_stats.trend == TrendDirection.INCREASING:
            highlights.append("Sleep duration is improving")
        elif sleep_stats.trend == TrendDirection.DECREASING:
            highlights.append("Sleep duration is declining")
    else:
        highlights.append("No sleep records this week")

    if workout_stats.total_records:
        highlights.append(
            f"{workout_stats.total_records} workout(s) completed, "
            f"averaging {format_duration(workout_stats.average_value)} each"
        )
    else:
        highlights.append("No workouts this week")

    if mood_stats.total_records:
        highlights.append(f"Average mood: {_mood_label(mood_stats.average_value)}")

    return ReportSummary(highlights=highlights, overall=overall_verdict(sleep_stats, workout_stats))


def monthly_summary(
    sleep_stats: ReportStats, workout_stats: ReportStats, mood_stats: ReportStats
) -> ReportSummary:
    highlights: list[str] = []

    if sleep_stats.total_records:
        consistency = sleep_stats.total_records / settings.report.tracking_days_per_month * 100
        highlights.append(
            f"Average sleep: {format_duration(sleep_stats.average_value)} "
            f"({consistency:.0f}% tracking consistency)"
        )
    if workout_stats.total_records:
        highlights.append(f"{workout_stats.total_records} workouts completed this month")
    if mood_stats.total_records:
        highlights.append(f"{mood_stats.total_records} mood entries logged")

    return ReportSummary(highlights=highlights, overall=overall_verdict(sleep_stats, workout_stats))


def generate_weekly_report(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    mood_records: Sequence[MoodEnergyRecord] | None = None,
    today: date | None = None,
) -> WeeklyReport:
    """Report on the last full Monday-to-Sunday week before ``today``'s week.

    Args:
        sleep_records: All sleep records.
        workout_records: All workout records.
        mood_records: All mood/energy records, if tracked.
        today: Reference day (defaults to today in the configured timezone).

    Returns:
        WeeklyReport covering the previous calendar week.
    """
    today = today or local_today()
    start, end = week_bounds(today - timedelta(weeks=1))

    sleep_stats = calculate_sleep_stats(_between(sleep_records, start, end))
    workout_stats = calculate_workout_stats(_between(workout_records, start, end))
    mood_stats = calculate_mood_stats(_between(mood_records or [], start, end))

    return WeeklyReport(
        start_date=start,
        end_date=end,
        sleep_stats=sleep_stats,
        workout_stats=workout_stats,
        mood_stats=mood_stats,
        summary=weekly_summary(sleep_stats, workout_stats, mood_stats),
    )


def generate_monthly_report(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    mood_records: Sequence[MoodEnergyRecord] | None = None,
    today: date | None = None,
) -> MonthlyReport:
    """Report on the previous calendar month.

    The weekly breakdown always covers the four full weeks before ``today``,
    whichever month is being reported on. Each entry is an independent weekly
    report, so it can straddle the month boundary.
    """
    today = today or local_today()
    start, end = previous_month_bounds(today)

    sleep_stats = calculate_sleep_stats(_between(sleep_records, start, end))
    workout_stats = calculate_workout_stats(_between(workout_records, start, end))
    mood_stats = calculate_mood_stats(_between(mood_records or [], start, end))

    breakdown = [
        generate_weekly_report(
            sleep_records, workout_records, mood_records, today=today - timedelta(weeks=i)
        )
        for i in range(BREAKDOWN_WEEKS)
    ]

    logger.debug(
        "Generated monthly report",
        start=start.isoformat(),
        end=end.isoformat(),
        sleep_records=sleep_stats.total_records,
    )

    return MonthlyReport(
        start_date=start,
        end_date=end,
        sleep_stats=sleep_stats,
        workout_stats=workout_stats,
        mood_stats=mood_stats,
        weekly_breakdown=breakdown,
        summary=monthly_summary(sleep_stats, workout_stats, mood_stats),
    )
