"""Periodic reports."""

from sleeptrack.reports.generator import (
    calculate_mood_stats,
    calculate_sleep_stats,
    calculate_workout_stats,
    generate_monthly_report,
    generate_weekly_report,
)

__all__ = [
    "calculate_sleep_stats",
    "calculate_workout_stats",
    "calculate_mood_stats",
    "generate_weekly_report",
    "generate_monthly_report",
]
