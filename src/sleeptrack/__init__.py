"""sleeptrack - Sleep, workout and mood analytics."""

__version__ = "0.1.0"

from sleeptrack.analytics import (
    analyze_trend,
    calculate_correlation,
    calculate_sleep_quality_score,
    detect_anomalies,
    sleep_workout_correlation,
)
from sleeptrack.errors import DataImportError, InvalidGoalTransition, SleeptrackError
from sleeptrack.goals import calculate_goal_progress, calculate_streak
from sleeptrack.insights import generate_all_insights
from sleeptrack.models import Goal, MoodEnergyRecord, SleepRecord, WorkoutRecord
from sleeptrack.reports import generate_monthly_report, generate_weekly_report

__all__ = [
    "__version__",
    # Models
    "SleepRecord",
    "WorkoutRecord",
    "MoodEnergyRecord",
    "Goal",
    # Errors
    "SleeptrackError",
    "DataImportError",
    "InvalidGoalTransition",
    # Core operations
    "calculate_sleep_quality_score",
    "analyze_trend",
    "calculate_correlation",
    "sleep_workout_correlation",
    "detect_anomalies",
    "calculate_streak",
    "calculate_goal_progress",
    "generate_all_insights",
    "generate_weekly_report",
    "generate_monthly_report",
]
