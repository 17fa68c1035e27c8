"""Statistics over sleep and workout records."""

from sleeptrack.analytics.anomalies import detect_anomalies
from sleeptrack.analytics.correlation import calculate_correlation, sleep_workout_correlation
from sleeptrack.analytics.patterns import (
    bedtime_wake_time_patterns,
    detect_seasonality,
    sleep_phase_distribution,
    weekly_sleep_comparison,
)
from sleeptrack.analytics.scoring import calculate_sleep_quality_score, duration_score
from sleeptrack.analytics.trends import (
    analyze_trend,
    sleep_duration_trend,
    sleep_efficiency_trend,
    sleep_quality_trend,
)

__all__ = [
    "calculate_sleep_quality_score",
    "duration_score",
    "analyze_trend",
    "sleep_duration_trend",
    "sleep_efficiency_trend",
    "sleep_quality_trend",
    "calculate_correlation",
    "sleep_workout_correlation",
    "detect_anomalies",
    "sleep_phase_distribution",
    "bedtime_wake_time_patterns",
    "weekly_sleep_comparison",
    "detect_seasonality",
]
