"""Turn analytics results into prioritized insights and recommendations.

Every generator is a no-op below ``MIN_INSIGHT_RECORDS`` sleep records.
"""

from collections.abc import Sequence

import structlog

from sleeptrack.analytics import (
    bedtime_wake_time_patterns,
    detect_anomalies,
    sleep_duration_trend,
    sleep_efficiency_trend,
    sleep_phase_distribution,
    sleep_quality_trend,
    sleep_workout_correlation,
)
from sleeptrack.models.analytics import (
    AlertData,
    AnomalyList,
    CorrelationStrength,
    TrendDirection,
)
from sleeptrack.models.insights import (
    Insight,
    InsightCategory,
    InsightPriority,
    InsightType,
    Recommendation,
)
from sleeptrack.models.records import MoodEnergyRecord, SleepRecord, WorkoutRecord
from sleeptrack.utils import format_duration

logger = structlog.get_logger()

MIN_INSIGHT_RECORDS = 7
MIN_CORRELATION_WORKOUTS = 5
ALERT_WINDOW = 7

SHORT_SLEEP_MINUTES = 7 * 60
LONG_SLEEP_MINUTES = 10 * 60
SCHEDULE_VARIANCE_MINUTES = 60
MIN_DEEP_SHARE = 15
MIN_REM_SHARE = 20
LOW_QUALITY = 60

DEPRIVATION_MINUTES = 6 * 60
POOR_QUALITY = 40


def _enough(sleep_records: Sequence[SleepRecord]) -> bool:
    return len(sleep_records) >= MIN_INSIGHT_RECORDS


def generate_trend_insights(sleep_records: Sequence[SleepRecord]) -> list[Insight]:
    """Insights for significant duration, quality and efficiency trends."""
    if not _enough(sleep_records):
        return []

    insights: list[Insight] = []

    duration = sleep_duration_trend(sleep_records)
    if duration.direction == TrendDirection.DECREASING and duration.significance > 0.6:
        insights.append(
            Insight(
                type=InsightType.TREND,
                category=InsightCategory.DURATION,
                title="Declining Sleep Duration",
                description=(
                    f"Your sleep duration has been decreasing over the past {duration.period}. "
                    f"Average duration has dropped from {format_duration(duration.start_value)} "
                    f"to {format_duration(duration.end_value)}."
                ),
                priority=InsightPriority.HIGH,
                data=duration,
            )
        )
    elif duration.direction == TrendDirection.INCREASING and duration.significance > 0.6:
        insights.append(
            Insight(
                type=InsightType.TREND,
                category=InsightCategory.DURATION,
                title="Improving Sleep Duration",
                description=(
                    f"Great job! Your sleep duration has been increasing over the past "
                    f"{duration.period}. Keep up the good work!"
                ),
                priority=InsightPriority.MEDIUM,
                data=duration,
            )
        )

    quality = sleep_quality_trend(sleep_records)
    if quality.direction == TrendDirection.INCREASING and quality.significance > 0.5:
        insights.append(
            Insight(
                type=InsightType.TREND,
                category=InsightCategory.EFFICIENCY,
                title="Improving Sleep Quality",
                description=(
                    f"Your sleep quality has been improving over the past {quality.period}. "
                    "Keep up the excellent work!"
                ),
                priority=InsightPriority.MEDIUM,
                data=quality,
            )
        )
    elif quality.direction == TrendDirection.DECREASING and quality.significance > 0.6:
        insights.append(
            Insight(
                type=InsightType.TREND,
                category=InsightCategory.EFFICIENCY,
                title="Declining Sleep Quality",
                description=(
                    f"Your sleep quality has been declining over the past {quality.period}. "
                    "Consider reviewing your sleep habits and environment."
                ),
                priority=InsightPriority.HIGH,
                data=quality,
            )
        )

    efficiency = sleep_efficiency_trend(sleep_records)
    if efficiency.direction == TrendDirection.DECREASING and efficiency.significance > 0.6:
        insights.append(
            Insight(
                type=InsightType.TREND,
                category=InsightCategory.EFFICIENCY,
                title="Declining Sleep Efficiency",
                description=(
                    "Your sleep efficiency has been decreasing. You may be spending more time "
                    "awake in bed. Try maintaining a consistent sleep schedule."
                ),
                priority=InsightPriority.MEDIUM,
                data=efficiency,
            )
        )

    return insights


def generate_anomaly_insights(sleep_records: Sequence[SleepRecord]) -> list[Insight]:
    """One summary insight per metric that has outlier nights."""
    if not _enough(sleep_records):
        return []

    anomalies = detect_anomalies(sleep_records)
    duration = [a for a in anomalies if a.type == "duration"]
    quality = [a for a in anomalies if a.type == "quality"]
    efficiency = [a for a in anomalies if a.type == "efficiency"]

    insights: list[Insight] = []

    if duration:
        severe = sum(1 for a in duration if a.severity == "high")
        detail = f" {severe} were significantly outside your normal pattern." if severe else ""
        insights.append(
            Insight(
                type=InsightType.ANOMALY,
                category=InsightCategory.DURATION,
                title="Unusual Sleep Duration Detected",
                description=(
                    f"We detected {len(duration)} day(s) with unusual sleep duration.{detail}"
                ),
                priority=InsightPriority.HIGH if severe else InsightPriority.MEDIUM,
                data=AnomalyList(anomalies=duration),
            )
        )

    if quality:
        poor = sum(1 for a in quality if a.severity == "high" and a.z_score < 0)
        detail = f" {poor} were particularly poor quality nights." if poor else ""
        insights.append(
            Insight(
                type=InsightType.ANOMALY,
                category=InsightCategory.EFFICIENCY,
                title="Sleep Quality Anomalies",
                description=(
                    f"We detected {len(quality)} day(s) with unusual sleep quality.{detail}"
                ),
                priority=InsightPriority.HIGH if poor else InsightPriority.LOW,
                data=AnomalyList(anomalies=quality),
            )
        )

    if efficiency:
        low = sum(1 for a in efficiency if a.severity == "high" and a.z_score < 0)
        detail = f" {low} showed low efficiency patterns." if low else ""
        insights.append(
            Insight(
                type=InsightType.ANOMALY,
                category=InsightCategory.EFFICIENCY,
                title="Sleep Efficiency Variations",
                description=(
                    f"We detected {len(efficiency)} day(s) with unusual sleep efficiency.{detail}"
                ),
                priority=InsightPriority.MEDIUM,
                data=AnomalyList(anomalies=efficiency),
            )
        )

    return insights


def generate_correlation_insights(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    mood_records: Sequence[MoodEnergyRecord] | None = None,
) -> list[Insight]:
    """Sleep quality vs workout intensity, when the relationship is measurable.

    ``mood_records`` is currently ignored.
    """
    if not _enough(sleep_records) or len(workout_records) < MIN_CORRELATION_WORKOUTS:
        return []

    correlation = sleep_workout_correlation(sleep_records, workout_records)
    if correlation.strength == CorrelationStrength.NONE:
        return []

    sign = "positive" if correlation.correlation > 0 else "negative"
    return [
        Insight(
            type=InsightType.CORRELATION,
            category=InsightCategory.PERFORMANCE,
            title=f"Sleep-Workout {sign.capitalize()} Correlation",
            description=(
                f"We found a {correlation.strength.value} {sign} correlation "
                f"({correlation.correlation:.2f}) between your sleep quality and workout "
                f"intensity. {correlation.interpretation}"
            ),
            priority=(
                InsightPriority.HIGH
                if correlation.strength == CorrelationStrength.STRONG
                else InsightPriority.MEDIUM
            ),
            data=correlation,
        )
    ]


def generate_recommendations(sleep_records: Sequence[SleepRecord]) -> list[Recommendation]:
    """Actionable suggestions for duration, schedule, phase and quality problems."""
    if not _enough(sleep_records):
        return []

    count = len(sleep_records)
    avg_duration = sum(r.duration for r in sleep_records) / count
    avg_quality = sum(r.quality_score for r in sleep_records) / count
    schedule = bedtime_wake_time_patterns(sleep_records)
    phases = sleep_phase_distribution(sleep_records)

    recommendations: list[Recommendation] = []

    if avg_duration < SHORT_SLEEP_MINUTES:
        recommendations.append(
            Recommendation(
                category=InsightCategory.DURATION,
                title="Increase Sleep Duration",
                description=(
                    f"Your average sleep duration is {format_duration(avg_duration)}. "
                    "Aim for 7-9 hours per night for optimal recovery and performance."
                ),
                priority=InsightPriority.HIGH,
            )
        )
    elif avg_duration > LONG_SLEEP_MINUTES:
        recommendations.append(
            Recommendation(
                category=InsightCategory.DURATION,
                title="Monitor Sleep Duration",
                description=(
                    f"Your average sleep duration is {format_duration(avg_duration)}. "
                    "While individual needs vary, consistently sleeping more than 10 hours "
                    "may indicate underlying issues."
                ),
                priority=InsightPriority.LOW,
            )
        )

    if schedule.bedtime_variance > SCHEDULE_VARIANCE_MINUTES:
        recommendations.append(
            Recommendation(
                category=InsightCategory.CONSISTENCY,
                title="Improve Bedtime Consistency",
                description=(
                    f"Your bedtime varies by {format_duration(schedule.bedtime_variance)} on "
                    "average. Try to maintain a consistent bedtime to improve sleep quality."
                ),
                priority=InsightPriority.MEDIUM,
            )
        )

    if phases.deep_sleep < MIN_DEEP_SHARE:
        recommendations.append(
            Recommendation(
                category=InsightCategory.PHASES,
                title="Increase Deep Sleep",
                description=(
                    f"Your deep sleep percentage ({phases.deep_sleep:.1f}%) is below optimal. "
                    "Try avoiding caffeine after 2 PM, keeping your bedroom cool and "
                    "exercising regularly."
                ),
                priority=InsightPriority.MEDIUM,
            )
        )

    if phases.rem_sleep < MIN_REM_SHARE:
        recommendations.append(
            Recommendation(
                category=InsightCategory.PHASES,
                title="Optimize REM Sleep",
                description=(
                    f"Your REM sleep percentage ({phases.rem_sleep:.1f}%) is below optimal. "
                    "Consider reducing alcohol before bed and managing stress levels."
                ),
                priority=InsightPriority.MEDIUM,
            )
        )

    if avg_quality < LOW_QUALITY:
        recommendations.append(
            Recommendation(
                category=InsightCategory.EFFICIENCY,
                title="Improve Sleep Quality",
                description=(
                    f"Your average sleep quality score is {avg_quality:.1f}. Consider "
                    "establishing a bedtime routine and reducing screen time before bed."
                ),
                priority=InsightPriority.HIGH,
            )
        )

    if schedule.wake_time_variance > SCHEDULE_VARIANCE_MINUTES:
        recommendations.append(
            Recommendation(
                category=InsightCategory.CONSISTENCY,
                title="Stabilize Wake Time",
                description=(
                    f"Your wake time varies by {format_duration(schedule.wake_time_variance)} "
                    "on average. A consistent wake time helps regulate your circadian rhythm."
                ),
                priority=InsightPriority.MEDIUM,
            )
        )

    return recommendations


def generate_alerts(sleep_records: Sequence[SleepRecord]) -> list[Insight]:
    """High-priority alerts for a bad last week of sleep."""
    if not _enough(sleep_records):
        return []

    recent = sorted(sleep_records, key=lambda r: r.date)[-ALERT_WINDOW:]
    avg_duration = sum(r.duration for r in recent) / len(recent)
    avg_quality = sum(r.quality_score for r in recent) / len(recent)

    alerts: list[Insight] = []

    if avg_duration < DEPRIVATION_MINUTES:
        alerts.append(
            Insight(
                type=InsightType.ALERT,
                category=InsightCategory.DURATION,
                title="Chronic Sleep Deprivation Warning",
                description=(
                    "Your average sleep duration over the past week has been less than "
                    "6 hours. This can significantly impact your health and performance."
                ),
                priority=InsightPriority.HIGH,
                data=AlertData(metric="duration", average=avg_duration, threshold=DEPRIVATION_MINUTES),
            )
        )

    if avg_quality < POOR_QUALITY:
        alerts.append(
            Insight(
                type=InsightType.ALERT,
                category=InsightCategory.EFFICIENCY,
                title="Poor Sleep Quality Alert",
                description=(
                    "Your sleep quality has been consistently poor over the past week. "
                    "Consider reviewing your sleep environment and habits."
                ),
                priority=InsightPriority.HIGH,
                data=AlertData(metric="quality", average=avg_quality, threshold=POOR_QUALITY),
            )
        )

    return alerts


def sort_insights(insights: Sequence[Insight]) -> list[Insight]:
    """Order by priority, most urgent first, then newest first."""
    return sorted(insights, key=lambda i: (i.priority.rank, -i.created_at.timestamp()))


def generate_all_insights(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord] | None = None,
    mood_records: Sequence[MoodEnergyRecord] | None = None,
) -> list[Insight]:
    """Run every generator and order the result by priority, newest first."""
    insights: list[Insight] = [
        *generate_trend_insights(sleep_records),
        *generate_anomaly_insights(sleep_records),
        *generate_correlation_insights(sleep_records, workout_records or [], mood_records),
        *generate_recommendations(sleep_records),
        *generate_alerts(sleep_records),
    ]
    insights = sort_insights(insights)

    logger.debug("Generated insights", records=len(sleep_records), insights=len(insights))
    return insights
