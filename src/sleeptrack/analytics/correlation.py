"""Pearson correlation between tracked metrics."""

import math
from collections import defaultdict
from collections.abc import Sequence
from datetime import date

import structlog

from sleeptrack.models.analytics import CorrelationData, CorrelationStrength, DataPoint
from sleeptrack.models.records import SleepRecord, WorkoutRecord

logger = structlog.get_logger()

MIN_CORRELATION_POINTS = 2
MIN_ALIGNED_DAYS = 5


def _strength(correlation: float) -> CorrelationStrength:
    magnitude = abs(correlation)
    if magnitude >= 0.7:
        return CorrelationStrength.STRONG
    if magnitude >= 0.4:
        return CorrelationStrength.MODERATE
    if magnitude >= 0.2:
        return CorrelationStrength.WEAK
    return CorrelationStrength.NONE


def _interpretation(correlation: float) -> str:
    if correlation > 0.3:
        return "Higher values tend to occur together (positive correlation)."
    if correlation < -0.3:
        return (
            "Higher values tend to occur with lower values of the other metric "
            "(negative correlation)."
        )
    return "No clear relationship detected."


def calculate_correlation(x: Sequence[float], y: Sequence[float]) -> CorrelationData:
    """Pearson correlation coefficient of two equal-length series.

    Uses population covariance and standard deviations. A zero spread in either
    series gives a correlation of 0 instead of NaN.
    """
    if len(x) != len(y) or len(x) < MIN_CORRELATION_POINTS:
        return CorrelationData(
            correlation=0,
            strength=CorrelationStrength.NONE,
            interpretation="Insufficient data",
        )

    n = len(x)
    mean_x = sum(x) / n
    mean_y = sum(y) / n

    covariance = 0.0
    var_x = 0.0
    var_y = 0.0
    for xi, yi in zip(x, y):
        dx = xi - mean_x
        dy = yi - mean_y
        covariance += dx * dy
        var_x += dx * dx
        var_y += dy * dy

    covariance /= n
    std_x = math.sqrt(var_x / n)
    std_y = math.sqrt(var_y / n)

    correlation = 0.0 if std_x == 0 or std_y == 0 else covariance / (std_x * std_y)
    correlation = max(-1.0, min(1.0, correlation))

    return CorrelationData(
        correlation=correlation,
        strength=_strength(correlation),
        interpretation=_interpretation(correlation),
    )


def sleep_workout_correlation(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
) -> CorrelationData:
    """Correlate nightly sleep quality with same-day workout intensity.

    Multiple workouts on one day contribute their mean intensity score
    (low=1 ... very-high=4).
    """
    intensities: dict[date, list[int]] = defaultdict(list)
    for workout in workout_records:
        intensities[workout.date].append(workout.intensity.score)

    points: list[DataPoint] = []
    for sleep in sleep_records:
        scores = intensities.get(sleep.date)
        if scores:
            points.append(
                DataPoint(x=sum(scores) / len(scores), y=sleep.quality_score, day=sleep.date)
            )

    if len(points) < MIN_ALIGNED_DAYS:
        logger.debug("Not enough aligned sleep/workout days", aligned=len(points))
        return CorrelationData(
            correlation=0,
            strength=CorrelationStrength.NONE,
            interpretation="Need more data to analyze correlation.",
        )

    result = calculate_correlation([p.y for p in points], [p.x for p in points])
    return result.model_copy(update={"data_points": points})
