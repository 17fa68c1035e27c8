"""Linear trend detection over ordered series."""

from collections.abc import Sequence
from datetime import date

import structlog

from sleeptrack.models.analytics import TrendData, TrendDirection
from sleeptrack.models.records import SleepRecord

logger = structlog.get_logger()

MIN_TREND_POINTS = 2
STABLE_SLOPE = 0.1


def _period_label(dates: Sequence[date]) -> str:
    """Label the span covered by a series.

    The short-span fallback is "week", not "weekly"; callers display it verbatim.
    """
    span = (dates[-1] - dates[0]).days if dates else 0
    if span > 30:
        return "monthly"
    if span > 7:
        return "weekly"
    return "week"


def analyze_trend(values: Sequence[float], dates: Sequence[date]) -> TrendData:
    """Fit an ordinary least squares line to ``values`` against their index.

    Args:
        values: Chronologically ordered measurements.
        dates: Dates parallel to ``values``; only the first and last are used,
            to label the period.

    Returns:
        TrendData with direction, R-squared significance and slope. Fewer than
        two values yield a stable trend with zero significance.
    """
    if len(values) < MIN_TREND_POINTS:
        logger.debug("Not enough points for a trend", points=len(values))
        return TrendData(
            direction=TrendDirection.STABLE,
            significance=0,
            period="week",
            start_value=0,
            end_value=0,
        )

    n = len(values)
    sum_x = n * (n - 1) / 2
    sum_y = sum(values)
    sum_xy = sum(i * v for i, v in enumerate(values))
    sum_x2 = sum(i * i for i in range(n))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    mean_y = sum_y / n
    ss_total = sum((v - mean_y) ** 2 for v in values)
    ss_residual = sum((v - (slope * i + intercept)) ** 2 for i, v in enumerate(values))
    r_squared = 0.0 if ss_total == 0 else 1 - ss_residual / ss_total

    if abs(slope) < STABLE_SLOPE:
        direction = TrendDirection.STABLE
    elif slope > 0:
        direction = TrendDirection.INCREASING
    else:
        direction = TrendDirection.DECREASING

    return TrendData(
        direction=direction,
        significance=max(0.0, min(1.0, r_squared)),
        period=_period_label(dates),
        start_value=values[0],
        end_value=values[-1],
        slope=slope,
    )


def _sleep_field_trend(records: Sequence[SleepRecord], field: str) -> TrendData:
    if not records:
        return TrendData(period="daily")

    ordered = sorted(records, key=lambda r: r.date)
    return analyze_trend(
        [getattr(r, field) for r in ordered],
        [r.date for r in ordered],
    )


def sleep_duration_trend(records: Sequence[SleepRecord]) -> TrendData:
    """Trend of nightly duration in minutes."""
    return _sleep_field_trend(records, "duration")


def sleep_efficiency_trend(records: Sequence[SleepRecord]) -> TrendData:
    """Trend of nightly sleep efficiency."""
    return _sleep_field_trend(records, "efficiency")


def sleep_quality_trend(records: Sequence[SleepRecord]) -> TrendData:
    """Trend of nightly quality score."""
    return _sleep_field_trend(records, "quality_score")
