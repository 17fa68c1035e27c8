"""Descriptive sleep patterns: phases, schedule, weekday and weekend habits."""

import math
from collections import Counter
from collections.abc import Sequence

from sleeptrack.models.analytics import (
    DailyStats,
    PhaseDistribution,
    SchedulePattern,
    SeasonalityData,
    WeeklyComparison,
)
from sleeptrack.models.records import SleepRecord
from sleeptrack.utils import format_clock, minutes_since_midnight

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def sleep_phase_distribution(records: Sequence[SleepRecord]) -> PhaseDistribution:
    """Percentage of recorded phase minutes spent in deep, REM and light sleep."""
    deep = sum(r.deep_sleep for r in records)
    rem = sum(r.rem_sleep for r in records)
    light = sum(r.light_sleep for r in records)
    total = deep + rem + light

    if total == 0:
        return PhaseDistribution()

    return PhaseDistribution(
        deep_sleep=deep / total * 100,
        rem_sleep=rem / total * 100,
        light_sleep=light / total * 100,
    )


def _spread(values: list[int]) -> tuple[float, float]:
    mean = sum(values) / len(values)
    std = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))
    return mean, std


def _mode(values: list[int]) -> int:
    # Ties resolve to the value seen first
    return Counter(values).most_common(1)[0][0]


def bedtime_wake_time_patterns(records: Sequence[SleepRecord]) -> SchedulePattern:
    """Average, modal and spread of bedtimes and wake times.

    Clock times are compared as minutes since midnight without wrapping, so a
    bedtime of 00:30 sits far from one of 23:30.
    """
    if not records:
        return SchedulePattern()

    bedtimes = [minutes_since_midnight(r.bedtime) for r in records]
    wake_times = [minutes_since_midnight(r.wake_time) for r in records]

    avg_bedtime, bedtime_std = _spread(bedtimes)
    avg_wake, wake_std = _spread(wake_times)

    return SchedulePattern(
        average_bedtime=format_clock(avg_bedtime),
        average_wake_time=format_clock(avg_wake),
        bedtime_variance=math.floor(bedtime_std + 0.5),
        wake_time_variance=math.floor(wake_std + 0.5),
        most_common_bedtime=format_clock(_mode(bedtimes)),
        most_common_wake_time=format_clock(_mode(wake_times)),
    )


def _daily_stats(records: list[SleepRecord]) -> DailyStats:
    if not records:
        return DailyStats()
    count = len(records)
    return DailyStats(
        average_duration=sum(r.duration for r in records) / count,
        average_efficiency=sum(r.efficiency for r in records) / count,
        average_quality=sum(r.quality_score for r in records) / count,
        record_count=count,
    )


def weekly_sleep_comparison(records: Sequence[SleepRecord]) -> WeeklyComparison:
    """Average sleep metrics per day of the week."""
    by_weekday: dict[str, list[SleepRecord]] = {day: [] for day in _WEEKDAYS}
    for record in records:
        by_weekday[_WEEKDAYS[record.date.weekday()]].append(record)

    return WeeklyComparison(**{day: _daily_stats(rs) for day, rs in by_weekday.items()})


def detect_seasonality(records: Sequence[SleepRecord]) -> SeasonalityData:
    """Compare weekday and weekend sleep duration."""
    if not records:
        return SeasonalityData()

    weekend = [r.duration for r in records if r.date.weekday() >= 5]
    weekday = [r.duration for r in records if r.date.weekday() < 5]

    weekday_average = sum(weekday) / len(weekday) if weekday else 0
    weekend_average = sum(weekend) / len(weekend) if weekend else 0
    difference = abs(weekday_average - weekend_average)

    if difference > 60:
        significance = "significant"
    elif difference > 30:
        significance = "moderate"
    else:
        significance = "minimal"

    return SeasonalityData(
        weekday_average=weekday_average,
        weekend_average=weekend_average,
        difference=difference,
        significance=significance,
    )
