"""Sleep quality scoring."""

import math
from collections.abc import Mapping
from typing import Any

from pydantic.alias_generators import to_camel

OPTIMAL_DURATION = 8 * 60
MIN_DURATION = 6 * 60
MAX_DURATION = 10 * 60

DEFAULT_EFFICIENCY = 85
OPTIMAL_DEEP_FRACTION = 0.20
OPTIMAL_REM_FRACTION = 0.25
DEEP_PENALTY = 50
REM_PENALTY = 40

# No historical comparison yet; every night gets the same baseline.
CONSISTENCY_BASELINE = 7


def _field(record: Any, name: str) -> float:
    """Read a numeric field from a model, object or (snake/camel) mapping."""
    if isinstance(record, Mapping):
        value = record.get(name, record.get(to_camel(name)))
    else:
        value = getattr(record, name, None)
    return value or 0


def duration_score(duration: float) -> float:
    """Score 0-40 for sleep duration in minutes.

    Ramps from 0 at 6h to 40 at 8h, then eases down to 30 at 10h. Anything
    outside the 6-10h window scores 0.
    """
    if duration < MIN_DURATION or duration > MAX_DURATION:
        return 0.0
    if duration <= OPTIMAL_DURATION:
        return (duration - MIN_DURATION) / (OPTIMAL_DURATION - MIN_DURATION) * 40
    return 40 - (duration - OPTIMAL_DURATION) / (MAX_DURATION - OPTIMAL_DURATION) * 10


def efficiency_score(efficiency: float) -> float:
    """Score 0-30 for sleep efficiency."""
    return (efficiency or DEFAULT_EFFICIENCY) * 0.3


def phase_score(duration: float, deep_sleep: float, rem_sleep: float) -> float:
    """Score 0-20 for how close deep and REM shares are to optimal."""
    if not duration:
        return 0.0

    deep_deviation = abs(deep_sleep / duration - OPTIMAL_DEEP_FRACTION)
    rem_deviation = abs(rem_sleep / duration - OPTIMAL_REM_FRACTION)

    deep = max(0.0, 10 - deep_deviation * DEEP_PENALTY)
    rem = max(0.0, 10 - rem_deviation * REM_PENALTY)
    return deep + rem


def calculate_sleep_quality_score(record: Any) -> int:
    """Compute a 0-100 quality score for one night of sleep.

    Args:
        record: A SleepRecord, or any object/mapping with ``duration``,
            ``efficiency``, ``deep_sleep`` and ``rem_sleep``. Missing fields
            count as 0 (efficiency falls back to 85).

    Returns:
        Integer score clamped to [0, 100].
    """
    duration = _field(record, "duration")

    total = (
        duration_score(duration)
        + efficiency_score(_field(record, "efficiency"))
        + phase_score(duration, _field(record, "deep_sleep"), _field(record, "rem_sleep"))
        + CONSISTENCY_BASELINE
    )

    # Round half up
    return max(0, min(100, math.floor(total + 0.5)))
