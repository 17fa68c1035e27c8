"""Z-score outlier detection for sleep records."""

import math
from collections.abc import Callable, Sequence
from typing import Literal

import structlog

from sleeptrack.models.analytics import Anomaly
from sleeptrack.models.records import SleepRecord
from sleeptrack.utils import format_duration

logger = structlog.get_logger()

MIN_ANOMALY_RECORDS = 7
Z_THRESHOLD = 2
HIGH_SEVERITY_Z = 3

Metric = Literal["duration", "quality", "efficiency"]

# metric -> (value getter, message when above mean, message when below mean)
_METRICS: dict[Metric, tuple[Callable[[SleepRecord], float], str, str]] = {
    "duration": (
        lambda r: r.duration,
        "Unusually long sleep ({value})",
        "Unusually short sleep ({value})",
    ),
    "quality": (
        lambda r: r.quality_score,
        "Exceptionally good sleep quality ({value})",
        "Poor sleep quality detected ({value})",
    ),
    "efficiency": (
        lambda r: r.efficiency,
        "Exceptionally high sleep efficiency ({value}%)",
        "Low sleep efficiency detected ({value}%)",
    ),
}


def _mean_and_std(values: list[float]) -> tuple[float, float]:
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return mean, math.sqrt(variance)


def _display(metric: Metric, value: float) -> str:
    if metric == "duration":
        return format_duration(value)
    return f"{value:g}"


def detect_anomalies(records: Sequence[SleepRecord]) -> list[Anomaly]:
    """Flag records whose duration, quality or efficiency is an outlier.

    A value is anomalous when it lies more than two population standard
    deviations from the cohort mean; beyond three it is high severity.

    Returns:
        Anomalies in record order, grouped per record as duration, quality,
        efficiency. Empty when fewer than 7 records are given.
    """
    if len(records) < MIN_ANOMALY_RECORDS:
        logger.debug("Not enough records for anomaly detection", records=len(records))
        return []

    stats = {
        metric: _mean_and_std([getter(r) for r in records])
        for metric, (getter, _, _) in _METRICS.items()
    }

    anomalies: list[Anomaly] = []
    for record in records:
        for metric, (getter, above, below) in _METRICS.items():
            mean, std = stats[metric]
            value = getter(record)
            z = 0.0 if std == 0 else (value - mean) / std
            if abs(z) <= Z_THRESHOLD:
                continue

            template = above if z > 0 else below
            anomalies.append(
                Anomaly(
                    type=metric,
                    record=record,
                    severity="high" if abs(z) > HIGH_SEVERITY_Z else "medium",
                    message=template.format(value=_display(metric, value)),
                    z_score=z,
                )
            )

    logger.debug("Detected anomalies", records=len(records), anomalies=len(anomalies))
    return anomalies
