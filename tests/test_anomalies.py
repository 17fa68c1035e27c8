"""Tests for z-score anomaly detection."""

import math
from datetime import date, timedelta

import pytest

from sleeptrack.analytics import detect_anomalies

START = date(2025, 1, 1)


def _with_outlier(make_sleep, normal_nights: int, outlier: float):
    records = [make_sleep(START + timedelta(days=i)) for i in range(normal_nights)]
    records.append(make_sleep(START + timedelta(days=normal_nights), duration=outlier))
    return records


class TestDetectAnomalies:
    def test_requires_seven_records(self, make_sleep):
        records = _with_outlier(make_sleep, 5, outlier=60)
        assert len(records) == 6
        assert detect_anomalies(records) == []

    def test_medium_severity(self, make_sleep):
        # One outlier among n records sits at z = -sqrt(n - 1)
        records = _with_outlier(make_sleep, 6, outlier=120)
        duration = [a for a in detect_anomalies(records) if a.type == "duration"]

        assert len(duration) == 1
        assert duration[0].severity == "medium"
        assert duration[0].z_score == pytest.approx(-math.sqrt(6))
        assert duration[0].record.date == records[-1].date

    def test_high_severity(self, make_sleep):
        records = _with_outlier(make_sleep, 10, outlier=120)
        duration = [a for a in detect_anomalies(records) if a.type == "duration"]

        assert len(duration) == 1
        assert duration[0].severity == "high"
        assert duration[0].message == "Unusually short sleep (2h 0m)"

    def test_long_sleep_message(self, make_sleep):
        records = _with_outlier(make_sleep, 10, outlier=900)
        duration = [a for a in detect_anomalies(records) if a.type == "duration"]
        assert duration[0].message == "Unusually long sleep (15h 0m)"

    def test_zero_spread_never_flags(self, make_sleep):
        records = [make_sleep(START + timedelta(days=i)) for i in range(10)]
        assert detect_anomalies(records) == []

    def test_efficiency_message(self, make_sleep):
        records = [make_sleep(START + timedelta(days=i)) for i in range(10)]
        records.append(make_sleep(START + timedelta(days=10), efficiency=40))

        efficiency = [a for a in detect_anomalies(records) if a.type == "efficiency"]
        assert efficiency[0].message == "Low sleep efficiency detected (40%)"
