"""Tests for sleep quality scoring and record parsing."""

from datetime import date, datetime

import pytest

from sleeptrack.analytics.scoring import (
    calculate_sleep_quality_score,
    duration_score,
    efficiency_score,
    phase_score,
)
from sleeptrack.models import SleepRecord


class TestDurationScore:
    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (480, 40),
            (360, 0),
            (600, 30),
            (420, 20),
            (540, 35),
            (359, 0),
            (601, 0),
            (0, 0),
        ],
    )
    def test_piecewise_curve(self, minutes, expected):
        assert duration_score(minutes) == pytest.approx(expected)


class TestComponentScores:
    def test_efficiency_defaults_to_85_when_missing(self):
        assert efficiency_score(0) == pytest.approx(25.5)
        assert efficiency_score(100) == pytest.approx(30)

    def test_ideal_phase_split_scores_20(self):
        assert phase_score(480, 96, 120) == pytest.approx(20)

    def test_phase_score_needs_duration(self):
        assert phase_score(0, 50, 50) == 0

    def test_phase_subscores_floor_at_zero(self):
        assert phase_score(480, 480, 0) == 0


class TestQualityScore:
    def test_ideal_night(self, make_sleep):
        record = make_sleep(date(2025, 1, 14))
        assert calculate_sleep_quality_score(record) == 94

    def test_accepts_camel_case_mapping(self):
        score = calculate_sleep_quality_score(
            {"duration": 480, "efficiency": 90, "deepSleep": 96, "remSleep": 120}
        )
        assert score == 94

    def test_missing_fields_round_half_up(self):
        # 40 + 25.5 + 0 + 7 = 72.5
        assert calculate_sleep_quality_score({"duration": 480}) == 73

    def test_zero_duration(self):
        # 0 + 25.5 + 0 + 7 = 32.5
        assert calculate_sleep_quality_score({"duration": 0}) == 33

    @pytest.mark.parametrize("duration", [0, 200, 360, 450, 480, 555, 600, 900, 1440])
    @pytest.mark.parametrize("efficiency", [0, 40, 85, 100])
    def test_always_integer_in_range(self, duration, efficiency):
        score = calculate_sleep_quality_score(
            {
                "duration": duration,
                "efficiency": efficiency,
                "deep_sleep": duration * 0.3,
                "rem_sleep": duration * 0.1,
            }
        )
        assert isinstance(score, int)
        assert 0 <= score <= 100


class TestSleepRecord:
    def test_quality_score_filled_in(self, make_sleep):
        record = make_sleep(date(2025, 1, 14))
        assert record.quality_score == 94

    def test_explicit_quality_score_kept(self, make_sleep):
        record = make_sleep(date(2025, 1, 14), quality_score=12)
        assert record.quality_score == 12

    def test_clock_times_anchor_to_date(self):
        record = SleepRecord.model_validate(
            {"date": "2025-01-14", "bedtime": "23:15", "wakeTime": "07:05", "duration": 470}
        )
        assert record.bedtime == datetime(2025, 1, 14, 23, 15)
        assert record.wake_time == datetime(2025, 1, 15, 7, 5)

    def test_after_midnight_bedtime_stays_on_date(self):
        record = SleepRecord(date=date(2025, 1, 14), bedtime="00:30", wake_time="08:00", duration=450)
        assert record.bedtime == datetime(2025, 1, 14, 0, 30)
        assert record.wake_time == datetime(2025, 1, 14, 8, 0)

    def test_dumps_camel_case(self, make_sleep):
        data = make_sleep(date(2025, 1, 14)).model_dump(by_alias=True)
        assert "wakeTime" in data
        assert "qualityScore" in data
