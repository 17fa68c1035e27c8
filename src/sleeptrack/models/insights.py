"""Insight and recommendation models."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import Field

from sleeptrack.models.analytics import AlertData, AnomalyList, CorrelationData, TrendData
from sleeptrack.models.base import TrackerModel, new_id


class InsightType(str, Enum):
    TREND = "trend"
    ANOMALY = "anomaly"
    CORRELATION = "correlation"
    RECOMMENDATION = "recommendation"
    ALERT = "alert"


class InsightCategory(str, Enum):
    DURATION = "duration"
    EFFICIENCY = "efficiency"
    PHASES = "phases"
    CONSISTENCY = "consistency"
    PERFORMANCE = "performance"


class InsightPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key, most urgent first."""
        return ("high", "medium", "low").index(self.value)


# Payload attached to an insight, tagged by ``kind``
InsightData = Annotated[
    TrendData | CorrelationData | AnomalyList | AlertData,
    Field(discriminator="kind"),
]


class Insight(TrackerModel):
    """A generated observation about the user's data."""

    id: str = Field(default_factory=lambda: new_id("insight"))
    type: InsightType
    category: InsightCategory
    title: str
    description: str
    priority: InsightPriority
    data: InsightData | None = None
    is_read: bool = False
    is_dismissed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


class Recommendation(Insight):
    """An actionable suggestion the user can mark as implemented."""

    type: InsightType = InsightType.RECOMMENDATION
    implemented: bool = False
    impact: float | None = None
