"""Read/dismiss bookkeeping and filters over stored insights."""

from collections.abc import Sequence
from typing import TypeVar

from sleeptrack.models.insights import (
    Insight,
    InsightCategory,
    InsightPriority,
    InsightType,
    Recommendation,
)

InsightT = TypeVar("InsightT", bound=Insight)


def _mark(insights: Sequence[InsightT], insight_id: str, **changes: bool) -> list[InsightT]:
    return [i.model_copy(update=changes) if i.id == insight_id else i for i in insights]


def mark_as_read(insights: Sequence[InsightT], insight_id: str) -> list[InsightT]:
    return _mark(insights, insight_id, is_read=True)


def mark_as_dismissed(insights: Sequence[InsightT], insight_id: str) -> list[InsightT]:
    return _mark(insights, insight_id, is_dismissed=True)


def mark_as_implemented(
    recommendations: Sequence[Recommendation], recommendation_id: str
) -> list[Recommendation]:
    return _mark(recommendations, recommendation_id, implemented=True)


def filter_by_category(insights: Sequence[InsightT], category: InsightCategory) -> list[InsightT]:
    return [i for i in insights if i.category == category]


def filter_by_priority(insights: Sequence[InsightT], priority: InsightPriority) -> list[InsightT]:
    return [i for i in insights if i.priority == priority]


def filter_by_type(insights: Sequence[InsightT], insight_type: InsightType) -> list[InsightT]:
    return [i for i in insights if i.type == insight_type]


def get_unread_insights(insights: Sequence[InsightT]) -> list[InsightT]:
    return [i for i in insights if not i.is_read]


def get_active_insights(insights: Sequence[InsightT]) -> list[InsightT]:
    """Insights the user has not dismissed."""
    return [i for i in insights if not i.is_dismissed]
