"""Insight and recommendation generation."""

from sleeptrack.insights.generator import (
    generate_alerts,
    generate_all_insights,
    generate_anomaly_insights,
    generate_correlation_insights,
    generate_recommendations,
    generate_trend_insights,
    sort_insights,
)
from sleeptrack.insights.manage import (
    filter_by_category,
    filter_by_priority,
    filter_by_type,
    get_active_insights,
    get_unread_insights,
    mark_as_dismissed,
    mark_as_implemented,
    mark_as_read,
)

__all__ = [
    "generate_trend_insights",
    "generate_anomaly_insights",
    "generate_correlation_insights",
    "generate_recommendations",
    "generate_alerts",
    "generate_all_insights",
    "sort_insights",
    "mark_as_read",
    "mark_as_dismissed",
    "mark_as_implemented",
    "filter_by_category",
    "filter_by_priority",
    "filter_by_type",
    "get_unread_insights",
    "get_active_insights",
]
