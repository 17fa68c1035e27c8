"""Pydantic models for tracker records and computed results."""

from sleeptrack.models.analytics import (
    AlertData,
    Anomaly,
    AnomalyList,
    CorrelationData,
    CorrelationStrength,
    DailyStats,
    DataPoint,
    PhaseDistribution,
    SchedulePattern,
    SeasonalityData,
    TrendData,
    TrendDirection,
    WeeklyComparison,
)
from sleeptrack.models.goals import (
    Achievement,
    Goal,
    GoalCategory,
    GoalPeriod,
    GoalProgress,
    GoalStats,
    GoalStatus,
    GoalSuggestion,
    GoalType,
    Milestone,
    PersonalBest,
    Streak,
)
from sleeptrack.models.insights import (
    Insight,
    InsightCategory,
    InsightPriority,
    InsightType,
    Recommendation,
)
from sleeptrack.models.records import (
    IntensityLevel,
    MoodEnergyRecord,
    PerformanceMetrics,
    SleepRecord,
    WorkoutRecord,
    WorkoutType,
)
from sleeptrack.models.reports import MonthlyReport, ReportStats, ReportSummary, WeeklyReport

__all__ = [
    # Records
    "SleepRecord",
    "WorkoutRecord",
    "MoodEnergyRecord",
    "PerformanceMetrics",
    "WorkoutType",
    "IntensityLevel",
    # Analytics results
    "TrendData",
    "TrendDirection",
    "CorrelationData",
    "CorrelationStrength",
    "DataPoint",
    "Anomaly",
    "AnomalyList",
    "AlertData",
    "PhaseDistribution",
    "SchedulePattern",
    "DailyStats",
    "WeeklyComparison",
    "SeasonalityData",
    # Goals
    "Goal",
    "GoalType",
    "GoalPeriod",
    "GoalStatus",
    "GoalCategory",
    "GoalProgress",
    "GoalStats",
    "GoalSuggestion",
    "Streak",
    "Milestone",
    "Achievement",
    "PersonalBest",
    # Insights
    "Insight",
    "InsightType",
    "InsightCategory",
    "InsightPriority",
    "Recommendation",
    # Reports
    "ReportStats",
    "ReportSummary",
    "WeeklyReport",
    "MonthlyReport",
]
