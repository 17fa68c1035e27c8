"""Goal tracking: streaks, progress and gamification."""

from sleeptrack.goals.achievements import (
    calculate_goal_stats,
    check_milestones,
    create_milestones,
    get_achievements,
    get_personal_bests,
    get_suggested_goals,
)
from sleeptrack.goals.progress import (
    calculate_goal_progress,
    refresh_goal,
    transition_goal,
    update_goal_status,
)
from sleeptrack.goals.streaks import calculate_streak

__all__ = [
    "calculate_streak",
    "calculate_goal_progress",
    "update_goal_status",
    "transition_goal",
    "refresh_goal",
    "calculate_goal_stats",
    "create_milestones",
    "check_milestones",
    "get_achievements",
    "get_personal_bests",
    "get_suggested_goals",
]
