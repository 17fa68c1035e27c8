"""Goal tracking and gamification models."""

from datetime import date, datetime
from enum import Enum
from typing import Literal

from pydantic import Field

from sleeptrack.models.base import TrackerModel, new_id


class GoalType(str, Enum):
    """What a goal measures."""

    SLEEP_DURATION = "sleep-duration"
    SLEEP_QUALITY = "sleep-quality"
    SLEEP_EFFICIENCY = "sleep-efficiency"
    BEDTIME_CONSISTENCY = "bedtime-consistency"
    WORKOUT_FREQUENCY = "workout-frequency"
    WORKOUT_DURATION = "workout-duration"
    STREAK_DAYS = "streak-days"


class GoalPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    FAILED = "failed"


class GoalCategory(str, Enum):
    SLEEP = "sleep"
    WORKOUT = "workout"
    CONSISTENCY = "consistency"
    CUSTOM = "custom"


class Goal(TrackerModel):
    """A user-defined target over a rolling period."""

    id: str = Field(default_factory=lambda: new_id("goal"))
    title: str = ""
    description: str = ""
    type: GoalType
    category: GoalCategory = GoalCategory.CUSTOM
    target_value: float = Field(gt=0)
    current_value: float = 0
    period: GoalPeriod = GoalPeriod.WEEKLY
    status: GoalStatus = GoalStatus.ACTIVE
    start_date: date
    end_date: date | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class GoalProgress(TrackerModel):
    """Computed progress of a goal against the current records."""

    goal_id: str
    current_value: float
    target_value: float
    percentage: float
    is_completed: bool
    remaining_days: int | None = None
    status: GoalStatus


class Streak(TrackerModel):
    """Consecutive-day tracking streak derived from sleep records."""

    current: int = 0
    best: int = 0
    start_date: date | None = None  # first day of the current run
    last_date: date | None = None  # most recent recorded day


class Milestone(TrackerModel):
    id: str
    goal_id: str
    title: str
    threshold: int  # percentage
    is_achieved: bool = False
    achieved_at: datetime | None = None


class Achievement(TrackerModel):
    id: str
    title: str
    description: str
    category: Literal["sleep", "workout", "streaks", "milestones"]
    is_unlocked: bool = False
    unlocked_at: datetime | None = None
    icon: str | None = None


class PersonalBest(TrackerModel):
    category: Literal[
        "longest-streak", "best-sleep-quality", "most-workouts", "highest-consistency"
    ]
    value: float
    achieved_on: date | None = Field(default=None, alias="date")
    description: str


class GoalStats(TrackerModel):
    total_goals: int
    active_goals: int
    completed_goals: int
    failed_goals: int
    overall_completion_rate: float


class GoalSuggestion(TrackerModel):
    """A goal template proposed from the user's recent data."""

    type: GoalType
    category: GoalCategory
    title: str
    description: str
    target_value: float
    period: GoalPeriod
