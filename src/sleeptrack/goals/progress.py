"""Goal progress computation and goal lifecycle."""

from collections.abc import Sequence
from datetime import date, datetime, timedelta
from typing import TypeVar

import structlog

from sleeptrack.errors import InvalidGoalTransition
from sleeptrack.goals.streaks import calculate_streak
from sleeptrack.models.goals import Goal, GoalPeriod, GoalProgress, GoalStatus, GoalType
from sleeptrack.models.records import SleepRecord, WorkoutRecord
from sleeptrack.utils import local_today, minutes_since_midnight

logger = structlog.get_logger()

# Window length in days, ending today
PERIOD_DAYS = {
    GoalPeriod.DAILY: 1,
    GoalPeriod.WEEKLY: 7,
    GoalPeriod.MONTHLY: 30,
}

BEDTIME_TOLERANCE_MINUTES = 30

ALLOWED_TRANSITIONS: dict[GoalStatus, set[GoalStatus]] = {
    GoalStatus.ACTIVE: {GoalStatus.PAUSED, GoalStatus.COMPLETED, GoalStatus.FAILED},
    GoalStatus.PAUSED: {GoalStatus.ACTIVE, GoalStatus.FAILED},
    GoalStatus.COMPLETED: set(),
    GoalStatus.FAILED: set(),
}

R = TypeVar("R", SleepRecord, WorkoutRecord)


def records_in_period(
    records: Sequence[R], period: GoalPeriod, start_date: date, today: date
) -> list[R]:
    """Records inside the goal window, never earlier than the goal's start."""
    cutoff = max(today - timedelta(days=PERIOD_DAYS[period] - 1), start_date)
    return [r for r in records if cutoff <= r.date <= today]


def bedtime_consistency(records: Sequence[SleepRecord]) -> float:
    """Percentage of nights within 30 minutes of the mean bedtime."""
    if not records:
        return 0.0
    bedtimes = [minutes_since_midnight(r.bedtime) for r in records]
    mean = sum(bedtimes) / len(bedtimes)
    consistent = sum(1 for b in bedtimes if abs(b - mean) <= BEDTIME_TOLERANCE_MINUTES)
    return consistent / len(bedtimes) * 100


def _average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _current_value(
    goal: Goal,
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    today: date,
) -> float:
    if goal.type == GoalType.STREAK_DAYS:
        return calculate_streak(sleep_records, today=today).current

    if goal.type in (GoalType.WORKOUT_FREQUENCY, GoalType.WORKOUT_DURATION):
        workouts = records_in_period(workout_records, goal.period, goal.start_date, today)
        if goal.type == GoalType.WORKOUT_FREQUENCY:
            return len(workouts)
        return sum(w.duration for w in workouts)

    nights = records_in_period(sleep_records, goal.period, goal.start_date, today)
    if goal.type == GoalType.SLEEP_DURATION:
        return _average([r.duration for r in nights])
    if goal.type == GoalType.SLEEP_QUALITY:
        return _average([r.quality_score for r in nights])
    if goal.type == GoalType.SLEEP_EFFICIENCY:
        return _average([r.efficiency for r in nights])
    if goal.type == GoalType.BEDTIME_CONSISTENCY:
        return bedtime_consistency(nights)

    raise ValueError(f"Unsupported goal type: {goal.type}")


def calculate_goal_progress(
    goal: Goal,
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    today: date | None = None,
) -> GoalProgress:
    """Measure a goal against the records in its period window.

    Args:
        goal: Goal definition.
        sleep_records: All sleep records.
        workout_records: All workout records.
        today: Reference day (defaults to today in the configured timezone).

    Returns:
        GoalProgress with the percentage capped at 100. A goal whose end date
        has passed without completion is reported as failed; any other status
        is passed through unchanged.
    """
    today = today or local_today()

    current = _current_value(goal, sleep_records, workout_records, today)
    percentage = min(100.0, current / goal.target_value * 100) if goal.target_value else 0.0
    is_completed = percentage >= 100

    remaining_days = None
    status = goal.status
    if goal.end_date is not None:
        remaining_days = max(0, (goal.end_date - today).days)
        overdue = today > goal.end_date and not is_completed
        if overdue and GoalStatus.FAILED in ALLOWED_TRANSITIONS[status]:
            status = GoalStatus.FAILED

    logger.debug(
        "Computed goal progress",
        goal_id=goal.id,
        goal_type=goal.type.value,
        current_value=current,
        percentage=percentage,
    )

    return GoalProgress(
        goal_id=goal.id,
        current_value=current,
        target_value=goal.target_value,
        percentage=percentage,
        is_completed=is_completed,
        remaining_days=remaining_days,
        status=status,
    )


def update_goal_status(goal: Goal, progress: GoalProgress, today: date | None = None) -> GoalStatus:
    """Status a goal should move to after a progress check.

    Adds the completion transition on top of what progress computation does.
    Completed and failed goals keep their status.
    """
    if not ALLOWED_TRANSITIONS[goal.status]:
        return goal.status
    if progress.is_completed and GoalStatus.COMPLETED in ALLOWED_TRANSITIONS[goal.status]:
        return GoalStatus.COMPLETED

    today = today or local_today()
    if goal.end_date is not None and today > goal.end_date:
        return GoalStatus.FAILED
    return goal.status


def transition_goal(goal: Goal, status: GoalStatus, now: datetime | None = None) -> Goal:
    """Return a copy of ``goal`` moved to ``status``.

    Raises:
        InvalidGoalTransition: If the lifecycle does not allow the move.
    """
    if status == goal.status:
        return goal
    if status not in ALLOWED_TRANSITIONS[goal.status]:
        raise InvalidGoalTransition(goal.id, goal.status.value, status.value)

    logger.info("Goal status changed", goal_id=goal.id, old=goal.status.value, new=status.value)
    return goal.model_copy(update={"status": status, "updated_at": now or datetime.now()})


def refresh_goal(
    goal: Goal,
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    today: date | None = None,
) -> tuple[Goal, GoalProgress]:
    """Recompute a goal's cached value and apply the status it earned."""
    today = today or local_today()
    progress = calculate_goal_progress(goal, sleep_records, workout_records, today=today)

    refreshed = goal.model_copy(update={"current_value": progress.current_value})
    new_status = update_goal_status(refreshed, progress, today=today)
    if new_status != refreshed.status:
        refreshed = transition_goal(refreshed, new_status)
    return refreshed, progress
