"""Goal statistics, milestones, achievements and goal suggestions."""

from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from sleeptrack.goals.progress import BEDTIME_TOLERANCE_MINUTES
from sleeptrack.models.goals import (
    Achievement,
    Goal,
    GoalCategory,
    GoalPeriod,
    GoalStats,
    GoalStatus,
    GoalSuggestion,
    GoalType,
    Milestone,
    PersonalBest,
    Streak,
)
from sleeptrack.models.records import SleepRecord, WorkoutRecord
from sleeptrack.utils import local_today, minutes_since_midnight, week_bounds

MILESTONE_TITLES = {
    25: "Good Start!",
    50: "Halfway There!",
    75: "Almost There!",
    100: "Goal Achieved!",
}


def calculate_goal_stats(goals: Sequence[Goal]) -> GoalStats:
    """Counts of goals by status and the overall completion rate."""
    counts = Counter(g.status for g in goals)
    total = len(goals)
    return GoalStats(
        total_goals=total,
        active_goals=counts[GoalStatus.ACTIVE],
        completed_goals=counts[GoalStatus.COMPLETED],
        failed_goals=counts[GoalStatus.FAILED],
        overall_completion_rate=counts[GoalStatus.COMPLETED] / total * 100 if total else 0,
    )


def create_milestones(goal_id: str) -> list[Milestone]:
    return [
        Milestone(id=f"milestone-{goal_id}-{threshold}", goal_id=goal_id, title=title, threshold=threshold)
        for threshold, title in MILESTONE_TITLES.items()
    ]


def check_milestones(
    milestones: Sequence[Milestone], percentage: float, now: datetime | None = None
) -> list[Milestone]:
    """Mark milestones whose threshold ``percentage`` has reached."""
    now = now or datetime.now()
    return [
        m.model_copy(update={"is_achieved": True, "achieved_at": now})
        if not m.is_achieved and percentage >= m.threshold
        else m
        for m in milestones
    ]


def _recent_workouts(workout_records: Sequence[WorkoutRecord], today: date) -> int:
    cutoff = today - timedelta(days=6)
    return sum(1 for w in workout_records if cutoff <= w.date <= today)


def has_consistent_bedtime(
    records: Sequence[SleepRecord],
    days: int,
    tolerance: float = BEDTIME_TOLERANCE_MINUTES,
) -> bool:
    """True when each of the last ``days`` nights is within ``tolerance`` of their mean bedtime."""
    if len(records) < days:
        return False

    recent = sorted(records, key=lambda r: r.date, reverse=True)[:days]
    bedtimes = [minutes_since_midnight(r.bedtime) for r in recent]
    mean = sum(bedtimes) / len(bedtimes)
    return all(abs(b - mean) <= tolerance for b in bedtimes)


def get_achievements(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    streak: Streak,
    today: date | None = None,
) -> list[Achievement]:
    """Evaluate the fixed achievement catalogue."""
    today = today or local_today()
    first_sleep = min((r.created_at for r in sleep_records), default=None)
    first_workout = min((w.created_at for w in workout_records), default=None)

    return [
        Achievement(
            id="first-sleep",
            title="First Sleep",
            description="Log your first sleep record",
            category="sleep",
            is_unlocked=bool(sleep_records),
            unlocked_at=first_sleep,
        ),
        Achievement(
            id="sleep-week",
            title="Week of Sleep",
            description="Track sleep for 7 consecutive days",
            category="streaks",
            is_unlocked=streak.best >= 7,
        ),
        Achievement(
            id="sleep-month",
            title="Month of Sleep",
            description="Track sleep for 30 consecutive days",
            category="streaks",
            is_unlocked=streak.best >= 30,
        ),
        Achievement(
            id="first-workout",
            title="First Workout",
            description="Log your first workout",
            category="workout",
            is_unlocked=bool(workout_records),
            unlocked_at=first_workout,
        ),
        Achievement(
            id="workout-streak-7",
            title="Week of Workouts",
            description="Workout for 7 days in a week",
            category="workout",
            is_unlocked=_recent_workouts(workout_records, today) >= 7,
        ),
        Achievement(
            id="perfect-sleep",
            title="Perfect Sleep",
            description="Achieve 100% sleep quality score",
            category="sleep",
            is_unlocked=any(r.quality_score >= 100 for r in sleep_records),
        ),
        Achievement(
            id="early-bird",
            title="Early Bird",
            description="Maintain consistent bedtime for a week",
            category="milestones",
            is_unlocked=has_consistent_bedtime(sleep_records, 7),
        ),
        Achievement(
            id="consistency-champion",
            title="Consistency Champion",
            description="Maintain consistent bedtime for a month",
            category="milestones",
            is_unlocked=has_consistent_bedtime(sleep_records, 30),
        ),
    ]


def get_personal_bests(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    streak: Streak,
) -> list[PersonalBest]:
    bests = [
        PersonalBest(
            category="longest-streak",
            value=streak.best,
            achieved_on=streak.start_date,
            description=f"{streak.best} days of consistent tracking",
        )
    ]

    if sleep_records:
        best_night = max(sleep_records, key=lambda r: r.quality_score)
        bests.append(
            PersonalBest(
                category="best-sleep-quality",
                value=best_night.quality_score,
                achieved_on=best_night.date,
                description=f"Quality score of {best_night.quality_score}",
            )
        )

    if workout_records:
        # Busiest Monday-to-Sunday week
        per_week = Counter(week_bounds(w.date)[0] for w in workout_records)
        week_start, count = max(per_week.items(), key=lambda item: (item[1], item[0]))
        bests.append(
            PersonalBest(
                category="most-workouts",
                value=count,
                achieved_on=week_start,
                description=f"{count} workouts in a week",
            )
        )

    return bests


def get_suggested_goals(
    sleep_records: Sequence[SleepRecord],
    workout_records: Sequence[WorkoutRecord],
    today: date | None = None,
) -> list[GoalSuggestion]:
    """Propose goals where the user's averages fall short."""
    today = today or local_today()
    suggestions: list[GoalSuggestion] = []

    if sleep_records:
        avg_duration = sum(r.duration for r in sleep_records) / len(sleep_records)
        if avg_duration < 7 * 60:
            suggestions.append(
                GoalSuggestion(
                    type=GoalType.SLEEP_DURATION,
                    category=GoalCategory.SLEEP,
                    title="Improve Sleep Duration",
                    description="Aim for at least 7 hours of sleep per night",
                    target_value=7 * 60,
                    period=GoalPeriod.DAILY,
                )
            )

        avg_quality = sum(r.quality_score for r in sleep_records) / len(sleep_records)
        if avg_quality < 70:
            suggestions.append(
                GoalSuggestion(
                    type=GoalType.SLEEP_QUALITY,
                    category=GoalCategory.SLEEP,
                    title="Boost Sleep Quality",
                    description="Work towards improving your sleep quality score",
                    target_value=75,
                    period=GoalPeriod.WEEKLY,
                )
            )

    if workout_records and _recent_workouts(workout_records, today) < 3:
        suggestions.append(
            GoalSuggestion(
                type=GoalType.WORKOUT_FREQUENCY,
                category=GoalCategory.WORKOUT,
                title="Exercise More",
                description="Aim for at least 3 workouts per week",
                target_value=3,
                period=GoalPeriod.WEEKLY,
            )
        )

    return suggestions
