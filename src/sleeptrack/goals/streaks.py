"""Consecutive-day streaks over sparse record dates."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from sleeptrack.models.goals import Streak
from sleeptrack.models.records import SleepRecord
from sleeptrack.utils import local_today

# Upper bound on the backwards walk for the current streak
MAX_STREAK_WALK = 1000

ONE_DAY = timedelta(days=1)


def longest_run(days: Iterable[date]) -> int:
    """Length of the longest run of consecutive calendar days."""
    best = 0
    run = 0
    previous: date | None = None
    for day in sorted(set(days)):
        run = run + 1 if previous is not None and (day - previous).days == 1 else 1
        best = max(best, run)
        previous = day
    return best


def calculate_streak(records: Sequence[SleepRecord], today: date | None = None) -> Streak:
    """Current and best tracking streaks.

    The current streak counts back from today, or from yesterday when nothing
    is recorded today yet, so an unlogged morning does not break a run that
    reached last night.

    Args:
        records: Sleep records in any order; duplicate dates count once.
        today: Reference day (defaults to today in the configured timezone).

    Returns:
        Streak with current/best lengths, the first day of the current run and
        the most recent recorded day.
    """
    if not records:
        return Streak(current=0, best=0)

    today = today or local_today()
    recorded = {r.date for r in records}

    check = today if today in recorded else today - ONE_DAY
    current = 0
    for _ in range(MAX_STREAK_WALK):
        if check not in recorded:
            break
        current += 1
        check -= ONE_DAY

    return Streak(
        current=current,
        best=longest_run(recorded),
        start_date=check + ONE_DAY if current else None,
        last_date=max(recorded),
    )
