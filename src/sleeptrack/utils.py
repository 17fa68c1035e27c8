"""Date and duration helpers shared across the analytics modules."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from sleeptrack.config.settings import settings


def local_today() -> date:
    """Today's date in the configured timezone."""
    return datetime.now(ZoneInfo(settings.timezone)).date()


def minutes_since_midnight(moment: datetime) -> int:
    """Clock time of a timestamp expressed in minutes."""
    return moment.hour * 60 + moment.minute


def format_clock(minutes: float) -> str:
    """Format minutes since midnight as HH:MM."""
    hours = int(minutes // 60) % 24
    mins = int(minutes % 60)
    return f"{hours:02d}:{mins:02d}"


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def previous_month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the calendar month before ``day``."""
    last = day.replace(day=1) - timedelta(days=1)
    return last.replace(day=1), last


def format_duration(minutes: float) -> str:
    """Format minutes as ``"Xh Ym"``."""
    hours = int(minutes // 60)
    mins = int(minutes % 60)
    return f"{hours}h {mins}m"


def format_duration_short(minutes: int) -> str:
    """Compact duration, e.g. ``45m``, ``2h`` or ``7h 30m``."""
    if minutes < 60:
        return f"{minutes}m"
    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"


def format_duration_detailed(minutes: int) -> str:
    """Spelled-out duration, e.g. ``1 hour 5 minutes``."""

    def plural(value: int, unit: str) -> str:
        return f"{value} {unit}{'' if value == 1 else 's'}"

    if minutes < 60:
        return plural(minutes, "minute")
    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return plural(hours, "hour")
    return f"{plural(hours, 'hour')} {plural(remaining, 'minute')}"
