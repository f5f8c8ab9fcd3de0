"""
Human-readable formatting of durations, dates and day labels.
"""
from datetime import date, datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday",
                 "Friday", "Saturday", "Sunday"]


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Resolve an IANA timezone name. None means the host's local timezone.

    Raises:
        ValueError: if the name is not a known timezone
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Invalid timezone '{name}'. Use IANA timezone identifiers.")


def local_datetime(epoch_seconds: int, tz: Optional[tzinfo] = None) -> datetime:
    """Interpret epoch seconds in the given timezone (host local if None)."""
    return datetime.fromtimestamp(epoch_seconds, tz)


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_day_label(day: date) -> str:
    """Short chart label, e.g. 'Jan 2nd'."""
    return f"{MONTH_ABBR[day.month - 1]} {ordinal(day.day)}"


def format_duration(minutes: int) -> str:
    """Summary form, e.g. 92 -> '1 h 32 m'."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours} h {mins} m"


def format_item_duration(minutes: int) -> str:
    """List item form, e.g. 92 -> '1 hr 32 min'."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours} hr {mins} min"


def format_workout_date(epoch_seconds: int, tz: Optional[tzinfo] = None) -> str:
    """Full date, e.g. 'Thursday, Sep 26th, 2024, 10:05 PM'."""
    moment = local_datetime(epoch_seconds, tz)
    hour12 = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{WEEKDAY_NAMES[moment.weekday()]}, {format_day_label(moment.date())}, "
        f"{moment.year}, {hour12:02d}:{moment.minute:02d} {meridiem}"
    )
