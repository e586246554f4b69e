"""
Clock-time helpers shared by the slot generator and the flow advisor.
"""

from datetime import datetime, time


def parse_clock_time(time_string: str) -> time:
    """Parse an "HH:MM" string (minutes optional) into a time."""
    parts = time_string.strip().split(":")
    hours = int(parts[0])
    minutes = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    return time(hour=hours, minute=minutes)


def combine_day_and_clock(day, time_string: str) -> datetime:
    """Place an "HH:MM" clock time on the given calendar day."""
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, parse_clock_time(time_string))


def time_to_minutes(time_string: str) -> int:
    clock = parse_clock_time(time_string)
    return clock.hour * 60 + clock.minute


def hour_string(moment: datetime) -> str:
    """Reduce a moment to its "HH:00" hour mark."""
    return f"{moment.hour:02d}:00"


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, rounded down."""
    return int((end - start).total_seconds() // 60)


def start_of_day(day) -> datetime:
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time.min)


def is_valid_clock_time(time_string: str) -> bool:
    try:
        parse_clock_time(time_string)
    except (ValueError, AttributeError):
        return False
    return True

