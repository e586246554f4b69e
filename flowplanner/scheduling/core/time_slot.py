"""
Time window representation for the scheduling system.
"""

from datetime import datetime, timedelta
from typing import Optional

from ..utils.time_utils import minutes_between


class TimeWindow:
    """
    A free interval inside working hours.

    The duration is kept in whole minutes next to the bounds so that a window
    shrunk by the allocator carries its remaining minutes forward exactly.
    """
    def __init__(self, start: datetime, end: datetime, duration: Optional[int] = None, is_available: bool = True):
        self.start = start
        self.end = end
        self.duration = duration if duration is not None else minutes_between(start, end)
        self.is_available = is_available

    def shrink_from_start(self, minutes: int) -> "TimeWindow":
        """Return the part of this window left after using its first `minutes`."""
        return TimeWindow(
            self.start + timedelta(minutes=minutes),
            self.end,
            self.duration - minutes,
            self.is_available,
        )

    def to_dict(self) -> dict:
        return {
            "start_time": self.start.isoformat(),
            "end_time": self.end.isoformat(),
            "duration": self.duration,
            "is_available": self.is_available,
        }

    def __eq__(self, other):
        if not isinstance(other, TimeWindow):
            return NotImplemented
        return (self.start, self.end, self.duration, self.is_available) == \
            (other.start, other.end, other.duration, other.is_available)

    def __lt__(self, other):
        return self.start < other.start

    def __repr__(self):
        return f"TimeWindow({self.start.strftime('%I:%M %p')} - {self.end.strftime('%I:%M %p')}, {self.duration}min)"

