"""flowplanner: smart time-blocking, priority scoring and flow protection."""

__version__ = "1.0.0"
