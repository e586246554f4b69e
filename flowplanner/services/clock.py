from datetime import datetime

import pytz

from ..config import TIMEZONE


def local_now() -> datetime:
    """Current wall-clock time in the configured timezone, as a naive datetime."""
    return datetime.now(pytz.timezone(TIMEZONE)).replace(tzinfo=None)


def to_local_naive(moment: datetime) -> datetime:
    """
    Express a moment as naive local wall-clock time, the form stored in the
    database. Naive input is already taken to be local and is returned as is.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=None)
    return moment.astimezone(pytz.timezone(TIMEZONE)).replace(tzinfo=None)
