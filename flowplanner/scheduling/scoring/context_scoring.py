"""
Time-of-day context scoring and time-slot suggestions.
"""

from datetime import datetime
from typing import Tuple

from ..core.constants import TimeOfDaySlot
from ..core.types import WorkItem
from .keyword_rules import (
    CONTEXT_BUCKETS, DEFAULT_CONTEXT, TIME_SLOT_RULES, ContextBucket, KeywordRule, first_matching_rule
)


def calculate_context_factor(item: WorkItem, now: datetime,
                             buckets: Tuple[ContextBucket, ...] = CONTEXT_BUCKETS) -> float:
    """
    Score how well the item fits the current hour (0.0 - 1.0).

    Hours outside every bucket (e.g. 11:00-13:00) get the neutral default.
    """
    hour = now.hour
    for bucket in buckets:
        if bucket.contains(hour):
            rule = first_matching_rule(item, bucket.rules)
            return rule.weight if rule else bucket.base
    return DEFAULT_CONTEXT


def suggest_time_slot(item: WorkItem, rules: Tuple[KeywordRule, ...] = TIME_SLOT_RULES) -> str:
    """Suggest morning / afternoon / evening work, or flexible if nothing matches."""
    rule = first_matching_rule(item, rules)
    return rule.category if rule else TimeOfDaySlot.FLEXIBLE.value
