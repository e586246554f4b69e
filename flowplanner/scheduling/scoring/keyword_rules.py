"""
Keyword rule tables used for context scoring and time-slot suggestions.

Detection is plain substring matching on the lower-cased title + description.
Each table is an ordered tuple of rules; the first rule that matches wins, so
new vocabulary (or a whole replacement table) can be dropped in without
touching the scoring or allocation code.
"""

from typing import NamedTuple, Optional, Tuple

from ..core.constants import TimeOfDaySlot
from ..core.types import WorkItem


class KeywordRule(NamedTuple):
    keywords: Tuple[str, ...]
    category: str
    weight: float
    matches_collaborators: bool = False

    def matches(self, item: WorkItem) -> bool:
        content = item.content
        if any(keyword in content for keyword in self.keywords):
            return True
        return self.matches_collaborators and item.has_collaborators


class ContextBucket(NamedTuple):
    """An hour range [start_hour, end_hour) with its base and boosted values."""
    start_hour: int
    end_hour: int
    base: float
    rules: Tuple[KeywordRule, ...]

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour


DEEP_WORK_KEYWORDS = ("planning", "strategy", "analysis", "strategie", "analyse")
COLLABORATION_KEYWORDS = ("meeting", "call", "review", "vergadering", "overleg")
ADMIN_KEYWORDS = ("email", "admin", "update")

CONTEXT_BUCKETS: Tuple[ContextBucket, ...] = (
    # Morning, best for deep work
    ContextBucket(8, 11, 0.7, (
        KeywordRule(DEEP_WORK_KEYWORDS, "deep_work", 0.9),
    )),
    # Early afternoon, good for collaboration
    ContextBucket(13, 16, 0.6, (
        KeywordRule(COLLABORATION_KEYWORDS, "collaboration", 0.9),
        KeywordRule((), "team", 0.8, matches_collaborators=True),
    )),
    # Late afternoon, admin
    ContextBucket(16, 18, 0.5, (
        KeywordRule(ADMIN_KEYWORDS, "admin", 0.8),
    )),
)
DEFAULT_CONTEXT = 0.5

TIME_SLOT_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule(DEEP_WORK_KEYWORDS + ("writing",), TimeOfDaySlot.MORNING.value, 1.0),
    KeywordRule(COLLABORATION_KEYWORDS, TimeOfDaySlot.AFTERNOON.value, 1.0, matches_collaborators=True),
    KeywordRule(ADMIN_KEYWORDS + ("filing",), TimeOfDaySlot.EVENING.value, 1.0),
)


def first_matching_rule(item: WorkItem, rules: Tuple[KeywordRule, ...]) -> Optional[KeywordRule]:
    for rule in rules:
        if rule.matches(item):
            return rule
    return None
