"""
Smart priority scoring for work items.

Each item gets five independent factors in [0, 1] which are combined with
fixed weights (urgency 30%, importance 25%, effort 20%, context 15%,
collaboration 10%) into a total score, also in [0, 1].
"""

import logging
from datetime import datetime
from typing import Dict, List, Sequence, Tuple

from ..core.constants import PriorityTier, TimeOfDaySlot
from ..core.types import PriorityFactors, PriorityScore, WorkItem
from .context_scoring import calculate_context_factor, suggest_time_slot

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24

IMPORTANCE_BY_TIER = {
    PriorityTier.URGENT.value: 1.0,
    PriorityTier.HIGH.value: 0.8,
    PriorityTier.NORMAL.value: 0.5,
    PriorityTier.LOW.value: 0.3,
}


def calculate_urgency_factor(item: WorkItem, now: datetime) -> float:
    """
    Map deadline proximity to urgency: overdue 1.0, today 0.9, within 3 days 0.7,
    within a week 0.5, within two weeks 0.3, later 0.2. No deadline is 0.3.
    """
    if not item.due_date:
        return 0.3

    days_until_due = (item.due_date - now).total_seconds() / SECONDS_PER_DAY

    if days_until_due < 0:
        return 1.0
    elif days_until_due < 1:
        return 0.9
    elif days_until_due < 3:
        return 0.7
    elif days_until_due < 7:
        return 0.5
    elif days_until_due < 14:
        return 0.3
    else:
        return 0.2


def calculate_importance_factor(item: WorkItem) -> float:
    base = IMPORTANCE_BY_TIER.get(item.priority, 0.5)
    collaborator_boost = 0.1 if item.has_collaborators else 0.0
    return min(1.0, base + collaborator_boost)


def calculate_effort_factor(item: WorkItem) -> float:
    """Shorter tasks score higher so quick wins surface first."""
    duration = item.estimated_duration
    if not duration:
        return 0.5

    if duration <= 30:
        return 0.9  # Quick win
    elif duration <= 60:
        return 0.7
    elif duration <= 120:
        return 0.5
    elif duration <= 240:
        return 0.3
    else:
        return 0.2


def calculate_collaboration_factor(item: WorkItem) -> float:
    count = len(item.collaborators)
    if count == 0:
        return 0.3  # Solo work
    elif count == 1:
        return 0.6
    elif count == 2:
        return 0.7
    else:
        return 0.9


def analyze_priority_factors(item: WorkItem, now: datetime) -> PriorityFactors:
    return PriorityFactors(
        urgency=calculate_urgency_factor(item, now),
        importance=calculate_importance_factor(item),
        effort=calculate_effort_factor(item),
        context=calculate_context_factor(item, now),
        collaboration=calculate_collaboration_factor(item),
    )


def generate_reasoning(factors: PriorityFactors) -> str:
    reasons = []

    if factors.urgency > 0.8:
        reasons.append("very urgent due to deadline")
    elif factors.urgency > 0.6:
        reasons.append("approaching deadline")

    if factors.importance > 0.8:
        reasons.append("high impact")

    if factors.effort > 0.8:
        reasons.append("quick win possible")

    if factors.collaboration > 0.7:
        reasons.append("team dependency")

    if factors.context > 0.8:
        reasons.append("optimal timing")

    if not reasons:
        return "Standard priority"

    return f"High priority because of: {', '.join(reasons)}"


def score_work_item(item: WorkItem, now: datetime) -> PriorityScore:
    """Calculate the smart priority score of a single work item at `now`."""
    factors = analyze_priority_factors(item, now)
    return PriorityScore(
        total=factors.weighted_total(),
        factors=factors,
        reasoning=generate_reasoning(factors),
        suggested_slot=suggest_time_slot(item),
    )


def rank_work_items(items: Sequence[WorkItem], now: datetime) -> List[Tuple[WorkItem, PriorityScore]]:
    """
    Score every item and order them by total score, highest first.
    Items with equal scores keep their input order.
    """
    scored = [(item, score_work_item(item, now)) for item in items]
    ranked = sorted(scored, key=lambda pair: pair[1].total, reverse=True)
    logger.debug(f"Ranked {len(ranked)} work items at {now.isoformat()}")
    return ranked


def personalized_recommendations(items: Sequence[WorkItem], now: datetime) -> Dict[str, object]:
    """
    Group ranked items into top priorities, quick wins and per-slot suggestions.
    """
    ranked = rank_work_items(items, now)

    def for_slot(slot: TimeOfDaySlot):
        return [pair for pair in ranked if pair[1].suggested_slot == slot.value][:3]

    return {
        "top_priority": ranked[:3],
        "quick_wins": [pair for pair in ranked if pair[1].factors.effort > 0.8][:5],
        "time_slot_suggestions": {
            TimeOfDaySlot.MORNING.value: for_slot(TimeOfDaySlot.MORNING),
            TimeOfDaySlot.AFTERNOON.value: for_slot(TimeOfDaySlot.AFTERNOON),
            TimeOfDaySlot.EVENING.value: for_slot(TimeOfDaySlot.EVENING),
        },
    }
