"""
Greedy allocation of ranked work items into free windows.

Single pass, no backtracking: each item goes into the first window that can
hold it (plus its recovery break), and the window is shrunk from the front.
Items that cannot be placed are reported, never dropped.
"""

import logging
from datetime import timedelta
from typing import List, Optional, Sequence

from ..core.constants import (
    BASE_DURATION, BREAK_COLOR, BREAK_DESCRIPTION, BREAK_TITLE, DEFAULT_COLOR,
    MAX_URGENT_DURATION, PRIORITY_COLORS, BlockType, PriorityTier
)
from ..core.time_slot import TimeWindow
from ..core.types import ProducedBlock, ScheduleOptions, ScheduleResult, WorkItem
from ..scoring.context_scoring import suggest_time_slot

logger = logging.getLogger(__name__)


def estimate_duration(item: WorkItem) -> int:
    """Minutes to reserve for an item, falling back to a per-tier estimate."""
    if item.estimated_duration:
        return item.estimated_duration

    if item.priority == PriorityTier.URGENT.value:
        return int(min(BASE_DURATION * 1.5, MAX_URGENT_DURATION))
    elif item.priority == PriorityTier.NORMAL.value:
        return BASE_DURATION
    elif item.priority == PriorityTier.LOW.value:
        return int(BASE_DURATION * 0.5)
    else:
        return BASE_DURATION


def color_for_priority(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, DEFAULT_COLOR)


def find_window_index(windows: List[TimeWindow], required_duration: int) -> Optional[int]:
    for index, window in enumerate(windows):
        if window.duration >= required_duration and window.is_available:
            return index
    return None


def allocate(ranked_items: Sequence[WorkItem], windows: Sequence[TimeWindow], options: ScheduleOptions) -> ScheduleResult:
    """
    Place ranked items into the given windows.

    Neither `ranked_items` nor `windows` is modified; the live window list is
    a private copy.
    """
    result = ScheduleResult()
    remaining: List[TimeWindow] = list(windows)
    tasks_scheduled = 0
    break_minutes = options.break_duration if options.focus_time_preferred else 0
    placed_items: List[WorkItem] = []

    for item in ranked_items:
        if tasks_scheduled >= options.max_tasks_per_day:
            result.unscheduled_activities.append(item)
            result.suggestions.append(
                f'Consider scheduling "{item.title}" for tomorrow to avoid overloading today'
            )
            continue

        estimated = estimate_duration(item)
        required = estimated + break_minutes

        index = find_window_index(remaining, required)
        if index is None:
            result.unscheduled_activities.append(item)
            if all(estimated > window.duration for window in remaining):
                result.conflicts.append(f'"{item.title}" ({estimated}min) doesn\'t fit in any available slot')
            logger.debug(f"No window for item {item.id} ({required}min required)")
            continue

        window = remaining[index]
        task_end = window.start + timedelta(minutes=estimated)
        result.scheduled_blocks.append(ProducedBlock(
            block_type=BlockType.TASK.value,
            activity_id=item.id,
            title=item.title,
            description=item.description,
            start=window.start,
            end=task_end,
            duration=estimated,
            priority=item.priority,
            color=color_for_priority(item.priority),
        ))
        tasks_scheduled += 1
        placed_items.append(item)

        if options.deadline_aware and item.due_date and task_end > item.due_date:
            result.conflicts.append(
                f'"{item.title}" is scheduled to finish after its deadline ({item.due_date:%Y-%m-%d %H:%M})'
            )

        if window.duration == required:
            remaining.pop(index)
        else:
            remaining[index] = window.shrink_from_start(required)

        if options.focus_time_preferred and options.break_duration > 0:
            result.scheduled_blocks.append(ProducedBlock(
                block_type=BlockType.BREAK.value,
                activity_id=None,
                title=BREAK_TITLE,
                description=BREAK_DESCRIPTION,
                start=task_end,
                end=task_end + timedelta(minutes=options.break_duration),
                duration=options.break_duration,
                priority=PriorityTier.NORMAL.value,
                color=BREAK_COLOR,
            ))

    if options.minimize_context_switching:
        switches = count_context_switches(placed_items)
        if switches > 0:
            result.suggestions.append(
                f"{switches} context switches between task types today - group similar tasks to stay in flow"
            )

    if result.scheduled_blocks:
        result.suggestions.append(f"Scheduled {tasks_scheduled} tasks with optimal spacing")

    if result.unscheduled_activities:
        result.suggestions.append(
            f"{len(result.unscheduled_activities)} tasks need rescheduling - "
            f"consider extending work hours or moving to another day"
        )

    logger.debug(
        f"Allocated {tasks_scheduled} tasks, {len(result.unscheduled_activities)} unscheduled, "
        f"{len(result.conflicts)} conflicts"
    )
    return result


def count_context_switches(items_in_order: Sequence[WorkItem]) -> int:
    """Count changes of suggested time-slot category between consecutive items."""
    categories = [suggest_time_slot(item) for item in items_in_order]
    return sum(1 for previous, current in zip(categories, categories[1:]) if previous != current)
