"""
Smart scheduling pipeline: free windows -> ranking -> greedy allocation.
"""

import logging
from datetime import datetime
from typing import Sequence

from ..algorithms.allocation import allocate
from ..algorithms.slot_generation import free_windows
from ..scoring.priority_scoring import rank_work_items
from .types import CommittedBlock, ScheduleOptions, ScheduleResult, WorkItem

logger = logging.getLogger(__name__)


def generate_smart_schedule(day, items: Sequence[WorkItem], committed: Sequence[CommittedBlock],
                            options: ScheduleOptions, now: datetime) -> ScheduleResult:
    """
    Build the time-block plan for one day.

    `items` are pending work items (completed ones filtered out by the caller),
    `committed` is everything already occupying that day. Nothing is persisted.
    """
    windows = free_windows(day, committed, options)
    ranked = [item for item, _score in rank_work_items(items, now)]
    result = allocate(ranked, windows, options)

    logger.debug(
        f"Smart schedule for {day}: {len(windows)} windows, {len(items)} items, "
        f"{len(result.task_blocks())} placed"
    )
    return result
