"""
Free window generation around committed time blocks.
"""

import logging
from datetime import timedelta
from typing import List, Sequence

from ..core.time_slot import TimeWindow
from ..core.types import CommittedBlock, ScheduleOptions
from ..utils.time_utils import combine_day_and_clock, minutes_between

logger = logging.getLogger(__name__)


def free_windows(day, committed: Sequence[CommittedBlock], options: ScheduleOptions) -> List[TimeWindow]:
    """
    Compute the free windows of a working day.

    Walks the committed blocks in start order with a cursor that begins at the
    start of working hours. Gaps shorter than `minimum_block_size` are dropped
    rather than split further. Windows never extend past the end of working
    hours and keep `buffer_time` minutes clear on both sides of every block.
    """
    work_start = combine_day_and_clock(day, options.working_hours_start)
    work_end = combine_day_and_clock(day, options.working_hours_end)
    buffer = timedelta(minutes=options.buffer_time)

    windows: List[TimeWindow] = []
    cursor = work_start

    for block in sorted(committed, key=lambda b: b.start):
        window_end = min(block.start - buffer, work_end)
        if cursor < window_end:
            _append_if_large_enough(windows, cursor, window_end, options.minimum_block_size)
        cursor = max(cursor, block.end + buffer)

    if cursor < work_end:
        _append_if_large_enough(windows, cursor, work_end, options.minimum_block_size)

    logger.debug(f"Found {len(windows)} free windows between {work_start} and {work_end}")
    return windows


def _append_if_large_enough(windows: List[TimeWindow], start, end, minimum_block_size: int):
    duration = minutes_between(start, end)
    if duration >= minimum_block_size:
        windows.append(TimeWindow(start, end, duration))
