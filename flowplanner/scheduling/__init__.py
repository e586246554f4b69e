"""
flowplanner scheduling system

Smart time-blocking core: priority scoring, free window generation, greedy
allocation and the flow protection advisor. Pure computation, no I/O; the
services layer feeds it from the database.
"""

from .core.scheduler import generate_smart_schedule
from .core.time_slot import TimeWindow
from .core.types import (
    CommittedBlock, PriorityFactors, PriorityScore, ProducedBlock, ScheduleOptions, ScheduleResult, WorkItem
)
from .algorithms.allocation import allocate, estimate_duration
from .algorithms.slot_generation import free_windows
from .scoring.priority_scoring import personalized_recommendations, rank_work_items, score_work_item
from .flow.advisor import recommend, low_stimulus_mode

__version__ = "1.0.0"
