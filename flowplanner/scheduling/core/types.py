"""
Value types passed between the scheduling components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from .constants import FACTOR_WEIGHTS, BlockType, PriorityTier


@dataclass(frozen=True)
class WorkItem:
    """A pending activity competing for a place in the day."""
    id: int
    title: str
    description: Optional[str] = None
    priority: str = PriorityTier.NORMAL.value
    due_date: Optional[datetime] = None
    estimated_duration: Optional[int] = None  # minutes
    collaborators: Tuple[int, ...] = ()

    @property
    def content(self) -> str:
        return f"{self.title or ''} {self.description or ''}".lower()

    @property
    def has_collaborators(self) -> bool:
        return len(self.collaborators) > 0


@dataclass(frozen=True)
class CommittedBlock:
    """Time already occupied on the day being scheduled."""
    start: datetime
    end: datetime


@dataclass
class ProducedBlock:
    block_type: str
    title: str
    start: datetime
    end: datetime
    duration: int
    priority: str
    color: str
    activity_id: Optional[int] = None
    description: Optional[str] = None

    @property
    def is_task(self) -> bool:
        return self.block_type == BlockType.TASK.value

    def to_dict(self) -> dict:
        return {
            "activity_id": self.activity_id,
            "block_type": self.block_type,
            "title": self.title,
            "description": self.description,
            "start_time": self.start.isoformat(),
            "end_time": self.end.isoformat(),
            "duration": self.duration,
            "priority": self.priority,
            "color": self.color,
        }


@dataclass(frozen=True)
class ScheduleOptions:
    working_hours_start: str  # "09:00"
    working_hours_end: str    # "17:00"
    break_duration: int
    minimum_block_size: int
    focus_time_preferred: bool
    max_tasks_per_day: int
    buffer_time: int
    deadline_aware: bool
    minimize_context_switching: bool


@dataclass
class ScheduleResult:
    scheduled_blocks: List[ProducedBlock] = field(default_factory=list)
    unscheduled_activities: List[WorkItem] = field(default_factory=list)
    conflicts: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def task_blocks(self) -> List[ProducedBlock]:
        return [block for block in self.scheduled_blocks if block.is_task]

    def scheduled_task_ids(self) -> List[int]:
        return [block.activity_id for block in self.task_blocks()]

    def to_dict(self) -> dict:
        return {
            "scheduled_blocks": [block.to_dict() for block in self.scheduled_blocks],
            "unscheduled_activities": [item.id for item in self.unscheduled_activities],
            "conflicts": list(self.conflicts),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class PriorityFactors:
    urgency: float
    importance: float
    effort: float
    context: float
    collaboration: float

    def weighted_total(self) -> float:
        return (
            self.urgency * FACTOR_WEIGHTS["urgency"] +
            self.importance * FACTOR_WEIGHTS["importance"] +
            self.effort * FACTOR_WEIGHTS["effort"] +
            self.context * FACTOR_WEIGHTS["context"] +
            self.collaboration * FACTOR_WEIGHTS["collaboration"]
        )

    def to_dict(self) -> dict:
        return {
            "urgency": self.urgency,
            "importance": self.importance,
            "effort": self.effort,
            "context": self.context,
            "collaboration": self.collaboration,
        }


@dataclass(frozen=True)
class PriorityScore:
    total: float
    factors: PriorityFactors
    reasoning: str
    suggested_slot: str
