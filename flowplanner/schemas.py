from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import date as _date, datetime
from typing import Dict, List, Literal, Optional

from .scheduling.core.constants import BlockType, PriorityTier
from .scheduling.core.types import ScheduleOptions
from .scheduling.utils.time_utils import is_valid_clock_time, time_to_minutes
from .services.clock import to_local_naive


def _check_clock_time(value: str) -> str:
    if not is_valid_clock_time(value):
        raise ValueError(f"'{value}' is not a valid HH:MM time")
    return value

# ----------------- Schedule Schemas ---------------------

class ScheduleOptionsIn(BaseModel):
    # The core ScheduleOptions has no defaults; these are the scheduling
    # service defaults the API fills in for omitted fields.
    working_hours_start: str = "09:00"
    working_hours_end: str = "17:00"
    break_duration: int = Field(15, ge=0)  # minutes
    minimum_block_size: int = Field(30, ge=0)  # minutes
    focus_time_preferred: bool = True
    max_tasks_per_day: int = Field(8, ge=0)
    buffer_time: int = Field(0, ge=0)  # minutes kept clear around committed blocks
    deadline_aware: bool = False
    minimize_context_switching: bool = False

    @field_validator("working_hours_start", "working_hours_end")
    @classmethod
    def validate_clock_time(cls, value: str) -> str:
        return _check_clock_time(value)

    @model_validator(mode="after")
    def validate_working_hours(self):
        if time_to_minutes(self.working_hours_end) <= time_to_minutes(self.working_hours_start):
            raise ValueError("working_hours_end must be after working_hours_start")
        return self

    def to_core(self) -> ScheduleOptions:
        return ScheduleOptions(**self.model_dump())


class ScheduleRequest(BaseModel):
    date: _date
    activity_ids: Optional[List[int]] = None  # None schedules every pending activity
    options: ScheduleOptionsIn = Field(default_factory=ScheduleOptionsIn)
    use_flow_strategy: bool = False  # take working hours and breaks from the active flow strategy


class TimeBlockCreate(BaseModel):
    title: str
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    block_type: BlockType = BlockType.MEETING
    priority: str = PriorityTier.NORMAL.value
    color: Optional[str] = None
    activity_id: Optional[int] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def to_local_time(cls, value: datetime) -> datetime:
        # Stored columns are naive local time; offsets are converted, not dropped
        return to_local_naive(value)

    @model_validator(mode="after")
    def validate_times(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class TimeBlockOut(BaseModel):
    id: int
    activity_id: Optional[int]
    title: str
    description: Optional[str]
    start_time: datetime
    end_time: datetime
    duration: int
    block_type: str
    is_scheduled: bool
    is_completed: bool
    priority: str
    color: Optional[str]

    class Config:
        from_attributes = True


class ProducedBlockOut(BaseModel):
    activity_id: Optional[int] = None
    block_type: str
    title: str
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    duration: int
    priority: str
    color: str


class WorkItemOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    priority: str
    due_date: Optional[datetime] = None
    estimated_duration: Optional[int] = None
    collaborators: List[int] = []


class ScheduleResultOut(BaseModel):
    date: _date
    scheduled_blocks: List[ProducedBlockOut]
    unscheduled_activities: List[WorkItemOut]
    conflicts: List[str]
    suggestions: List[str]
    saved: bool = False

# ----------------- Priority Schemas ---------------------

class PriorityFactorsOut(BaseModel):
    urgency: float
    importance: float
    effort: float
    context: float
    collaboration: float


class PriorityScoreOut(BaseModel):
    total: float
    factors: PriorityFactorsOut
    reasoning: str
    suggested_slot: str


class ScoredActivityOut(BaseModel):
    activity: WorkItemOut
    smart_priority: PriorityScoreOut


class RecommendationsOut(BaseModel):
    top_priority: List[ScoredActivityOut]
    quick_wins: List[ScoredActivityOut]
    time_slot_suggestions: Dict[str, List[ScoredActivityOut]]

# ----------------- Flow Schemas ---------------------

class WorkingHoursSchema(BaseModel):
    start: str
    end: str
    peak_start: str
    peak_end: str

    @field_validator("start", "end", "peak_start", "peak_end")
    @classmethod
    def validate_clock_time(cls, value: str) -> str:
        return _check_clock_time(value)


class EnergyPatternSchema(BaseModel):
    morning: float = Field(..., ge=0, le=1)
    afternoon: float = Field(..., ge=0, le=1)
    evening: float = Field(..., ge=0, le=1)


class QuietHoursSchema(BaseModel):
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_clock_time(cls, value: str) -> str:
        return _check_clock_time(value)


class NotificationSettingsSchema(BaseModel):
    allow_interruptions: bool
    urgent_only: bool
    quiet_hours: QuietHoursSchema


class FlowStrategySchema(BaseModel):
    personality_type: str
    strategy_name: str
    description: Optional[str] = ""
    working_hours: WorkingHoursSchema
    max_task_switches: int = Field(..., ge=0)
    focus_block_duration: int = Field(..., ge=0)
    break_duration: int = Field(..., ge=0)
    preferred_task_types: List[str] = []
    energy_pattern: EnergyPatternSchema
    notification_settings: NotificationSettingsSchema

    class Config:
        from_attributes = True


class FlowRecommendationOut(BaseModel):
    should_focus: bool
    suggested_task_types: List[str]
    allow_interruptions: bool
    energy_level: float
    time_slot_type: Literal["peak", "productive", "low-energy"]
    recommendation: str


class ApplyPresetRequest(BaseModel):
    personality_type: str
    low_stimulus: bool = False


class ApplyPresetResponse(BaseModel):
    success: bool
    message: str
    strategy: FlowStrategySchema


class PersonalityAssessmentIn(BaseModel):
    preferred_start_time: str
    most_productive_hours: List[str] = Field(..., min_length=1)
    task_switch_tolerance: int = Field(..., ge=0)
    collaboration_preference: int = Field(..., ge=1, le=5)
    energy_fluctuations: Literal["high", "medium", "low"]

    @field_validator("preferred_start_time")
    @classmethod
    def validate_start(cls, value: str) -> str:
        return _check_clock_time(value)

    @field_validator("most_productive_hours")
    @classmethod
    def validate_hours(cls, value: List[str]) -> List[str]:
        return [_check_clock_time(hour) for hour in value]


class PersonalityAssessmentOut(BaseModel):
    personality_type: str
    preset: FlowStrategySchema
