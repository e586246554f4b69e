"""
Flow strategy records consumed by the flow advisor.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class WorkingHours:
    start: str
    end: str
    peak_start: str
    peak_end: str


@dataclass(frozen=True)
class EnergyPattern:
    morning: float
    afternoon: float
    evening: float


@dataclass(frozen=True)
class QuietHours:
    start: str
    end: str


@dataclass(frozen=True)
class NotificationSettings:
    allow_interruptions: bool
    urgent_only: bool
    quiet_hours: QuietHours


@dataclass(frozen=True)
class FlowStrategy:
    personality_type: str
    strategy_name: str
    working_hours: WorkingHours
    max_task_switches: int
    focus_block_duration: int
    break_duration: int
    energy_pattern: EnergyPattern
    notification_settings: NotificationSettings
    preferred_task_types: List[str] = field(default_factory=list)
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "FlowStrategy":
        notifications = data["notification_settings"]
        return cls(
            personality_type=data["personality_type"],
            strategy_name=data["strategy_name"],
            description=data.get("description", ""),
            working_hours=WorkingHours(**data["working_hours"]),
            max_task_switches=data["max_task_switches"],
            focus_block_duration=data["focus_block_duration"],
            break_duration=data["break_duration"],
            preferred_task_types=list(data.get("preferred_task_types") or []),
            energy_pattern=EnergyPattern(**data["energy_pattern"]),
            notification_settings=NotificationSettings(
                allow_interruptions=notifications["allow_interruptions"],
                urgent_only=notifications["urgent_only"],
                quiet_hours=QuietHours(**notifications["quiet_hours"]),
            ),
        )

    def to_dict(self) -> dict:
        notifications = self.notification_settings
        return {
            "personality_type": self.personality_type,
            "strategy_name": self.strategy_name,
            "description": self.description,
            "working_hours": {
                "start": self.working_hours.start,
                "end": self.working_hours.end,
                "peak_start": self.working_hours.peak_start,
                "peak_end": self.working_hours.peak_end,
            },
            "max_task_switches": self.max_task_switches,
            "focus_block_duration": self.focus_block_duration,
            "break_duration": self.break_duration,
            "preferred_task_types": list(self.preferred_task_types),
            "energy_pattern": {
                "morning": self.energy_pattern.morning,
                "afternoon": self.energy_pattern.afternoon,
                "evening": self.energy_pattern.evening,
            },
            "notification_settings": {
                "allow_interruptions": notifications.allow_interruptions,
                "urgent_only": notifications.urgent_only,
                "quiet_hours": {
                    "start": notifications.quiet_hours.start,
                    "end": notifications.quiet_hours.end,
                },
            },
        }


@dataclass(frozen=True)
class FlowRecommendation:
    should_focus: bool
    suggested_task_types: List[str]
    allow_interruptions: bool
    energy_level: float
    time_slot_type: str  # 'peak' | 'productive' | 'low-energy'
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "should_focus": self.should_focus,
            "suggested_task_types": list(self.suggested_task_types),
            "allow_interruptions": self.allow_interruptions,
            "energy_level": self.energy_level,
            "time_slot_type": self.time_slot_type,
            "recommendation": self.recommendation,
        }
