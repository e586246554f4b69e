"""
Shared constants for the scheduling system.
"""

import enum


class PriorityTier(str, enum.Enum):
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class BlockType(str, enum.Enum):
    TASK = "task"
    BREAK = "break"
    MEETING = "meeting"
    FOCUS = "focus"


class TimeOfDaySlot(str, enum.Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    FLEXIBLE = "flexible"


# Factor weights for the smart priority score (sum to 1.0)
FACTOR_WEIGHTS = {
    "urgency": 0.30,
    "importance": 0.25,
    "effort": 0.20,
    "context": 0.15,
    "collaboration": 0.10,
}

# Block colours per priority tier
PRIORITY_COLORS = {
    PriorityTier.URGENT.value: "#dc2626",  # red-600
    PriorityTier.NORMAL.value: "#2563eb",  # blue-600
    PriorityTier.LOW.value: "#16a34a",     # green-600
}
DEFAULT_COLOR = PRIORITY_COLORS[PriorityTier.NORMAL.value]
BREAK_COLOR = "#e5e7eb"

BREAK_TITLE = "Break"
BREAK_DESCRIPTION = "Scheduled break for focus and productivity"

# Duration estimation for items without an explicit estimate (minutes)
BASE_DURATION = 60
MAX_URGENT_DURATION = 120
