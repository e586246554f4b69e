"""
Flow protection advisor.

Derives the focus / interruption policy for the current hour from a flow
strategy. Any object exposing the FlowStrategy attributes is accepted, so
user-defined strategies work the same way as the bundled presets.
"""

from datetime import datetime
from typing import List, Sequence

from ..utils.time_utils import hour_string, time_to_minutes
from .strategy import FlowRecommendation

PEAK = "peak"
PRODUCTIVE = "productive"
LOW_ENERGY = "low-energy"

DEFAULT_ENERGY = 0.5

# time slot type -> (task types, recommendation)
SLOT_GUIDANCE = {
    PEAK: (["deep_work", "analysis", "planning"],
           "Peak performance time - focus on your most challenging tasks"),
    PRODUCTIVE: (["collaboration", "communication", "admin"],
                 "Good energy for collaborative work and communication"),
    LOW_ENERGY: (["admin", "email", "planning"],
                 "Lower energy period - handle lighter administrative tasks"),
}


def is_time_in_range(current: str, start: str, end: str) -> bool:
    """
    Inclusive "HH:MM" range check. A range whose start is after its end wraps
    around midnight.
    """
    current_minutes = time_to_minutes(current)
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)

    if start_minutes <= end_minutes:
        return start_minutes <= current_minutes <= end_minutes
    return current_minutes >= start_minutes or current_minutes <= end_minutes


def energy_level_at(energy_pattern, hour: int) -> float:
    if 6 <= hour < 12:
        return energy_pattern.morning
    elif 12 <= hour < 18:
        return energy_pattern.afternoon
    elif 18 <= hour < 22:
        return energy_pattern.evening
    return DEFAULT_ENERGY


def classify_time_slot(is_peak_time: bool, energy_level: float) -> str:
    if is_peak_time and energy_level > 0.8:
        return PEAK
    elif energy_level > 0.6:
        return PRODUCTIVE
    return LOW_ENERGY


def recommend(strategy, now: datetime) -> FlowRecommendation:
    """Recommend focus and interruption policy for `now` under `strategy`."""
    current = hour_string(now)
    working_hours = strategy.working_hours
    quiet_hours = strategy.notification_settings.quiet_hours

    is_peak_time = is_time_in_range(current, working_hours.peak_start, working_hours.peak_end)
    is_quiet_hours = is_time_in_range(current, quiet_hours.start, quiet_hours.end)

    energy_level = energy_level_at(strategy.energy_pattern, now.hour)
    time_slot_type = classify_time_slot(is_peak_time, energy_level)

    should_focus = is_peak_time or energy_level > 0.7
    allow_interruptions = not is_quiet_hours and (
        strategy.notification_settings.allow_interruptions or not should_focus
    )

    suggested_task_types: List[str] = list(strategy.preferred_task_types or [])
    recommendation = ""
    if time_slot_type in SLOT_GUIDANCE:
        task_types, recommendation = SLOT_GUIDANCE[time_slot_type]
        suggested_task_types = list(task_types)

    return FlowRecommendation(
        should_focus=should_focus,
        suggested_task_types=suggested_task_types,
        allow_interruptions=allow_interruptions,
        energy_level=energy_level,
        time_slot_type=time_slot_type,
        recommendation=recommendation,
    )


def default_recommendation() -> FlowRecommendation:
    """Returned to users that have no active flow strategy."""
    return FlowRecommendation(
        should_focus=True,
        suggested_task_types=["deep_work"],
        allow_interruptions=False,
        energy_level=0.7,
        time_slot_type=PRODUCTIVE,
        recommendation="No active flow strategy. Consider setting up a personality-based strategy.",
    )


def low_stimulus_mode() -> dict:
    """Fixed overrides for low-stimulus days; merge over a strategy's settings."""
    return {
        "max_task_switches": 1,
        "focus_block_duration": 45,
        "break_duration": 10,
        "preferred_task_types": ["simple", "routine", "low-cognitive"],
        "notification_settings": {
            "allow_interruptions": False,
            "urgent_only": True,
            "quiet_hours": {"start": "09:00", "end": "17:00"},
        },
    }


def assess_personality_type(preferred_start_time: str, most_productive_hours: Sequence[str],
                            task_switch_tolerance: int, collaboration_preference: int,
                            energy_fluctuations: str) -> str:
    """
    Pick the personality preset that best matches a self-reported work pattern.
    `collaboration_preference` is on a 1-5 scale, `energy_fluctuations` is
    one of high / medium / low.
    """
    start_hour = int(preferred_start_time.split(":")[0])
    productive_hours = [int(t.split(":")[0]) for t in most_productive_hours]
    average_productive_hour = sum(productive_hours) / len(productive_hours) if productive_hours else 12

    if start_hour <= 7 and average_productive_hour <= 10:
        return "early_bird"

    if start_hour >= 10 and average_productive_hour >= 14:
        return "night_owl"

    if energy_fluctuations == "high" and task_switch_tolerance <= 2:
        return "sprint_recover"

    if collaboration_preference >= 4 and task_switch_tolerance >= 4:
        return "collaborative"

    if energy_fluctuations in ("low", "medium"):
        return "steady_pacer"

    return "adaptive"
