"""
Flow strategy service: applies personality presets to users and produces
flow recommendations for their active strategy.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ..models import FlowStrategy as FlowStrategyRecord
from ..scheduling.core.types import ScheduleOptions
from ..scheduling.flow.advisor import default_recommendation, low_stimulus_mode, recommend
from ..scheduling.flow.presets import get_preset
from ..scheduling.flow.strategy import FlowRecommendation, FlowStrategy
from .clock import local_now

logger = logging.getLogger(__name__)


class FlowService:
    """Stateless wrapper around the flow advisor and the flow_strategies table."""

    def current_strategy(self, db: Session, user_id: int) -> Optional[FlowStrategyRecord]:
        return db.query(FlowStrategyRecord).filter(
            FlowStrategyRecord.user_id == user_id,
            FlowStrategyRecord.is_active == True,
        ).order_by(FlowStrategyRecord.created_at.desc(), FlowStrategyRecord.id.desc()).first()

    def apply_preset(self, db: Session, user_id: int, personality_type: str, low_stimulus: bool = False) -> FlowStrategyRecord:
        """
        Make a preset the user's active strategy, optionally with the
        low-stimulus overrides merged on top. Raises KeyError for unknown presets.
        """
        settings = get_preset(personality_type).to_dict()
        if low_stimulus:
            settings.update(low_stimulus_mode())

        db.query(FlowStrategyRecord).filter(
            FlowStrategyRecord.user_id == user_id,
            FlowStrategyRecord.is_active == True,
        ).update({FlowStrategyRecord.is_active: False})

        record = FlowStrategyRecord(user_id=user_id, is_active=True, **settings)
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info(f"Applied flow preset '{personality_type}' for user {user_id} (low stimulus: {low_stimulus})")
        return record

    def to_strategy(self, record: FlowStrategyRecord) -> FlowStrategy:
        return FlowStrategy.from_dict({
            "personality_type": record.personality_type,
            "strategy_name": record.strategy_name,
            "description": record.description or "",
            "working_hours": dict(record.working_hours),
            "max_task_switches": record.max_task_switches,
            "focus_block_duration": record.focus_block_duration,
            "break_duration": record.break_duration,
            "preferred_task_types": list(record.preferred_task_types or []),
            "energy_pattern": dict(record.energy_pattern),
            "notification_settings": {
                **record.notification_settings,
                "quiet_hours": dict(record.notification_settings["quiet_hours"]),
            },
        })

    def recommendations_for(self, db: Session, user_id: int, now: Optional[datetime] = None) -> FlowRecommendation:
        record = self.current_strategy(db, user_id)
        if not record:
            return default_recommendation()
        return recommend(self.to_strategy(record), now or local_now())

    def schedule_options_for_strategy(self, strategy: FlowStrategy, base: ScheduleOptions) -> ScheduleOptions:
        """Working hours and break length follow the strategy; everything else stays."""
        return replace(
            base,
            working_hours_start=strategy.working_hours.start,
            working_hours_end=strategy.working_hours.end,
            break_duration=strategy.break_duration,
        )


# Global flow service instance
flow_service = FlowService()
