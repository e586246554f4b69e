"""
Scheduling service: reads pending activities and committed time blocks from the
database, runs the smart scheduling pipeline and persists the produced blocks.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from ..models import CLOSED_STATUSES, Activity, TimeBlock
from ..schemas import ScheduleOptionsIn, TimeBlockCreate
from ..scheduling.core.constants import BlockType
from ..scheduling.core.scheduler import generate_smart_schedule
from ..scheduling.core.types import CommittedBlock, PriorityScore, ScheduleOptions, ScheduleResult, WorkItem
from ..scheduling.scoring.priority_scoring import personalized_recommendations, rank_work_items
from ..scheduling.utils.time_utils import minutes_between, start_of_day
from .clock import local_now
from .flow_service import flow_service

logger = logging.getLogger(__name__)


def activity_to_work_item(activity: Activity) -> WorkItem:
    """Convert a stored activity, rejecting values the scheduler cannot use."""
    if activity.estimated_duration is not None and activity.estimated_duration < 0:
        raise ValueError(f"Activity {activity.id} has a negative estimated duration")
    return WorkItem(
        id=activity.id,
        title=activity.title,
        description=activity.description,
        priority=activity.priority,
        due_date=activity.due_date,
        estimated_duration=activity.estimated_duration,
        collaborators=tuple(activity.collaborators or ()),
    )


def time_block_to_committed(block: TimeBlock) -> CommittedBlock:
    if block.end_time < block.start_time:
        raise ValueError(f"Time block {block.id} ends before it starts")
    return CommittedBlock(start=block.start_time, end=block.end_time)


def work_item_to_dict(item: WorkItem) -> dict:
    return {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "priority": item.priority,
        "due_date": item.due_date,
        "estimated_duration": item.estimated_duration,
        "collaborators": list(item.collaborators),
    }


def scored_to_dict(item: WorkItem, score: PriorityScore) -> dict:
    return {
        "activity": work_item_to_dict(item),
        "smart_priority": {
            "total": score.total,
            "factors": score.factors.to_dict(),
            "reasoning": score.reasoning,
            "suggested_slot": score.suggested_slot,
        },
    }


def result_to_dict(day: date, result: ScheduleResult, saved: bool = False) -> dict:
    return {
        "date": day,
        "scheduled_blocks": [block.to_dict() for block in result.scheduled_blocks],
        "unscheduled_activities": [work_item_to_dict(item) for item in result.unscheduled_activities],
        "conflicts": list(result.conflicts),
        "suggestions": list(result.suggestions),
        "saved": saved,
    }


class SchedulerService:
    """
    Glue between the database and the scheduling core.

    Auto-scheduling reads committed blocks and writes new ones; those two steps
    run under a per (user, day) lock so concurrent requests in this process
    cannot book the same free window twice.
    """

    def __init__(self):
        # (user, day) -> [lock, number of holders and waiters]
        self._day_locks: Dict[Tuple[int, date], list] = {}
        self._guard = threading.Lock()

    @contextmanager
    def day_lock(self, user_id: int, day: date):
        key = (user_id, day)
        with self._guard:
            entry = self._day_locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._day_locks[key]

    # ================================
    # LOADING
    # ================================

    def pending_activities(self, db: Session, user_id: int, activity_ids: Optional[Sequence[int]] = None) -> List[WorkItem]:
        query = db.query(Activity).filter(
            Activity.created_by == user_id,
            Activity.status.notin_(CLOSED_STATUSES),
        )
        if activity_ids is not None:
            query = query.filter(Activity.id.in_(list(activity_ids)))
        activities = query.order_by(Activity.created_at.asc(), Activity.id.asc()).all()
        return [activity_to_work_item(activity) for activity in activities]

    def blocks_for_day(self, db: Session, user_id: int, day: date) -> List[TimeBlock]:
        day_start = start_of_day(day)
        day_end = day_start + timedelta(days=1)
        return db.query(TimeBlock).filter(
            TimeBlock.created_by == user_id,
            TimeBlock.start_time < day_end,
            TimeBlock.end_time > day_start,
        ).order_by(TimeBlock.start_time.asc()).all()

    def committed_blocks(self, db: Session, user_id: int, day: date) -> List[CommittedBlock]:
        return [time_block_to_committed(block) for block in self.blocks_for_day(db, user_id, day)]

    def resolve_options(self, db: Session, user_id: int, options_in: ScheduleOptionsIn,
                        use_flow_strategy: bool = False) -> ScheduleOptions:
        options = options_in.to_core()
        if use_flow_strategy:
            record = flow_service.current_strategy(db, user_id)
            if record:
                options = flow_service.schedule_options_for_strategy(flow_service.to_strategy(record), options)
        return options

    # ================================
    # SCHEDULING
    # ================================

    def preview_schedule(self, db: Session, user_id: int, day: date, options: ScheduleOptions,
                         activity_ids: Optional[Sequence[int]] = None, now: Optional[datetime] = None) -> ScheduleResult:
        """Plan the day without saving anything."""
        items = self.pending_activities(db, user_id, activity_ids)
        committed = self.committed_blocks(db, user_id, day)
        result = generate_smart_schedule(day, items, committed, options, now or local_now())
        logger.info(
            f"Previewed schedule for user {user_id} on {day}: "
            f"{len(result.task_blocks())} placed, {len(result.unscheduled_activities)} unscheduled"
        )
        return result

    def auto_schedule(self, db: Session, user_id: int, day: date, options: ScheduleOptions,
                      activity_ids: Optional[Sequence[int]] = None, now: Optional[datetime] = None) -> ScheduleResult:
        """Plan the day and store every produced block as committed time."""
        with self.day_lock(user_id, day):
            result = self.preview_schedule(db, user_id, day, options, activity_ids, now)
            for block in result.scheduled_blocks:
                db.add(TimeBlock(
                    activity_id=block.activity_id,
                    title=block.title,
                    description=block.description,
                    start_time=block.start,
                    end_time=block.end,
                    duration=block.duration,
                    block_type=block.block_type,
                    is_scheduled=True,
                    is_completed=False,
                    priority=block.priority,
                    color=block.color,
                    created_by=user_id,
                ))
            db.commit()
        logger.info(f"Saved {len(result.scheduled_blocks)} time blocks for user {user_id} on {day}")
        return result

    def has_task_blocks(self, db: Session, user_id: int, day: date) -> bool:
        return any(block.block_type == BlockType.TASK.value for block in self.blocks_for_day(db, user_id, day))

    def create_block(self, db: Session, user_id: int, block_in: TimeBlockCreate) -> TimeBlock:
        block = TimeBlock(
            activity_id=block_in.activity_id,
            title=block_in.title,
            description=block_in.description,
            start_time=block_in.start_time,
            end_time=block_in.end_time,
            duration=minutes_between(block_in.start_time, block_in.end_time),
            block_type=block_in.block_type.value,
            is_scheduled=True,
            priority=block_in.priority,
            color=block_in.color,
            created_by=user_id,
        )
        db.add(block)
        db.commit()
        db.refresh(block)
        return block

    # ================================
    # PRIORITIES
    # ================================

    def ranked_activities(self, db: Session, user_id: int, now: Optional[datetime] = None) -> List[Tuple[WorkItem, PriorityScore]]:
        return rank_work_items(self.pending_activities(db, user_id), now or local_now())

    def recommendations(self, db: Session, user_id: int, now: Optional[datetime] = None) -> dict:
        grouped = personalized_recommendations(self.pending_activities(db, user_id), now or local_now())
        return {
            "top_priority": [scored_to_dict(*pair) for pair in grouped["top_priority"]],
            "quick_wins": [scored_to_dict(*pair) for pair in grouped["quick_wins"]],
            "time_slot_suggestions": {
                slot: [scored_to_dict(*pair) for pair in pairs]
                for slot, pairs in grouped["time_slot_suggestions"].items()
            },
        }


# Global scheduler service instance
scheduler_service = SchedulerService()
