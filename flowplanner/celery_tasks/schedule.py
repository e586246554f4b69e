from flowplanner.database import SessionLocal
from flowplanner.models import User
from flowplanner.celery_app import celery_app
from flowplanner.config import AUTO_SCHEDULE_MAX_URGENT, AUTO_SCHEDULE_MAX_TASKS
from flowplanner.scheduling.core.constants import PriorityTier
from flowplanner.scheduling.core.types import ScheduleOptions
from flowplanner.services.clock import local_now
from flowplanner.services.scheduler_service import scheduler_service
from sqlalchemy.orm import Session
from datetime import timedelta
import logging

logger = logging.getLogger(__name__)

NIGHTLY_OPTIONS = ScheduleOptions(
    working_hours_start="09:00",
    working_hours_end="17:00",
    break_duration=15,
    minimum_block_size=30,
    focus_time_preferred=True,
    max_tasks_per_day=AUTO_SCHEDULE_MAX_TASKS,
    buffer_time=0,
    deadline_aware=False,
    minimize_context_switching=False,
)


def schedule_urgent_for_tomorrow(db: Session, user_id: int) -> int:
    """Auto-schedule a user's urgent pending activities for tomorrow. Returns blocks placed."""
    tomorrow = (local_now() + timedelta(days=1)).date()

    if scheduler_service.has_task_blocks(db, user_id, tomorrow):
        logger.info(f"User {user_id} already has task blocks on {tomorrow}, skipping")
        return 0

    urgent_ids = [
        item.id for item in scheduler_service.pending_activities(db, user_id)
        if item.priority == PriorityTier.URGENT.value
    ][:AUTO_SCHEDULE_MAX_URGENT]
    if not urgent_ids:
        logger.info(f"No urgent activities to schedule for user {user_id}")
        return 0

    result = scheduler_service.auto_schedule(db, user_id, tomorrow, NIGHTLY_OPTIONS, urgent_ids)
    placed = len(result.task_blocks())
    logger.info(f"Auto-scheduled {placed} of {len(urgent_ids)} urgent activities for user {user_id} on {tomorrow}")
    return placed


@celery_app.task(name="flowplanner.celery_tasks.schedule.auto_schedule_user")
def auto_schedule_user(user_id: int) -> int:
    db: Session = SessionLocal()
    try:
        user = db.query(User).filter_by(id=user_id).first()
        if not user:
            logger.error(f"User {user_id} not found")
            return 0
        return schedule_urgent_for_tomorrow(db, user.id)
    finally:
        db.close()


@celery_app.task(name="flowplanner.celery_tasks.schedule.auto_schedule_all_users")
def auto_schedule_all_users() -> dict:
    """Nightly run: plan tomorrow's urgent work for every active user."""
    db: Session = SessionLocal()
    try:
        user_ids = [user.id for user in db.query(User).filter(User.is_active == True).all()]
    finally:
        db.close()

    logger.info(f"Starting nightly auto-scheduling for {len(user_ids)} users")
    placed = {}
    for user_id in user_ids:
        try:
            placed[user_id] = auto_schedule_user(user_id)
        except Exception as e:
            # One broken user must not stop the nightly run
            logger.error(f"Auto-scheduling failed for user {user_id}: {e}")
    logger.info("Nightly auto-scheduling completed")
    return placed
