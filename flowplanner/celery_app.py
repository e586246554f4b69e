"""
Celery Configuration for flowplanner with Beat Scheduling
"""

from celery import Celery
from celery.schedules import crontab

from flowplanner.config import REDIS_URL, TIMEZONE

# Create Celery app
celery_app = Celery(
    "flowplanner",
    broker=REDIS_URL,  # Redis as message broker
    backend=REDIS_URL,  # Redis as result backend
    include=["flowplanner.celery_tasks.schedule"]
)

# Basic configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone=TIMEZONE,
    enable_utc=True,
)

# Beat schedule configuration
celery_app.conf.beat_schedule = {
    'auto-schedule-tomorrow': {
        'task': 'flowplanner.celery_tasks.schedule.auto_schedule_all_users',
        'schedule': crontab(hour=0, minute=0),  # Every night at midnight
    },
}

if __name__ == "__main__":
    celery_app.start()
