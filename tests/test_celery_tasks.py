"""Tests for the nightly auto-scheduling tasks, run eagerly against the test database."""

import pytest
from datetime import date, datetime

from flowplanner.celery_app import celery_app
from flowplanner.celery_tasks import schedule as schedule_tasks
from flowplanner.models import TimeBlock, User
from flowplanner.schemas import TimeBlockCreate
from flowplanner.services.scheduler_service import scheduler_service

TOMORROW = date(2025, 3, 4)


@pytest.fixture(autouse=True)
def task_env(monkeypatch, session_factory):
    monkeypatch.setattr(schedule_tasks, "SessionLocal", session_factory)
    monkeypatch.setattr(schedule_tasks, "local_now", lambda: datetime(2025, 3, 3, 23, 0))


class TestAutoScheduleUser:

    def test_urgent_activities_are_planned_for_tomorrow(self, db_session, user, add_activity):
        add_activity("Normal work", estimated_duration=60)
        for n in range(4):
            add_activity(f"Incident {n}", priority="urgent")

        placed = schedule_tasks.auto_schedule_user(user.id)

        assert placed == 3
        tasks = [b for b in scheduler_service.blocks_for_day(db_session, user.id, TOMORROW) if b.block_type == "task"]
        assert [b.title for b in tasks] == ["Incident 0", "Incident 1", "Incident 2"]
        assert tasks[0].start_time == datetime(2025, 3, 4, 9, 0)
        assert tasks[0].duration == 90

    def test_days_with_task_blocks_are_skipped(self, db_session, user, add_activity):
        add_activity("Incident", priority="urgent")
        schedule_tasks.auto_schedule_user(user.id)

        assert schedule_tasks.auto_schedule_user(user.id) == 0
        assert db_session.query(TimeBlock).filter_by(block_type="task").count() == 1

    def test_meetings_do_not_block_the_run(self, db_session, user, add_activity):
        add_activity("Incident", priority="urgent")
        scheduler_service.create_block(db_session, user.id, TimeBlockCreate(
            title="Standup", start_time=datetime(2025, 3, 4, 9), end_time=datetime(2025, 3, 4, 9, 30),
        ))

        assert schedule_tasks.auto_schedule_user(user.id) == 1

    def test_nothing_urgent(self, db_session, user, add_activity):
        add_activity("Normal work")
        assert schedule_tasks.auto_schedule_user(user.id) == 0
        assert db_session.query(TimeBlock).count() == 0

    def test_unknown_user(self):
        assert schedule_tasks.auto_schedule_user(4242) == 0


class TestAutoScheduleAllUsers:

    def test_failures_do_not_stop_the_run(self, monkeypatch, db_session, user):
        other = User(username="kim", email="kim@example.com")
        inactive = User(username="lee", email="lee@example.com", is_active=False)
        db_session.add_all([other, inactive])
        db_session.commit()
        failing_id = user.id

        def fake_schedule(db, user_id):
            if user_id == failing_id:
                raise RuntimeError("boom")
            return 2

        monkeypatch.setattr(schedule_tasks, "schedule_urgent_for_tomorrow", fake_schedule)

        placed = schedule_tasks.auto_schedule_all_users()

        assert placed == {other.id: 2}


class TestBeatSchedule:

    def test_nightly_entry(self):
        entry = celery_app.conf.beat_schedule["auto-schedule-tomorrow"]
        assert entry["task"] == "flowplanner.celery_tasks.schedule.auto_schedule_all_users"
