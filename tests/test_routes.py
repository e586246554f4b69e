"""API tests through the FastAPI test client."""

from datetime import datetime

from flowplanner.models import ActivityStatus


class TestInfo:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Welcome to flowplanner API"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"


class TestScheduleRoutes:

    def test_unknown_user(self, client):
        response = client.post("/schedule/999/preview", json={"date": "2025-03-03"})
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_preview(self, client, user, add_activity):
        activity = add_activity("Draft proposal", estimated_duration=60)

        response = client.post(f"/schedule/{user.id}/preview", json={"date": "2025-03-03"})

        assert response.status_code == 200
        body = response.json()
        assert body["saved"] is False
        task = body["scheduled_blocks"][0]
        assert task["activity_id"] == activity.id
        assert task["start_time"] == "2025-03-03T09:00:00"
        assert task["end_time"] == "2025-03-03T10:00:00"
        assert body["scheduled_blocks"][1]["block_type"] == "break"

        listed = client.get(f"/schedule/{user.id}/blocks", params={"date": "2025-03-03"})
        assert listed.json() == []

    def test_auto_schedule_saves_blocks(self, client, user, add_activity):
        add_activity("Draft proposal", estimated_duration=60)
        add_activity("Done already", status=ActivityStatus.COMPLETED)

        response = client.post(f"/schedule/{user.id}/auto", json={
            "date": "2025-03-03",
            "options": {"focus_time_preferred": False},
        })

        assert response.status_code == 200
        assert response.json()["saved"] is True
        listed = client.get(f"/schedule/{user.id}/blocks", params={"date": "2025-03-03"}).json()
        assert [block["title"] for block in listed] == ["Draft proposal"]
        assert listed[0]["is_scheduled"] is True

    def test_meetings_are_planned_around(self, client, user, add_activity):
        add_activity("Draft proposal", estimated_duration=60)

        created = client.post(f"/schedule/{user.id}/blocks", json={
            "title": "Dentist",
            "start_time": "2025-03-03T09:00:00",
            "end_time": "2025-03-03T10:00:00",
        })
        assert created.status_code == 201
        assert created.json()["block_type"] == "meeting"

        body = client.post(f"/schedule/{user.id}/preview", json={"date": "2025-03-03"}).json()

        assert body["scheduled_blocks"][0]["start_time"] == "2025-03-03T10:00:00"

    def test_unscheduled_and_conflicts(self, client, user, add_activity):
        add_activity("Data migration", estimated_duration=500)

        body = client.post(f"/schedule/{user.id}/preview", json={"date": "2025-03-03"}).json()

        assert body["scheduled_blocks"] == []
        assert body["unscheduled_activities"][0]["title"] == "Data migration"
        assert body["conflicts"] == ['"Data migration" (500min) doesn\'t fit in any available slot']

    def test_invalid_working_hours(self, client, user):
        response = client.post(f"/schedule/{user.id}/preview", json={
            "date": "2025-03-03",
            "options": {"working_hours_start": "17:00", "working_hours_end": "09:00"},
        })
        assert response.status_code == 422

    def test_invalid_clock_time(self, client, user):
        response = client.post(f"/schedule/{user.id}/preview", json={
            "date": "2025-03-03",
            "options": {"working_hours_start": "nine"},
        })
        assert response.status_code == 422

    def test_inverted_block(self, client, user):
        response = client.post(f"/schedule/{user.id}/blocks", json={
            "title": "Backwards",
            "start_time": "2025-03-03T11:00:00",
            "end_time": "2025-03-03T10:00:00",
        })
        assert response.status_code == 422

    def test_offset_times_are_stored_as_local_time(self, monkeypatch, client, user):
        monkeypatch.setattr("flowplanner.services.clock.TIMEZONE", "Europe/Amsterdam")

        response = client.post(f"/schedule/{user.id}/blocks", json={
            "title": "Call with Karachi",
            "start_time": "2025-03-03T10:00:00+05:00",
            "end_time": "2025-03-03T11:00:00+05:00",
        })

        assert response.status_code == 201
        listed = client.get(f"/schedule/{user.id}/blocks", params={"date": "2025-03-03"}).json()
        assert listed[0]["start_time"] == "2025-03-03T06:00:00"
        assert listed[0]["end_time"] == "2025-03-03T07:00:00"
        assert listed[0]["duration"] == 60

    def test_mixed_offset_and_local_times(self, monkeypatch, client, user):
        monkeypatch.setattr("flowplanner.services.clock.TIMEZONE", "Europe/Amsterdam")

        response = client.post(f"/schedule/{user.id}/blocks", json={
            "title": "Standup",
            "start_time": "2025-03-03T08:00:00Z",
            "end_time": "2025-03-03T10:00:00",
        })

        assert response.status_code == 201
        assert response.json()["start_time"] == "2025-03-03T09:00:00"
        assert response.json()["duration"] == 60

    def test_mixed_times_that_end_before_they_start(self, monkeypatch, client, user):
        monkeypatch.setattr("flowplanner.services.clock.TIMEZONE", "Europe/Amsterdam")

        # 10:00 UTC is 11:00 local, so the block would end where it starts
        response = client.post(f"/schedule/{user.id}/blocks", json={
            "title": "Standup",
            "start_time": "2025-03-03T10:00:00Z",
            "end_time": "2025-03-03T11:00:00",
        })

        assert response.status_code == 422

    def test_malformed_activity(self, client, user, add_activity):
        add_activity("Broken", estimated_duration=-5)
        response = client.post(f"/schedule/{user.id}/preview", json={"date": "2025-03-03"})
        assert response.status_code == 422

    def test_flow_strategy_working_hours(self, client, user, add_activity):
        add_activity("Draft proposal", estimated_duration=60)
        client.post(f"/flow/{user.id}/apply-preset", json={"personality_type": "night_owl"})

        body = client.post(f"/schedule/{user.id}/preview", json={
            "date": "2025-03-03",
            "use_flow_strategy": True,
        }).json()

        assert body["scheduled_blocks"][0]["start_time"] == "2025-03-03T10:00:00"
        assert body["scheduled_blocks"][1]["duration"] == 20


class TestPriorityRoutes:

    def test_ranked(self, client, user, add_activity):
        add_activity("Someday", priority="low")
        add_activity("Fire", priority="urgent", due_date=datetime(2020, 1, 1, 9))

        body = client.get(f"/priorities/{user.id}").json()

        assert [entry["activity"]["title"] for entry in body] == ["Fire", "Someday"]
        assert body[0]["smart_priority"]["factors"]["urgency"] == 1.0
        assert 0 <= body[1]["smart_priority"]["total"] <= 1

    def test_recommendations(self, client, user, add_activity):
        add_activity("Quick reply", estimated_duration=10)

        body = client.get(f"/priorities/{user.id}/recommendations").json()

        assert [entry["activity"]["title"] for entry in body["quick_wins"]] == ["Quick reply"]
        assert set(body["time_slot_suggestions"]) == {"morning", "afternoon", "evening"}


class TestFlowRoutes:

    def test_presets(self, client):
        body = client.get("/flow/presets").json()
        assert len(body) == 6
        assert body[0]["personality_type"] == "early_bird"

    def test_low_stimulus(self, client):
        assert client.get("/flow/low-stimulus").json()["break_duration"] == 10

    def test_assess(self, client):
        response = client.post("/flow/assess", json={
            "preferred_start_time": "06:30",
            "most_productive_hours": ["08:00", "09:00"],
            "task_switch_tolerance": 2,
            "collaboration_preference": 2,
            "energy_fluctuations": "medium",
        })
        assert response.status_code == 200
        assert response.json()["personality_type"] == "early_bird"
        assert response.json()["preset"]["strategy_name"] == "Early Bird"

    def test_assess_validation(self, client):
        response = client.post("/flow/assess", json={
            "preferred_start_time": "06:30",
            "most_productive_hours": [],
            "task_switch_tolerance": 2,
            "collaboration_preference": 9,
            "energy_fluctuations": "wild",
        })
        assert response.status_code == 422

    def test_strategy_lifecycle(self, client, user):
        assert client.get(f"/flow/{user.id}/strategy").json() is None

        applied = client.post(f"/flow/{user.id}/apply-preset", json={
            "personality_type": "early_bird",
            "low_stimulus": True,
        })
        assert applied.status_code == 200
        assert applied.json()["success"] is True
        assert applied.json()["strategy"]["max_task_switches"] == 1

        current = client.get(f"/flow/{user.id}/strategy").json()
        assert current["personality_type"] == "early_bird"

    def test_invalid_preset(self, client, user):
        response = client.post(f"/flow/{user.id}/apply-preset", json={"personality_type": "vampire"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid personality type"

    def test_recommendations(self, client, user):
        default = client.get(f"/flow/{user.id}/recommendations").json()
        assert default["time_slot_type"] == "productive"

        client.post(f"/flow/{user.id}/apply-preset", json={"personality_type": "early_bird"})
        body = client.get(f"/flow/{user.id}/recommendations", params={"at": "2025-03-03T09:30:00"}).json()

        assert body["time_slot_type"] == "peak"
        assert body["should_focus"] is True
