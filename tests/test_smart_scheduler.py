"""End-to-end tests for the scheduling pipeline."""

from datetime import timedelta

from flowplanner.scheduling import generate_smart_schedule

from .factories import DAY, MORNING, at, busy, make_item, make_options


def outage():
    return make_item(1, title="Fix production outage", priority="urgent",
                     due_date=MORNING - timedelta(hours=2), estimated_duration=45)


def docs():
    return make_item(2, title="Write onboarding docs", estimated_duration=60)


def inbox():
    return make_item(3, title="Tidy inbox", priority="low")


class TestGenerateSmartSchedule:

    def test_ranked_items_fill_the_free_windows(self):
        result = generate_smart_schedule(
            DAY, [inbox(), docs(), outage()], [busy(10, 0, 11, 0)], make_options(), MORNING
        )

        assert result.scheduled_task_ids() == [1, 2, 3]
        assert [(b.block_type, b.start, b.end) for b in result.scheduled_blocks] == [
            ("task", at(9, 0), at(9, 45)),
            ("break", at(9, 45), at(10, 0)),
            ("task", at(11, 0), at(12, 0)),
            ("break", at(12, 0), at(12, 15)),
            ("task", at(12, 15), at(12, 45)),
            ("break", at(12, 45), at(13, 0)),
        ]
        assert result.unscheduled_activities == []

    def test_committed_time_is_never_used(self):
        committed = [busy(9, 30, 10, 30), busy(13, 0, 14, 30)]
        items = [make_item(i, estimated_duration=40) for i in range(1, 10)]

        result = generate_smart_schedule(DAY, items, committed, make_options(), MORNING)

        for block in result.scheduled_blocks:
            assert at(9) <= block.start and block.end <= at(17)
            for taken in committed:
                assert block.end <= taken.start or block.start >= taken.end

    def test_repeatable(self):
        args = (DAY, [inbox(), docs(), outage()], [busy(10, 0, 11, 0)], make_options(), MORNING)
        assert generate_smart_schedule(*args) == generate_smart_schedule(*args)

    def test_empty_day(self):
        result = generate_smart_schedule(DAY, [], [], make_options(), MORNING)
        assert result.scheduled_blocks == []
        assert result.unscheduled_activities == []
        assert result.conflicts == []
