"""Unit tests for free window generation."""

from flowplanner.scheduling.algorithms.slot_generation import free_windows
from flowplanner.scheduling.core.time_slot import TimeWindow

from .factories import DAY, at, busy, make_options


def spans(windows):
    return [(w.start.strftime("%H:%M"), w.end.strftime("%H:%M"), w.duration) for w in windows]


class TestFreeWindows:
    """Test window generation around committed blocks."""

    def test_empty_day_is_one_window(self):
        windows = free_windows(DAY, [], make_options())
        assert spans(windows) == [("09:00", "17:00", 480)]

    def test_single_meeting_splits_the_day(self):
        windows = free_windows(DAY, [busy(10, 0, 11, 0)], make_options(minimum_block_size=30))
        assert spans(windows) == [("09:00", "10:00", 60), ("11:00", "17:00", 360)]

    def test_unsorted_input(self):
        committed = [busy(14, 0, 15, 0), busy(10, 0, 11, 0)]
        windows = free_windows(DAY, committed, make_options())

        assert spans(windows) == [
            ("09:00", "10:00", 60),
            ("11:00", "14:00", 180),
            ("15:00", "17:00", 120),
        ]
        # Caller's list is left alone
        assert committed[0].start == at(14)

    def test_small_gaps_are_dropped(self):
        committed = [busy(10, 0, 10, 50), busy(11, 0, 12, 0)]
        windows = free_windows(DAY, committed, make_options(minimum_block_size=30))
        assert spans(windows) == [("09:00", "10:00", 60), ("12:00", "17:00", 300)]

    def test_overlapping_blocks(self):
        committed = [busy(10, 0, 12, 0), busy(11, 0, 11, 30)]
        windows = free_windows(DAY, committed, make_options())
        assert spans(windows) == [("09:00", "10:00", 60), ("12:00", "17:00", 300)]

    def test_block_before_working_hours(self):
        windows = free_windows(DAY, [busy(8, 0, 9, 30)], make_options())
        assert spans(windows) == [("09:30", "17:00", 450)]

    def test_block_after_working_hours(self):
        windows = free_windows(DAY, [busy(18, 0, 19, 0)], make_options())
        assert spans(windows) == [("09:00", "17:00", 480)]

    def test_block_running_past_the_end(self):
        windows = free_windows(DAY, [busy(16, 30, 18, 0)], make_options())
        assert spans(windows) == [("09:00", "16:30", 450)]

    def test_fully_booked_day(self):
        assert free_windows(DAY, [busy(8, 0, 18, 0)], make_options()) == []

    def test_buffer_around_blocks(self):
        windows = free_windows(DAY, [busy(10, 0, 11, 0)], make_options(buffer_time=15))
        assert spans(windows) == [("09:00", "09:45", 45), ("11:15", "17:00", 345)]

    def test_custom_working_hours(self):
        options = make_options(working_hours_start="07:30", working_hours_end="12:00")
        windows = free_windows(DAY, [busy(9, 0, 9, 30)], options)
        assert spans(windows) == [("07:30", "09:00", 90), ("09:30", "12:00", 150)]

    def test_windows_avoid_committed_time(self):
        committed = [busy(9, 15, 9, 45), busy(12, 0, 13, 0), busy(15, 40, 16, 0)]
        options = make_options(minimum_block_size=20)
        work_start, work_end = at(9), at(17)

        windows = free_windows(DAY, committed, options)

        for window in windows:
            assert work_start <= window.start < window.end <= work_end
            assert window.duration >= options.minimum_block_size
            for block in committed:
                assert window.end <= block.start or window.start >= block.end


class TestTimeWindow:

    def test_shrink_from_start(self):
        window = TimeWindow(at(9), at(17))
        rest = window.shrink_from_start(75)

        assert rest.start == at(10, 15)
        assert rest.end == at(17)
        assert rest.duration == 405
        assert window.duration == 480

    def test_ordering(self):
        assert TimeWindow(at(9), at(10)) < TimeWindow(at(11), at(12))
