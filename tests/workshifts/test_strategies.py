from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.workforce_attendance.workforce_attendance.core.exceptions import TimeLogChronologyError
from src.workforce_attendance.workforce_attendance.schedules.model import TimeRange
from src.workforce_attendance.workforce_attendance.timelogs.model import TimeLog
from src.workforce_attendance.workforce_attendance.timelogs.time_logs import TimeLogs
from src.workforce_attendance.workforce_attendance.workshifts.policy import ShiftPolicy
from src.workforce_attendance.workforce_attendance.workshifts.strategies.scheduled_strategy import ScheduledShiftStrategy
from src.workforce_attendance.workforce_attendance.workshifts.strategies.unscheduled_strategy import UnscheduledShiftStrategy
from src.workforce_attendance.workforce_attendance.worksites.model import Worksite

UTC = ZoneInfo("UTC")
PARIS = ZoneInfo("Europe/Paris")
POLICY = ShiftPolicy.default()


def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=timezone.utc)


def make_logs(*spans, zone: ZoneInfo = UTC) -> TimeLogs:
    site = Worksite(worksite_id=1, code="HQ", name="Head office", time_zone=zone)
    return TimeLogs(
        TimeLog(time_log_id=i + 1, employee_id=1, worksite=site, entry_time=s, exit_time=e)
        for i, (s, e) in enumerate(spans)
    )


# --- Unscheduled ---

def test_no_pause_returns_all_logs():
    # 09:00-12:00 and 12:00-17:00 touch: a single shift
    logs = make_logs((at(10, 9), at(10, 12)), (at(10, 12), at(10, 17)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), logs)

    assert result == logs


def test_empty_input_returns_empty():
    assert UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), TimeLogs.empty()).is_empty()


def test_one_pause_at_start_of_week_selects_right_segment():
    # Sunday 2024-01-07 23:00-23:59, Monday 08:00-16:00 (8h01m gap)
    logs = make_logs((at(7, 23), at(7, 23, 59)), (at(8, 8), at(8, 16)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 8), logs)

    assert result.as_list() == [logs[1]]


def test_one_pause_on_target_day_selects_left_segment():
    logs = make_logs((at(8, 8), at(8, 16)), (at(9, 1), at(9, 5)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 8), logs)

    assert result.as_list() == [logs[0]]


def test_two_pauses_select_middle_day():
    logs = make_logs(
        (at(9, 9), at(9, 17)),
        (at(10, 9), at(10, 12)),
        (at(10, 13), at(10, 17)),
        (at(11, 9), at(11, 17)),
    )

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[1], logs[2]]


def test_gap_below_threshold_is_not_a_pause():
    logs = make_logs((at(10, 9), at(10, 12)), (at(10, 15, 59), at(10, 18)))

    assert UnscheduledShiftStrategy.find_long_pauses(logs, POLICY.long_pause_threshold) == []
    assert len(UnscheduledShiftStrategy.find_long_pauses(logs, timedelta(hours=3))) == 1


def test_gap_equal_to_threshold_is_a_pause():
    logs = make_logs((at(10, 9), at(10, 12)), (at(10, 16), at(10, 18)))

    pauses = UnscheduledShiftStrategy.find_long_pauses(logs, timedelta(hours=4))

    assert [p.duration for p in pauses] == [timedelta(hours=4)]


def test_negative_gap_is_a_chronology_error():
    class Unordered:
        def __init__(self, logs):
            self._logs = logs

        def __iter__(self):
            return iter(self._logs)

    ordered = make_logs((at(10, 9), at(10, 12)), (at(10, 13), at(10, 14)))
    reversed_logs = Unordered([ordered[1], ordered[0]])

    with pytest.raises(TimeLogChronologyError):
        UnscheduledShiftStrategy.find_long_pauses(reversed_logs, timedelta(hours=4))


def test_one_pause_uses_worksite_local_exit_date():
    # 23:30 UTC on the 7th is 00:30 on the 8th in Paris: exit is on the target day
    logs = make_logs((at(7, 20), at(7, 23, 30)), (at(8, 8), at(8, 16)), zone=PARIS)

    result = UnscheduledShiftStrategy(POLICY, PARIS).infer(date(2024, 1, 8), logs)

    assert result.as_list() == [logs[0]]


# One pause over spans of three or more days. The decision only looks at the
# local exit date of the log before the pause.

def test_one_pause_previous_day_then_next_day_selects_right_segment():
    logs = make_logs((at(9, 20), at(9, 23)), (at(11, 9), at(11, 17)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[1]]


def test_one_pause_target_day_then_two_days_later_selects_left_segment():
    logs = make_logs((at(10, 9), at(10, 17)), (at(12, 9), at(12, 17)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[0]]


def test_one_pause_entirely_after_target_day_selects_left_segment():
    logs = make_logs((at(11, 9), at(11, 17)), (at(12, 9), at(12, 17)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[0]]


def test_one_pause_overnight_log_ending_on_target_day_selects_left_segment():
    logs = make_logs((at(9, 22), at(10, 6)), (at(11, 22), at(12, 6)))

    result = UnscheduledShiftStrategy(POLICY, UTC).infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[0]]


# --- Scheduled ---

def test_scheduled_window_with_margin_selects_overlapping_logs():
    logs = make_logs(
        (at(10, 3), at(10, 4, 30)),
        (at(10, 8, 30), at(10, 17, 10)),
    )
    strategy = ScheduledShiftStrategy(POLICY, TimeRange(time(9, 0), time(17, 0)), UTC)

    result = strategy.infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[1]]


def test_scheduled_window_is_half_open():
    # Expanded window is [05:00, 21:00)
    logs = make_logs(
        (at(10, 4), at(10, 5)),
        (at(10, 5), at(10, 6)),
        (at(10, 20), at(10, 20, 59)),
        (at(10, 21), at(10, 22)),
    )
    strategy = ScheduledShiftStrategy(POLICY, TimeRange(time(9, 0), time(17, 0)), UTC)

    result = strategy.infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[1], logs[2]]
    assert logs[3] not in result.as_list()


def test_scheduled_overnight_shift_spans_midnight():
    logs = make_logs(
        (at(10, 9), at(10, 12)),
        (at(10, 22), at(11, 2)),
        (at(11, 2, 30), at(11, 6)),
    )
    policy = ShiftPolicy.from_minutes(selection_margin=60, long_pause_threshold=240)
    strategy = ScheduledShiftStrategy(policy, TimeRange(time(22, 0), time(6, 0)), UTC)

    result = strategy.infer(date(2024, 1, 10), logs)

    assert result.as_list() == [logs[1], logs[2]]
