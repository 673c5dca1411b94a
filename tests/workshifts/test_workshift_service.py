from dataclasses import replace
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from src.workforce_attendance.workforce_attendance.admin.service import SettingsAdminService
from src.workforce_attendance.workforce_attendance.common.datetime_utils import FixedClock
from src.workforce_attendance.workforce_attendance.core.exceptions import ValidationError
from src.workforce_attendance.workforce_attendance.employees.model import Employee
from src.workforce_attendance.workforce_attendance.schedules.model import TimeRange
from src.workforce_attendance.workforce_attendance.schedules.service import ScheduleService
from src.workforce_attendance.workforce_attendance.timelogs.model import TimeLog
from src.workforce_attendance.workforce_attendance.workshifts.model import WorkShift
from src.workforce_attendance.workforce_attendance.workshifts.service import WorkShiftService
from src.workforce_attendance.workforce_attendance.worksites.model import Worksite

SITE = Worksite(worksite_id=1, code="HQ", name="Head office", time_zone=ZoneInfo("UTC"))
EMPLOYEE = Employee(employee_id=1, name="A")
NOW = datetime(2024, 1, 20, 12, 0, tzinfo=timezone.utc)


def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=timezone.utc)


def log(log_id: int, entry: datetime, exit_: Optional[datetime]) -> TimeLog:
    return TimeLog(time_log_id=log_id, employee_id=1, worksite=SITE, entry_time=entry, exit_time=exit_)


class InMemoryTimeLogs:
    def __init__(self, logs: list[TimeLog]):
        self.logs = logs
        self.searches = []

    def search_by_employee_and_entry_range(self, *, employee_id: int, start: datetime, end: datetime):
        self.searches.append((start, end))
        found = [l for l in self.logs if l.employee_id == employee_id and start <= l.entry_time < end]
        return sorted(found, key=lambda l: l.entry_time)

    def find_orphans_since(self, *, anchor: datetime, employee_id: int):
        return []


class InMemoryWorkShifts:
    def __init__(self):
        self.by_key: dict[tuple[int, date], WorkShift] = {}
        self._id = 0

    def save(self, workshift: WorkShift) -> WorkShift:
        self._id += 1
        saved = replace(workshift, workshift_id=self._id)
        self.by_key[workshift.identity] = saved
        return saved

    def exists_by_employee_and_date(self, *, employee_id: int, work_date: date) -> bool:
        return (employee_id, work_date) in self.by_key

    def find_by_employee_and_date(self, *, employee_id: int, work_date: date):
        return self.by_key.get((employee_id, work_date))


class InMemorySchedules:
    def __init__(self, time_range: Optional[TimeRange] = None):
        self.time_range = time_range

    def find_time_range_for_date(self, *, employee_id: int, work_date: date, weekday: int):
        return self.time_range


def make_service(logs, *, workshifts=None, time_range=None, days_until_locked=3):
    time_logs = InMemoryTimeLogs(logs)
    service = WorkShiftService(
        workshifts or InMemoryWorkShifts(),
        time_logs,
        ScheduleService(InMemorySchedules(time_range)),
        SettingsAdminService(days_until_locked),
        FixedClock(NOW),
    )
    return service, time_logs


def test_recent_day_is_rebuilt_from_logs():
    logs = [log(1, at(19, 9), at(19, 12)), log(2, at(19, 12), at(19, 17))]
    service, time_logs = make_service(logs)

    shift = service.find_work_shift(EMPLOYEE, SITE, date(2024, 1, 19))

    assert [l.time_log_id for l in shift.time_logs] == [1, 2]
    assert shift.total_work_time == timedelta(hours=8)
    assert time_logs.searches == [(at(18, 0), at(21, 0))]


def test_locked_day_returns_materialized_shift_without_querying_logs():
    workshifts = InMemoryWorkShifts()
    stored = workshifts.save(
        WorkShift(employee=EMPLOYEE, date=date(2024, 1, 10), total_work_time=timedelta(hours=6), worksite=SITE)
    )
    service, time_logs = make_service([log(1, at(10, 9), at(10, 17))], workshifts=workshifts)

    shift = service.find_work_shift(EMPLOYEE, SITE, date(2024, 1, 10))

    assert shift is stored
    assert time_logs.searches == []


def test_lock_horizon_boundary():
    workshifts = InMemoryWorkShifts()
    stored = workshifts.save(WorkShift(employee=EMPLOYEE, date=date(2024, 1, 17), worksite=SITE))
    workshifts.save(WorkShift(employee=EMPLOYEE, date=date(2024, 1, 18), worksite=SITE))
    logs = [log(1, at(18, 9), at(18, 17))]
    service, _ = make_service(logs, workshifts=workshifts)

    # 17 + 3 <= 20: locked
    assert service.find_work_shift(EMPLOYEE, SITE, date(2024, 1, 17)) is stored
    # 18 + 3 > 20: recomputed
    assert service.find_work_shift(EMPLOYEE, SITE, date(2024, 1, 18)).total_work_time == timedelta(hours=8)


def test_locked_day_without_stored_shift_is_rebuilt():
    service, time_logs = make_service([log(1, at(10, 9), at(10, 17))])

    shift = service.find_work_shift(EMPLOYEE, SITE, date(2024, 1, 10))

    assert shift.total_work_time == timedelta(hours=8)
    assert len(time_logs.searches) == 1


def test_open_logs_are_ignored_when_building():
    service, _ = make_service([])

    shift = service.build_work_shift(EMPLOYEE, SITE, date(2024, 1, 19), [log(1, at(19, 9), None)])

    assert shift.is_empty()
    assert shift.worksite == SITE


def test_schedule_drives_the_selection():
    logs = [log(1, at(19, 2), at(19, 3)), log(2, at(19, 8, 30), at(19, 17, 10))]
    service, _ = make_service(logs, time_range=TimeRange(time(9, 0), time(17, 0)))

    shift = service.find_work_shift(EMPLOYEE, SITE, date(2024, 1, 19))

    assert [l.time_log_id for l in shift.time_logs] == [2]


def test_find_work_shifts_returns_one_shift_per_day():
    logs = [log(1, at(18, 9), at(18, 17)), log(2, at(19, 9), at(19, 17))]
    service, _ = make_service(logs)

    shifts = service.find_work_shifts(EMPLOYEE, SITE, date(2024, 1, 18), date(2024, 1, 19))

    assert [s.date for s in shifts] == [date(2024, 1, 18), date(2024, 1, 19)]
    assert [[l.time_log_id for l in s.time_logs] for s in shifts] == [[1], [2]]


def test_find_work_shifts_rejects_reversed_range():
    service, _ = make_service([])

    with pytest.raises(ValidationError):
        service.find_work_shifts(EMPLOYEE, SITE, date(2024, 1, 19), date(2024, 1, 18))


def test_missing_arguments_are_type_errors():
    service, _ = make_service([])

    with pytest.raises(TypeError):
        service.find_work_shift(None, SITE, date(2024, 1, 19))
    with pytest.raises(TypeError):
        service.build_work_shift(EMPLOYEE, SITE, date(2024, 1, 19), None)
