from datetime import date, datetime, timezone
from types import SimpleNamespace
from zoneinfo import ZoneInfo

import pytest
from flask import Flask

from src.workforce_attendance.workforce_attendance.admin.service import SettingsAdminService
from src.workforce_attendance.workforce_attendance.common.datetime_utils import FixedClock
from src.workforce_attendance.workforce_attendance.employees.model import Employee
from src.workforce_attendance.workforce_attendance.schedules.service import ScheduleService
from src.workforce_attendance.workforce_attendance.timelogs.model import TimeLog
from src.workforce_attendance.workforce_attendance.workshifts.controller import register
from src.workforce_attendance.workforce_attendance.workshifts.service import WorkShiftService
from src.workforce_attendance.workforce_attendance.worksites.model import Worksite

SITE = Worksite(worksite_id=1, code="HQ", name="Head office", time_zone=ZoneInfo("UTC"))
EMPLOYEE = Employee(employee_id=1, name="A")


def at(day: int, hour: int) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


class InMemoryEmployees:
    def get_by_id(self, employee_id: int):
        return EMPLOYEE if employee_id == 1 else None


class InMemoryWorksites:
    def get_by_code(self, code: str):
        return SITE if code == "HQ" else None


class InMemoryTimeLogs:
    logs = [TimeLog(time_log_id=7, employee_id=1, worksite=SITE, entry_time=at(19, 9), exit_time=at(19, 17))]

    def search_by_employee_and_entry_range(self, *, employee_id: int, start: datetime, end: datetime):
        return [l for l in self.logs if start <= l.entry_time < end]


class NoWorkShifts:
    def find_by_employee_and_date(self, *, employee_id: int, work_date: date):
        return None


class NoSchedules:
    def find_time_range_for_date(self, *, employee_id: int, work_date: date, weekday: int):
        return None


@pytest.fixture
def client():
    service = WorkShiftService(
        NoWorkShifts(),
        InMemoryTimeLogs(),
        ScheduleService(NoSchedules()),
        SettingsAdminService(3),
        FixedClock(at(20, 12)),
    )
    container = SimpleNamespace(
        employees_repo=InMemoryEmployees(),
        worksites_repo=InMemoryWorksites(),
        workshift_service=service,
    )
    app = Flask(__name__)
    register(app, container)
    return app.test_client()


def test_single_day(client):
    resp = client.get("/api/v1/employees/1/workshifts?date=2024-01-19&worksite=HQ")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    [shift] = body["workshifts"]
    assert shift["date"] == "2024-01-19"
    assert shift["worksite"] == "HQ"
    assert shift["total_work_seconds"] == 8 * 3600
    assert shift["total_pause_seconds"] == 0
    assert [l["time_log_id"] for l in shift["time_logs"]] == [7]


def test_date_range(client):
    resp = client.get("/api/v1/employees/1/workshifts?start=2024-01-18&end=2024-01-19&worksite=HQ")

    assert resp.status_code == 200
    assert [s["date"] for s in resp.get_json()["workshifts"]] == ["2024-01-18", "2024-01-19"]


def test_unknown_employee_is_404(client):
    resp = client.get("/api/v1/employees/2/workshifts?date=2024-01-19&worksite=HQ")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_unknown_worksite_is_404(client):
    resp = client.get("/api/v1/employees/1/workshifts?date=2024-01-19&worksite=NOPE")

    assert resp.status_code == 404


def test_bad_date_is_400(client):
    resp = client.get("/api/v1/employees/1/workshifts?date=19-01-2024&worksite=HQ")

    assert resp.status_code == 400
    assert "YYYY-MM-DD" in resp.get_json()["message"]


def test_reversed_range_is_400(client):
    resp = client.get("/api/v1/employees/1/workshifts?start=2024-01-19&end=2024-01-18&worksite=HQ")

    assert resp.status_code == 400
