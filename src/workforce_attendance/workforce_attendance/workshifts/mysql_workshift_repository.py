from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    seconds_to_timedelta,
    timedelta_to_seconds,
)
from ..employees.model import Employee
from ..timelogs.mysql_time_log_repository import TIME_LOG_COLUMNS, time_log_from_row
from ..worksites.mysql_worksite_repository import worksite_from_row
from .model import WorkShift
from .repository import WorkShiftRepository


class MySQLWorkShiftRepository(WorkShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, workshift: WorkShift) -> WorkShift:
        worksite_id = workshift.worksite.worksite_id if workshift.worksite else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workshifts (employee_id, worksite_id, work_date, total_work_seconds, total_pause_seconds)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (
                    workshift.employee.employee_id,
                    worksite_id,
                    workshift.date,
                    timedelta_to_seconds(workshift.total_work_time),
                    timedelta_to_seconds(workshift.total_pause_time),
                ),
            )
            workshift_id = int(cur.lastrowid)
            if workshift.time_logs:
                cur.executemany(
                    """
                    INSERT INTO workshift_time_logs (workshift_id, time_log_id, position)
                    VALUES (%s, %s, %s)
                    """,
                    [(workshift_id, log.time_log_id, i) for i, log in enumerate(workshift.time_logs)],
                )
        return replace(workshift, workshift_id=workshift_id)

    def exists_by_employee_and_date(self, *, employee_id: int, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM workshifts WHERE employee_id=%s AND work_date=%s LIMIT 1",
                (int(employee_id), work_date),
            )
            return fetchone(cur) is not None

    def find_by_employee_and_date(self, *, employee_id: int, work_date: date) -> Optional[WorkShift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT w.workshift_id, w.work_date, w.total_work_seconds, w.total_pause_seconds,
                       e.employee_id, e.name AS employee_name, e.email AS employee_email,
                       ws.worksite_id AS ws_worksite_id, ws.code AS ws_code,
                       ws.name AS ws_name, ws.time_zone AS ws_time_zone
                FROM workshifts w
                JOIN employees e ON e.employee_id = w.employee_id
                LEFT JOIN worksites ws ON ws.worksite_id = w.worksite_id
                WHERE w.employee_id=%s AND w.work_date=%s
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            workshift_id = int(r["workshift_id"])

            cur.execute(
                f"""
                SELECT {TIME_LOG_COLUMNS}
                FROM workshift_time_logs l
                JOIN time_logs t ON t.time_log_id = l.time_log_id
                JOIN worksites ws ON ws.worksite_id = t.worksite_id
                WHERE l.workshift_id=%s
                ORDER BY l.position ASC
                """,
                (workshift_id,),
            )
            logs = tuple(time_log_from_row(row) for row in fetchall(cur))

        return WorkShift(
            employee=Employee(
                employee_id=int(r["employee_id"]),
                name=r["employee_name"],
                email=r.get("employee_email"),
            ),
            date=r["work_date"],
            time_logs=logs,
            total_work_time=seconds_to_timedelta(r["total_work_seconds"]),
            total_pause_time=seconds_to_timedelta(r["total_pause_seconds"]),
            worksite=worksite_from_row(r, prefix="ws_") if r.get("ws_worksite_id") is not None else None,
            workshift_id=workshift_id,
        )
