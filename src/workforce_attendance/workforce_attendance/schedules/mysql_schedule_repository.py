from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .model import TimeRange
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_time_range_for_date(self, *, employee_id: int, work_date: date, weekday: int) -> Optional[TimeRange]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.start_time, r.end_time
                FROM employees e
                JOIN schedule_rules sr ON sr.schedule_id = e.schedule_id
                JOIN day_of_week_time_ranges r ON r.rule_id = sr.rule_id
                WHERE e.employee_id=%s
                  AND sr.start_date <= %s
                  AND (sr.end_date IS NULL OR sr.end_date >= %s)
                  AND r.day_of_week=%s
                ORDER BY sr.start_date DESC
                LIMIT 1
                """,
                (int(employee_id), work_date, work_date, int(weekday)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return TimeRange(
                start_time=normalize_mysql_time(r["start_time"]),
                end_time=normalize_mysql_time(r["end_time"]),
            )
