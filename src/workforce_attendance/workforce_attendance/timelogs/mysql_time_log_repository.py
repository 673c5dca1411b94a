from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, to_db_datetime
from ..worksites.mysql_worksite_repository import worksite_from_row
from .model import TimeLog
from .repository import TimeLogRepository

TIME_LOG_COLUMNS = """
    t.time_log_id, t.employee_id, t.entry_time, t.exit_time, t.deleted,
    ws.worksite_id AS ws_worksite_id, ws.code AS ws_code, ws.name AS ws_name, ws.time_zone AS ws_time_zone
"""


def time_log_from_row(r: Dict[str, Any]) -> TimeLog:
    return TimeLog(
        time_log_id=int(r["time_log_id"]),
        employee_id=int(r["employee_id"]),
        worksite=worksite_from_row(r, prefix="ws_"),
        entry_time=from_db_datetime(r["entry_time"]),
        exit_time=from_db_datetime(r.get("exit_time")),
        deleted=bool(r.get("deleted")),
    )


class MySQLTimeLogRepository(TimeLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def search_by_employee_and_entry_range(
        self,
        *,
        employee_id: int,
        start: datetime,
        end: datetime,
    ) -> Sequence[TimeLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {TIME_LOG_COLUMNS}
                FROM time_logs t
                JOIN worksites ws ON ws.worksite_id = t.worksite_id
                WHERE t.employee_id=%s AND t.deleted=0
                  AND t.entry_time >= %s AND t.entry_time < %s
                ORDER BY t.entry_time ASC
                """,
                (int(employee_id), to_db_datetime(start), to_db_datetime(end)),
            )
            return [time_log_from_row(r) for r in fetchall(cur)]

    def find_orphans_since(self, *, anchor: datetime, employee_id: int) -> Sequence[TimeLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {TIME_LOG_COLUMNS}
                FROM time_logs t
                JOIN worksites ws ON ws.worksite_id = t.worksite_id
                WHERE t.employee_id=%s AND t.deleted=0
                  AND t.exit_time IS NOT NULL
                  AND t.entry_time >= %s
                  AND NOT EXISTS (
                      SELECT 1 FROM workshift_time_logs w WHERE w.time_log_id = t.time_log_id
                  )
                ORDER BY t.entry_time ASC
                """,
                (int(employee_id), to_db_datetime(anchor)),
            )
            return [time_log_from_row(r) for r in fetchall(cur)]
