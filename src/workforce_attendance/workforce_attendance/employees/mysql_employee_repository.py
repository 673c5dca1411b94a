from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_db_datetime
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, email
                FROM employees
                WHERE employee_id=%s AND deleted=0
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(employee_id=int(r["employee_id"]), name=r["name"], email=r.get("email"))

    def find_ids_with_orphan_time_logs(self, anchor: datetime) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT t.employee_id
                FROM time_logs t
                WHERE t.deleted=0
                  AND t.exit_time IS NOT NULL
                  AND t.entry_time >= %s
                  AND NOT EXISTS (
                      SELECT 1 FROM workshift_time_logs w WHERE w.time_log_id = t.time_log_id
                  )
                ORDER BY t.employee_id
                """,
                (to_db_datetime(anchor),),
            )
            return [int(r["employee_id"]) for r in fetchall(cur)]
