from __future__ import annotations

from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Worksite
from .repository import WorksiteRepository


def worksite_from_row(r: Dict[str, Any], prefix: str = "") -> Worksite:
    return Worksite(
        worksite_id=int(r[f"{prefix}worksite_id"]),
        code=r[f"{prefix}code"],
        name=r[f"{prefix}name"],
        time_zone=ZoneInfo(r[f"{prefix}time_zone"]),
    )


class MySQLWorksiteRepository(WorksiteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_code(self, code: str) -> Optional[Worksite]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worksite_id, code, name, time_zone
                FROM worksites
                WHERE code=%s AND deleted=0
                """,
                (code,),
            )
            r = fetchone(cur)
            return worksite_from_row(r) if r else None
