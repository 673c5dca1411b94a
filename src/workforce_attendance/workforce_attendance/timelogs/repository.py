from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import TimeLog


class TimeLogRepository(Protocol):
    def search_by_employee_and_entry_range(
        self,
        *,
        employee_id: int,
        start: datetime,
        end: datetime,
    ) -> Sequence[TimeLog]:
        """Logs (open or closed) with start <= entry_time < end, ordered by entry time."""

        raise NotImplementedError

    def find_orphans_since(self, *, anchor: datetime, employee_id: int) -> Sequence[TimeLog]:
        """Closed logs with entry_time >= anchor not linked to any work shift, ordered by entry time."""

        raise NotImplementedError
