from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import WorkShift


class WorkShiftRepository(Protocol):
    def save(self, workshift: WorkShift) -> WorkShift:
        """Persist the shift and link its time logs. Returns the shift with its id set."""

        raise NotImplementedError

    def exists_by_employee_and_date(self, *, employee_id: int, work_date: date) -> bool:
        raise NotImplementedError

    def find_by_employee_and_date(self, *, employee_id: int, work_date: date) -> Optional[WorkShift]:
        raise NotImplementedError
