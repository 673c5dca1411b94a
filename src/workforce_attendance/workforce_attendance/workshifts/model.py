from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from ..employees.model import Employee
from ..timelogs.model import TimeLog
from ..worksites.model import Worksite


@dataclass(frozen=True)
class WorkShift:
    """Domain aggregate: one continuous period of attendance of an employee on a calendar day.

    Identity is (employee, date); at most one materialized shift per employee per day.
    """

    employee: Employee
    date: date
    time_logs: tuple[TimeLog, ...] = ()
    total_work_time: timedelta = timedelta(0)
    total_pause_time: timedelta = timedelta(0)
    worksite: Optional[Worksite] = None
    workshift_id: Optional[int] = field(default=None, compare=False)

    @classmethod
    def skeleton(cls, employee: Employee, work_date: date, worksite: Optional[Worksite] = None) -> "WorkShift":
        """Shift with no logs and zero totals: no attendance that day."""
        return cls(employee=employee, date=work_date, worksite=worksite)

    @property
    def identity(self) -> tuple[int, date]:
        return (self.employee.employee_id, self.date)

    def is_empty(self) -> bool:
        return not self.time_logs

    def __str__(self) -> str:
        return f"WorkShift[id={self.workshift_id}, employee={self.employee.employee_id}, date={self.date}]"
