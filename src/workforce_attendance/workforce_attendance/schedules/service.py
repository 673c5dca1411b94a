from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.validators import require_not_none
from ..employees.model import Employee
from .model import TimeRange
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = require_not_none(schedules, "schedules")

    def find_time_range_for_employee_by_date(self, employee: Employee, work_date: date) -> Optional[TimeRange]:
        require_not_none(employee, "employee")
        require_not_none(work_date, "work_date")
        logger.debug("Finding time range for employee %s on %s", employee.employee_id, work_date)
        return self._schedules.find_time_range_for_date(
            employee_id=employee.employee_id,
            work_date=work_date,
            weekday=work_date.isoweekday(),
        )
