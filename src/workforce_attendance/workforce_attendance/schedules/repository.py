from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import TimeRange


class ScheduleRepository(Protocol):
    def find_time_range_for_date(self, *, employee_id: int, work_date: date, weekday: int) -> Optional[TimeRange]:
        """Time range of the schedule rule active for the employee on that date.

        `weekday` follows `date.isoweekday()` (Monday=1 ... Sunday=7).
        """

        raise NotImplementedError
