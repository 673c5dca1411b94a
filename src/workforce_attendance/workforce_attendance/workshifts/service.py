from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Sequence

from ..admin.service import AdminService
from ..common.datetime_utils import Clock, local_date, start_of_day
from ..common.validators import require_not_none
from ..core.constants import LOOKAHEAD_DAYS, LOOKBEHIND_DAYS
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..schedules.service import ScheduleService
from ..timelogs.model import TimeLog
from ..timelogs.repository import TimeLogRepository
from ..timelogs.time_logs import TimeLogs
from ..worksites.model import Worksite
from .composer import WorkShiftComposer
from .factory import ShiftInferenceStrategyResolver
from .model import WorkShift
from .policy import ShiftPolicy
from .repository import WorkShiftRepository

logger = logging.getLogger(__name__)


class WorkShiftService:
    def __init__(
        self,
        workshifts: WorkShiftRepository,
        time_logs: TimeLogRepository,
        schedule_service: ScheduleService,
        admin_service: AdminService,
        clock: Clock,
        *,
        policy: ShiftPolicy | None = None,
        resolver: ShiftInferenceStrategyResolver | None = None,
    ):
        self._workshifts = require_not_none(workshifts, "workshifts")
        self._time_logs = require_not_none(time_logs, "time_logs")
        self._schedules = require_not_none(schedule_service, "schedule_service")
        self._admin = require_not_none(admin_service, "admin_service")
        self._clock = require_not_none(clock, "clock")
        self._policy = policy or ShiftPolicy.default()
        self._resolver = resolver or ShiftInferenceStrategyResolver()

    def save(self, workshift: WorkShift) -> WorkShift:
        require_not_none(workshift, "workshift")
        logger.debug("Saving %s", workshift)
        return self._workshifts.save(workshift)

    def exists(self, employee: Employee, work_date: date) -> bool:
        return self._workshifts.exists_by_employee_and_date(employee_id=employee.employee_id, work_date=work_date)

    def find_work_shift(self, employee: Employee, worksite: Worksite, work_date: date) -> WorkShift:
        """Shift of an employee on a date.

        Once the day is past the lock horizon the materialized shift (if any) is returned
        as stored; otherwise it is rebuilt from the logs around that date.
        """
        require_not_none(employee, "employee")
        require_not_none(worksite, "worksite")
        require_not_none(work_date, "work_date")
        logger.debug("Finding work shift for employee %s at %s on %s", employee.employee_id, worksite, work_date)

        zone = worksite.time_zone
        today = local_date(self._clock.now(), zone)
        if work_date + timedelta(days=self._admin.get_days_until_locked()) <= today:
            stored = self._workshifts.find_by_employee_and_date(
                employee_id=employee.employee_id, work_date=work_date
            )
            if stored is not None:
                return stored
            # Not a warning: the employee may not have worked that day.
            logger.debug("No materialized work shift for employee %s on %s", employee.employee_id, work_date)

        day_start = start_of_day(work_date, zone)
        start = day_start - timedelta(days=LOOKBEHIND_DAYS)
        end = day_start + timedelta(days=LOOKAHEAD_DAYS)
        logger.debug("Querying time logs in [%s, %s)", start, end)
        logs = self._time_logs.search_by_employee_and_entry_range(
            employee_id=employee.employee_id, start=start, end=end
        )
        return self.build_work_shift(employee, worksite, work_date, logs)

    def find_work_shifts(self, employee: Employee, worksite: Worksite, start: date, end: date) -> list[WorkShift]:
        """One shift per day in [start, end]."""
        if end < start:
            raise ValidationError("end must not be before start")
        days = (end - start).days + 1
        return [self.find_work_shift(employee, worksite, start + timedelta(days=i)) for i in range(days)]

    def build_work_shift(
        self,
        employee: Employee,
        worksite: Worksite,
        work_date: date,
        time_logs: Sequence[TimeLog],
    ) -> WorkShift:
        require_not_none(employee, "employee")
        require_not_none(worksite, "worksite")
        require_not_none(work_date, "work_date")
        require_not_none(time_logs, "time_logs")
        logger.debug("Building work shift for employee %s at %s on %s", employee.employee_id, worksite, work_date)

        closed = [log for log in time_logs if log.is_closed()]
        if len(closed) != len(time_logs):
            logger.debug("Ignoring %s open time log(s)", len(time_logs) - len(closed))
        if not closed:
            return WorkShift.skeleton(employee, work_date, worksite)

        time_range = self._schedules.find_time_range_for_employee_by_date(employee, work_date)
        strategy = self._resolver.resolve(time_range, worksite, self._policy)
        return WorkShiftComposer(strategy).compose(employee, work_date, TimeLogs(closed), worksite=worksite)
