from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.validators import require_not_none
from ..employees.model import Employee
from ..timelogs.time_logs import TimeLogs
from ..worksites.model import Worksite
from .intervals import TimeInterval, TimeIntervals
from .model import WorkShift
from .strategies.base import ShiftInferenceStrategy

logger = logging.getLogger(__name__)


class WorkShiftComposer:
    """Aggregate the logs selected by a strategy into a WorkShift with its totals.

    Work time is the time covered by the selected logs, pause time the sum of the
    gaps between consecutive ones. Logs in a TimeLogs never overlap, so the covered
    time equals the sum of each log's duration.
    """

    def __init__(self, strategy: ShiftInferenceStrategy):
        self._strategy = require_not_none(strategy, "strategy")

    def compose(
        self,
        employee: Employee,
        work_date: date,
        ordered_logs: TimeLogs,
        *,
        worksite: Optional[Worksite] = None,
    ) -> WorkShift:
        require_not_none(employee, "employee")
        require_not_none(work_date, "work_date")
        require_not_none(ordered_logs, "ordered_logs")

        if ordered_logs.is_empty():
            return WorkShift.skeleton(employee, work_date, worksite)

        selected = self._strategy.infer(work_date, ordered_logs)
        if selected.is_empty():
            logger.debug("No logs selected for employee %s on %s", employee.employee_id, work_date)
            return WorkShift.skeleton(employee, work_date, worksite)

        intervals = TimeIntervals(TimeInterval(log.entry_time, log.exit_time) for log in selected)
        shift = WorkShift(
            employee=employee,
            date=work_date,
            time_logs=tuple(selected),
            total_work_time=intervals.total_covered_duration(),
            total_pause_time=intervals.total_gap_duration(),
            worksite=worksite,
        )
        logger.debug("Composed %s: logs=%s work=%s pause=%s",
                     shift, len(shift.time_logs), shift.total_work_time, shift.total_pause_time)
        return shift
