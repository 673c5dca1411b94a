from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Sequence

from ..admin.service import AdminService
from ..common.datetime_utils import Clock, day_bounds, local_date
from ..common.validators import require_not_none
from ..core.exceptions import DomainError, ResourceNotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..timelogs.model import TimeLog
from ..timelogs.repository import TimeLogRepository
from ..worksites.model import Worksite
from .service import WorkShiftService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bucket:
    """Orphan logs of one employee at one worksite on one local calendar day."""

    worksite: Worksite
    work_date: date
    time_logs: tuple[TimeLog, ...]


@dataclass
class PrecomputeReport:
    target_anchor: datetime
    employees_seen: int = 0
    workshifts_saved: int = 0
    buckets_skipped: int = 0
    failed_employee_ids: list[int] = field(default_factory=list)


def bucket_time_logs(time_logs: Sequence[TimeLog]) -> list[Bucket]:
    """Greedy split of ordered logs into (worksite, local day) buckets.

    The first pending log fixes the bucket's worksite and the local calendar day of its
    entry. Every later log at that worksite entering before the end of that day joins
    the bucket; logs from other worksites stay pending, in order, for the next buckets.
    """
    buckets: list[Bucket] = []
    pending = list(time_logs)
    while pending:
        first = pending[0]
        worksite = first.worksite
        work_date = local_date(first.entry_time, worksite.time_zone)
        day_start, day_end = day_bounds(work_date, worksite.time_zone)

        selected = [first]
        remaining: list[TimeLog] = []
        for index in range(1, len(pending)):
            candidate = pending[index]
            if candidate.entry_time >= day_end:
                remaining.extend(pending[index:])
                break
            if candidate.worksite == worksite and candidate.entry_time >= day_start:
                selected.append(candidate)
            else:
                remaining.append(candidate)

        buckets.append(Bucket(worksite=worksite, work_date=work_date, time_logs=tuple(selected)))
        pending = remaining
    return buckets


class WorkShiftPrecomputeJob:
    """Nightly batch: materialize work shifts from orphan time logs.

    Only logs not yet linked to a shift are read, so re-running after a partial
    failure picks up exactly the logs that are still pending.
    """

    def __init__(
        self,
        workshift_service: WorkShiftService,
        time_logs: TimeLogRepository,
        employees: EmployeeRepository,
        admin_service: AdminService,
        clock: Clock,
    ):
        self._workshifts = require_not_none(workshift_service, "workshift_service")
        self._time_logs = require_not_none(time_logs, "time_logs")
        self._employees = require_not_none(employees, "employees")
        self._admin = require_not_none(admin_service, "admin_service")
        self._clock = require_not_none(clock, "clock")

    def run(self) -> PrecomputeReport:
        days_until_locked = self._admin.get_days_until_locked()
        target = self._clock.now() - timedelta(days=days_until_locked + 1)
        logger.debug("WorkShift precompute started; days_until_locked=%s target_anchor=%s", days_until_locked, target)

        report = PrecomputeReport(target_anchor=target)
        employee_ids = self._employees.find_ids_with_orphan_time_logs(target)
        logger.debug("Pending employees count=%s", len(employee_ids))

        for employee_id in employee_ids:
            report.employees_seen += 1
            try:
                self._process_employee(employee_id, target, report)
            except DomainError:
                logger.exception("WorkShift precompute failed for employee %s", employee_id)
                report.failed_employee_ids.append(employee_id)

        logger.info(
            "WorkShift precompute finished; employees=%s saved=%s skipped=%s failed=%s",
            report.employees_seen,
            report.workshifts_saved,
            report.buckets_skipped,
            len(report.failed_employee_ids),
        )
        return report

    def _process_employee(self, employee_id: int, target: datetime, report: PrecomputeReport) -> None:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise ResourceNotFoundError(f"Employee {employee_id} not found")

        orphans = list(self._time_logs.find_orphans_since(anchor=target, employee_id=employee_id))
        if not orphans:
            # Reported as pending but nothing to read: the reporting query raced with another writer.
            logger.warning("No orphan time logs for employee %s at target_anchor %s", employee_id, target)
            return
        logger.debug("Orphan time logs for employee %s count=%s", employee_id, len(orphans))

        orphans.sort(key=lambda log: log.entry_time)
        for bucket in bucket_time_logs(orphans):
            self._save_bucket(employee, bucket, report)

    def _save_bucket(self, employee: Employee, bucket: Bucket, report: PrecomputeReport) -> None:
        if self._workshifts.exists(employee, bucket.work_date):
            logger.warning(
                "WorkShift already materialized for employee %s on %s; %s log(s) at %s left unlinked",
                employee.employee_id,
                bucket.work_date,
                len(bucket.time_logs),
                bucket.worksite,
            )
            report.buckets_skipped += 1
            return

        workshift = self._workshifts.build_work_shift(employee, bucket.worksite, bucket.work_date, bucket.time_logs)
        saved = self._workshifts.save(workshift)
        report.workshifts_saved += 1
        logger.debug("WorkShift persisted with id %s (%s logs)", saved.workshift_id, len(saved.time_logs))
