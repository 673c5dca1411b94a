from __future__ import annotations

from dataclasses import dataclass

from .admin.service import SettingsAdminService
from .common.datetime_utils import Clock, SystemClock
from .core.constants import DEFAULT_DAYS_UNTIL_LOCKED
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .timelogs.mysql_time_log_repository import MySQLTimeLogRepository
from .workshifts.mysql_workshift_repository import MySQLWorkShiftRepository
from .workshifts.policy import ShiftPolicy
from .workshifts.precompute_job import WorkShiftPrecomputeJob
from .workshifts.service import WorkShiftService
from .worksites.mysql_worksite_repository import MySQLWorksiteRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    worksites_repo: MySQLWorksiteRepository
    time_logs_repo: MySQLTimeLogRepository
    schedules_repo: MySQLScheduleRepository
    workshifts_repo: MySQLWorkShiftRepository

    admin_service: SettingsAdminService
    schedule_service: ScheduleService
    workshift_service: WorkShiftService
    precompute_job: WorkShiftPrecomputeJob


def build_container(*, settings, clock: Clock | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(dict(settings.DB_CONFIG)))
    clock = clock or SystemClock()

    employees_repo = MySQLEmployeeRepository(conn)
    worksites_repo = MySQLWorksiteRepository(conn)
    time_logs_repo = MySQLTimeLogRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    workshifts_repo = MySQLWorkShiftRepository(conn)

    admin_service = SettingsAdminService(getattr(settings, "DAYS_UNTIL_LOCKED", DEFAULT_DAYS_UNTIL_LOCKED))
    schedule_service = ScheduleService(schedules_repo)
    workshift_service = WorkShiftService(
        workshifts_repo,
        time_logs_repo,
        schedule_service,
        admin_service,
        clock,
        policy=ShiftPolicy.from_settings(settings),
    )
    precompute_job = WorkShiftPrecomputeJob(
        workshift_service,
        time_logs_repo,
        employees_repo,
        admin_service,
        clock,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        worksites_repo=worksites_repo,
        time_logs_repo=time_logs_repo,
        schedules_repo=schedules_repo,
        workshifts_repo=workshifts_repo,
        admin_service=admin_service,
        schedule_service=schedule_service,
        workshift_service=workshift_service,
        precompute_job=precompute_job,
    )
