from __future__ import annotations

from typing import Any, Dict

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import ResourceNotFoundError, ValidationError
from ..timelogs.model import TimeLog
from .model import WorkShift


def time_log_to_dict(log: TimeLog) -> Dict[str, Any]:
    return {
        "time_log_id": log.time_log_id,
        "worksite": log.worksite.code,
        "entry_time": log.entry_time.isoformat(),
        "exit_time": log.exit_time.isoformat() if log.exit_time else None,
    }


def workshift_to_dict(workshift: WorkShift) -> Dict[str, Any]:
    return {
        "workshift_id": workshift.workshift_id,
        "employee_id": workshift.employee.employee_id,
        "date": workshift.date.isoformat(),
        "worksite": workshift.worksite.code if workshift.worksite else None,
        "total_work_seconds": int(workshift.total_work_time.total_seconds()),
        "total_pause_seconds": int(workshift.total_pause_time.total_seconds()),
        "time_logs": [time_log_to_dict(log) for log in workshift.time_logs],
    }


def register(app: Flask, container) -> None:
    def _parse_date_arg(name: str):
        value = request.args.get(name)
        if not value:
            raise ValidationError(f"Missing query parameter '{name}'")
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"Invalid date for '{name}': {value!r} (expected YYYY-MM-DD)")

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(ResourceNotFoundError)
    def handle_not_found(e: ResourceNotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/v1/employees/<int:employee_id>/workshifts", methods=["GET"], endpoint="api_employee_workshifts")
    def employee_workshifts(employee_id: int):
        code = require_non_empty(request.args.get("worksite") or "", "worksite")

        employee = container.employees_repo.get_by_id(employee_id)
        if employee is None:
            raise ResourceNotFoundError(f"Employee {employee_id} not found")
        worksite = container.worksites_repo.get_by_code(code)
        if worksite is None:
            raise ResourceNotFoundError(f"Worksite {code!r} not found")

        service = container.workshift_service
        if request.args.get("date"):
            workshifts = [service.find_work_shift(employee, worksite, _parse_date_arg("date"))]
        else:
            workshifts = service.find_work_shifts(employee, worksite, _parse_date_arg("start"), _parse_date_arg("end"))

        return jsonify({"success": True, "workshifts": [workshift_to_dict(w) for w in workshifts]}), 200
