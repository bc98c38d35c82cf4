from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    employees = container.employee_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_roster")
    def attendance_roster():
        rows = service.roster(request.args.get("search", ""))
        return ok(roster=[{"employee": r.employee, "status": r.status} for r in rows])

    @app.route("/api/attendance/<int:employee_id>/check-in", methods=["POST"], endpoint="check_in")
    def check_in(employee_id: int):
        if not employees.get(employee_id):
            return fail("Employee not found", 404)
        record = service.check_in(employee_id)
        return ok(record=record, clock_status=service.status(employee_id))

    @app.route("/api/attendance/<int:employee_id>/check-out", methods=["POST"], endpoint="check_out")
    def check_out(employee_id: int):
        service.check_out(employee_id)
        return ok(clock_status=service.status(employee_id))

    @app.route("/api/attendance/<int:employee_id>/log", methods=["GET"], endpoint="attendance_log")
    def attendance_log(employee_id: int):
        employee = employees.get(employee_id)
        if not employee:
            return fail("Employee not found", 404)
        return ok(employee=employee, records=service.log_ui(employee_id))
