from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    def list_payroll():
        return ok(payroll_records=service.filter(request.args.get("search", "")))

    @app.route("/api/payroll/<int:payroll_id>/payslip", methods=["GET"], endpoint="payslip")
    def payslip(payroll_id: int):
        slip = service.payslip(payroll_id)
        if not slip:
            return fail("Payroll record not found", 404)
        return ok(payslip=slip)
