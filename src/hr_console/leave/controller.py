from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import fail, json_body, ok
from ..core.constants import ALL
from ..core.enums import LeaveType
from ..core.exceptions import ValidationError
from ..container import Container
from .model import NewLeaveRequest

logger = logging.getLogger(__name__)


def _employee_id(value) -> int | None:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        raise ValidationError("Please select an employee.")


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/leave-types", methods=["GET"], endpoint="list_leave_types")
    def list_leave_types():
        return ok(leave_types=list(LeaveType))

    @app.route("/api/leave", methods=["GET"], endpoint="list_leave_requests")
    def list_leave_requests():
        status = request.args.get("status", ALL)
        search = request.args.get("search", "")
        return ok(leave_requests=service.filter(status, search))

    @app.route("/api/leave", methods=["POST"], endpoint="submit_leave")
    def submit_leave():
        data = json_body()
        try:
            # Any "status" in the body is ignored: new requests are always Pending.
            leave = service.submit(
                NewLeaveRequest(
                    employee_id=_employee_id(data.get("employee_id")),
                    start_date=data.get("start_date") or "",
                    end_date=data.get("end_date") or "",
                    leave_type=data.get("leave_type") or LeaveType.VACATION,
                    reason=data.get("reason", ""),
                )
            )
            return ok(201, leave_request=leave)
        except ValidationError as e:
            return fail(str(e))
        except Exception:
            logger.exception("Unexpected error while submitting a leave request")
            return fail("System error while submitting the request", 500)

    @app.route("/api/leave/<int:request_id>/status", methods=["POST"], endpoint="update_leave_status")
    def update_leave_status(request_id: int):
        try:
            service.update_status(request_id, json_body().get("status", ""))
            return ok()
        except ValidationError as e:
            return fail(str(e))
        except Exception:
            logger.exception("Unexpected error while updating leave request %s", request_id)
            return fail("System error while updating the request", 500)
