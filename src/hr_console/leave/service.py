from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_text
from ..core.constants import ALL
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import ValidationError
from ..store.state import DomainStore, next_id
from .model import LeaveRequest, NewLeaveRequest
from .queries import filter_leave_requests

logger = logging.getLogger(__name__)

MSG_NO_EMPLOYEE = "Please select an employee."
MSG_END_BEFORE_START = "End date cannot be before start date."


def validate_leave_request(request: NewLeaveRequest) -> Optional[str]:
    """Return the message to show the user, or None when the request can be submitted."""
    if not request.employee_id:
        return MSG_NO_EMPLOYEE
    try:
        start = parse_iso_date(request.start_date, "Start date")
        end = parse_iso_date(request.end_date, "End date")
    except ValidationError as e:
        return str(e)
    if start > end:
        return MSG_END_BEFORE_START
    return None


class LeaveService:
    def __init__(self, store: DomainStore):
        self._store = store

    def list_all(self) -> tuple[LeaveRequest, ...]:
        return self._store.state.leave_requests

    def submit(self, request: NewLeaveRequest) -> LeaveRequest:
        error = validate_leave_request(request)
        if error:
            raise ValidationError(error)

        requests = self._store.state.leave_requests
        leave = LeaveRequest(
            request_id=next_id(r.request_id for r in requests),
            employee_id=int(request.employee_id),
            start_date=parse_iso_date(request.start_date),
            end_date=parse_iso_date(request.end_date),
            leave_type=require_choice(request.leave_type, LeaveType, "Leave type"),
            status=LeaveStatus.PENDING,
            reason=require_text(request.reason, "Reason").strip(),
        )
        self._store.replace(leave_requests=requests + (leave,))
        logger.info("Leave request %s submitted for employee %s", leave.request_id, leave.employee_id)
        return leave

    def update_status(self, request_id: int, status: LeaveStatus) -> None:
        """Overwrite the status. No transition is refused; Approved may go back to Pending."""
        status = require_choice(status, LeaveStatus, "Status")
        request_id = int(request_id)
        requests = self._store.state.leave_requests
        if not any(r.request_id == request_id for r in requests):
            logger.debug("Status update skipped: leave request %s not found", request_id)
            return

        self._store.replace(
            leave_requests=[dataclasses.replace(r, status=status) if r.request_id == request_id else r for r in requests]
        )
        logger.info("Leave request %s set to %s", request_id, status.value)

    def filter(self, status: str = ALL, search: str = "") -> list[LeaveRequest]:
        state = self._store.state
        return filter_leave_requests(state.leave_requests, state.employees, status, search)
