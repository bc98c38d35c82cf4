from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class NewLeaveRequest:
    """Leave form data. Status is not part of the form; new requests are always Pending.

    ``employee_id`` is None (or 0) when no employee has been selected yet.
    Dates may be given as ISO strings; they are compared as dates.
    """

    employee_id: Optional[int]
    start_date: date | str
    end_date: date | str
    leave_type: LeaveType = LeaveType.VACATION
    reason: str = ""


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    leave_type: LeaveType
    status: LeaveStatus
    reason: str = ""
