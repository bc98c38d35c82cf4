"""Pure functions over attendance records.

Nothing here touches the store; pass in the current snapshot's collections.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.constants import HOURS_ABSENT, HOURS_INVALID
from ..core.enums import ClockStatus
from ..employees.model import Employee
from .model import AttendanceRecord


def records_for(records: Iterable[AttendanceRecord], employee_id: int) -> list[AttendanceRecord]:
    return [r for r in records if r.employee_id == employee_id]


def latest_record(records: Iterable[AttendanceRecord]) -> Optional[AttendanceRecord]:
    """Record with the greatest check-in time, or None."""
    return max(records, key=lambda r: r.check_in_time, default=None)


def latest_open_record(records: Iterable[AttendanceRecord], employee_id: int) -> Optional[AttendanceRecord]:
    return latest_record(r for r in records_for(records, employee_id) if r.is_open)


def clock_status(records: Iterable[AttendanceRecord], employee_id: int) -> ClockStatus:
    """Checked In when the employee's latest record has no check-out, else Checked Out."""
    latest = latest_record(records_for(records, employee_id))
    if latest is not None and latest.is_open:
        return ClockStatus.CHECKED_IN
    return ClockStatus.CHECKED_OUT


def clock_status_map(employees: Iterable[Employee], records: Sequence[AttendanceRecord]) -> dict[int, ClockStatus]:
    return {e.employee_id: clock_status(records, e.employee_id) for e in employees}


def hours_worked(check_in: datetime, check_out: Optional[datetime]) -> Optional[float]:
    """(check_out - check_in) in hours, 2 decimals. None while still checked in.

    May be negative; ``format_hours_worked`` reports that as Invalid.
    """
    if check_out is None:
        return None
    return round((check_out - check_in).total_seconds() / 3600, 2)


def format_hours_worked(check_in: datetime, check_out: Optional[datetime]) -> str:
    hours = hours_worked(check_in, check_out)
    if hours is None:
        return HOURS_ABSENT
    if check_out < check_in:
        return HOURS_INVALID
    return f"{hours:.2f} hrs"


def attendance_log(records: Iterable[AttendanceRecord], employee_id: int) -> list[AttendanceRecord]:
    """Employee's records, newest first by (date, check_in_time)."""
    return sorted(records_for(records, employee_id), key=lambda r: (r.date, r.check_in_time), reverse=True)
