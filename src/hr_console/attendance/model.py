from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ClockStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in/check-out pair.

    ``check_out_time`` is None while the employee is still checked in.
    """

    record_id: int
    employee_id: int
    date: date
    check_in_time: datetime
    check_out_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None


@dataclass(frozen=True)
class RosterRow:
    """Read-model for the attendance board: an employee and their clock status."""

    employee: Employee
    status: ClockStatus
