"""In-memory domain store.

The store owns every collection. Each collection is a tuple of frozen
records, and a mutation always builds a new ``DomainState`` and swaps it in
with a single assignment, so readers see either the old snapshot or the new
one and can detect change by identity (``old is not store.state``).
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..payroll.model import PayrollRecord
from ..performance.model import PerformanceReview

logger = logging.getLogger(__name__)


def next_id(ids: Iterable[int]) -> int:
    """max(existing ids, default 0) + 1."""
    return max(ids, default=0) + 1


@dataclass(frozen=True)
class DomainState:
    """Point-in-time snapshot of all collections."""

    employees: tuple[Employee, ...] = ()
    leave_requests: tuple[LeaveRequest, ...] = ()
    attendance_records: tuple[AttendanceRecord, ...] = ()
    performance_reviews: tuple[PerformanceReview, ...] = ()
    payroll_records: tuple[PayrollRecord, ...] = ()


class DomainStore:
    def __init__(self, initial_state: DomainState | None = None):
        self._state = initial_state or DomainState()

    @property
    def state(self) -> DomainState:
        return self._state

    def commit(self, new_state: DomainState) -> DomainState:
        if not isinstance(new_state, DomainState):
            raise TypeError("commit() expects a DomainState")
        self._state = new_state
        logger.debug(
            "Committed snapshot: %d employees, %d leave requests, %d attendance records, "
            "%d reviews, %d payroll records",
            len(new_state.employees),
            len(new_state.leave_requests),
            len(new_state.attendance_records),
            len(new_state.performance_reviews),
            len(new_state.payroll_records),
        )
        return new_state

    def replace(self, **collections) -> DomainState:
        """Replace one or more whole collections in a single commit."""
        frozen = {name: tuple(items) for name, items in collections.items()}
        return self.commit(dataclasses.replace(self._state, **frozen))
