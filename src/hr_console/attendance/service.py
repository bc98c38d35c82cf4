from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from ..common.datetime_utils import now_local
from ..core.enums import ClockStatus
from ..employees.queries import full_name_matches
from ..store.state import DomainStore, next_id
from .clock import attendance_log, clock_status, clock_status_map, format_hours_worked, latest_open_record
from .model import AttendanceRecord, RosterRow

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, store: DomainStore):
        self._store = store

    def check_in(self, employee_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        """Open a new record. A second check-in while already checked in opens another one."""
        now = now or now_local()
        employee_id = int(employee_id)
        records = self._store.state.attendance_records

        if clock_status(records, employee_id) == ClockStatus.CHECKED_IN:
            logger.warning("Employee %s checked in again without checking out", employee_id)

        record = AttendanceRecord(
            record_id=next_id(r.record_id for r in records),
            employee_id=employee_id,
            date=now.date(),
            check_in_time=now,
            check_out_time=None,
        )
        self._store.replace(attendance_records=records + (record,))
        logger.info("Employee %s checked in at %s", employee_id, now.isoformat(timespec="seconds"))
        return record

    def check_out(self, employee_id: int, *, now: datetime | None = None) -> None:
        """Close the employee's most recent open record. No-op when nothing is open."""
        now = now or now_local()
        employee_id = int(employee_id)
        records = self._store.state.attendance_records

        target = latest_open_record(records, employee_id)
        if target is None:
            logger.debug("Check-out skipped: employee %s has no open record", employee_id)
            return

        self._store.replace(
            attendance_records=[
                dataclasses.replace(r, check_out_time=now) if r.record_id == target.record_id else r for r in records
            ]
        )
        logger.info("Employee %s checked out at %s", employee_id, now.isoformat(timespec="seconds"))

    def status(self, employee_id: int) -> ClockStatus:
        return clock_status(self._store.state.attendance_records, int(employee_id))

    def status_map(self) -> dict[int, ClockStatus]:
        state = self._store.state
        return clock_status_map(state.employees, state.attendance_records)

    def roster(self, search: str = "") -> list[RosterRow]:
        """Employees whose full name contains ``search``, each with their clock status."""
        state = self._store.state
        statuses = clock_status_map(state.employees, state.attendance_records)
        return [
            RosterRow(employee=e, status=statuses[e.employee_id])
            for e in state.employees
            if full_name_matches(e, search)
        ]

    def log(self, employee_id: int) -> list[AttendanceRecord]:
        return attendance_log(self._store.state.attendance_records, int(employee_id))

    def log_ui(self, employee_id: int) -> list[dict]:
        return [self._to_ui(r) for r in self.log(employee_id)]

    @staticmethod
    def _to_ui(r: AttendanceRecord) -> dict:
        return {
            "record_id": r.record_id,
            "date": r.date.strftime("%Y-%m-%d"),
            "check_in": r.check_in_time.strftime("%H:%M"),
            "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "N/A",
            "hours_worked": format_hours_worked(r.check_in_time, r.check_out_time),
        }
