from __future__ import annotations

from typing import Optional

from ..employees.queries import employee_index, find_employee, full_name_matches
from ..store.state import DomainStore
from .model import PayrollRecord, Payslip


class PayrollService:
    """Read-only queries over payroll records. Nothing here changes the store."""

    def __init__(self, store: DomainStore):
        self._store = store

    def list_all(self) -> tuple[PayrollRecord, ...]:
        return self._store.state.payroll_records

    def filter(self, search: str = "") -> list[PayrollRecord]:
        """Records whose employee's full name contains ``search``; orphans are left out."""
        state = self._store.state
        by_id = employee_index(state.employees)
        return [r for r in state.payroll_records if full_name_matches(by_id.get(r.employee_id), search)]

    def payslip(self, payroll_id: int) -> Optional[Payslip]:
        state = self._store.state
        record = next((r for r in state.payroll_records if r.payroll_id == int(payroll_id)), None)
        if record is None:
            return None
        employee = find_employee(state.employees, record.employee_id)
        if employee is None:
            return None
        return Payslip(employee=employee, record=record)
