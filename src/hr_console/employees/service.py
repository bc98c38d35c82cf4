from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from ..common.validators import require_choice, require_non_empty, require_non_negative, require_text
from ..core.constants import ALL
from ..core.enums import Department
from ..store.state import DomainStore, next_id
from .model import Employee, NewEmployee
from .queries import filter_employees, find_employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, store: DomainStore):
        self._store = store

    @staticmethod
    def _clean(data: NewEmployee | Employee):
        return dataclasses.replace(
            data,
            first_name=require_non_empty(data.first_name, "First name"),
            last_name=require_non_empty(data.last_name, "Last name"),
            email=require_non_empty(data.email, "Email"),
            department=require_choice(data.department, Department, "Department"),
            salary=require_non_negative(data.salary, "Salary"),
            position=require_text(data.position, "Position"),
            date_of_joining=require_text(data.date_of_joining, "Date of joining"),
            date_of_birth=require_text(data.date_of_birth, "Date of birth"),
            contact_number=require_text(data.contact_number, "Contact number"),
            emergency_contact=require_text(data.emergency_contact, "Emergency contact"),
            address=require_text(data.address, "Address"),
        )

    def list_all(self) -> tuple[Employee, ...]:
        return self._store.state.employees

    def get(self, employee_id: int) -> Optional[Employee]:
        return find_employee(self._store.state.employees, int(employee_id))

    def departments(self) -> list[Department]:
        return list(Department)

    def add(self, new_employee: NewEmployee) -> Employee:
        data = self._clean(new_employee)
        employees = self._store.state.employees
        employee = Employee(employee_id=next_id(e.employee_id for e in employees), **dataclasses.asdict(data))
        self._store.replace(employees=employees + (employee,))
        logger.info("Employee %s added (%s)", employee.employee_id, employee.full_name)
        return employee

    def update(self, employee: Employee) -> None:
        employee = self._clean(employee)
        employees = self._store.state.employees
        if find_employee(employees, employee.employee_id) is None:
            logger.debug("Update skipped: employee %s not found", employee.employee_id)
            return

        self._store.replace(
            employees=[employee if e.employee_id == employee.employee_id else e for e in employees]
        )
        logger.info("Employee %s updated", employee.employee_id)

    def delete(self, employee_id: int) -> None:
        """Remove the employee with their leave requests and attendance records in one commit."""
        employee_id = int(employee_id)
        state = self._store.state
        if find_employee(state.employees, employee_id) is None:
            logger.debug("Delete skipped: employee %s not found", employee_id)
            return

        self._store.replace(
            employees=[e for e in state.employees if e.employee_id != employee_id],
            leave_requests=[r for r in state.leave_requests if r.employee_id != employee_id],
            attendance_records=[r for r in state.attendance_records if r.employee_id != employee_id],
        )
        logger.info("Employee %s deleted with dependent leave and attendance rows", employee_id)

    def filter(self, department: str = ALL, search: str = "") -> list[Employee]:
        return filter_employees(self._store.state.employees, department, search)
