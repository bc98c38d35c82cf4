from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.validators import contains_ci
from ..core.constants import ALL
from .model import Employee


def find_employee(employees: Iterable[Employee], employee_id: int) -> Optional[Employee]:
    return next((e for e in employees if e.employee_id == employee_id), None)


def employee_index(employees: Iterable[Employee]) -> dict[int, Employee]:
    return {e.employee_id: e for e in employees}


def filter_employees(employees: Sequence[Employee], department: str, search: str) -> list[Employee]:
    """Department match (or ``"all"``) AND search text in name, email or position.

    Keeps the order of ``employees``.
    """
    dept = getattr(department, "value", department) or ALL

    def matches(e: Employee) -> bool:
        if dept != ALL and e.department.value != dept:
            return False
        return any(contains_ci(field, search) for field in (e.first_name, e.last_name, e.email, e.position))

    return [e for e in employees if matches(e)]


def full_name_matches(employee: Optional[Employee], search: str) -> bool:
    """Case-insensitive "first last" substring match; a missing employee never matches."""
    if employee is None:
        return False
    return contains_ci(employee.full_name, search)
