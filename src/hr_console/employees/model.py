from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Department


@dataclass(frozen=True)
class NewEmployee:
    """Employee form data before an id has been assigned."""

    first_name: str
    last_name: str
    email: str
    department: Department
    position: str = ""
    salary: float = 0.0
    date_of_joining: str = ""
    date_of_birth: str = ""
    contact_number: str = ""
    emergency_contact: str = ""
    address: str = ""


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Date fields are kept as the free-form strings entered in the form.
    """

    employee_id: int
    first_name: str
    last_name: str
    email: str
    department: Department
    position: str
    salary: float
    date_of_joining: str = ""
    date_of_birth: str = ""
    contact_number: str = ""
    emergency_contact: str = ""
    address: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
