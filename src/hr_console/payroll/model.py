from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import PayrollStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class PayrollRecord:
    payroll_id: int
    employee_id: int
    pay_period_start: date
    pay_period_end: date
    gross_salary: float
    deductions: float
    net_salary: float
    status: PayrollStatus


@dataclass(frozen=True)
class Payslip:
    """Read-model behind the payslip view."""

    employee: Employee
    record: PayrollRecord
