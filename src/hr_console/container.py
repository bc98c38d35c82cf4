from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .employees.service import EmployeeService
from .leave.service import LeaveService
from .payroll.service import PayrollService
from .performance.service import PerformanceService
from .store.seed import build_demo_state
from .store.state import DomainState, DomainStore


@dataclass(frozen=True)
class Container:
    store: DomainStore

    employee_service: EmployeeService
    leave_service: LeaveService
    attendance_service: AttendanceService
    performance_service: PerformanceService
    payroll_service: PayrollService


def build_container(*, seed_demo_data: bool = True, initial_state: DomainState | None = None) -> Container:
    if initial_state is None:
        initial_state = build_demo_state() if seed_demo_data else DomainState()
    store = DomainStore(initial_state)

    return Container(
        store=store,
        employee_service=EmployeeService(store),
        leave_service=LeaveService(store),
        attendance_service=AttendanceService(store),
        performance_service=PerformanceService(store),
        payroll_service=PayrollService(store),
    )
