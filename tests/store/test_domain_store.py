from __future__ import annotations

from datetime import date

import pytest

from hr_console.core.enums import Department
from hr_console.employees.model import Employee
from hr_console.store.seed import build_demo_state
from hr_console.store.state import DomainState, DomainStore, next_id


def _employee(employee_id: int) -> Employee:
    return Employee(
        employee_id=employee_id,
        first_name="A",
        last_name="B",
        email="a@example.com",
        department=Department.SALES,
        position="Rep",
        salary=1,
    )


def test_next_id_starts_at_one_for_empty_collection():
    assert next_id([]) == 1


def test_next_id_is_max_plus_one_even_with_gaps():
    assert next_id([3, 101, 7]) == 102


def test_replace_builds_new_snapshot_and_keeps_old_one_intact():
    store = DomainStore()
    before = store.state

    store.replace(employees=[_employee(1)])

    assert store.state is not before
    assert before.employees == ()
    assert isinstance(store.state.employees, tuple)
    assert [e.employee_id for e in store.state.employees] == [1]


def test_replace_leaves_other_collections_untouched():
    store = DomainStore(build_demo_state(today=date(2024, 8, 20)))
    leave_before = store.state.leave_requests

    store.replace(employees=[])

    assert store.state.leave_requests is leave_before


def test_commit_rejects_non_state_values():
    with pytest.raises(TypeError):
        DomainStore().commit({"employees": ()})


def test_demo_state_has_seed_collections():
    state = build_demo_state(today=date(2024, 8, 20))

    assert isinstance(state, DomainState)
    assert [e.employee_id for e in state.employees] == [101, 102, 103, 104, 105]
    assert len(state.leave_requests) == 5
    assert state.attendance_records[-1].date == date(2024, 8, 20)
    assert state.attendance_records[0].date == date(2024, 8, 19)
    assert all(p.net_salary == round(p.gross_salary - p.deductions, 2) for p in state.payroll_records)
