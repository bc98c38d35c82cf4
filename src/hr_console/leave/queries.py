from __future__ import annotations

from typing import Sequence

from ..core.constants import ALL
from ..employees.model import Employee
from ..employees.queries import employee_index, full_name_matches
from .model import LeaveRequest


def filter_leave_requests(
    requests: Sequence[LeaveRequest],
    employees: Sequence[Employee],
    status: str,
    search: str,
) -> list[LeaveRequest]:
    """Status match (or ``"all"``) AND employee full name contains ``search``.

    Requests whose employee no longer exists are left out.
    """
    wanted = getattr(status, "value", status) or ALL
    by_id = employee_index(employees)
    return [
        r
        for r in requests
        if (wanted == ALL or r.status.value == wanted) and full_name_matches(by_id.get(r.employee_id), search)
    ]
