"""Example: drive the service layer directly (no Flask).

Controllers are only a thin layer; the rules live in the services.
"""

from hr_console.container import build_container
from hr_console.core.enums import LeaveStatus
from hr_console.leave.model import NewLeaveRequest


def main():
    container = build_container(seed_demo_data=True)

    container.attendance_service.check_in(102)
    print(container.attendance_service.status_map())

    leave = container.leave_service.submit(
        NewLeaveRequest(employee_id=103, start_date="2024-10-01", end_date="2024-10-03", reason="Moving house.")
    )
    container.leave_service.update_status(leave.request_id, LeaveStatus.APPROVED)
    print(container.leave_service.filter(LeaveStatus.APPROVED, "emily"))

    for row in container.attendance_service.log_ui(101):
        print(row)


if __name__ == "__main__":
    main()
