"""Demo collections the console starts with."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..attendance.model import AttendanceRecord
from ..core.enums import Department, LeaveStatus, LeaveType, PayrollStatus
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..payroll.model import PayrollRecord
from ..performance.model import PerformanceRatings, PerformanceReview
from .state import DomainState


def demo_employees() -> tuple[Employee, ...]:
    return (
        Employee(
            employee_id=101,
            first_name="Jane",
            last_name="Doe",
            email="jane.doe@example.com",
            department=Department.ENGINEERING,
            position="Senior Software Engineer",
            salary=120000,
            date_of_joining="2021-06-15",
            date_of_birth="1990-05-20",
            contact_number="123-456-7890",
            emergency_contact="John Doe (Spouse) - 098-765-4321",
            address="123 Main St, Anytown, USA",
        ),
        Employee(
            employee_id=102,
            first_name="John",
            last_name="Smith",
            email="john.smith@example.com",
            department=Department.MARKETING,
            position="Marketing Manager",
            salary=95000,
            date_of_joining="2020-02-10",
            date_of_birth="1988-11-30",
            contact_number="234-567-8901",
            emergency_contact="Mary Smith (Sister) - 109-876-5432",
            address="456 Oak Ave, Anytown, USA",
        ),
        Employee(
            employee_id=103,
            first_name="Emily",
            last_name="Jones",
            email="emily.jones@example.com",
            department=Department.HUMAN_RESOURCES,
            position="HR Specialist",
            salary=75000,
            date_of_joining="2022-09-01",
            date_of_birth="1995-03-12",
            contact_number="345-678-9012",
            emergency_contact="David Jones (Father) - 210-987-6543",
            address="789 Pine Ln, Anytown, USA",
        ),
        Employee(
            employee_id=104,
            first_name="Michael",
            last_name="Brown",
            email="michael.brown@example.com",
            department=Department.SALES,
            position="Sales Representative",
            salary=80000,
            date_of_joining="2023-01-20",
            date_of_birth="1992-08-25",
            contact_number="456-789-0123",
            emergency_contact="Sarah Brown (Wife) - 321-098-7654",
            address="101 Maple Dr, Anytown, USA",
        ),
        Employee(
            employee_id=105,
            first_name="Chris",
            last_name="Lee",
            email="chris.lee@example.com",
            department=Department.ENGINEERING,
            position="DevOps Engineer",
            salary=110000,
            date_of_joining="2022-03-18",
            date_of_birth="1991-07-07",
            contact_number="567-890-1234",
            emergency_contact="Patricia Lee (Mother) - 432-109-8765",
            address="212 Birch Rd, Anytown, USA",
        ),
    )


def demo_leave_requests() -> tuple[LeaveRequest, ...]:
    return (
        LeaveRequest(1, 101, date(2024, 8, 5), date(2024, 8, 7), LeaveType.VACATION, LeaveStatus.APPROVED, "Family trip."),
        LeaveRequest(2, 102, date(2024, 7, 29), date(2024, 7, 29), LeaveType.SICK, LeaveStatus.APPROVED, "Doctor's appointment."),
        LeaveRequest(3, 105, date(2024, 8, 12), date(2024, 8, 16), LeaveType.VACATION, LeaveStatus.PENDING, "Going to the beach."),
        LeaveRequest(4, 104, date(2024, 8, 1), date(2024, 8, 2), LeaveType.PERSONAL, LeaveStatus.REJECTED, "Attending a friend's wedding."),
        LeaveRequest(5, 101, date(2024, 9, 2), date(2024, 9, 2), LeaveType.SICK, LeaveStatus.PENDING, "Feeling unwell."),
    )


def demo_attendance_records(today: date) -> tuple[AttendanceRecord, ...]:
    yesterday = today - timedelta(days=1)

    def at(day: date, h: int, m: int, s: int) -> datetime:
        return datetime.combine(day, time(h, m, s))

    return (
        AttendanceRecord(1, 101, yesterday, at(yesterday, 9, 2, 15), at(yesterday, 17, 5, 22)),
        AttendanceRecord(2, 102, yesterday, at(yesterday, 8, 55, 41), at(yesterday, 17, 3, 11)),
        # 103 never checked out yesterday
        AttendanceRecord(3, 103, yesterday, at(yesterday, 9, 15, 0), None),
        AttendanceRecord(4, 104, yesterday, at(yesterday, 9, 0, 5), at(yesterday, 17, 30, 8)),
        AttendanceRecord(5, 101, today, at(today, 9, 0, 10), None),
    )


def demo_payroll_records() -> tuple[PayrollRecord, ...]:
    start, end = date(2024, 7, 1), date(2024, 7, 31)
    monthly = {101: 10000.0, 102: 7916.67, 103: 6250.0, 104: 6666.67, 105: 9166.67}
    deductions = {101: 2500.0, 102: 1979.17, 103: 1562.5, 104: 1666.67, 105: 2291.67}
    return tuple(
        PayrollRecord(
            payroll_id=idx,
            employee_id=emp_id,
            pay_period_start=start,
            pay_period_end=end,
            gross_salary=gross,
            deductions=deductions[emp_id],
            net_salary=round(gross - deductions[emp_id], 2),
            status=PayrollStatus.PAID if emp_id != 105 else PayrollStatus.PENDING,
        )
        for idx, (emp_id, gross) in enumerate(monthly.items(), start=1)
    )


def demo_performance_reviews() -> tuple[PerformanceReview, ...]:
    return (
        PerformanceReview(
            review_id=1,
            employee_id=105,
            reviewer_id=101,
            review_date=date(2024, 6, 28),
            goals="Automate the staging deployment pipeline.",
            ratings=PerformanceRatings(quality=4, communication=3, punctuality=5, teamwork=4),
            comments="Reliable and quick to unblock others.",
            overall_score=4.0,
        ),
        PerformanceReview(
            review_id=2,
            employee_id=104,
            reviewer_id=102,
            review_date=date(2024, 6, 30),
            goals="Grow the regional client base by 10%.",
            ratings=PerformanceRatings(quality=3, communication=4, punctuality=3, teamwork=4),
            comments="Good rapport with clients; reporting needs attention.",
            overall_score=3.5,
        ),
    )


def build_demo_state(*, today: date | None = None) -> DomainState:
    return DomainState(
        employees=demo_employees(),
        leave_requests=demo_leave_requests(),
        attendance_records=demo_attendance_records(today or date.today()),
        performance_reviews=demo_performance_reviews(),
        payroll_records=demo_payroll_records(),
    )
