from __future__ import annotations

from enum import Enum


class Department(str, Enum):
    """Fixed set of departments an employee can belong to."""

    ENGINEERING = "Engineering"
    HUMAN_RESOURCES = "Human Resources"
    MARKETING = "Marketing"
    SALES = "Sales"
    FINANCE = "Finance"
    PRODUCT_MANAGEMENT = "Product Management"


class LeaveType(str, Enum):
    SICK = "Sick"
    VACATION = "Vacation"
    PERSONAL = "Personal"


class LeaveStatus(str, Enum):
    """Leave request workflow status. Any status may overwrite any other."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ClockStatus(str, Enum):
    """Derived from the latest attendance record, never stored."""

    CHECKED_IN = "Checked In"
    CHECKED_OUT = "Checked Out"


class PayrollStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
