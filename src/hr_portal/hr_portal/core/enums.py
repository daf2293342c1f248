from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status set at check-in; never recomputed from times."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class SessionState(str, Enum):
    CHECKED_OUT = "CHECKED_OUT"
    CHECKED_IN = "CHECKED_IN"


class Department(str, Enum):
    ENGINEERING = "Engineering"
    MARKETING = "Marketing"
    HR = "HR"
    SALES = "Sales"
    FINANCE = "Finance"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"
