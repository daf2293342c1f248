"""Demo data loaded into the in-memory repositories on startup."""
from __future__ import annotations

from ..attendance.model import AttendanceRecord
from ..core.constants import ADMIN_EMPLOYEE_ID
from ..core.enums import Department, EmployeeStatus
from ..users.model import Employee

DEMO_EMPLOYEES: tuple[Employee, ...] = (
    Employee(
        id="EMP001",
        first_name="Jay",
        last_name="Sharma",
        email="jay.sharma@jayhrm.com",
        mobile_number="9876543210",
        role="Senior Engineer",
        department=Department.ENGINEERING,
        status=EmployeeStatus.ACTIVE,
        join_date="2022-03-15",
        avatar_url="https://picsum.photos/seed/jay/100/100",
    ),
    Employee(
        id="EMP002",
        first_name="Sarah",
        last_name="Connor",
        email="sarah.c@jayhrm.com",
        mobile_number="9876543211",
        role="Product Manager",
        department=Department.MARKETING,
        status=EmployeeStatus.ACTIVE,
        join_date="2021-06-01",
        avatar_url="https://picsum.photos/seed/sarah/100/100",
    ),
    Employee(
        id="EMP003",
        first_name="Michael",
        last_name="Chen",
        email="m.chen@jayhrm.com",
        mobile_number="9876543212",
        role="HR Specialist",
        department=Department.HR,
        status=EmployeeStatus.ON_LEAVE,
        join_date="2023-01-10",
        avatar_url="https://picsum.photos/seed/chen/100/100",
    ),
    Employee(
        id="EMP004",
        first_name="Emily",
        last_name="Davis",
        email="emily.d@jayhrm.com",
        mobile_number="9876543213",
        role="Sales Executive",
        department=Department.SALES,
        status=EmployeeStatus.ACTIVE,
        join_date="2023-05-20",
        avatar_url="https://picsum.photos/seed/emily/100/100",
    ),
    Employee(
        id="EMP005",
        first_name="Robert",
        last_name="Wilson",
        email="r.wilson@jayhrm.com",
        mobile_number="9876543214",
        role="Accountant",
        department=Department.FINANCE,
        status=EmployeeStatus.INACTIVE,
        join_date="2020-11-05",
        avatar_url="https://picsum.photos/seed/robert/100/100",
    ),
)

# Logs in through the admin form only, so it has no usable mobile number.
ADMIN_EMPLOYEE = Employee(
    id=ADMIN_EMPLOYEE_ID,
    first_name="Jayanth",
    last_name="Admin",
    email="jayanth@jayhrm.com",
    mobile_number="",
    role="System Administrator",
    department=Department.HR,
    status=EmployeeStatus.ACTIVE,
    join_date="2020-01-01",
)

# Wire-format rows, validated through AttendanceRecord.from_dict on load.
DEMO_ATTENDANCE: tuple[dict, ...] = (
    {"id": "ATT001", "employeeId": "EMP001", "date": "2023-10-24", "checkIn": "09:00", "checkOut": "17:30", "status": "Present", "isVerified": True},
    {"id": "ATT002", "employeeId": "EMP001", "date": "2023-10-25", "checkIn": "09:15", "checkOut": "17:45", "status": "Late", "isVerified": True},
    {"id": "ATT003", "employeeId": "EMP001", "date": "2023-10-26", "checkIn": "08:55", "checkOut": "17:30", "status": "Present", "isVerified": False},
    {"id": "ATT004", "employeeId": "EMP002", "date": "2023-10-26", "checkIn": "09:00", "checkOut": "18:00", "status": "Present", "isVerified": False},
    {"id": "ATT005", "employeeId": "EMP003", "date": "2023-10-26", "checkIn": "", "checkOut": "", "status": "Absent", "isVerified": True},
)


def demo_employees() -> list[Employee]:
    return [*DEMO_EMPLOYEES, ADMIN_EMPLOYEE]


def demo_attendance() -> list[AttendanceRecord]:
    return [AttendanceRecord.from_dict(row) for row in DEMO_ATTENDANCE]
