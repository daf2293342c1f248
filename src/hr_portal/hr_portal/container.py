from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_TICK_SECONDS
from .database.seed import ADMIN_EMPLOYEE, demo_attendance, demo_employees
from .users.memory_employee_repository import InMemoryEmployeeRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    attendance_service: AttendanceService

    def close(self) -> None:
        self.attendance_service.close()


def build_container(*, settings, clock: Callable[[], datetime] = now_local) -> Container:
    seed = bool(getattr(settings, "SEED_DEMO_DATA", True))

    # The admin account must exist for approvals even without demo data.
    employees = demo_employees() if seed else [ADMIN_EMPLOYEE]
    employees_repo = InMemoryEmployeeRepository(employees)
    attendance_repo = InMemoryAttendanceRepository(demo_attendance() if seed else ())

    auth_service = AuthService(
        employees_repo,
        admin_username=str(getattr(settings, "ADMIN_USERNAME")),
        admin_password_hash=str(getattr(settings, "ADMIN_PASSWORD_HASH")),
    )
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        clock=clock,
        tick_seconds=float(getattr(settings, "SESSION_TICK_SECONDS", DEFAULT_TICK_SECONDS)),
        strict_checkout=bool(getattr(settings, "STRICT_CHECKOUT", False)),
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        attendance_service=attendance_service,
    )
