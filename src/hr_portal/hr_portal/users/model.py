from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import Department, EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no storage access). Membership in the HR
    department is what grants reviewer rights.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    mobile_number: str
    role: str
    department: Department
    status: EmployeeStatus
    join_date: str
    avatar_url: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}"

    @property
    def is_hr(self) -> bool:
        return self.department == Department.HR

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "mobileNumber": self.mobile_number,
            "role": self.role,
            "department": self.department.value,
            "status": self.status.value,
            "joinDate": self.join_date,
            "avatarUrl": self.avatar_url,
            "isHR": self.is_hr,
        }
