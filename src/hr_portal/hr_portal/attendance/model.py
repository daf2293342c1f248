from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_hhmm, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one calendar-day attendance entry for one employee.

    ``date`` is ``YYYY-MM-DD`` and the times are ``HH:MM`` strings. Empty
    ``check_out`` means the session is still open.
    """

    id: str
    employee_id: str
    date: str
    check_in: str
    check_out: str
    status: AttendanceStatus
    is_verified: bool = False

    @property
    def is_open(self) -> bool:
        return bool(self.check_in) and not self.check_out

    @property
    def sort_key(self) -> tuple[str, str]:
        return self.date, self.check_in

    def with_check_out(self, check_out: str) -> "AttendanceRecord":
        return replace(self, check_out=check_out)

    def verified(self) -> "AttendanceRecord":
        return replace(self, is_verified=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": self.date,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "status": self.status.value,
            "isVerified": self.is_verified,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        try:
            status = AttendanceStatus(data.get("status", AttendanceStatus.PRESENT.value))
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {data.get('status')!r}") from None

        record_date = require_non_empty(str(data.get("date", "")), "date")
        try:
            parse_iso_date(record_date)
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD") from None

        return cls(
            id=require_non_empty(str(data.get("id", "")), "id"),
            employee_id=require_non_empty(str(data.get("employeeId", "")), "employeeId"),
            date=record_date,
            check_in=require_hhmm(str(data.get("checkIn") or ""), "checkIn"),
            check_out=require_hhmm(str(data.get("checkOut") or ""), "checkOut"),
            status=status,
            is_verified=bool(data.get("isVerified", False)),
        )
