from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_TICK_SECONDS, EMPTY_TIME_PLACEHOLDER
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.model import Employee
from ..users.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .session import AttendanceSession

logger = logging.getLogger(__name__)

STATUS_BADGES = {
    AttendanceStatus.PRESENT: "badge-present",
    AttendanceStatus.ABSENT: "badge-absent",
    AttendanceStatus.LATE: "badge-late",
}


class AttendanceService:
    """Use cases around the self-service attendance session.

    Keeps one :class:`AttendanceSession` per employee and re-derives it from the
    repository before every action, so the record collection stays the only
    source of truth.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        strict_checkout: bool = False,
        session_factory: Optional[Callable[[], AttendanceSession]] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock
        self._session_factory = session_factory or (
            lambda: AttendanceSession(clock=clock, tick_seconds=tick_seconds, strict_checkout=strict_checkout)
        )
        self._sessions: dict[str, AttendanceSession] = {}
        self._lock = threading.Lock()
        # Held from restore to replace_all so each action reads and writes as one step.
        self._write_lock = threading.RLock()

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")
        return employee

    def _session_for(self, employee_id: str) -> AttendanceSession:
        with self._lock:
            session = self._sessions.get(employee_id)
            if session is None:
                session = self._session_factory()
                self._sessions[employee_id] = session
            return session

    def _restored(self, employee_id: str, now: datetime) -> AttendanceSession:
        session = self._session_for(employee_id)
        session.restore_from_history(self._attendance.list_all(), employee_id, now.date())
        return session

    def status(self, employee_id: str, *, now: Optional[datetime] = None) -> dict[str, Any]:
        now = now or self._clock()
        self._require_employee(employee_id)
        with self._write_lock:
            session = self._restored(employee_id, now)
            session.refresh_elapsed(now)
            return session.snapshot()

    def check_in(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or self._clock()
        self._require_employee(employee_id)
        with self._write_lock:
            session = self._restored(employee_id, now)
            records = session.check_in(self._attendance.list_all(), employee_id, now)
            self._attendance.replace_all(records)
        return records[0]

    def check_out(self, employee_id: str, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        """Close the open session. Returns the closed record, or None if it had vanished."""
        now = now or self._clock()
        self._require_employee(employee_id)
        with self._write_lock:
            session = self._restored(employee_id, now)
            record_id = session.active_record_id
            records = session.check_out(self._attendance.list_all(), now)
            self._attendance.replace_all(records)
        return next((r for r in records if r.id == record_id), None)

    def approve(self, record_id: str, *, reviewer_id: str) -> AttendanceRecord:
        reviewer = self._require_employee(reviewer_id)
        if not reviewer.is_hr:
            raise AuthorizationError("Admin approval restricted to HR")

        with self._write_lock:
            records = self._attendance.list_all()
            target = next((r for r in records if r.id == record_id), None)
            if not target:
                raise ValidationError("Attendance record not found")
            if target.is_verified:
                raise ValidationError("Attendance record already verified")

            approved = target.verified()
            self._attendance.replace_all([approved if r.id == record_id else r for r in records])
        logger.info("Record %s verified by %s", record_id, reviewer.id)
        return approved

    def get_logs_ui(self, viewer_id: str) -> list[dict]:
        viewer = self._require_employee(viewer_id)
        return [self._to_ui(r, viewer) for r in self._attendance.list_all()]

    def _to_ui(self, r: AttendanceRecord, viewer: Employee) -> dict:
        employee = self._employees.get_by_id(r.employee_id)
        return {
            "id": r.id,
            "employee_id": r.employee_id,
            "employee_name": employee.full_name if employee else r.employee_id,
            "initials": employee.initials if employee else "",
            "date": r.date,
            "check_in": r.check_in or EMPTY_TIME_PLACEHOLDER,
            "check_out": r.check_out or EMPTY_TIME_PLACEHOLDER,
            "status": r.status.value,
            "css_class": STATUS_BADGES.get(r.status, "badge-absent"),
            "is_verified": r.is_verified,
            "verification": "Verified" if r.is_verified else "Pending Review",
            "can_approve": viewer.is_hr and not r.is_verified,
        }

    def close(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()
