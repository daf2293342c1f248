from __future__ import annotations

import threading
import time
from datetime import datetime

import pytest

from src.hr_portal.hr_portal.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.hr_portal.hr_portal.attendance.model import AttendanceRecord
from src.hr_portal.hr_portal.attendance.service import AttendanceService
from src.hr_portal.hr_portal.attendance.session import AttendanceSession
from src.hr_portal.hr_portal.core.enums import AttendanceStatus, Department, EmployeeStatus
from src.hr_portal.hr_portal.core.exceptions import AuthorizationError, SessionStateError, ValidationError
from src.hr_portal.hr_portal.users.memory_employee_repository import InMemoryEmployeeRepository
from src.hr_portal.hr_portal.users.model import Employee


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeTicker:
    def __init__(self, callback):
        self.cancelled = False

    def start(self) -> None:
        pass

    def cancel(self) -> None:
        self.cancelled = True


def _employee(employee_id: str, department: Department) -> Employee:
    return Employee(
        id=employee_id,
        first_name="Ann",
        last_name="Lee",
        email=f"{employee_id.lower()}@example.com",
        mobile_number="0000",
        role="Staff",
        department=department,
        status=EmployeeStatus.ACTIVE,
        join_date="2023-01-01",
    )


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, 9, 0, 0))


@pytest.fixture
def employees():
    return InMemoryEmployeeRepository([_employee("E1", Department.ENGINEERING), _employee("HR1", Department.HR)])


@pytest.fixture
def attendance():
    return InMemoryAttendanceRepository(
        [AttendanceRecord("ATT001", "E1", "2024-04-30", "09:00", "17:30", AttendanceStatus.PRESENT)]
    )


@pytest.fixture
def tickers():
    return []


@pytest.fixture
def service(attendance, employees, clock, tickers):
    def ticker_factory(callback):
        ticker = FakeTicker(callback)
        tickers.append(ticker)
        return ticker

    return AttendanceService(
        attendance,
        employees,
        clock=clock,
        session_factory=lambda: AttendanceSession(clock=clock, ticker_factory=ticker_factory),
    )


def test_check_in_and_out_update_the_repository(service, attendance, clock):
    record = service.check_in("E1")

    assert attendance.list_all()[0] == record
    assert service.status("E1")["checkedIn"] is True

    clock.now = datetime(2024, 5, 1, 17, 30)
    closed = service.check_out("E1")

    assert closed is not None
    assert closed.check_out == "17:30"
    assert attendance.get_by_id(record.id).check_out == "17:30"
    assert service.status("E1")["state"] == "CHECKED_OUT"


def test_second_check_in_is_guarded(service):
    service.check_in("E1")

    with pytest.raises(SessionStateError):
        service.check_in("E1")


def test_status_restores_open_session_after_restart(attendance, employees, clock):
    attendance.replace_all([AttendanceRecord("ATT9", "E1", "2024-05-01", "08:00", "", AttendanceStatus.PRESENT)])
    fresh = AttendanceService(attendance, employees, clock=clock, tick_seconds=0)

    status = fresh.status("E1")

    assert status["checkedIn"] is True
    assert status["activeRecordId"] == "ATT9"
    assert status["since"] == "08:00"
    assert status["elapsed"] == "01:00:00"


def test_check_out_after_record_removed_is_rejected(service, attendance):
    service.check_in("E1")
    attendance.replace_all([])

    with pytest.raises(SessionStateError):
        service.check_out("E1")


def test_unknown_employee_rejected(service):
    with pytest.raises(ValidationError):
        service.check_in("NOPE")


def test_approve_requires_hr(service):
    with pytest.raises(AuthorizationError):
        service.approve("ATT001", reviewer_id="E1")


def test_approve_flips_flag_exactly_once(service, attendance):
    approved = service.approve("ATT001", reviewer_id="HR1")

    assert approved.is_verified is True
    assert attendance.get_by_id("ATT001").is_verified is True

    with pytest.raises(ValidationError):
        service.approve("ATT001", reviewer_id="HR1")


def test_approve_missing_record(service):
    with pytest.raises(ValidationError):
        service.approve("ATT404", reviewer_id="HR1")


def test_logs_ui_rows(service):
    service.check_in("E1")

    rows = service.get_logs_ui("HR1")

    assert rows[0]["check_out"] == "--:--"
    assert rows[0]["employee_name"] == "Ann Lee"
    assert rows[0]["initials"] == "AL"
    assert rows[0]["verification"] == "Pending Review"
    assert rows[0]["can_approve"] is True
    assert rows[1]["css_class"] == "badge-present"
    assert all(not r["can_approve"] for r in service.get_logs_ui("E1"))


def test_close_cancels_all_session_tickers(service, tickers):
    service.check_in("E1")

    service.close()

    assert tickers and all(t.cancelled for t in tickers)


class SlowReadRepository(InMemoryAttendanceRepository):
    """Pauses after every read so concurrent actions would interleave their writes."""

    def list_all(self):
        records = super().list_all()
        time.sleep(0.05)
        return records


def _run_concurrently(*calls):
    errors = []

    def runner(call):
        try:
            call()
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=runner, args=(call,)) for call in calls]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    return errors


def test_concurrent_check_ins_keep_every_record(clock):
    employees = InMemoryEmployeeRepository([_employee("E1", Department.ENGINEERING), _employee("E2", Department.SALES)])
    repo = SlowReadRepository()
    svc = AttendanceService(repo, employees, clock=clock, tick_seconds=0)

    errors = _run_concurrently(lambda: svc.check_in("E1"), lambda: svc.check_in("E2"))

    assert errors == []
    assert sorted(r.employee_id for r in repo.list_all()) == ["E1", "E2"]


def test_concurrent_check_ins_for_same_employee_create_one_record(employees, clock):
    repo = SlowReadRepository()
    svc = AttendanceService(repo, employees, clock=clock, tick_seconds=0)

    errors = _run_concurrently(lambda: svc.check_in("E1"), lambda: svc.check_in("E1"))

    assert len(errors) == 1 and isinstance(errors[0], SessionStateError)
    assert len(repo.list_all()) == 1


def test_approve_does_not_drop_concurrent_check_in(employees, clock):
    repo = SlowReadRepository(
        [AttendanceRecord("ATT001", "E1", "2024-04-30", "09:00", "17:30", AttendanceStatus.PRESENT)]
    )
    svc = AttendanceService(repo, employees, clock=clock, tick_seconds=0)

    errors = _run_concurrently(lambda: svc.check_in("E1"), lambda: svc.approve("ATT001", reviewer_id="HR1"))

    assert errors == []
    records = repo.list_all()
    assert len(records) == 2
    assert repo.get_by_id("ATT001").is_verified is True
