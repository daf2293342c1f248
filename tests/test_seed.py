from src.hr_portal.hr_portal.core.enums import AttendanceStatus
from src.hr_portal.hr_portal.database.seed import demo_attendance, demo_employees


def test_demo_attendance_parsed_from_wire_rows():
    records = {r.id: r for r in demo_attendance()}

    assert records["ATT002"].status == AttendanceStatus.LATE
    assert records["ATT002"].check_in == "09:15"
    assert records["ATT003"].is_verified is False
    assert records["ATT005"].status == AttendanceStatus.ABSENT
    assert not records["ATT005"].is_open


def test_demo_attendance_belongs_to_demo_employees():
    known = {e.id for e in demo_employees()}

    assert all(r.employee_id in known for r in demo_attendance())
