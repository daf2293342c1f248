import pytest
from werkzeug.security import generate_password_hash

from src.hr_portal.hr_portal.core.exceptions import AuthenticationError, ValidationError
from src.hr_portal.hr_portal.database.seed import demo_employees
from src.hr_portal.hr_portal.users.memory_employee_repository import InMemoryEmployeeRepository
from src.hr_portal.hr_portal.users.service import AuthService


@pytest.fixture
def auth():
    return AuthService(
        InMemoryEmployeeRepository(demo_employees()),
        admin_username="admin",
        admin_password_hash=generate_password_hash("secret"),
    )


def test_employee_login_by_mobile_number(auth):
    employee = auth.login_employee(" 9876543212 ")

    assert employee.id == "EMP003"
    assert employee.is_hr


def test_unknown_mobile_number_rejected(auth):
    with pytest.raises(AuthenticationError, match="Mobile number not found"):
        auth.login_employee("1111111111")


def test_blank_mobile_number_does_not_match_admin(auth):
    with pytest.raises(AuthenticationError):
        auth.login_employee("")


def test_admin_login(auth):
    admin = auth.login_admin("admin", "secret")

    assert admin.id == "ADMIN001"
    assert admin.is_hr


@pytest.mark.parametrize("username,password", [("admin", "wrong"), ("root", "secret"), ("", "")])
def test_admin_login_rejects_bad_credentials(auth, username, password):
    with pytest.raises(AuthenticationError, match="Invalid Username or Password."):
        auth.login_admin(username, password)


def test_admin_login_fails_without_configured_hash():
    auth = AuthService(InMemoryEmployeeRepository(demo_employees()), admin_username="admin", admin_password_hash="")

    with pytest.raises(AuthenticationError):
        auth.login_admin("admin", "")


def test_get_employee_unknown(auth):
    with pytest.raises(ValidationError):
        auth.get_employee("EMP999")
