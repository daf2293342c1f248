from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.constants import ADMIN_EMPLOYEE_ID
from ..core.exceptions import AuthenticationError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in as an employee (mobile number) or as the administrator."""

    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        admin_username: str,
        admin_password_hash: str,
        admin_employee_id: str = ADMIN_EMPLOYEE_ID,
    ):
        self._employees = employees
        self._admin_username = admin_username
        self._admin_password_hash = admin_password_hash
        self._admin_employee_id = admin_employee_id

    def login_employee(self, mobile_number: str) -> Employee:
        mobile_number = (mobile_number or "").strip()
        employee = self._employees.get_by_mobile_number(mobile_number) if mobile_number else None
        if not employee:
            raise AuthenticationError("Mobile number not found. Please contact HR.")
        logger.info("Employee %s logged in", employee.id)
        return employee

    def login_admin(self, username: str, password: str) -> Employee:
        try:
            ok = username == self._admin_username and check_password_hash(self._admin_password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        admin = self._employees.get_by_id(self._admin_employee_id)
        if not ok or not admin:
            raise AuthenticationError("Invalid Username or Password.")
        logger.info("Administrator %s logged in", admin.id)
        return admin

    def get_employee(self, employee_id: Optional[str]) -> Employee:
        employee = self._employees.get_by_id(require_non_empty(employee_id or "", "employee id"))
        if not employee:
            raise ValidationError("Employee not found")
        return employee
