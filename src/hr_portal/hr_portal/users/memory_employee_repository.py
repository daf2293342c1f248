from __future__ import annotations

from typing import Iterable, Optional

from .model import Employee


class InMemoryEmployeeRepository:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[str, Employee] = {e.id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_mobile_number(self, mobile_number: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.mobile_number == mobile_number), None)
