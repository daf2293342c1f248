from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    """Process-local record store.

    Note: Nothing is persisted; the collection lives as long as the process.
    """

    def __init__(self, records: Optional[Iterable[AttendanceRecord]] = None):
        self._lock = threading.Lock()
        self._records: tuple[AttendanceRecord, ...] = tuple(records or ())

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            return list(self._records)

    def replace_all(self, records: Iterable[AttendanceRecord]) -> None:
        with self._lock:
            self._records = tuple(records)

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with self._lock:
            return next((r for r in self._records if r.id == record_id), None)
