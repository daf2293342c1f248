from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Owner of the shared attendance record collection.

    The session core never writes to a store itself: it receives the full
    collection, builds a new one and hands it back through ``replace_all``.
    """

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def replace_all(self, records: Iterable[AttendanceRecord]) -> None:
        raise NotImplementedError
