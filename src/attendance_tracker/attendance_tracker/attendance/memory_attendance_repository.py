from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self.save_many(list(records))

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._by_key.values())

    def save_many(self, records: Sequence[AttendanceRecord]) -> int:
        for r in records:
            self._by_key[r.key] = r
        return len(records)
