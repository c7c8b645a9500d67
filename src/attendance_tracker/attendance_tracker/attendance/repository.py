from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def save_many(self, records: Sequence[AttendanceRecord]) -> int:
        """Insert or replace by (employee_id, work_date). Returns rows written."""

        raise NotImplementedError
