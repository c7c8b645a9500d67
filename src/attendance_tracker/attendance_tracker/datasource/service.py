from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.fetch import Fetch, guarded
from ..core.exceptions import PersistenceError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


class AttendanceDataService:
    """Upstream reads and downstream writes behind one seam.

    Reads come back as a ``Fetch`` (loading / ready / error) so callers decide
    how to surface an unavailable roster. Writes are fire-and-forget: a failed
    save raises ``PersistenceError`` and is never retried here.
    """

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceRepository):
        self._employees = employees
        self._attendance = attendance

    def fetch_employees(self) -> Fetch[list[Employee]]:
        result = guarded(lambda: list(self._employees.list_all()))
        if not result.is_ready:
            logger.warning("Employee roster unavailable: %s", result.reason)
        return result

    def fetch_employee(self, employee_id: str) -> Fetch[Optional[Employee]]:
        result = guarded(lambda: self._employees.get_by_id(str(employee_id)))
        if not result.is_ready:
            logger.warning("Employee %s unavailable: %s", employee_id, result.reason)
        return result

    def fetch_records(self) -> Fetch[list[AttendanceRecord]]:
        result = guarded(lambda: list(self._attendance.list_all()))
        if not result.is_ready:
            logger.warning("Attendance records unavailable: %s", result.reason)
        return result

    def save_records(self, records: Sequence[AttendanceRecord]) -> int:
        try:
            saved = self._attendance.save_many(records)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Could not store attendance: {e}") from e
        logger.info("Stored %d attendance record(s)", saved)
        return saved
