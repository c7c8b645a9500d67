from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import EmploymentStatus
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee roster.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        name: str,
        department: str,
        status: EmploymentStatus,
        date_of_joining: date,
        allocated_minutes: Optional[int],
        shift_start: Optional[str],
        shift_end: Optional[str],
    ) -> str:
        raise NotImplementedError
