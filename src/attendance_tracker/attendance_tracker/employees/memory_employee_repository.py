from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import EmploymentStatus
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Roster kept in process memory, ordered by registration."""

    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[str, Employee] = {}
        for e in employees:
            self._by_id[e.employee_id] = e

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(str(employee_id))

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
        employee_id = str(self._next_id())
        self._by_id[employee_id] = Employee(
            employee_id=employee_id,
            name=name,
            department=department,
            status=status,
            date_of_joining=date_of_joining,
            allocated_minutes=allocated_minutes,
            shift_start=shift_start,
            shift_end=shift_end,
        )
        return employee_id

    def _next_id(self) -> int:
        numeric = [int(k) for k in self._by_id if k.isdigit()]
        return max(numeric, default=0) + 1
