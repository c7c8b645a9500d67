from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.dates import format_form_date
from ..common.timeutils import format_hhmm
from ..core.enums import EmploymentStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: a registered employee.

    Note: plain data object; allocated hours are kept in minutes and only
    rendered as HH:MM at the edges.
    """

    employee_id: str
    name: str
    department: str
    status: EmploymentStatus
    date_of_joining: date
    allocated_minutes: Optional[int] = None
    shift_start: Optional[str] = None
    shift_end: Optional[str] = None

    @property
    def allocated_hours(self) -> Optional[str]:
        if self.allocated_minutes is None:
            return None
        return format_hhmm(self.allocated_minutes)

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "status": self.status.value,
            "doj": format_form_date(self.date_of_joining),
            "allocatedHours": self.allocated_hours,
            "shiftStart": self.shift_start,
            "shiftEnd": self.shift_end,
        }
