from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..common.timeutils import parse_hhmm
from ..common.validators import collect, optional_time, require_form_date, require_min_length, require_time
from ..core.constants import DEPARTMENTS
from ..core.enums import EmploymentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..datasource.service import AttendanceDataService
from .filters import EmployeeFilter, unique_in_order
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _require_department(value: Optional[str]) -> str:
    value = (value or "").strip()
    if value not in DEPARTMENTS:
        message = "Please select a department"
        raise ValidationError(message, {"department": message})
    return value


def _require_status(value: Optional[str]) -> EmploymentStatus:
    try:
        return EmploymentStatus((value or "").strip())
    except ValueError:
        message = "Status must be PAYROLLED or NON-PAYROLLED"
        raise ValidationError(message, {"status": message})


class EmployeeService:
    """Use case: register employees and browse the roster."""

    def __init__(self, employees: EmployeeRepository, data: AttendanceDataService):
        self._employees = employees
        self._data = data

    def register(self, form: Mapping[str, str]) -> Employee:
        name, department, status, doj, allocated, shift_start, shift_end = collect(
            lambda: require_min_length(form.get("name"), "name", 2, "Name must be at least 2 characters"),
            lambda: _require_department(form.get("department")),
            lambda: _require_status(form.get("status") or EmploymentStatus.PAYROLLED.value),
            lambda: require_form_date(form.get("doj"), "doj"),
            lambda: require_time(form.get("allocatedHours"), "allocatedHours"),
            lambda: optional_time(form.get("shiftStart"), "shiftStart"),
            lambda: optional_time(form.get("shiftEnd"), "shiftEnd"),
        )

        employee_id = self._employees.create_employee(
            name=name,
            department=department,
            status=status,
            date_of_joining=doj,
            allocated_minutes=parse_hhmm(allocated),
            shift_start=shift_start,
            shift_end=shift_end,
        )
        logger.info("Registered employee %s (%s, %s)", employee_id, name, department)
        return self.get(employee_id)

    def get(self, employee_id: str) -> Employee:
        employee = self._data.fetch_employee(employee_id).unwrap()
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def list_employees(self, employee_filter: Optional[EmployeeFilter] = None) -> list[Employee]:
        employees = self._data.fetch_employees().unwrap()
        if employee_filter is None:
            return list(employees)
        return employee_filter.apply(employees)

    def departments(self) -> list[str]:
        return unique_in_order(e.department for e in self._data.fetch_employees().unwrap())

    def statuses(self) -> list[str]:
        return unique_in_order(e.status.value for e in self._data.fetch_employees().unwrap())
