from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.dates import format_form_date, is_sunday
from ..common.validators import collect, optional_time, require_form_date, require_non_empty, require_time
from ..core.enums import AttendanceMark
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.filters import EmployeeFilter
from ..employees.model import Employee


@dataclass(frozen=True)
class SingleEntryForm:
    """Raw values typed into the single-employee form."""

    employee_id: str = ""
    date: str = ""
    in_time: str = ""
    out_time: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SingleEntryForm":
        return cls(
            employee_id=str(data.get("employeeId") or ""),
            date=str(data.get("date") or ""),
            in_time=str(data.get("inTime") or ""),
            out_time=str(data.get("outTime") or ""),
        )

    def validate(self) -> tuple[str, date, str, str]:
        """Returns (employee_id, work_date, in_time, out_time) or raises ValidationError."""
        employee_id, work_date, in_time, out_time = collect(
            lambda: require_non_empty(self.employee_id, "employeeId", "Please select an employee"),
            lambda: require_form_date(self.date, "date"),
            lambda: require_time(self.in_time, "inTime"),
            lambda: require_time(self.out_time, "outTime"),
        )
        return employee_id, work_date, in_time, out_time

    def to_dict(self) -> dict:
        return {"employeeId": self.employee_id, "date": self.date, "inTime": self.in_time, "outTime": self.out_time}


@dataclass
class BulkRow:
    """One employee's editable line on the bulk sheet."""

    employee: Employee
    in_time: Optional[str]
    out_time: Optional[str]
    is_selected: bool = True
    mark: AttendanceMark = AttendanceMark.PRESENT

    @property
    def employee_id(self) -> str:
        return self.employee.employee_id

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee.employee_id,
            "name": self.employee.name,
            "department": self.employee.department,
            "status": self.employee.status.value,
            "allocatedHours": self.employee.allocated_hours,
            "shiftStart": self.employee.shift_start,
            "shiftEnd": self.employee.shift_end,
            "isSelected": self.is_selected,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "isPresent": self.mark == AttendanceMark.PRESENT,
            "isAbsent": self.mark == AttendanceMark.ABSENT,
            "isLeave": self.mark == AttendanceMark.LEAVE,
        }


@dataclass
class BulkSheet:
    """Bulk attendance sheet for one date.

    ``rows`` is the only copy of the sheet state. Filtered views are computed
    on read, and every edit addresses a row by employee id.
    """

    work_date: date
    rows: list[BulkRow] = field(default_factory=list)

    @classmethod
    def for_roster(cls, work_date: date, employees: Iterable[Employee]) -> "BulkSheet":
        sunday = is_sunday(work_date)
        rows = [
            BulkRow(
                employee=e,
                in_time=None if sunday else e.shift_start,
                out_time=None if sunday else e.shift_end,
            )
            for e in employees
        ]
        return cls(work_date=work_date, rows=rows)

    @property
    def is_sunday(self) -> bool:
        return is_sunday(self.work_date)

    def view(self, employee_filter: Optional[EmployeeFilter] = None) -> list[BulkRow]:
        if employee_filter is None:
            return list(self.rows)
        return [r for r in self.rows if employee_filter.matches(r.employee)]

    def row(self, employee_id: str) -> BulkRow:
        for r in self.rows:
            if r.employee_id == str(employee_id):
                return r
        raise NotFoundError(f"Employee {employee_id} is not on the sheet")

    def set_selected(self, employee_id: str, selected: bool) -> None:
        self.row(employee_id).is_selected = bool(selected)

    def set_mark(self, employee_id: str, mark: AttendanceMark) -> None:
        self.row(employee_id).mark = mark

    def set_time(self, employee_id: str, field_name: str, value: Optional[str]) -> None:
        if field_name not in ("in_time", "out_time"):
            raise ValueError(f"Unknown time field: {field_name}")
        setattr(self.row(employee_id), field_name, value or None)

    def selected(self) -> list[BulkRow]:
        return [r for r in self.rows if r.is_selected]

    def apply_edits(self, edits: Any) -> None:
        """Apply row edits as sent by a client.

        ``edits`` must be a list of objects keyed by ``employeeId``. Marks and
        times are validated per row; every bad field is reported as
        ``rows.<index>.<field>``.
        """
        if not isinstance(edits, (list, tuple)):
            message = "Rows must be a list of objects"
            raise ValidationError(message, {"rows": message})

        errors: dict[str, str] = {}
        for i, edit in enumerate(edits):
            if not isinstance(edit, Mapping):
                errors[f"rows.{i}"] = "Each row must be an object"
                continue

            employee_id = str(edit.get("employeeId") or "")
            try:
                self.row(employee_id)
            except NotFoundError as e:
                errors[f"rows.{i}.employeeId"] = str(e)
                continue

            if "isSelected" in edit:
                self.set_selected(employee_id, edit["isSelected"])

            try:
                mark = _mark_from_edit(edit, f"rows.{i}.mark")
            except ValidationError as e:
                errors.update(e.field_errors)
            else:
                if mark is not None:
                    self.set_mark(employee_id, mark)

            for key, attr in (("inTime", "in_time"), ("outTime", "out_time")):
                if key not in edit:
                    continue
                try:
                    self.set_time(employee_id, attr, optional_time(edit.get(key), f"rows.{i}.{key}"))
                except ValidationError as e:
                    errors.update(e.field_errors)

        if errors:
            raise ValidationError("Please correct the highlighted rows", errors)

    def to_dict(self, employee_filter: Optional[EmployeeFilter] = None) -> dict:
        return {
            "date": format_form_date(self.work_date),
            "isSunday": self.is_sunday,
            "rows": [r.to_dict() for r in self.view(employee_filter)],
        }


def _mark_from_edit(edit: Mapping[str, Any], field_name: str) -> Optional[AttendanceMark]:
    if edit.get("mark"):
        try:
            return AttendanceMark(str(edit["mark"]).strip().lower())
        except ValueError:
            message = "Mark must be present, absent or leave"
            raise ValidationError(message, {field_name: message})
    if edit.get("isLeave"):
        return AttendanceMark.LEAVE
    if edit.get("isAbsent"):
        return AttendanceMark.ABSENT
    if edit.get("isPresent"):
        return AttendanceMark.PRESENT
    return None
