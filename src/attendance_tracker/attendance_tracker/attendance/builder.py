from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.dates import is_sunday
from ..common.timeutils import parse_hhmm
from ..core.constants import ZERO_DURATION
from ..core.enums import AttendanceMark
from ..employees.model import Employee
from .calculator import WorkingHoursCalculator
from .forms import BulkRow, BulkSheet
from .model import AttendanceRecord


class AttendanceRecordBuilder:
    """Turns validated form state into AttendanceRecord values.

    Lateness, holiday and overtime are not derived here: records leave the
    builder with ``is_late=False``, ``is_holiday=False`` and zero overtime.
    """

    def __init__(self, calculator: Optional[WorkingHoursCalculator] = None):
        self._calculator = calculator or WorkingHoursCalculator()

    def build_single(
        self,
        *,
        employee: Optional[Employee],
        work_date: date,
        in_time: str,
        out_time: str,
    ) -> AttendanceRecord:
        sunday = is_sunday(work_date)
        allocated = employee.allocated_hours if employee else None

        if sunday and employee:
            working_hours = allocated or ZERO_DURATION
        else:
            working_hours = self._calculator.compute(in_time, out_time, allocated, sunday)

        return AttendanceRecord(
            employee_id=employee.employee_id if employee else "",
            work_date=work_date,
            in_time=in_time,
            out_time=out_time,
            working_minutes=parse_hhmm(working_hours) or 0,
            is_present=True,
            is_sunday=sunday,
        )

    def build_bulk(self, sheet: BulkSheet) -> list[AttendanceRecord]:
        return [self._build_row(sheet.work_date, sheet.is_sunday, r) for r in sheet.selected()]

    def _build_row(self, work_date: date, sunday: bool, row: BulkRow) -> AttendanceRecord:
        if row.mark != AttendanceMark.PRESENT:
            return AttendanceRecord(
                employee_id=row.employee_id,
                work_date=work_date,
                in_time=None,
                out_time=None,
                working_minutes=0,
                is_present=False,
                is_sunday=sunday,
                mark=row.mark,
            )

        working_hours = self._calculator.compute(row.in_time, row.out_time, row.employee.allocated_hours, sunday)
        return AttendanceRecord(
            employee_id=row.employee_id,
            work_date=work_date,
            # Sunday entries are credited, not clocked.
            in_time=None if sunday else row.in_time,
            out_time=None if sunday else row.out_time,
            working_minutes=parse_hhmm(working_hours) or 0,
            is_present=True,
            is_sunday=sunday,
            mark=AttendanceMark.PRESENT,
        )
