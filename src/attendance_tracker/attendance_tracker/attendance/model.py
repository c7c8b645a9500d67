from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.dates import day_key, format_form_date
from ..common.timeutils import format_hhmm, format_total
from ..core.enums import AttendanceMark


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance on one calendar day.

    At most one record exists per (employee_id, work_date).
    """

    employee_id: str
    work_date: date
    in_time: Optional[str]
    out_time: Optional[str]
    working_minutes: int
    overtime_minutes: int = 0
    is_present: bool = True
    is_late: bool = False
    is_holiday: bool = False
    is_sunday: bool = False
    mark: AttendanceMark = AttendanceMark.PRESENT

    @property
    def key(self) -> tuple[str, date]:
        return self.employee_id, self.work_date

    @property
    def day_key(self) -> str:
        return day_key(self.work_date)

    @property
    def working_hours(self) -> str:
        return format_hhmm(self.working_minutes)

    @property
    def overtime(self) -> str:
        return format_hhmm(self.overtime_minutes)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "date": format_form_date(self.work_date),
            "dayKey": self.day_key,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "workingHours": self.working_hours,
            "overtime": self.overtime,
            "isPresent": self.is_present,
            "isAbsent": self.mark == AttendanceMark.ABSENT,
            "isLeave": self.mark == AttendanceMark.LEAVE,
            "isLate": self.is_late,
            "isHoliday": self.is_holiday,
            "isSunday": self.is_sunday,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model derived from the full record set; never stored."""

    employee_id: str
    days_present: int
    absents: int
    late_days: int
    overtime_minutes: int
    sundays_impacted: int
    balance: int

    @property
    def overtime(self) -> str:
        return format_total(self.overtime_minutes)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "daysPresent": self.days_present,
            "absents": self.absents,
            "lateDays": self.late_days,
            "overtime": self.overtime,
            "sundaysImpacted": self.sundays_impacted,
            "balance": self.balance,
        }
