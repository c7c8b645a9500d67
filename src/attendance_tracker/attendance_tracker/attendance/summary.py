from __future__ import annotations

from typing import Iterable

from ..core.constants import OVERTIME_DAY_MINUTES
from .model import AttendanceRecord, AttendanceSummary


def summarize(records: Iterable[AttendanceRecord], employee_id: str) -> AttendanceSummary:
    """Presence, absence, lateness and overtime for one employee.

    ``absents`` counts every record of the employee not flagged present
    (Sundays and holidays included). Every 8 hours of accumulated overtime
    adds one day to ``balance``.
    """
    employee_id = str(employee_id)
    own = [r for r in records if r.employee_id == employee_id]

    days_present = sum(1 for r in own if r.is_present)
    late_days = sum(1 for r in own if r.is_late)
    sundays_impacted = sum(1 for r in own if r.is_sunday and not r.is_present)
    absents = len(own) - days_present
    overtime_minutes = sum(r.overtime_minutes for r in own)

    overtime_days = overtime_minutes // OVERTIME_DAY_MINUTES
    return AttendanceSummary(
        employee_id=employee_id,
        days_present=days_present,
        absents=absents,
        late_days=late_days,
        overtime_minutes=overtime_minutes,
        sundays_impacted=sundays_impacted,
        balance=days_present - absents + overtime_days,
    )
