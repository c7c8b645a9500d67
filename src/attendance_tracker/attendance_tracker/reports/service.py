from __future__ import annotations

import csv
import io
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.summary import summarize
from ..common.dates import day_key
from ..core.constants import CHART_LABEL_MAX_LENGTH, DEFAULT_PAGE_SIZE, DEFAULT_REPORT_PERIOD_DAYS
from ..datasource.service import AttendanceDataService
from ..employees.filters import EmployeeFilter, unique_in_order
from ..employees.model import Employee

SUMMARY_CSV_FIELDS = [
    "employee_id",
    "name",
    "department",
    "status",
    "days_present",
    "absents",
    "late_days",
    "overtime",
    "sundays_impacted",
    "balance",
]


@dataclass(frozen=True)
class DashboardStats:
    present: int
    absent: int
    late: int
    overtime_records: int
    sundays_worked: int
    attendance_rate: int

    def to_dict(self) -> dict:
        return {
            "presentDays": self.present,
            "absentDays": self.absent,
            "lateDays": self.late,
            "overtimeRecords": self.overtime_records,
            "sundaysWorked": self.sundays_worked,
            "attendanceRate": self.attendance_rate,
        }


@dataclass(frozen=True)
class DailyTable:
    day: date
    page: int
    pages: int
    rows: list[dict]

    def to_dict(self) -> dict:
        return {"date": day_key(self.day), "page": self.page, "pages": self.pages, "rows": self.rows}


def short_department_name(department: str) -> str:
    first = department.split(" ")[0]
    return first[:CHART_LABEL_MAX_LENGTH]


class ReportService:
    """Dashboard read-models built from the roster and the full record set.

    Absences in the dashboard and the chart are an approximation over a fixed
    period (``employees * period_days - present``), not a calendar count.
    """

    def __init__(
        self,
        data: AttendanceDataService,
        *,
        period_days: int = DEFAULT_REPORT_PERIOD_DAYS,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._data = data
        self._period_days = int(period_days)
        self._page_size = int(page_size)

    def _load(self) -> tuple[list[Employee], list[AttendanceRecord]]:
        return self._data.fetch_employees().unwrap(), self._data.fetch_records().unwrap()

    def dashboard_stats(self) -> DashboardStats:
        employees, records = self._load()
        present = sum(1 for r in records if r.is_present)
        expected = len(employees) * self._period_days

        return DashboardStats(
            present=present,
            absent=expected - present,
            late=sum(1 for r in records if r.is_late),
            overtime_records=sum(1 for r in records if r.overtime_minutes > 0),
            sundays_worked=sum(1 for r in records if r.is_sunday and r.is_present),
            attendance_rate=math.floor(present * 100 / expected + 0.5) if expected else 0,
        )

    def department_summaries(self, day: date) -> list[dict]:
        employees, records = self._load()
        department_of = {e.employee_id: e.department for e in employees}
        todays = [r for r in records if r.work_date == day]

        out = []
        for department in unique_in_order(e.department for e in employees):
            total = sum(1 for e in employees if e.department == department)
            dept_records = [r for r in todays if department_of.get(r.employee_id) == department]
            present = sum(1 for r in dept_records if r.is_present)
            out.append(
                {
                    "name": department,
                    "totalEmployees": total,
                    "presentToday": present,
                    "absentToday": total - present,
                    "lateToday": sum(1 for r in dept_records if r.is_late),
                }
            )
        return out

    def department_chart(self) -> list[dict]:
        employees, records = self._load()
        department_of = {e.employee_id: e.department for e in employees}

        out = []
        for department in unique_in_order(e.department for e in employees):
            headcount = sum(1 for e in employees if e.department == department)
            dept_records = [r for r in records if department_of.get(r.employee_id) == department]
            present = sum(1 for r in dept_records if r.is_present)
            out.append(
                {
                    "department": short_department_name(department),
                    "present": present,
                    "absent": headcount * self._period_days - present,
                    "late": sum(1 for r in dept_records if r.is_late),
                }
            )
        return out

    def daily_table(
        self,
        day: date,
        *,
        employee_filter: Optional[EmployeeFilter] = None,
        page: int = 1,
    ) -> DailyTable:
        employees, records = self._load()
        if employee_filter is not None:
            employees = employee_filter.apply(employees)

        key = day_key(day)
        by_employee = {r.employee_id: r for r in records if r.day_key == key}

        pages = math.ceil(len(employees) / self._page_size)
        page = max(1, min(int(page), max(pages, 1)))
        start = (page - 1) * self._page_size

        rows = []
        for e in employees[start : start + self._page_size]:
            record = by_employee.get(e.employee_id)
            rows.append(
                {
                    "employee": e.to_dict(),
                    "attendance": record.to_dict() if record else None,
                    "summary": summarize(records, e.employee_id).to_dict(),
                }
            )
        return DailyTable(day=day, page=page, pages=pages, rows=rows)

    def employee_cards(self, *, employee_filter: Optional[EmployeeFilter] = None, limit: Optional[int] = None) -> list[dict]:
        employees, records = self._load()
        if employee_filter is not None:
            employees = employee_filter.apply(employees)
        if limit is not None:
            employees = employees[: int(limit)]
        return [{"employee": e.to_dict(), "summary": summarize(records, e.employee_id).to_dict()} for e in employees]

    def export_summaries_csv(self, *, employee_filter: Optional[EmployeeFilter] = None) -> str:
        employees, records = self._load()
        if employee_filter is not None:
            employees = employee_filter.apply(employees)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SUMMARY_CSV_FIELDS)
        writer.writeheader()
        for e in employees:
            s = summarize(records, e.employee_id)
            writer.writerow(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "department": e.department,
                    "status": e.status.value,
                    "days_present": s.days_present,
                    "absents": s.absents,
                    "late_days": s.late_days,
                    "overtime": s.overtime,
                    "sundays_impacted": s.sundays_impacted,
                    "balance": s.balance,
                }
            )
        return out.getvalue()
