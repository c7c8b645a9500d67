from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

import pytest

from attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.core.enums import AttendanceMark
from attendance_tracker.core.exceptions import DataUnavailableError
from attendance_tracker.datasource.service import AttendanceDataService
from attendance_tracker.employees.filters import EmployeeFilter
from attendance_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from attendance_tracker.reports.service import ReportService, short_department_name

MONDAY = date(2024, 5, 6)
SUNDAY = date(2024, 5, 5)


class FakeRecordsUnavailable(InMemoryAttendanceRepository):
    def list_all(self):
        raise TimeoutError("records feed timed out")


@pytest.fixture
def records():
    return [
        AttendanceRecord(
            employee_id="1",
            work_date=MONDAY,
            in_time="10:00",
            out_time="20:00",
            working_minutes=600,
            overtime_minutes=90,
            is_late=True,
        ),
        AttendanceRecord(employee_id="2", work_date=MONDAY, in_time="09:00", out_time="17:00", working_minutes=480),
        AttendanceRecord(
            employee_id="3",
            work_date=MONDAY,
            in_time=None,
            out_time=None,
            working_minutes=0,
            is_present=False,
            mark=AttendanceMark.ABSENT,
        ),
        AttendanceRecord(
            employee_id="1",
            work_date=SUNDAY,
            in_time=None,
            out_time=None,
            working_minutes=510,
            is_sunday=True,
        ),
    ]


def _service(roster, records, *, page_size=10, attendance=None):
    data = AttendanceDataService(
        InMemoryEmployeeRepository(roster),
        attendance if attendance is not None else InMemoryAttendanceRepository(records),
    )
    return ReportService(data, period_days=30, page_size=page_size)


def test_dashboard_stats(roster, records):
    stats = _service(roster, records).dashboard_stats()

    assert stats.present == 3
    assert stats.absent == 3 * 30 - 3
    assert stats.late == 1
    assert stats.overtime_records == 1
    assert stats.sundays_worked == 1
    assert stats.attendance_rate == 3


def test_attendance_rate_rounds_half_up(roster):
    staff = [replace(roster[0], employee_id=str(i)) for i in range(1, 9)]
    present = [
        AttendanceRecord(
            employee_id=str(i % 8 + 1),
            work_date=MONDAY + timedelta(days=i // 8),
            in_time="10:00",
            out_time="18:30",
            working_minutes=510,
        )
        for i in range(30)
    ]

    stats = _service(staff, present).dashboard_stats()

    assert (stats.present, stats.absent) == (30, 210)
    assert stats.attendance_rate == 13


def test_dashboard_stats_without_employees(records):
    stats = _service([], []).dashboard_stats()

    assert stats.attendance_rate == 0
    assert stats.absent == 0


def test_department_summaries_for_one_day(roster, records):
    rows = _service(roster, records).department_summaries(MONDAY)

    assert rows == [
        {"name": "MOULDING DEPT. (A & B SHIFT)", "totalEmployees": 1, "presentToday": 1, "absentToday": 0, "lateToday": 1},
        {"name": "REFILLING DEPT.", "totalEmployees": 1, "presentToday": 1, "absentToday": 0, "lateToday": 0},
        {"name": "SECURITY DEPT.NIGHT SHIFT", "totalEmployees": 1, "presentToday": 0, "absentToday": 1, "lateToday": 0},
    ]


def test_department_chart_uses_short_labels(roster, records):
    series = _service(roster, records).department_chart()

    assert [s["department"] for s in series] == ["MOULDING", "REFILLIN", "SECURITY"]
    assert series[0] == {"department": "MOULDING", "present": 2, "absent": 28, "late": 1}


def test_short_department_name():
    assert short_department_name("OFFICE STAFF") == "OFFICE"
    assert short_department_name("FOILING & HOT STAMPING DEPT.") == "FOILING"


def test_daily_table_pages_and_clamps(roster, records):
    svc = _service(roster, records, page_size=2)

    first = svc.daily_table(MONDAY, page=1)
    assert (first.page, first.pages) == (1, 2)
    assert [r["employee"]["id"] for r in first.rows] == ["1", "2"]
    assert first.rows[0]["attendance"]["workingHours"] == "10:00"
    assert first.rows[0]["summary"]["overtime"] == "1:30"
    assert first.rows[0]["summary"]["balance"] == 2

    last = svc.daily_table(MONDAY, page=5)
    assert last.page == 2
    assert [r["employee"]["id"] for r in last.rows] == ["3"]
    assert last.rows[0]["attendance"]["isPresent"] is False


def test_daily_table_without_record_for_day(roster, records):
    table = _service(roster, records).daily_table(date(2024, 5, 7))

    assert all(r["attendance"] is None for r in table.rows)
    assert table.to_dict()["date"] == "07-05-24"


def test_daily_table_empty_filter_result(roster, records):
    table = _service(roster, records).daily_table(MONDAY, employee_filter=EmployeeFilter(query="nobody"))

    assert (table.page, table.pages, table.rows) == (1, 0, [])


def test_employee_cards_respects_filter_and_limit(roster, records):
    svc = _service(roster, records)

    assert len(svc.employee_cards(limit=2)) == 2
    cards = svc.employee_cards(employee_filter=EmployeeFilter(status="PAYROLLED"))
    assert [c["employee"]["id"] for c in cards] == ["1"]
    assert cards[0]["summary"]["daysPresent"] == 2


def test_export_summaries_csv(roster, records):
    lines = _service(roster, records).export_summaries_csv().splitlines()

    assert lines[0] == "employee_id,name,department,status,days_present,absents,late_days,overtime,sundays_impacted,balance"
    assert lines[1] == '1,PALASH BAR,MOULDING DEPT. (A & B SHIFT),PAYROLLED,2,0,1,1:30,0,2'
    assert lines[3] == "3,RAVI KUMAR,SECURITY DEPT.NIGHT SHIFT,NON-PAYROLLED,0,1,0,0:00,0,-1"
    assert len(lines) == 4


def test_reports_need_records(roster):
    svc = _service(roster, [], attendance=FakeRecordsUnavailable())

    with pytest.raises(DataUnavailableError, match="records feed timed out"):
        svc.dashboard_stats()
