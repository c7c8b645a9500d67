from datetime import date

from attendance_tracker.attendance.builder import AttendanceRecordBuilder
from attendance_tracker.attendance.forms import BulkSheet
from attendance_tracker.core.enums import AttendanceMark
from attendance_tracker.employees.filters import EmployeeFilter

MONDAY = date(2024, 5, 6)
SUNDAY = date(2024, 5, 5)


def test_single_weekday_applies_tolerance(roster):
    builder = AttendanceRecordBuilder()

    record = builder.build_single(employee=roster[0], work_date=MONDAY, in_time="10:05", out_time="18:30")

    assert record.working_hours == "08:30"
    assert record.is_present is True
    assert record.is_sunday is False
    assert record.is_late is False
    assert record.is_holiday is False
    assert record.overtime == "00:00"
    assert (record.in_time, record.out_time) == ("10:05", "18:30")


def test_single_sunday_credits_allocated(roster):
    record = AttendanceRecordBuilder().build_single(employee=roster[0], work_date=SUNDAY, in_time="10:00", out_time="11:00")

    assert record.working_hours == "08:30"
    assert record.is_sunday is True


def test_single_sunday_without_allocation_is_zero(roster):
    record = AttendanceRecordBuilder().build_single(employee=roster[2], work_date=SUNDAY, in_time="21:00", out_time="09:00")

    assert record.working_hours == "00:00"


def test_single_overnight_shift(roster):
    record = AttendanceRecordBuilder().build_single(employee=roster[2], work_date=MONDAY, in_time="21:00", out_time="09:00")

    assert record.working_hours == "12:00"


def test_sheet_defaults_to_shift_times_and_present(roster):
    sheet = BulkSheet.for_roster(MONDAY, roster)

    row = sheet.row("1")
    assert (row.in_time, row.out_time) == ("10:00", "18:30")
    assert row.is_selected is True
    assert row.mark == AttendanceMark.PRESENT


def test_sheet_on_sunday_starts_without_times(roster):
    sheet = BulkSheet.for_roster(SUNDAY, roster)

    assert all(r.in_time is None and r.out_time is None for r in sheet.rows)


def test_bulk_records_only_selected_rows(roster):
    sheet = BulkSheet.for_roster(MONDAY, roster)
    sheet.set_selected("3", False)
    sheet.set_mark("2", AttendanceMark.LEAVE)
    sheet.set_time("1", "out_time", "18:00")

    records = {r.employee_id: r for r in AttendanceRecordBuilder().build_bulk(sheet)}

    assert set(records) == {"1", "2"}
    assert records["1"].working_hours == "08:00"
    assert records["2"].working_minutes == 0
    assert records["2"].in_time is None and records["2"].out_time is None
    assert records["2"].is_present is False
    assert records["2"].mark == AttendanceMark.LEAVE


def test_bulk_absent_row_has_no_hours(roster):
    sheet = BulkSheet.for_roster(MONDAY, roster)
    sheet.set_mark("1", AttendanceMark.ABSENT)

    record = next(r for r in AttendanceRecordBuilder().build_bulk(sheet) if r.employee_id == "1")

    assert record.working_hours == "00:00"
    assert record.is_present is False


def test_bulk_sunday_credits_allocated_and_drops_times(roster):
    sheet = BulkSheet.for_roster(SUNDAY, roster)
    sheet.set_time("1", "in_time", "10:00")
    sheet.set_time("1", "out_time", "12:00")

    records = {r.employee_id: r for r in AttendanceRecordBuilder().build_bulk(sheet)}

    assert records["1"].working_hours == "08:30"
    assert records["1"].in_time is None
    assert records["2"].working_hours == "08:00"
    assert records["3"].working_hours == "00:00"
    assert all(r.is_sunday for r in records.values())


def test_edits_through_filtered_view_reach_the_sheet(roster):
    sheet = BulkSheet.for_roster(MONDAY, roster)
    view = sheet.view(EmployeeFilter(department="REFILLING DEPT."))
    assert [r.employee_id for r in view] == ["2"]

    sheet.set_time(view[0].employee_id, "in_time", "09:30")
    sheet.set_selected(view[0].employee_id, False)

    assert sheet.row("2").in_time == "09:30"
    assert sheet.row("2").is_selected is False
    assert sheet.view(EmployeeFilter(department="REFILLING DEPT."))[0].in_time == "09:30"
