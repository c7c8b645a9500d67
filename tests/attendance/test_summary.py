from datetime import date, timedelta

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.attendance.summary import summarize
from attendance_tracker.core.enums import AttendanceMark


def _rec(employee_id="1", day=1, *, present=True, late=False, sunday=False, overtime=0):
    return AttendanceRecord(
        employee_id=employee_id,
        work_date=date(2024, 5, 1) + timedelta(days=day - 1),
        in_time="09:00" if present else None,
        out_time="17:00" if present else None,
        working_minutes=480 if present else 0,
        overtime_minutes=overtime,
        is_present=present,
        is_late=late,
        is_sunday=sunday,
        mark=AttendanceMark.PRESENT if present else AttendanceMark.ABSENT,
    )


def test_counts_only_the_requested_employee():
    records = [
        _rec("1", 1),
        _rec("1", 2, late=True),
        _rec("1", 3, present=False),
        _rec("1", 5, present=False, sunday=True),
        _rec("1", 12, sunday=True),
        _rec("2", 1, present=False),
    ]

    s = summarize(records, "1")

    assert s.days_present == 3
    assert s.absents == 2
    assert s.late_days == 1
    assert s.sundays_impacted == 1
    assert s.overtime == "0:00"
    assert s.balance == 1


def test_overtime_total_is_unpadded_and_feeds_balance():
    records = [_rec("7", d, overtime=150) for d in range(1, 5)]  # 10 hours

    s = summarize(records, "7")

    assert s.overtime_minutes == 600
    assert s.overtime == "10:00"
    assert s.balance == 4 - 0 + 1


def test_balance_law_on_synthetic_sets():
    for overtime_each, present_days, absent_days in [(0, 3, 2), (60, 10, 1), (239, 4, 4), (480, 2, 5)]:
        records = [_rec("9", d, overtime=overtime_each) for d in range(1, present_days + 1)]
        records += [_rec("9", 20 + d, present=False) for d in range(absent_days)]
        total = overtime_each * present_days

        s = summarize(records, "9")

        assert s.balance == s.days_present - s.absents + total // 480
        assert s.days_present == present_days
        assert s.absents == absent_days


def test_unknown_employee_is_all_zero():
    s = summarize([_rec("1", 1)], "42")

    assert (s.days_present, s.absents, s.late_days, s.sundays_impacted, s.balance) == (0, 0, 0, 0, 0)
    assert s.overtime == "0:00"


def test_summarize_is_repeatable():
    records = [_rec("1", 1, overtime=30), _rec("1", 2, present=False), _rec("1", 3, late=True)]

    assert summarize(records, "1") == summarize(records, "1")


def test_to_dict_uses_dashboard_keys():
    assert summarize([_rec("1", 1)], "1").to_dict() == {
        "employeeId": "1",
        "daysPresent": 1,
        "absents": 0,
        "lateDays": 0,
        "overtime": "0:00",
        "sundaysImpacted": 0,
        "balance": 1,
    }
