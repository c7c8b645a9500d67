from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceMark
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, mysql_time_to_hhmm
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = (
    "employee_id, work_date, in_time, out_time, working_minutes, overtime_minutes, "
    "is_present, is_late, is_holiday, is_sunday, mark"
)


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        in_time=mysql_time_to_hhmm(r.get("in_time")),
        out_time=mysql_time_to_hhmm(r.get("out_time")),
        working_minutes=int(r["working_minutes"]),
        overtime_minutes=int(r["overtime_minutes"]),
        is_present=bool(r["is_present"]),
        is_late=bool(r["is_late"]),
        is_holiday=bool(r["is_holiday"]),
        is_sunday=bool(r["is_sunday"]),
        mark=AttendanceMark(r["mark"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records ORDER BY work_date, employee_id")
            return [_row_to_record(r) for r in fetchall(cur)]

    def save_many(self, records: Sequence[AttendanceRecord]) -> int:
        rows = [
            (
                int(r.employee_id),
                r.work_date,
                r.in_time,
                r.out_time,
                r.working_minutes,
                r.overtime_minutes,
                r.is_present,
                r.is_late,
                r.is_holiday,
                r.is_sunday,
                r.mark.value,
            )
            for r in records
        ]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                f"""
                INSERT INTO attendance_records({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    in_time=VALUES(in_time),
                    out_time=VALUES(out_time),
                    working_minutes=VALUES(working_minutes),
                    overtime_minutes=VALUES(overtime_minutes),
                    is_present=VALUES(is_present),
                    is_late=VALUES(is_late),
                    is_holiday=VALUES(is_holiday),
                    is_sunday=VALUES(is_sunday),
                    mark=VALUES(mark)
                """,
                rows,
            )
        return len(rows)
