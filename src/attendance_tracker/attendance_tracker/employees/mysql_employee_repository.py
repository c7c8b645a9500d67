from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import EmploymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_hhmm
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, department, status, date_of_joining, allocated_minutes, shift_start, shift_end"


def _row_to_employee(r: dict) -> Employee:
    allocated = r.get("allocated_minutes")
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        department=r["department"],
        status=EmploymentStatus(r["status"]),
        date_of_joining=r["date_of_joining"],
        allocated_minutes=int(allocated) if allocated is not None else None,
        shift_start=mysql_time_to_hhmm(r.get("shift_start")),
        shift_end=mysql_time_to_hhmm(r.get("shift_end")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        if not str(employee_id).isdigit():
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def create_employee(
        self,
        *,
        name: str,
        department: str,
        status: EmploymentStatus,
        date_of_joining: date,
        allocated_minutes: Optional[int],
        shift_start: Optional[str],
        shift_end: Optional[str],
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, department, status, date_of_joining, allocated_minutes, shift_start, shift_end)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, department, status.value, date_of_joining, allocated_minutes, shift_start, shift_end),
            )
            return str(cur.lastrowid)
