from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterable

from ..core.enums import EmploymentStatus
from ..employees.repository import EmployeeRepository
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# name, department, status, date of joining, allocated minutes, shift start, shift end
DEMO_ROSTER = (
    ("PALASH BAR", "MOULDING DEPT. (A & B SHIFT)", EmploymentStatus.PAYROLLED, date(2023, 6, 13), 510, "10:00", "18:30"),
    ("SUBINAY NASKAR", "FOILING & HOT STAMPING DEPT. DAY SHIFT", EmploymentStatus.PAYROLLED, date(2024, 6, 4), 510, "10:10", "18:40"),
    ("PRIYA SHARMA", "REFILLING DEPT.", EmploymentStatus.NON_PAYROLLED, date(2024, 3, 23), 480, "09:00", "17:00"),
    ("AMIT SINGH", "EXTRUSION DEPT. (A & B SHIFT)", EmploymentStatus.PAYROLLED, date(2023, 8, 5), 540, "11:00", "20:00"),
    ("NEHA GUPTA", "PEN ASSEMBLING DEPT.", EmploymentStatus.PAYROLLED, date(2023, 11, 17), 450, "10:30", "18:00"),
    ("SURESH PATEL", "DESPATCH DEPT. DAY SHIFT", EmploymentStatus.PAYROLLED, date(2024, 2, 2), 510, "10:00", "18:30"),
    ("MEENA VERMA", "OFFICE STAFF", EmploymentStatus.PAYROLLED, date(2023, 7, 14), 480, "09:30", "17:30"),
    ("RAVI KUMAR", "SECURITY DEPT.NIGHT SHIFT", EmploymentStatus.NON_PAYROLLED, date(2023, 9, 30), 720, "21:00", "09:00"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    quote = None

    for ch in sql:
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", conn_factory.database)


def seed_demo_roster(employees: EmployeeRepository) -> int:
    """Register the demo roster when no employee exists yet."""
    if employees.list_all():
        return 0

    for name, department, status, doj, allocated, start, end in DEMO_ROSTER:
        employees.create_employee(
            name=name,
            department=department,
            status=status,
            date_of_joining=doj,
            allocated_minutes=allocated,
            shift_start=start,
            shift_end=end,
        )
    logger.info("Seeded %d demo employees", len(DEMO_ROSTER))
    return len(DEMO_ROSTER)
