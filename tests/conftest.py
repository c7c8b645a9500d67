from __future__ import annotations

from datetime import date

import pytest

from attendance_tracker.container import build_container
from attendance_tracker.core.enums import EmploymentStatus
from attendance_tracker.employees.model import Employee


@pytest.fixture
def roster() -> list[Employee]:
    return [
        Employee(
            employee_id="1",
            name="PALASH BAR",
            department="MOULDING DEPT. (A & B SHIFT)",
            status=EmploymentStatus.PAYROLLED,
            date_of_joining=date(2023, 6, 13),
            allocated_minutes=510,
            shift_start="10:00",
            shift_end="18:30",
        ),
        Employee(
            employee_id="2",
            name="PRIYA SHARMA",
            department="REFILLING DEPT.",
            status=EmploymentStatus.NON_PAYROLLED,
            date_of_joining=date(2024, 3, 23),
            allocated_minutes=480,
            shift_start="09:00",
            shift_end="17:00",
        ),
        Employee(
            employee_id="3",
            name="RAVI KUMAR",
            department="SECURITY DEPT.NIGHT SHIFT",
            status=EmploymentStatus.NON_PAYROLLED,
            date_of_joining=date(2023, 9, 30),
            allocated_minutes=None,
            shift_start="21:00",
            shift_end="09:00",
        ),
    ]


@pytest.fixture
def container(roster):
    from attendance_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository

    return build_container(employees_repo=InMemoryEmployeeRepository(roster))
