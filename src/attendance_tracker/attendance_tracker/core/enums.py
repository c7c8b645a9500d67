from __future__ import annotations

from enum import Enum


class EmploymentStatus(str, Enum):
    """Payroll category of an employee."""

    PAYROLLED = "PAYROLLED"
    NON_PAYROLLED = "NON-PAYROLLED"


class AttendanceMark(str, Enum):
    """How an employee was marked on the bulk sheet."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"


class FetchState(str, Enum):
    """Lifecycle of a read from the upstream data source."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
