from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_REPORT_PERIOD_DAYS
from .datasource.service import AttendanceDataService
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .holidays.repository import InMemoryHolidayRepository
from .holidays.service import DEFAULT_HOLIDAYS, HolidayService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    holidays_repo: InMemoryHolidayRepository

    data_service: AttendanceDataService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    holiday_service: HolidayService
    report_service: ReportService


def build_container(
    *,
    employees_repo: Optional[EmployeeRepository] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    period_days: int = DEFAULT_REPORT_PERIOD_DAYS,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Container:
    employees_repo = employees_repo or InMemoryEmployeeRepository()
    attendance_repo = attendance_repo or InMemoryAttendanceRepository()
    holidays_repo = InMemoryHolidayRepository(DEFAULT_HOLIDAYS)

    data_service = AttendanceDataService(employees_repo, attendance_repo)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        data_service=data_service,
        employee_service=EmployeeService(employees_repo, data_service),
        attendance_service=AttendanceService(data_service),
        holiday_service=HolidayService(holidays_repo),
        report_service=ReportService(data_service, period_days=period_days, page_size=page_size),
    )


def build_mysql_container(*, db_config: dict, **kwargs) -> Container:
    from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
    from .database.connection import DBConfig, DatabaseConnection
    from .employees.mysql_employee_repository import MySQLEmployeeRepository

    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        **kwargs,
    )
