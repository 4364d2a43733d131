from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DATE_FORMAT, DEFAULT_TIME_FORMAT
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .tracker.controller import TrackerController


@dataclass(frozen=True)
class Container:
    employee_service: EmployeeService
    attendance_service: AttendanceService

    time_format: str = DEFAULT_TIME_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT

    def tracker(self, selected_date: date) -> TrackerController:
        return TrackerController(
            self.employee_service,
            self.attendance_service,
            selected_date=selected_date,
            time_format=self.time_format,
            date_format=self.date_format,
        )


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    time_format: str = DEFAULT_TIME_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> Container:
    return Container(
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo),
        time_format=time_format,
        date_format=date_format,
    )


def build_container(
    *,
    db_config: dict,
    time_format: str = DEFAULT_TIME_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        time_format=time_format,
        date_format=date_format,
    )
