from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.container import build_services
from attendance_tracker.core.exceptions import StoreError
from attendance_tracker.employees.model import Employee


class FailureSwitch:
    """Makes selected repository methods raise StoreError."""

    def __init__(self):
        self.failing: set[str] = set()

    def check(self, name: str) -> None:
        if name in self.failing:
            raise StoreError(f"simulated failure in {name}")


class InMemoryEmployees:
    def __init__(self, switch: FailureSwitch):
        self._switch = switch
        self._by_id: dict[int, Employee] = {}
        self._id = 0

    def add(self, name: str, email: str, employee_id: str) -> Employee:
        self._id += 1
        emp = Employee(id=self._id, name=name, email=email, employee_id=employee_id)
        self._by_id[emp.id] = emp
        return emp

    def get(self, emp_id: int) -> Employee:
        return self._by_id[emp_id]

    def list_ordered_by_name(self):
        self._switch.check("list_ordered_by_name")
        return sorted(self._by_id.values(), key=lambda e: e.name)

    def create(self, *, name: str, email: str, employee_id: str) -> Employee:
        self._switch.check("create")
        return self.add(name, email, employee_id)


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees, switch: FailureSwitch):
        self._employees = employees
        self._switch = switch
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._clock = datetime(2026, 1, 1, 0, 0, 0)

    def _next_created_at(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def add(self, *, employee_id: int, work_date: date, check_in=None, check_out=None) -> AttendanceRecord:
        self._id += 1
        rec = AttendanceRecord(
            id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            created_at=self._next_created_at(),
            employee=self._employees.get(employee_id),
        )
        self._by_id[rec.id] = rec
        return rec

    def list_for_date(self, work_date: date):
        self._switch.check("list_for_date")
        items = [r for r in self._by_id.values() if r.work_date == work_date]
        items.sort(key=lambda r: r.created_at, reverse=True)
        return items

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(record_id)

    def create_check_in(self, *, employee_id: int, work_date: date, check_in: datetime) -> AttendanceRecord:
        self._switch.check("create_check_in")
        return self.add(employee_id=employee_id, work_date=work_date, check_in=check_in)

    def set_check_out(self, *, record_id: int, check_out: datetime) -> bool:
        self._switch.check("set_check_out")
        rec = self._by_id.get(record_id)
        if not rec:
            return False
        self._by_id[record_id] = rec.with_check_out(check_out)
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def work_date(fixed_now) -> date:
    return fixed_now.date()


@pytest.fixture
def switch() -> FailureSwitch:
    return FailureSwitch()


@pytest.fixture
def employees_repo(switch) -> InMemoryEmployees:
    return InMemoryEmployees(switch)


@pytest.fixture
def attendance_repo(employees_repo, switch) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo, switch)


@pytest.fixture
def container(employees_repo, attendance_repo):
    return build_services(employees_repo=employees_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from attendance_tracker import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
