from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from attendance_tracker.attendance.service import AttendanceService
from attendance_tracker.core.exceptions import StoreError, ValidationError


@pytest.fixture
def ahmed(employees_repo):
    return employees_repo.add("Ahmed", "a@x.com", "E1")


def test_list_for_date_returns_only_that_date(attendance_repo, ahmed, work_date):
    attendance_repo.add(employee_id=ahmed.id, work_date=work_date, check_in=datetime(2026, 2, 2, 8, 0))
    attendance_repo.add(employee_id=ahmed.id, work_date=work_date - timedelta(days=1))
    attendance_repo.add(employee_id=ahmed.id, work_date=work_date + timedelta(days=1))

    records = AttendanceService(attendance_repo).list_for_date(work_date)

    assert len(records) == 1
    assert all(r.work_date == work_date for r in records)


def test_list_for_date_newest_first(attendance_repo, employees_repo, ahmed, work_date):
    mona = employees_repo.add("Mona", "m@x.com", "E2")
    first = attendance_repo.add(employee_id=ahmed.id, work_date=work_date)
    second = attendance_repo.add(employee_id=mona.id, work_date=work_date)

    records = AttendanceService(attendance_repo).list_for_date(work_date)

    assert [r.id for r in records] == [second.id, first.id]
    assert records[0].employee.name == "Mona"


def test_check_in_uses_selected_date_and_now(attendance_repo, ahmed, fixed_now):
    selected = date(2026, 1, 15)

    record = AttendanceService(attendance_repo).check_in(ahmed.id, work_date=selected, now=fixed_now)

    assert record.work_date == selected
    assert record.check_in == fixed_now
    assert record.check_out is None
    assert record.employee.employee_id == "E1"


def test_second_check_in_same_day_is_not_blocked(attendance_repo, ahmed, work_date, fixed_now):
    svc = AttendanceService(attendance_repo)
    svc.check_in(ahmed.id, work_date=work_date, now=fixed_now)
    svc.check_in(ahmed.id, work_date=work_date, now=fixed_now + timedelta(minutes=5))

    assert len(svc.list_for_date(work_date)) == 2


def test_check_out_sets_timestamp_and_keeps_check_in(attendance_repo, ahmed, work_date, fixed_now):
    svc = AttendanceService(attendance_repo)
    record = svc.check_in(ahmed.id, work_date=work_date, now=fixed_now)
    leave = fixed_now + timedelta(hours=8)

    assert svc.check_out(record.id, now=leave) == leave

    updated = attendance_repo.get_by_id(record.id)
    assert updated.check_out == leave
    assert updated.check_in == fixed_now


def test_check_out_unknown_record_raises(attendance_repo):
    with pytest.raises(ValidationError):
        AttendanceService(attendance_repo).check_out(999)


def test_check_in_store_failure_propagates(attendance_repo, ahmed, work_date, switch):
    switch.failing.add("create_check_in")

    with pytest.raises(StoreError):
        AttendanceService(attendance_repo).check_in(ahmed.id, work_date=work_date)
