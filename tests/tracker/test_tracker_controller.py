from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

import pytest

from attendance_tracker.core.constants import (
    CSV_HEADERS,
    MSG_ADD_EMPLOYEE_FAILED,
    MSG_CHECK_IN_FAILED,
    MSG_CHECK_OUT_FAILED,
)
from attendance_tracker.tracker.state import EmployeeDraft


@pytest.fixture(autouse=True)
def frozen_clock(monkeypatch, fixed_now):
    monkeypatch.setattr("attendance_tracker.attendance.service.now_local", lambda: fixed_now)


@pytest.fixture
def tracker(container, work_date):
    return container.tracker(work_date)


def test_select_date_fetches_both_lists(tracker, employees_repo, attendance_repo, work_date):
    ahmed = employees_repo.add("Ahmed", "a@x.com", "E1")
    attendance_repo.add(employee_id=ahmed.id, work_date=work_date, check_in=datetime(2026, 2, 2, 8, 0))
    attendance_repo.add(employee_id=ahmed.id, work_date=work_date + timedelta(days=1))

    state = tracker.select_date(work_date)

    assert [e.name for e in state.employees] == ["Ahmed"]
    assert len(state.records) == 1
    assert not state.loading


def test_check_in_adds_exactly_one_open_record(tracker, employees_repo, work_date, fixed_now):
    ahmed = employees_repo.add("Ahmed", "a@x.com", "E1")
    tracker.select_date(work_date)
    before = len(tracker.state.records)

    assert tracker.check_in(ahmed.id)

    mine = [r for r in tracker.state.records if r.employee_id == ahmed.id]
    assert len(tracker.state.records) == before + 1
    assert len(mine) == 1
    assert mine[0].check_in == fixed_now
    assert mine[0].check_out is None
    assert tracker.state.alert is None


def test_check_out_sets_check_out_and_keeps_check_in(tracker, employees_repo, attendance_repo, work_date, fixed_now):
    ahmed = employees_repo.add("Ahmed", "a@x.com", "E1")
    arrived = datetime(2026, 2, 2, 7, 55)
    record = attendance_repo.add(employee_id=ahmed.id, work_date=work_date, check_in=arrived)
    tracker.select_date(work_date)

    assert tracker.check_out(record.id)

    (updated,) = tracker.state.records
    assert updated.id == record.id
    assert updated.check_in == arrived
    assert updated.check_out == fixed_now


def test_check_in_failure_leaves_records_unchanged(tracker, employees_repo, attendance_repo, switch, work_date, caplog):
    ahmed = employees_repo.add("Ahmed", "a@x.com", "E1")
    mona = employees_repo.add("Mona", "m@x.com", "E2")
    attendance_repo.add(employee_id=mona.id, work_date=work_date, check_in=datetime(2026, 2, 2, 8, 0))
    tracker.select_date(work_date)
    before = tracker.state.records

    switch.failing.add("create_check_in")
    with caplog.at_level(logging.ERROR):
        assert not tracker.check_in(ahmed.id)

    assert tracker.state.records == before
    assert tracker.state.alert == MSG_CHECK_IN_FAILED
    assert "Error checking in" in caplog.text


def test_check_out_failure_surfaces_alert(tracker, switch, work_date):
    tracker.select_date(work_date)
    switch.failing.add("set_check_out")

    assert not tracker.check_out(1)
    assert tracker.state.alert == MSG_CHECK_OUT_FAILED


def test_fetch_failure_is_logged_without_alert(tracker, employees_repo, switch, work_date, caplog):
    employees_repo.add("Ahmed", "a@x.com", "E1")
    tracker.select_date(work_date)

    switch.failing.add("list_ordered_by_name")
    with caplog.at_level(logging.ERROR):
        state = tracker.refresh_employees()

    assert [e.name for e in state.employees] == ["Ahmed"]
    assert state.alert is None
    assert "Error fetching employees" in caplog.text


def test_add_employee_success_clears_form(tracker, employees_repo, work_date):
    employees_repo.add("Zaid", "z@x.com", "E9")
    tracker.select_date(work_date)
    tracker.open_add_employee()
    tracker.update_draft(name="Ahmed", email="a@x.com", employee_id="E1")

    assert tracker.submit_employee()

    state = tracker.state
    matches = [e for e in state.employees if (e.name, e.email, e.employee_id) == ("Ahmed", "a@x.com", "E1")]
    assert len(matches) == 1
    assert [e.name for e in state.employees] == ["Ahmed", "Zaid"]
    assert state.draft == EmployeeDraft()
    assert not state.show_add_employee


def test_add_employee_store_failure_keeps_form_and_draft(tracker, switch, work_date):
    tracker.select_date(work_date)
    tracker.open_add_employee()
    tracker.update_draft(name="Ahmed", email="a@x.com", employee_id="E1")
    switch.failing.add("create")

    assert not tracker.submit_employee()

    state = tracker.state
    assert state.show_add_employee
    assert state.draft.name == "Ahmed"
    assert state.alert == MSG_ADD_EMPLOYEE_FAILED
    assert state.employees == ()


def test_add_employee_validation_message_is_shown(tracker, work_date):
    tracker.open_add_employee()
    tracker.update_draft(name="Ahmed", email="bad", employee_id="E1")

    assert not tracker.submit_employee()
    assert tracker.state.alert
    assert tracker.state.alert != MSG_ADD_EMPLOYEE_FAILED


def test_export_rows_match_loaded_records(tracker, employees_repo, attendance_repo, work_date):
    ahmed = employees_repo.add("Ahmed", "a@x.com", "E1")
    mona = employees_repo.add("Mona", "m@x.com", "E2")
    attendance_repo.add(employee_id=ahmed.id, work_date=work_date, check_in=datetime(2026, 2, 2, 8, 0))
    attendance_repo.add(employee_id=mona.id, work_date=work_date, check_in=datetime(2026, 2, 2, 9, 0))
    tracker.select_date(work_date)

    export = tracker.export_csv()
    lines = export.content.decode("utf-8-sig").splitlines()

    assert export.filename == "attendance_2026-02-02.csv"
    assert lines[0] == ",".join(CSV_HEADERS)
    assert len(lines) - 1 == len(tracker.state.records) == 2


def test_export_does_not_touch_the_store(tracker, switch, work_date):
    tracker.select_date(work_date)
    switch.failing.update({"list_for_date", "list_ordered_by_name"})

    export = tracker.export_csv()

    assert export.content.decode("utf-8-sig").splitlines() == [",".join(CSV_HEADERS)]


def test_date_change_refetches_records(tracker, employees_repo, attendance_repo, work_date):
    ahmed = employees_repo.add("Ahmed", "a@x.com", "E1")
    other_day = date(2026, 2, 3)
    attendance_repo.add(employee_id=ahmed.id, work_date=other_day)
    tracker.select_date(work_date)
    assert tracker.state.records == ()

    state = tracker.select_date(other_day)

    assert state.selected_date == other_day
    assert [r.work_date for r in state.records] == [other_day]
