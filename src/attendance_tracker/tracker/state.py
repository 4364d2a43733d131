"""Page state and the pure reducer that evolves it.

``TrackerState`` is immutable: every action yields a new state via
``reduce(state, action)``. Nothing in here touches the store or Flask.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple, Union

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee


class Resource(str, Enum):
    EMPLOYEES = "employees"
    RECORDS = "records"


@dataclass(frozen=True)
class EmployeeDraft:
    """Add-employee form contents."""

    name: str = ""
    email: str = ""
    employee_id: str = ""


@dataclass(frozen=True)
class TrackerState:
    selected_date: date
    employees: Tuple[Employee, ...] = ()
    records: Tuple[AttendanceRecord, ...] = ()
    loading: bool = False
    records_failed: bool = False
    show_add_employee: bool = False
    draft: EmployeeDraft = field(default_factory=EmployeeDraft)
    alert: Optional[str] = None


def initial_state(selected_date: date) -> TrackerState:
    return TrackerState(selected_date=selected_date)


# ---- actions ----


@dataclass(frozen=True)
class DateSelected:
    work_date: date


@dataclass(frozen=True)
class FetchStarted:
    resource: Resource
    work_date: Optional[date] = None


@dataclass(frozen=True)
class EmployeesLoaded:
    employees: Tuple[Employee, ...]


@dataclass(frozen=True)
class RecordsLoaded:
    work_date: date
    records: Tuple[AttendanceRecord, ...]


@dataclass(frozen=True)
class FetchFailed:
    resource: Resource
    work_date: Optional[date] = None


@dataclass(frozen=True)
class CheckedIn:
    record: AttendanceRecord


@dataclass(frozen=True)
class CheckedOut:
    record_id: int
    check_out: datetime


@dataclass(frozen=True)
class EmployeeAdded:
    employee: Employee


@dataclass(frozen=True)
class MutationFailed:
    message: str


@dataclass(frozen=True)
class AddEmployeeOpened:
    pass


@dataclass(frozen=True)
class DraftChanged:
    draft: EmployeeDraft


Action = Union[
    DateSelected,
    FetchStarted,
    EmployeesLoaded,
    RecordsLoaded,
    FetchFailed,
    CheckedIn,
    CheckedOut,
    EmployeeAdded,
    MutationFailed,
    AddEmployeeOpened,
    DraftChanged,
]


def _is_stale(state: TrackerState, work_date: Optional[date]) -> bool:
    return work_date is not None and work_date != state.selected_date


def reduce(state: TrackerState, action: Action) -> TrackerState:
    if isinstance(action, DateSelected):
        return replace(state, selected_date=action.work_date)

    if isinstance(action, FetchStarted):
        if action.resource is Resource.RECORDS and not _is_stale(state, action.work_date):
            return replace(state, loading=True)
        return state

    if isinstance(action, EmployeesLoaded):
        return replace(state, employees=tuple(action.employees))

    if isinstance(action, RecordsLoaded):
        # Response for a date that is no longer selected.
        if _is_stale(state, action.work_date):
            return state
        return replace(state, records=tuple(action.records), loading=False, records_failed=False)

    if isinstance(action, FetchFailed):
        if action.resource is Resource.RECORDS and not _is_stale(state, action.work_date):
            return replace(state, loading=False, records_failed=True)
        return state

    if isinstance(action, CheckedIn):
        if action.record.work_date != state.selected_date:
            return state
        return replace(state, records=(action.record,) + state.records)

    if isinstance(action, CheckedOut):
        records = tuple(
            r.with_check_out(action.check_out) if r.id == action.record_id else r
            for r in state.records
        )
        return replace(state, records=records)

    if isinstance(action, EmployeeAdded):
        employees = tuple(sorted(state.employees + (action.employee,), key=lambda e: e.name))
        return replace(state, employees=employees, draft=EmployeeDraft(), show_add_employee=False)

    if isinstance(action, MutationFailed):
        return replace(state, alert=action.message)

    if isinstance(action, AddEmployeeOpened):
        return replace(state, show_add_employee=True)

    if isinstance(action, DraftChanged):
        return replace(state, draft=action.draft)

    raise TypeError(f"Unsupported action: {action!r}")
