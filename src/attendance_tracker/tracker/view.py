from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_time
from ..core.constants import DEFAULT_TIME_FORMAT
from ..employees.model import Employee
from .state import TrackerState


class RowAction(str, Enum):
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    COMPLETE = "complete"


@dataclass(frozen=True)
class EmployeeRow:
    employee: Employee
    record: Optional[AttendanceRecord]
    action: RowAction
    check_in: str
    check_out: str


@dataclass(frozen=True)
class Summary:
    total_employees: int
    checked_in: int
    checked_out: int


def record_for(employee_id: int, records: Iterable[AttendanceRecord]) -> Optional[AttendanceRecord]:
    """First loaded record of the employee; records are newest first."""
    return next((r for r in records if r.employee_id == employee_id), None)


def action_for(record: Optional[AttendanceRecord]) -> RowAction:
    if record is None or not record.is_checked_in:
        return RowAction.CHECK_IN
    if not record.is_checked_out:
        return RowAction.CHECK_OUT
    return RowAction.COMPLETE


def build_rows(state: TrackerState, *, time_format: str = DEFAULT_TIME_FORMAT) -> List[EmployeeRow]:
    rows: List[EmployeeRow] = []
    for employee in state.employees:
        record = record_for(employee.id, state.records)
        rows.append(
            EmployeeRow(
                employee=employee,
                record=record,
                action=action_for(record),
                check_in=format_time(record.check_in if record else None, time_format),
                check_out=format_time(record.check_out if record else None, time_format),
            )
        )
    return rows


def summarize(state: TrackerState) -> Summary:
    return Summary(
        total_employees=len(state.employees),
        checked_in=sum(1 for r in state.records if r.is_checked_in),
        checked_out=sum(1 for r in state.records if r.is_checked_out),
    )
