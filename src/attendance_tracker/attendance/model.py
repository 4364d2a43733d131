from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record, joined with its owning employee.

    ``employee_id`` references ``Employee.id`` (not the human-readable code).
    """

    id: int
    employee_id: int
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    created_at: Optional[datetime]
    employee: Employee

    @property
    def is_checked_in(self) -> bool:
        return self.check_in is not None

    @property
    def is_checked_out(self) -> bool:
        return self.check_out is not None

    def with_check_out(self, check_out: datetime) -> "AttendanceRecord":
        return replace(self, check_out=check_out)
