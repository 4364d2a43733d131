from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        """Records dated ``work_date`` joined with their employee, newest first."""

        raise NotImplementedError

    def create_check_in(self, *, employee_id: int, work_date: date, check_in: datetime) -> AttendanceRecord:
        raise NotImplementedError

    def set_check_out(self, *, record_id: int, check_out: datetime) -> bool:
        raise NotImplementedError
