from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in / check-out use cases.

    Each call is a single store round trip: no retries, no rollback across
    calls. A second check-in for the same employee and day is accepted.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return list(self._attendance.list_for_date(work_date))

    def check_in(self, employee_id: int, *, work_date: date, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        record = self._attendance.create_check_in(employee_id=int(employee_id), work_date=work_date, check_in=now)
        logger.info("Check-in employee=%s date=%s record=%s", employee_id, work_date, record.id)
        return record

    def check_out(self, record_id: int, *, now: datetime | None = None) -> datetime:
        now = now or now_local()
        if not self._attendance.set_check_out(record_id=int(record_id), check_out=now):
            raise ValidationError("سجل الحضور غير موجود")
        logger.info("Check-out record=%s", record_id)
        return now
