from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..employees.model import Employee
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT_JOINED = """
    SELECT
        ar.id, ar.employee_id, ar.date, ar.check_in, ar.check_out, ar.created_at,
        e.name AS employee_name, e.email AS employee_email, e.employee_id AS employee_code
    FROM attendance_records ar
    JOIN employees e ON e.id = ar.employee_id
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["date"],
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        created_at=r.get("created_at"),
        employee=Employee(
            id=int(r["employee_id"]),
            name=r["employee_name"],
            email=r["employee_email"],
            employee_id=r["employee_code"],
        ),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_JOINED
                + """
                WHERE ar.date=%s
                ORDER BY ar.created_at DESC, ar.id DESC
                """,
                (work_date,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def create_check_in(self, *, employee_id: int, work_date: date, check_in: datetime) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, check_in, date)
                VALUES(%s,%s,%s)
                """,
                (int(employee_id), check_in, work_date),
            )
            record_id = int(cur.lastrowid)
            cur.execute(_SELECT_JOINED + " WHERE ar.id=%s", (record_id,))
            return _row_to_record(fetchone(cur))

    def set_check_out(self, *, record_id: int, check_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out=%s
                WHERE id=%s
                """,
                (check_out, int(record_id)),
            )
            return cur.rowcount > 0
