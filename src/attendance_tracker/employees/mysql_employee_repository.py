from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


def row_to_employee(r: dict) -> Employee:
    return Employee(
        id=int(r["id"]),
        name=r["name"],
        email=r["email"],
        employee_id=r["employee_id"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_ordered_by_name(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, email, employee_id
                FROM employees
                ORDER BY name ASC
                """
            )
            return [row_to_employee(r) for r in fetchall(cur)]

    def create(self, *, name: str, email: str, employee_id: str) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, employee_id)
                VALUES(%s,%s,%s)
                """,
                (name, email, employee_id),
            )
            return Employee(id=int(cur.lastrowid), name=name, email=email, employee_id=employee_id)
