from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee that attendance is recorded for.

    ``employee_id`` is the human-readable employee code, ``id`` the store key.
    """

    id: int
    name: str
    email: str
    employee_id: str
