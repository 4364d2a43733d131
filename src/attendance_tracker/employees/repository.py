from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Services depend on this interface, not on a concrete store.
    """

    def list_ordered_by_name(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, employee_id: str) -> Employee:
        raise NotImplementedError
