from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_email, require_non_empty
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: list and add employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.list_ordered_by_name())

    def create_employee(self, *, name: str, email: str, employee_id: str) -> Employee:
        # Duplicate codes are accepted; the store holds no uniqueness rule either.
        name = require_non_empty(name, "اسم الموظف")
        email = require_email(email, "البريد الإلكتروني")
        employee_id = require_non_empty(employee_id, "رقم الموظف")

        employee = self._employees.create(name=name, email=email, employee_id=employee_id)
        logger.info("Added employee id=%s code=%s", employee.id, employee.employee_id)
        return employee
