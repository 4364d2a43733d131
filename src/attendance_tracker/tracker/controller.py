from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from ..attendance.service import AttendanceService
from ..core.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIME_FORMAT,
    MSG_ADD_EMPLOYEE_FAILED,
    MSG_CHECK_IN_FAILED,
    MSG_CHECK_OUT_FAILED,
)
from ..core.exceptions import DomainError, ValidationError
from ..employees.service import EmployeeService
from ..export.csv_export import CsvExport, export_attendance_csv
from .state import (
    Action,
    AddEmployeeOpened,
    CheckedIn,
    CheckedOut,
    DateSelected,
    DraftChanged,
    EmployeeAdded,
    EmployeesLoaded,
    FetchFailed,
    FetchStarted,
    MutationFailed,
    RecordsLoaded,
    Resource,
    TrackerState,
    initial_state,
    reduce,
)

logger = logging.getLogger(__name__)


class TrackerController:
    """Drives the attendance page.

    Every operator action is one store call followed by a re-fetch of the
    affected list. Failures are logged; mutation failures also set the
    operator alert. Lists keep the last successful fetch on failure.
    """

    def __init__(
        self,
        employees: EmployeeService,
        attendance: AttendanceService,
        *,
        selected_date: date,
        time_format: str = DEFAULT_TIME_FORMAT,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self._employees = employees
        self._attendance = attendance
        self._time_format = time_format
        self._date_format = date_format
        self._state = initial_state(selected_date)

    @property
    def state(self) -> TrackerState:
        return self._state

    def dispatch(self, action: Action) -> TrackerState:
        self._state = reduce(self._state, action)
        return self._state

    # ---- loading ----

    def select_date(self, work_date: date) -> TrackerState:
        self.dispatch(DateSelected(work_date))
        return self.refresh()

    def refresh(self) -> TrackerState:
        self.refresh_employees()
        return self.refresh_records()

    def refresh_employees(self) -> TrackerState:
        self.dispatch(FetchStarted(Resource.EMPLOYEES))
        try:
            employees = self._employees.list_employees()
        except DomainError:
            logger.exception("Error fetching employees")
            return self.dispatch(FetchFailed(Resource.EMPLOYEES))
        return self.dispatch(EmployeesLoaded(tuple(employees)))

    def refresh_records(self) -> TrackerState:
        work_date = self._state.selected_date
        self.dispatch(FetchStarted(Resource.RECORDS, work_date))
        try:
            records = self._attendance.list_for_date(work_date)
        except DomainError:
            logger.exception("Error fetching attendance records for %s", work_date)
            return self.dispatch(FetchFailed(Resource.RECORDS, work_date))
        return self.dispatch(RecordsLoaded(work_date, tuple(records)))

    # ---- mutations ----

    def check_in(self, employee_id: int) -> bool:
        try:
            record = self._attendance.check_in(employee_id, work_date=self._state.selected_date)
        except DomainError:
            logger.exception("Error checking in employee %s", employee_id)
            self.dispatch(MutationFailed(MSG_CHECK_IN_FAILED))
            return False
        self.dispatch(CheckedIn(record))
        self.refresh_records()
        return True

    def check_out(self, record_id: int) -> bool:
        try:
            check_out = self._attendance.check_out(record_id)
        except DomainError:
            logger.exception("Error checking out record %s", record_id)
            self.dispatch(MutationFailed(MSG_CHECK_OUT_FAILED))
            return False
        self.dispatch(CheckedOut(record_id, check_out))
        self.refresh_records()
        return True

    def open_add_employee(self) -> TrackerState:
        return self.dispatch(AddEmployeeOpened())

    def update_draft(self, **fields: str) -> TrackerState:
        return self.dispatch(DraftChanged(replace(self._state.draft, **fields)))

    def submit_employee(self) -> bool:
        draft = self._state.draft
        try:
            employee = self._employees.create_employee(
                name=draft.name,
                email=draft.email,
                employee_id=draft.employee_id,
            )
        except ValidationError as e:
            logger.warning("Rejected new employee: %s", e)
            self.dispatch(MutationFailed(str(e)))
            return False
        except DomainError:
            logger.exception("Error adding employee")
            self.dispatch(MutationFailed(MSG_ADD_EMPLOYEE_FAILED))
            return False
        self.dispatch(EmployeeAdded(employee))
        self.refresh_employees()
        return True

    # ---- export ----

    def export_csv(self) -> CsvExport:
        return export_attendance_csv(
            self._state.records,
            self._state.selected_date,
            time_format=self._time_format,
            date_format=self._date_format,
        )
