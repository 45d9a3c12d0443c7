from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..attendance import ledger
from ..attendance.model import AttendanceRecord, AttendanceSheetRow
from ..common.datetime_utils import now_local
from ..common.ids import IdFactory, new_id
from ..common.logger import get_logger
from ..common.validators import require_choice, require_date, require_non_empty
from ..core.enums import AttendanceStatus, DeletePolicy, LeaveDecision, LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, StorageCorruptionError
from ..employees import commands as employee_commands
from ..employees.department_model import Department, DepartmentOverview
from ..employees.factory import build_department, build_employee
from ..employees.model import Employee
from ..leaves import workflow
from ..leaves.model import LeaveRequest, LeaveRequestRow
from ..storage.hr_data_repository import HRDataRepository
from .aggregate import HRData

logger = get_logger("records.store")


class RecordStore:
    """Holds the HRData aggregate and applies commands to it.

    Each command computes a new aggregate, persists it through the repository
    and only then replaces the in-memory value. A failed write leaves the store
    exactly as it was. Commands are serialized on one lock, so concurrent
    requests never build on a stale aggregate.
    """

    def __init__(
        self,
        repository: HRDataRepository,
        data: HRData,
        *,
        delete_policy: DeletePolicy = DeletePolicy.RETAIN,
        strict_leave_dates: bool = False,
        id_factory: IdFactory = new_id,
        clock: Callable[[], datetime] = now_local,
        load_warning: Optional[StorageCorruptionError] = None,
    ):
        self._repository = repository
        self._data = data
        self._delete_policy = DeletePolicy(delete_policy)
        self._strict_leave_dates = bool(strict_leave_dates)
        self._id_factory = id_factory
        self._clock = clock
        self.load_warning = load_warning
        self._lock = threading.Lock()

    @classmethod
    def open(cls, repository: HRDataRepository, **kwargs: Any) -> "RecordStore":
        result = repository.load()
        return cls(repository, result.data, load_warning=result.warning, **kwargs)

    @property
    def data(self) -> HRData:
        return self._data

    @property
    def delete_policy(self) -> DeletePolicy:
        return self._delete_policy

    def _apply(self, transform: Callable[[HRData], HRData]) -> HRData:
        """Run one command: read, transform, persist, swap, under the write lock."""
        with self._lock:
            new_data = transform(self._data)
            self._repository.save(new_data)
            self._data = new_data
            self.load_warning = None
            return new_data

    # Employees
    def add_employee(self, payload: Mapping[str, Any]) -> Employee:
        employee = build_employee(payload, id_factory=self._id_factory)
        self._apply(lambda data: employee_commands.add_employee(data, employee))
        logger.info("Added employee %s", employee.id)
        return employee

    def update_employee(self, employee_id: str, payload: Mapping[str, Any]) -> Employee:
        employee = build_employee(payload, id_override=employee_id)
        self._apply(lambda data: employee_commands.update_employee(data, employee))
        logger.info("Updated employee %s", employee.id)
        return employee

    def delete_employee(self, employee_id: str) -> None:
        self._apply(
            lambda data: employee_commands.delete_employee(data, employee_id, policy=self._delete_policy)
        )
        logger.info("Deleted employee %s (policy=%s)", employee_id, self._delete_policy.value)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._data.find_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee not found: {employee_id}")
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return list(self._data.employees)

    def search_employees(self, term: str) -> Sequence[Employee]:
        return employee_commands.search_employees(self._data, term)

    # Departments
    def add_department(self, payload: Mapping[str, Any]) -> Department:
        department = build_department(payload, id_factory=self._id_factory)
        self._apply(lambda data: employee_commands.add_department(data, department))
        logger.info("Added department %s", department.id)
        return department

    def get_department(self, department_id: str) -> Department:
        department = self._data.find_department(department_id)
        if not department:
            raise NotFoundError(f"Department not found: {department_id}")
        return department

    def list_departments(self) -> Sequence[Department]:
        return list(self._data.departments)

    def department_overview(self) -> Sequence[DepartmentOverview]:
        return employee_commands.department_overview(self._data)

    # Attendance
    def mark_attendance(self, employee_id: str, work_date: Any, status: Any) -> AttendanceRecord:
        employee_id = require_non_empty(employee_id, "Employee")
        work_date = require_date(work_date, "Date")
        status = require_choice(status, AttendanceStatus, "Status")

        new_data = self._apply(
            lambda data: ledger.mark_attendance(
                data,
                employee_id=employee_id,
                work_date=work_date,
                status=status,
                now=self._clock(),
                id_factory=self._id_factory,
            )
        )
        logger.info("Marked %s %s on %s", employee_id, status.value, work_date.isoformat())
        return ledger.find_record(new_data, employee_id, work_date)

    def attendance_sheet(self, work_date: Any) -> Sequence[AttendanceSheetRow]:
        return ledger.attendance_sheet(self._data, require_date(work_date, "Date"))

    # Leaves
    def request_leave(
        self,
        employee_id: str,
        leave_type: Any,
        start_date: Any,
        end_date: Any,
        reason: str,
    ) -> LeaveRequest:
        employee_id = require_non_empty(employee_id, "Employee")
        leave_type = require_choice(leave_type, LeaveType, "Leave type")
        start_date = require_date(start_date, "Start date")
        end_date = require_date(end_date, "End date")

        new_data = self._apply(
            lambda data: workflow.request_leave(
                data,
                employee_id=employee_id,
                leave_type=leave_type,
                start_date=start_date,
                end_date=end_date,
                reason=reason,
                strict_dates=self._strict_leave_dates,
                id_factory=self._id_factory,
            )
        )
        request = new_data.leave_requests[-1]
        logger.info("Leave request %s filed for %s", request.id, request.employee_id)
        return request

    def decide_leave(self, request_id: str, decision: Any) -> LeaveRequest:
        decision = require_choice(decision, LeaveDecision, "Decision")
        new_data = self._apply(lambda data: workflow.decide(data, request_id, decision))
        logger.info("Leave request %s %s", request_id, decision.outcome.value)
        return new_data.find_leave_request(request_id)

    def list_leave_requests(self, status: Optional[Any] = None) -> Sequence[LeaveRequestRow]:
        if status is not None:
            status = require_choice(status, LeaveStatus, "Status")
        return workflow.list_leave_requests(self._data, status=status)
