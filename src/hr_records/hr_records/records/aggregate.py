from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..employees.department_model import Department
from ..employees.model import Employee
from ..leaves.model import LeaveRequest
from ..payroll.model import PayrollRecord


@dataclass(frozen=True)
class HRData:
    """The whole HR state as one immutable value.

    Commands never mutate an ``HRData``; they return a new one via ``dataclasses.replace``.
    """

    employees: tuple[Employee, ...] = ()
    departments: tuple[Department, ...] = ()
    attendance: tuple[AttendanceRecord, ...] = ()
    leave_requests: tuple[LeaveRequest, ...] = ()
    payroll: tuple[PayrollRecord, ...] = ()

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.id == employee_id), None)

    def find_department(self, department_id: str) -> Optional[Department]:
        return next((d for d in self.departments if d.id == department_id), None)

    def find_leave_request(self, request_id: str) -> Optional[LeaveRequest]:
        return next((r for r in self.leave_requests if r.id == request_id), None)
