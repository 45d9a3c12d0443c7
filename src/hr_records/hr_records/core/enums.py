from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status, stored as its display text."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class LeaveType(str, Enum):
    SICK = "Sick Leave"
    CASUAL = "Casual Leave"
    ANNUAL = "Annual Leave"


class LeaveStatus(str, Enum):
    """Leave request lifecycle: PENDING moves once to APPROVED or REJECTED."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def outcome(self) -> LeaveStatus:
        return LeaveStatus.APPROVED if self is LeaveDecision.APPROVE else LeaveStatus.REJECTED


class DeletePolicy(str, Enum):
    """What happens to attendance/leave/payroll rows when an employee is deleted."""

    RETAIN = "retain"
    CASCADE = "cascade"
