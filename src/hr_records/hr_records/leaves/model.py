from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_id: str
    type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING


@dataclass(frozen=True)
class LeaveRequestRow:
    """Read-model for leave listings (joined with the employee name)."""

    request: LeaveRequest
    employee_name: str
