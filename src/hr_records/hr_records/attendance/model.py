from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark, unique per (employee_id, work_date)."""

    id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    check_in_time: Optional[time] = None


@dataclass(frozen=True)
class AttendanceSheetRow:
    """Read-model: an employee and their mark for a day, if any."""

    employee: Employee
    record: Optional[AttendanceRecord]
