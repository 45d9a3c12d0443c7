from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.constants import DASHBOARD_RECENT_HIRES
from ..core.enums import AttendanceStatus, LeaveStatus
from ..employees.model import Employee
from ..records.aggregate import HRData


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    total_departments: int
    present_today: int
    pending_leaves: int
    monthly_salary_total: Decimal
    # First employees in stored order, not sorted by hire date.
    recent_hires: tuple[Employee, ...] = ()


def build_dashboard(data: HRData, today: date) -> DashboardStats:
    return DashboardStats(
        total_employees=len(data.employees),
        total_departments=len(data.departments),
        present_today=sum(
            1 for a in data.attendance if a.work_date == today and a.status == AttendanceStatus.PRESENT
        ),
        pending_leaves=sum(1 for r in data.leave_requests if r.status == LeaveStatus.PENDING),
        monthly_salary_total=sum((e.salary for e in data.employees), Decimal("0")),
        recent_hires=tuple(data.employees[:DASHBOARD_RECENT_HIRES]),
    )
