"""Demo dataset used when storage is empty or unreadable."""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, LeaveStatus, LeaveType
from ..employees.department_model import Department
from ..employees.model import Employee
from ..leaves.model import LeaveRequest
from ..records.aggregate import HRData


def build_seed_data(today: date) -> HRData:
    return HRData(
        departments=(
            Department(id="d1", name="IT Department", manager_id="e1", description="Technology and Development"),
            Department(id="d2", name="Human Resources", manager_id="e2", description="Employee Relations and Recruiting"),
            Department(id="d3", name="Sales", manager_id="e3", description="Revenue and Customer Acquisition"),
            Department(id="d4", name="Marketing", manager_id="e4", description="Brand and Outreach"),
        ),
        employees=(
            Employee(
                id="e1",
                name="Troy Au",
                email="troy.au@hrms.com",
                position="Senior Developer",
                department_id="d1",
                salary=Decimal("85000"),
                hire_date=date(2022, 1, 15),
            ),
            Employee(
                id="e2",
                name="Julius Simon",
                email="julius.simon@hrms.com",
                position="HR Manager",
                department_id="d2",
                salary=Decimal("75000"),
                hire_date=date(2021, 3, 10),
            ),
            Employee(
                id="e3",
                name="Charles Sinacay",
                email="charles.sinacay@hrms.com",
                position="Sales Representative",
                department_id="d3",
                salary=Decimal("45000"),
                hire_date=date(2023, 6, 1),
            ),
            Employee(
                id="e4",
                name="Jake Valdez",
                email="jake.valdez@hrms.com",
                position="Marketing Lead",
                department_id="d4",
                salary=Decimal("65000"),
                hire_date=date(2022, 8, 20),
            ),
        ),
        attendance=(
            AttendanceRecord(id="a1", employee_id="e1", work_date=today, status=AttendanceStatus.PRESENT, check_in_time=time(8, 55)),
            AttendanceRecord(id="a2", employee_id="e2", work_date=today, status=AttendanceStatus.PRESENT, check_in_time=time(9, 0)),
        ),
        leave_requests=(
            LeaveRequest(
                id="l1",
                employee_id="e3",
                type=LeaveType.SICK,
                start_date=date(2023, 10, 1),
                end_date=date(2023, 10, 3),
                reason="Flu and fever",
                status=LeaveStatus.APPROVED,
            ),
        ),
        payroll=(),
    )
