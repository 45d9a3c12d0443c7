from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..core.enums import DeletePolicy
from ..core.exceptions import NotFoundError, ValidationError
from ..records.aggregate import HRData
from .department_model import Department, DepartmentOverview
from .model import Employee


def add_employee(data: HRData, employee: Employee) -> HRData:
    if data.find_employee(employee.id):
        raise ValidationError(f"Employee id already exists: {employee.id}")
    return replace(data, employees=data.employees + (employee,))


def update_employee(data: HRData, employee: Employee) -> HRData:
    if not data.find_employee(employee.id):
        raise NotFoundError(f"Employee not found: {employee.id}")
    return replace(
        data,
        employees=tuple(employee if e.id == employee.id else e for e in data.employees),
    )


def delete_employee(data: HRData, employee_id: str, *, policy: DeletePolicy = DeletePolicy.RETAIN) -> HRData:
    """Remove an employee.

    With ``RETAIN`` their attendance, leave and payroll rows stay behind as
    dangling references (historical records). ``CASCADE`` drops them too.
    Department ``manager_id`` values are never rewritten.
    """
    if not data.find_employee(employee_id):
        raise NotFoundError(f"Employee not found: {employee_id}")

    data = replace(data, employees=tuple(e for e in data.employees if e.id != employee_id))
    if policy is DeletePolicy.CASCADE:
        data = replace(
            data,
            attendance=tuple(a for a in data.attendance if a.employee_id != employee_id),
            leave_requests=tuple(r for r in data.leave_requests if r.employee_id != employee_id),
            payroll=tuple(p for p in data.payroll if p.employee_id != employee_id),
        )
    return data


def add_department(data: HRData, department: Department) -> HRData:
    # Names may repeat; ids may not.
    if data.find_department(department.id):
        raise ValidationError(f"Department id already exists: {department.id}")
    return replace(data, departments=data.departments + (department,))


def search_employees(data: HRData, term: str) -> Sequence[Employee]:
    """Case-insensitive substring match over name, email and position."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(data.employees)
    return [
        e
        for e in data.employees
        if needle in e.name.lower() or needle in e.email.lower() or needle in e.position.lower()
    ]


def department_overview(data: HRData) -> Sequence[DepartmentOverview]:
    rows = []
    for d in data.departments:
        manager = data.find_employee(d.manager_id) if d.manager_id else None
        rows.append(
            DepartmentOverview(
                department=d,
                manager_name=manager.name if manager else "Unassigned",
                employee_count=sum(1 for e in data.employees if e.department_id == d.id),
            )
        )
    return rows
