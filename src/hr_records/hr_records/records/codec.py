"""JSON codec for the HRData aggregate.

Field names follow the persisted layout (``employees``, ``departments``,
``attendance``, ``leaveRequests``, ``payroll``), dates are ``YYYY-MM-DD``,
months ``YYYY-MM`` and money is a JSON number read back as ``Decimal``.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_check_in, format_iso_date, parse_check_in, parse_iso_date
from ..core.enums import AttendanceStatus, LeaveStatus, LeaveType
from ..core.exceptions import StorageCorruptionError
from ..employees.department_model import Department
from ..employees.model import Employee
from ..leaves.model import LeaveRequest
from ..payroll.model import PayrollDeductions, PayrollRecord
from .aggregate import HRData


def money_to_json(value: Decimal):
    """Integral amounts as ints, short decimals as floats, anything longer as an exact string."""
    if value == value.to_integral_value():
        return int(value)
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


def _money(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        raise TypeError(f"Not an amount: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not an amount: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return amount


def employee_to_dict(e: Employee) -> Dict[str, Any]:
    out = {
        "id": e.id,
        "name": e.name,
        "email": e.email,
        "position": e.position,
        "departmentId": e.department_id,
        "salary": money_to_json(e.salary),
        "hireDate": format_iso_date(e.hire_date),
    }
    if e.avatar is not None:
        out["avatar"] = e.avatar
    return out


def employee_from_dict(d: Dict[str, Any]) -> Employee:
    return Employee(
        id=str(d["id"]),
        name=d["name"],
        email=d["email"],
        position=d["position"],
        department_id=d["departmentId"],
        salary=_money(d["salary"]),
        hire_date=parse_iso_date(d["hireDate"]),
        avatar=d.get("avatar"),
    )


def department_to_dict(d: Department) -> Dict[str, Any]:
    return {
        "id": d.id,
        "name": d.name,
        "managerId": d.manager_id or "",
        "description": d.description,
    }


def department_from_dict(d: Dict[str, Any]) -> Department:
    return Department(
        id=str(d["id"]),
        name=d["name"],
        manager_id=d.get("managerId") or None,
        description=d.get("description") or "",
    )


def attendance_to_dict(a: AttendanceRecord) -> Dict[str, Any]:
    out = {
        "id": a.id,
        "employeeId": a.employee_id,
        "date": format_iso_date(a.work_date),
        "status": a.status.value,
    }
    if a.check_in_time is not None:
        out["checkInTime"] = format_check_in(a.check_in_time)
    return out


def attendance_from_dict(d: Dict[str, Any]) -> AttendanceRecord:
    check_in = d.get("checkInTime")
    return AttendanceRecord(
        id=str(d["id"]),
        employee_id=d["employeeId"],
        work_date=parse_iso_date(d["date"]),
        status=AttendanceStatus(d["status"]),
        check_in_time=parse_check_in(check_in) if check_in else None,
    )


def leave_to_dict(r: LeaveRequest) -> Dict[str, Any]:
    return {
        "id": r.id,
        "employeeId": r.employee_id,
        "type": r.type.value,
        "startDate": format_iso_date(r.start_date),
        "endDate": format_iso_date(r.end_date),
        "reason": r.reason,
        "status": r.status.value,
    }


def leave_from_dict(d: Dict[str, Any]) -> LeaveRequest:
    return LeaveRequest(
        id=str(d["id"]),
        employee_id=d["employeeId"],
        type=LeaveType(d["type"]),
        start_date=parse_iso_date(d["startDate"]),
        end_date=parse_iso_date(d["endDate"]),
        reason=d.get("reason", ""),
        status=LeaveStatus(d["status"]),
    )


def payroll_to_dict(p: PayrollRecord) -> Dict[str, Any]:
    return {
        "id": p.id,
        "employeeId": p.employee_id,
        "month": p.month,
        "basicSalary": money_to_json(p.basic_salary),
        "deductions": {
            "tax": money_to_json(p.deductions.tax),
            "sss": money_to_json(p.deductions.sss),
            "philhealth": money_to_json(p.deductions.philhealth),
            "other": money_to_json(p.deductions.other),
        },
        "netSalary": money_to_json(p.net_salary),
        "generatedDate": p.generated_date.isoformat(),
    }


def payroll_from_dict(d: Dict[str, Any]) -> PayrollRecord:
    ded = d["deductions"]
    return PayrollRecord(
        id=str(d["id"]),
        employee_id=d["employeeId"],
        month=d["month"],
        basic_salary=_money(d["basicSalary"]),
        deductions=PayrollDeductions(
            tax=_money(ded["tax"]),
            sss=_money(ded["sss"]),
            philhealth=_money(ded["philhealth"]),
            other=_money(ded.get("other", 0)),
        ),
        net_salary=_money(d["netSalary"]),
        # JS toISOString() ends with "Z"; fromisoformat() before 3.11 does not accept it.
        generated_date=datetime.fromisoformat(str(d["generatedDate"]).replace("Z", "+00:00")),
    )


def to_dict(data: HRData) -> Dict[str, Any]:
    return {
        "employees": [employee_to_dict(e) for e in data.employees],
        "departments": [department_to_dict(d) for d in data.departments],
        "attendance": [attendance_to_dict(a) for a in data.attendance],
        "leaveRequests": [leave_to_dict(r) for r in data.leave_requests],
        "payroll": [payroll_to_dict(p) for p in data.payroll],
    }


def from_dict(raw: Dict[str, Any]) -> HRData:
    return HRData(
        employees=tuple(employee_from_dict(e) for e in raw["employees"]),
        departments=tuple(department_from_dict(d) for d in raw["departments"]),
        attendance=tuple(attendance_from_dict(a) for a in raw["attendance"]),
        leave_requests=tuple(leave_from_dict(r) for r in raw["leaveRequests"]),
        payroll=tuple(payroll_from_dict(p) for p in raw.get("payroll", [])),
    )


def dumps(data: HRData) -> str:
    return json.dumps(to_dict(data), ensure_ascii=False)


def loads(text: str) -> HRData:
    """Decode a persisted aggregate, raising ``StorageCorruptionError`` on any defect."""
    try:
        raw = json.loads(text, parse_float=Decimal)
        if not isinstance(raw, dict):
            raise TypeError(f"Expected an object, got {type(raw).__name__}")
        return from_dict(raw)
    except (ValueError, KeyError, TypeError, AttributeError, ArithmeticError) as e:
        raise StorageCorruptionError(f"Stored HR data is unreadable: {e}") from e
