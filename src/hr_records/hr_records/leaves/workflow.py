from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.ids import IdFactory, new_id
from ..common.validators import require_non_empty
from ..core.enums import LeaveDecision, LeaveStatus, LeaveType
from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from ..records.aggregate import HRData
from .model import LeaveRequest, LeaveRequestRow


def request_leave(
    data: HRData,
    *,
    employee_id: str,
    leave_type: LeaveType,
    start_date: date,
    end_date: date,
    reason: str,
    strict_dates: bool = False,
    id_factory: IdFactory = new_id,
) -> HRData:
    if not data.find_employee(employee_id):
        raise NotFoundError(f"Employee not found: {employee_id}")

    if strict_dates and end_date < start_date:
        raise ValidationError("End date must be on or after start date")

    request = LeaveRequest(
        id=id_factory(),
        employee_id=employee_id,
        type=leave_type,
        start_date=start_date,
        end_date=end_date,
        reason=require_non_empty(reason, "Reason"),
        status=LeaveStatus.PENDING,
    )
    return replace(data, leave_requests=data.leave_requests + (request,))


def decide(data: HRData, request_id: str, decision: LeaveDecision) -> HRData:
    req = data.find_leave_request(request_id)
    if not req:
        raise NotFoundError(f"Leave request not found: {request_id}")
    if req.status != LeaveStatus.PENDING:
        raise InvalidTransitionError(f"Leave request {request_id} is already {req.status.value}")

    decided = replace(req, status=decision.outcome)
    return replace(
        data,
        leave_requests=tuple(decided if r.id == request_id else r for r in data.leave_requests),
    )


def list_leave_requests(data: HRData, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequestRow]:
    rows = []
    for r in data.leave_requests:
        if status is not None and r.status != status:
            continue
        employee = data.find_employee(r.employee_id)
        rows.append(LeaveRequestRow(request=r, employee_name=employee.name if employee else "Unknown"))
    return rows
