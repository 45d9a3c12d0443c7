from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.ids import IdFactory, new_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..records.aggregate import HRData
from .model import AttendanceRecord, AttendanceSheetRow


def find_record(data: HRData, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
    return next(
        (a for a in data.attendance if a.employee_id == employee_id and a.work_date == work_date),
        None,
    )


def mark_attendance(
    data: HRData,
    *,
    employee_id: str,
    work_date: date,
    status: AttendanceStatus,
    now: datetime,
    id_factory: IdFactory = new_id,
) -> HRData:
    """Upsert the mark for (employee_id, work_date).

    An existing mark keeps its id and is replaced; otherwise a new one is
    appended. Check-in is stamped from ``now`` only for PRESENT.
    """
    if not data.find_employee(employee_id):
        raise NotFoundError(f"Employee not found: {employee_id}")

    existing = find_record(data, employee_id, work_date)
    record = AttendanceRecord(
        id=existing.id if existing else id_factory(),
        employee_id=employee_id,
        work_date=work_date,
        status=status,
        check_in_time=now.time().replace(second=0, microsecond=0) if status == AttendanceStatus.PRESENT else None,
    )

    kept = tuple(a for a in data.attendance if not (a.employee_id == employee_id and a.work_date == work_date))
    return replace(data, attendance=kept + (record,))


def attendance_sheet(data: HRData, work_date: date) -> Sequence[AttendanceSheetRow]:
    return [AttendanceSheetRow(employee=e, record=find_record(data, e.id, work_date)) for e in data.employees]
