from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, now_local
from ..container import Container
from ..records.codec import attendance_to_dict


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.get("/api/attendance", endpoint="attendance_sheet")
    def attendance_sheet():
        work_date = request.args.get("date") or format_iso_date(now_local().date())
        rows = store.attendance_sheet(work_date)
        return jsonify(
            [
                {
                    "employeeId": row.employee.id,
                    "employeeName": row.employee.name,
                    "record": attendance_to_dict(row.record) if row.record else None,
                }
                for row in rows
            ]
        )

    @app.post("/api/attendance", endpoint="mark_attendance")
    def mark_attendance():
        payload = request.get_json(silent=True) or {}
        record = store.mark_attendance(
            payload.get("employeeId"),
            payload.get("date") or format_iso_date(now_local().date()),
            payload.get("status"),
        )
        return jsonify(attendance_to_dict(record))
