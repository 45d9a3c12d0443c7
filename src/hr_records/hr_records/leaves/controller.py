from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..records.codec import leave_to_dict


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.get("/api/leaves", endpoint="list_leaves")
    def list_leaves():
        rows = store.list_leave_requests(request.args.get("status") or None)
        return jsonify([{**leave_to_dict(row.request), "employeeName": row.employee_name} for row in rows])

    @app.post("/api/leaves", endpoint="request_leave")
    def request_leave():
        payload = request.get_json(silent=True) or {}
        leave = store.request_leave(
            payload.get("employeeId"),
            payload.get("type"),
            payload.get("startDate"),
            payload.get("endDate"),
            payload.get("reason"),
        )
        return jsonify(leave_to_dict(leave)), 201

    @app.post("/api/leaves/<request_id>/<decision>", endpoint="decide_leave")
    def decide_leave(request_id: str, decision: str):
        return jsonify(leave_to_dict(store.decide_leave(request_id, decision)))
