from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..container import Container
from ..core.constants import APP_NAME, CURRENCY
from ..records.codec import money_to_json
from .service import build_dashboard


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.get("/api/dashboard", endpoint="dashboard")
    def dashboard():
        stats = build_dashboard(store.data, now_local().date())
        return jsonify(
            {
                "appName": APP_NAME,
                "currency": CURRENCY,
                "totalEmployees": stats.total_employees,
                "totalDepartments": stats.total_departments,
                "presentToday": stats.present_today,
                "pendingLeaves": stats.pending_leaves,
                "monthlySalaryTotal": money_to_json(stats.monthly_salary_total),
                "recentHires": [
                    {
                        "id": e.id,
                        "name": e.name,
                        "position": e.position,
                        "hireDate": e.hire_date.isoformat(),
                    }
                    for e in stats.recent_hires
                ],
            }
        )

    @app.get("/api/health", endpoint="health")
    def health():
        warning = store.load_warning
        return jsonify({"status": "ok", "storageWarning": str(warning) if warning else None})
