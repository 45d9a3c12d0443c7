from __future__ import annotations

import csv
import io

from flask import Flask, jsonify

from ..container import Container
from ..records.codec import money_to_json, payroll_to_dict

_CSV_FIELDS = [
    "month",
    "employee_id",
    "employee_name",
    "basic_salary",
    "tax",
    "sss",
    "philhealth",
    "other",
    "net_salary",
]


def register(app: Flask, container: Container) -> None:
    store = container.store
    payroll = container.payroll_service

    @app.get("/api/payroll/<month>", endpoint="payroll_sheet")
    def payroll_sheet(month: str):
        sheet = payroll.build_sheet(store.list_employees(), month)
        return jsonify(
            {
                "month": sheet.month,
                "records": [payroll_to_dict(r) for r in sheet.records],
                "totalBasic": money_to_json(sheet.total_basic),
                "totalDeductions": money_to_json(sheet.total_deductions),
                "totalNet": money_to_json(sheet.total_net),
            }
        )

    @app.get("/api/payroll/<month>/<employee_id>", endpoint="employee_payroll")
    def employee_payroll(month: str, employee_id: str):
        record = payroll.compute_payroll(store.get_employee(employee_id), month)
        return jsonify(payroll_to_dict(record))

    @app.get("/api/payroll-export/<month>", endpoint="payroll_export")
    def payroll_export(month: str):
        employees = store.list_employees()
        names = {e.id: e.name for e in employees}
        sheet = payroll.build_sheet(employees, month)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS)
        writer.writeheader()
        for r in sheet.records:
            writer.writerow(
                {
                    "month": r.month,
                    "employee_id": r.employee_id,
                    "employee_name": names.get(r.employee_id, ""),
                    "basic_salary": f"{r.basic_salary:.2f}",
                    "tax": f"{r.deductions.tax:.2f}",
                    "sss": f"{r.deductions.sss:.2f}",
                    "philhealth": f"{r.deductions.philhealth:.2f}",
                    "other": f"{r.deductions.other:.2f}",
                    "net_salary": f"{r.net_salary:.2f}",
                }
            )

        # BOM so spreadsheet apps detect UTF-8
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=payroll_{sheet.month}.csv"},
        )
