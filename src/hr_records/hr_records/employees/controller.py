from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..records.codec import department_to_dict, employee_to_dict


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.get("/api/employees", endpoint="list_employees")
    def list_employees():
        term = request.args.get("q", "")
        employees = store.search_employees(term) if term else store.list_employees()
        return jsonify([employee_to_dict(e) for e in employees])

    @app.post("/api/employees", endpoint="add_employee")
    def add_employee():
        employee = store.add_employee(request.get_json(silent=True) or {})
        return jsonify(employee_to_dict(employee)), 201

    @app.get("/api/employees/<employee_id>", endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(employee_to_dict(store.get_employee(employee_id)))

    @app.put("/api/employees/<employee_id>", endpoint="update_employee")
    def update_employee(employee_id: str):
        employee = store.update_employee(employee_id, request.get_json(silent=True) or {})
        return jsonify(employee_to_dict(employee))

    @app.delete("/api/employees/<employee_id>", endpoint="delete_employee")
    def delete_employee(employee_id: str):
        store.delete_employee(employee_id)
        return "", 204

    @app.get("/api/departments", endpoint="list_departments")
    def list_departments():
        return jsonify(
            [
                {
                    **department_to_dict(row.department),
                    "managerName": row.manager_name,
                    "employeeCount": row.employee_count,
                }
                for row in store.department_overview()
            ]
        )

    @app.post("/api/departments", endpoint="add_department")
    def add_department():
        department = store.add_department(request.get_json(silent=True) or {})
        return jsonify(department_to_dict(department)), 201
