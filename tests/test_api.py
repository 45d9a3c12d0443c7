from __future__ import annotations

import pytest

from hr_records.main import create_app
from hr_records.storage.memory_storage import InMemoryStorage


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(storage):
    app = create_app(settings_module="hr_records.config.testing", storage=storage)
    return app.test_client()


def test_list_seed_employees(client):
    resp = client.get("/api/employees")

    assert resp.status_code == 200
    assert [e["id"] for e in resp.get_json()] == ["e1", "e2", "e3", "e4"]


def test_search_employees(client):
    resp = client.get("/api/employees?q=marketing")

    assert [e["name"] for e in resp.get_json()] == ["Jake Valdez"]


def test_employee_crud(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload)
    assert created.status_code == 201
    emp_id = created.get_json()["id"]

    assert client.get(f"/api/employees/{emp_id}").get_json()["email"] == "maria.santos@hrms.com"

    updated = client.put(f"/api/employees/{emp_id}", json={**employee_payload, "position": "Senior Accountant"})
    assert updated.get_json()["position"] == "Senior Accountant"

    assert client.delete(f"/api/employees/{emp_id}").status_code == 204
    assert client.get(f"/api/employees/{emp_id}").status_code == 404


def test_validation_error_is_400(client, employee_payload):
    resp = client.post("/api/employees", json={**employee_payload, "email": "nope"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_departments_overview(client):
    client.post("/api/departments", json={"name": "Finance", "description": "Money"})

    rows = client.get("/api/departments").get_json()
    assert rows[0]["managerName"] == "Troy Au"
    assert rows[0]["employeeCount"] == 1
    assert rows[-1]["name"] == "Finance"
    assert rows[-1]["managerName"] == "Unassigned"


def test_mark_attendance_and_sheet(client):
    resp = client.post("/api/attendance", json={"employeeId": "e4", "date": "2026-03-02", "status": "Late"})
    assert resp.status_code == 200
    assert "checkInTime" not in resp.get_json()

    sheet = client.get("/api/attendance?date=2026-03-02").get_json()
    marked = {row["employeeId"]: row["record"] for row in sheet}
    assert marked["e4"]["status"] == "Late"
    assert marked["e1"] is None


def test_mark_attendance_unknown_employee_is_404(client):
    resp = client.post("/api/attendance", json={"employeeId": "zz", "date": "2026-03-02", "status": "Absent"})

    assert resp.status_code == 404


def test_leave_flow_and_conflict(client):
    created = client.post(
        "/api/leaves",
        json={"employeeId": "e2", "type": "Annual Leave", "startDate": "2026-04-01", "endDate": "2026-04-03", "reason": "Vacation"},
    )
    assert created.status_code == 201
    leave_id = created.get_json()["id"]

    assert client.post(f"/api/leaves/{leave_id}/approve").get_json()["status"] == "Approved"
    again = client.post(f"/api/leaves/{leave_id}/reject")
    assert again.status_code == 409
    assert again.get_json()["error"] == "InvalidTransitionError"

    pending = client.get("/api/leaves?status=Pending").get_json()
    assert pending == []


def test_payroll_sheet(client):
    body = client.get("/api/payroll/2026-01").get_json()

    assert body["totalBasic"] == 270000
    assert body["totalNet"] == 220050
    assert body["records"][0]["deductions"] == {"tax": 8500, "sss": 3825, "philhealth": 3400, "other": 0}


def test_payroll_bad_month(client):
    assert client.get("/api/payroll/2026-1x").status_code == 400


def test_single_employee_payroll(client):
    body = client.get("/api/payroll/2026-01/e3").get_json()

    assert body["id"] == "pay_e3_2026-01"
    assert body["netSalary"] == 36675


def test_dashboard_and_health(client):
    stats = client.get("/api/dashboard").get_json()
    assert stats["totalEmployees"] == 4
    assert stats["currency"] == "PHP"
    assert [h["id"] for h in stats["recentHires"]] == ["e1", "e2", "e3"]
    assert stats["recentHires"][0] == {
        "id": "e1",
        "name": "Troy Au",
        "position": "Senior Developer",
        "hireDate": "2022-01-15",
    }

    assert client.get("/api/health").get_json() == {"status": "ok", "storageWarning": None}


def test_health_reports_corrupt_storage():
    app = create_app(settings_module="hr_records.config.testing", storage=InMemoryStorage({"hrms_data_v1": "garbage"}))

    body = app.test_client().get("/api/health").get_json()

    assert body["storageWarning"].startswith("Stored HR data is unreadable")


def test_payroll_csv_export(client):
    resp = client.get("/api/payroll-export/2026-01")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "payroll_2026-01.csv" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "month,employee_id,employee_name,basic_salary,tax,sss,philhealth,other,net_salary"
    assert lines[1] == "2026-01,e1,Troy Au,85000.00,8500.00,3825.00,3400.00,0.00,69275.00"
    assert len(lines) == 5
