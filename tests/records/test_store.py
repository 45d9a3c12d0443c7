from __future__ import annotations

import threading
import time as clock
from datetime import date, time

import pytest

from hr_records.core.enums import AttendanceStatus, DeletePolicy, LeaveStatus
from hr_records.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from hr_records.records import codec
from hr_records.records.store import RecordStore
from hr_records.storage.hr_data_repository import HRDataRepository
from hr_records.storage.memory_storage import InMemoryStorage

from conftest import NOW, TODAY, SequentialIds


class FailingStorage(InMemoryStorage):
    def __init__(self):
        super().__init__()
        self.fail = False

    def set(self, key: str, value: str) -> None:
        if self.fail:
            raise OSError("disk full")
        super().set(key, value)


class SlowStorage(InMemoryStorage):
    def set(self, key: str, value: str) -> None:
        clock.sleep(0.01)
        super().set(key, value)


def _persisted(storage, key="hrms_data_v1"):
    return codec.loads(storage.get(key))


def test_open_on_empty_storage_seeds_and_persists(store, storage):
    assert len(store.data.employees) == 4
    assert _persisted(storage) == store.data
    assert store.load_warning is None


def test_add_employee_persists_and_returns_record(store, storage, employee_payload):
    employee = store.add_employee(employee_payload)

    assert employee.id == "id1"
    assert store.get_employee("id1") == employee
    assert _persisted(storage).find_employee("id1") == employee


def test_invalid_employee_leaves_store_unchanged(store, storage, employee_payload):
    before = storage.get("hrms_data_v1")

    with pytest.raises(ValidationError):
        store.add_employee({**employee_payload, "salary": -5})

    assert len(store.data.employees) == 4
    assert storage.get("hrms_data_v1") == before


def test_failed_write_keeps_previous_state(employee_payload):
    storage = FailingStorage()
    store = RecordStore.open(HRDataRepository(storage, today=lambda: TODAY), id_factory=SequentialIds())
    before = store.data
    storage.fail = True

    with pytest.raises(OSError):
        store.add_employee(employee_payload)

    assert store.data is before


def test_update_employee_uses_path_id(store, employee_payload):
    updated = store.update_employee("e2", {**employee_payload, "id": "ignored"})

    assert updated.id == "e2"
    assert store.get_employee("e2").name == "Maria Santos"


def test_update_and_delete_unknown_employee(store, employee_payload):
    with pytest.raises(NotFoundError):
        store.update_employee("missing", employee_payload)
    with pytest.raises(NotFoundError):
        store.delete_employee("missing")
    with pytest.raises(NotFoundError):
        store.get_employee("missing")


def test_delete_policy_is_applied(repository):
    store = RecordStore.open(repository, delete_policy=DeletePolicy.CASCADE)

    store.delete_employee("e1")

    assert all(a.employee_id != "e1" for a in store.data.attendance)


def test_delete_retains_dangling_records(store):
    store.delete_employee("e1")

    assert any(a.employee_id == "e1" for a in store.data.attendance)


def test_add_department_and_overview(store):
    department = store.add_department({"name": "Finance", "managerId": "e2", "description": "Books"})

    assert store.get_department(department.id).name == "Finance"
    overview = {r.department.id: r for r in store.department_overview()}
    assert overview[department.id].manager_name == "Julius Simon"
    assert overview[department.id].employee_count == 0


def test_mark_attendance_uses_clock_and_validates_status(store):
    record = store.mark_attendance("e3", "2026-01-15", "Present")

    assert record.check_in_time == time(NOW.hour, NOW.minute)
    assert record.status == AttendanceStatus.PRESENT

    with pytest.raises(ValidationError):
        store.mark_attendance("e3", "2026-01-15", "On leave")
    with pytest.raises(ValidationError):
        store.mark_attendance("e3", "yesterday", "Absent")


def test_attendance_sheet_for_date(store):
    rows = store.attendance_sheet(date(2026, 1, 15))

    assert sum(1 for r in rows if r.record) == 2


def test_leave_lifecycle_through_store(store, storage):
    req = store.request_leave("e4", "Casual Leave", "2026-03-02", "2026-03-03", "Errand")

    assert req.status == LeaveStatus.PENDING
    assert [r.request.id for r in store.list_leave_requests("Pending")] == [req.id]

    decided = store.decide_leave(req.id, "reject")
    assert decided.status == LeaveStatus.REJECTED
    assert _persisted(storage).find_leave_request(req.id).status == LeaveStatus.REJECTED

    with pytest.raises(InvalidTransitionError):
        store.decide_leave(req.id, "approve")
    with pytest.raises(ValidationError):
        store.decide_leave(req.id, "maybe")


def test_request_leave_rejects_unknown_type(store):
    with pytest.raises(ValidationError):
        store.request_leave("e4", "Sabbatical", "2026-03-02", "2026-03-03", "Rest")


def test_strict_leave_dates_setting(repository):
    store = RecordStore.open(repository, strict_leave_dates=True)

    with pytest.raises(ValidationError):
        store.request_leave("e4", "Sick Leave", "2026-03-05", "2026-03-03", "Flu")


def test_payroll_collection_is_never_written(store, employee_payload):
    store.add_employee(employee_payload)
    store.mark_attendance("e1", "2026-01-16", "Late")

    assert store.data.payroll == ()


def test_concurrent_commands_keep_every_update(employee_payload):
    storage = SlowStorage()
    store = RecordStore.open(HRDataRepository(storage, today=lambda: TODAY))
    workers = [
        threading.Thread(
            target=store.add_employee,
            args=({**employee_payload, "id": f"t{i}", "email": f"t{i}@hrms.com"},),
        )
        for i in range(8)
    ]

    for w in workers:
        w.start()
    for w in workers:
        w.join()

    ids = {e.id for e in store.data.employees}
    assert {f"t{i}" for i in range(8)} <= ids
    assert len(store.data.employees) == 12
    assert _persisted(storage) == store.data


def test_largest_salary_is_persisted_exactly(store, storage, employee_payload):
    employee = store.add_employee({**employee_payload, "salary": "9999999999999.99"})

    assert _persisted(storage).find_employee(employee.id) == employee


@pytest.mark.parametrize("salary", ["1234.567", "1234567890123456.78"])
def test_salary_outside_stored_precision_is_rejected(store, storage, employee_payload, salary):
    before = storage.get("hrms_data_v1")

    with pytest.raises(ValidationError):
        store.add_employee({**employee_payload, "salary": salary})

    assert storage.get("hrms_data_v1") == before
