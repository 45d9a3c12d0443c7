from __future__ import annotations

from datetime import date, datetime

import pytest

from hr_records.records.store import RecordStore
from hr_records.storage.hr_data_repository import HRDataRepository
from hr_records.storage.memory_storage import InMemoryStorage

TODAY = date(2026, 1, 15)
NOW = datetime(2026, 1, 15, 8, 42, 17)


class SequentialIds:
    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._n = 0

    def __call__(self) -> str:
        self._n += 1
        return f"{self._prefix}{self._n}"


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def repository(storage) -> HRDataRepository:
    return HRDataRepository(storage, today=lambda: TODAY)


@pytest.fixture
def store(repository) -> RecordStore:
    return RecordStore.open(repository, id_factory=SequentialIds(), clock=lambda: NOW)


@pytest.fixture
def employee_payload() -> dict:
    return {
        "name": "Maria Santos",
        "email": "maria.santos@hrms.com",
        "position": "Accountant",
        "departmentId": "d2",
        "salary": 50000,
        "hireDate": "2024-02-01",
    }
