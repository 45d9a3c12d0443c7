from __future__ import annotations

import json
import logging
from datetime import date

from hr_records.core.exceptions import StorageCorruptionError
from hr_records.records import codec
from hr_records.records.store import RecordStore
from hr_records.storage.hr_data_repository import HRDataRepository
from hr_records.storage.memory_storage import InMemoryStorage
from hr_records.storage.seed import build_seed_data

TODAY = date(2026, 1, 15)


def test_missing_key_initializes_seed_and_persists():
    storage = InMemoryStorage()

    result = HRDataRepository(storage, today=lambda: TODAY).load()

    assert result.warning is None
    assert result.data == build_seed_data(TODAY)
    assert storage.get("hrms_data_v1") is not None


def test_existing_value_is_loaded():
    seeded = build_seed_data(date(2025, 12, 1))
    storage = InMemoryStorage({"custom": codec.dumps(seeded)})

    result = HRDataRepository(storage, key="custom", today=lambda: TODAY).load()

    assert result.data == seeded


def test_corrupt_value_falls_back_to_seed_and_warns(caplog):
    storage = InMemoryStorage({"hrms_data_v1": "{oops"})

    with caplog.at_level(logging.WARNING, logger="hr_records.storage"):
        result = HRDataRepository(storage, today=lambda: TODAY).load()

    assert result.data == build_seed_data(TODAY)
    assert isinstance(result.warning, StorageCorruptionError)
    assert "Falling back to seed dataset" in caplog.text
    # Not overwritten until a command succeeds.
    assert storage.get("hrms_data_v1") == "{oops"


def test_store_surfaces_warning_until_next_commit():
    storage = InMemoryStorage({"hrms_data_v1": "[1, 2"})
    store = RecordStore.open(HRDataRepository(storage, today=lambda: TODAY))

    assert store.load_warning is not None

    store.add_department({"name": "Legal"})

    assert store.load_warning is None
    assert codec.loads(storage.get("hrms_data_v1")) == store.data


def test_unreadable_salary_falls_back_to_seed():
    raw = json.loads(codec.dumps(build_seed_data(TODAY)))
    raw["employees"][0]["salary"] = "abc"
    storage = InMemoryStorage({"hrms_data_v1": json.dumps(raw)})

    result = HRDataRepository(storage, today=lambda: TODAY).load()

    assert result.data == build_seed_data(TODAY)
    assert isinstance(result.warning, StorageCorruptionError)
