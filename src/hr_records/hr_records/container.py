from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .core.enums import DeletePolicy
from .payroll.service import PayrollService
from .records.store import RecordStore
from .storage.hr_data_repository import HRDataRepository
from .storage.repository import KeyValueStorage


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    repository: HRDataRepository
    store: RecordStore
    payroll_service: PayrollService


def build_storage(settings: Any) -> KeyValueStorage:
    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()

    if backend == "memory":
        from .storage.memory_storage import InMemoryStorage

        return InMemoryStorage()

    if backend == "file":
        from .storage.file_storage import FileStorage

        return FileStorage(getattr(settings, "STORAGE_DIR"))

    if backend == "mysql":
        from .database.bootstrap import apply_schema
        from .database.connection import DatabaseConnection, DBConfig
        from .storage.mysql_storage import MySQLStorage

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(conn)
        return MySQLStorage(conn)

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, settings: Any, storage: KeyValueStorage | None = None) -> Container:
    storage = storage if storage is not None else build_storage(settings)
    repository = HRDataRepository(storage, key=str(getattr(settings, "STORAGE_KEY", "hrms_data_v1")))
    store = RecordStore.open(
        repository,
        delete_policy=DeletePolicy(str(getattr(settings, "EMPLOYEE_DELETE_POLICY", "retain")).lower()),
        strict_leave_dates=bool(getattr(settings, "STRICT_LEAVE_DATES", False)),
    )

    return Container(
        storage=storage,
        repository=repository,
        store=store,
        payroll_service=PayrollService(),
    )
