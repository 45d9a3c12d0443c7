"""Create the MySQL key/value table used by STORAGE_BACKEND=mysql."""

from __future__ import annotations

import importlib

from hr_records.config import get_settings_module
from hr_records.database.bootstrap import apply_schema
from hr_records.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(DatabaseConnection.get_instance(config))
    print(f"OK: kv_store ready -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()
