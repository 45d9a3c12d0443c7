from __future__ import annotations

from typing import Optional

from ..database.mysql_base import ConnectionFactory, db_cursor, fetchone
from .repository import KeyValueStorage


class MySQLStorage(KeyValueStorage):
    def __init__(self, conn_factory: ConnectionFactory):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT storage_value
                FROM kv_store
                WHERE storage_key=%s
                """,
                (key,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return row["storage_value"]

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(storage_key, storage_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE storage_value=VALUES(storage_value)
                """,
                (key, value),
            )
