from __future__ import annotations

from .mysql_base import ConnectionFactory, db_cursor

KV_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    storage_key VARCHAR(191) NOT NULL PRIMARY KEY,
    storage_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4
"""


def apply_schema(conn_factory: ConnectionFactory) -> None:
    """Create the key/value table (idempotent: CREATE IF NOT EXISTS)."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(KV_TABLE_DDL)
