from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Optional, Protocol


class ConnectionFactory(Protocol):
    def connect(self):
        raise NotImplementedError


@contextmanager
def db_cursor(conn_factory: ConnectionFactory, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None
