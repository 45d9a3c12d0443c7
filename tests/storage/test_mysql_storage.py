from __future__ import annotations

from hr_records.database.bootstrap import apply_schema
from hr_records.storage.mysql_storage import MySQLStorage


class FakeCursor:
    def __init__(self, db):
        self._db = db
        self._row = None

    def execute(self, sql, params=()):
        self._db.statements.append(" ".join(sql.split()))
        if sql.lstrip().upper().startswith("SELECT"):
            value = self._db.rows.get(params[0])
            self._row = {"storage_value": value} if value is not None else None
        elif sql.lstrip().upper().startswith("INSERT"):
            self._db.pending[params[0]] = params[1]

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db):
        self._db = db

    def cursor(self, dictionary=True):
        return FakeCursor(self._db)

    def commit(self):
        self._db.rows.update(self._db.pending)
        self._db.pending.clear()
        self._db.commits += 1

    def rollback(self):
        self._db.pending.clear()
        self._db.rollbacks += 1

    def close(self):
        pass


class FakeDB:
    def __init__(self):
        self.rows = {}
        self.pending = {}
        self.statements = []
        self.commits = 0
        self.rollbacks = 0

    def connect(self):
        return FakeConnection(self)


def test_get_missing_key():
    assert MySQLStorage(FakeDB()).get("hrms_data_v1") is None


def test_set_upserts_and_commits():
    db = FakeDB()
    storage = MySQLStorage(db)

    storage.set("hrms_data_v1", "{}")
    storage.set("hrms_data_v1", '{"x": 1}')

    assert storage.get("hrms_data_v1") == '{"x": 1}'
    assert db.commits == 3
    assert "ON DUPLICATE KEY UPDATE" in db.statements[0]


def test_apply_schema_creates_kv_table():
    db = FakeDB()

    apply_schema(db)

    assert db.statements[0].startswith("CREATE TABLE IF NOT EXISTS kv_store")
