import sqlite3

import pytest

from database.db_manager import DatabaseManager
from utils.errors import StorageError


def _tables(db):
    rows = db.get_connection().execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return sorted(r["name"] for r in rows)


def test_initialize_creates_tables(db):
    assert _tables(db) == ["app_settings", "expenses"]


def test_expenses_columns(db):
    cols = {
        row["name"]: (row["type"], row["notnull"])
        for row in db.get_connection().execute("PRAGMA table_info(expenses)")
    }
    assert cols == {
        "id": ("INTEGER", 0),
        "amount": ("REAL", 1),
        "category": ("TEXT", 1),
        "note": ("TEXT", 0),
    }


def test_initialize_is_idempotent(db):
    conn = db.get_connection()
    conn.execute("INSERT INTO expenses(amount, category, note) VALUES (5, 'Food', NULL)")
    conn.commit()
    conn.execute("UPDATE app_settings SET value = ? WHERE key = ?", ("€", "currency_symbol"))
    conn.commit()

    db.initialize()
    db.initialize()

    assert _tables(db) == ["app_settings", "expenses"]
    assert conn.execute("SELECT COUNT(*) FROM expenses").fetchone()[0] == 1
    assert db.get_setting("currency_symbol") == "€"


def test_default_settings_seeded(db):
    assert db.get_setting("appearance_mode") == "system"
    assert db.get_setting("currency_symbol") == "$"
    assert db.get_setting("missing", "fallback") == "fallback"


def test_get_setting_reads_stored_value(db):
    conn = db.get_connection()
    conn.execute("UPDATE app_settings SET value = ? WHERE key = ?", ("dark", "appearance_mode"))
    conn.commit()
    assert db.get_setting("appearance_mode") == "dark"


def test_open_default_creates_db_in_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    db = DatabaseManager.open_default()
    try:
        assert (tmp_path / "expenses.db").exists()
        assert _tables(db) == ["app_settings", "expenses"]
    finally:
        db.close()


def test_data_survives_reopen(tmp_path):
    path = str(tmp_path / "expenses.db")
    first = DatabaseManager(path)
    first.initialize()
    first.get_connection().execute(
        "INSERT INTO expenses(amount, category) VALUES (3.5, 'Books')"
    )
    first.get_connection().commit()
    first.close()

    second = DatabaseManager(path)
    second.initialize()
    try:
        row = second.get_connection().execute("SELECT * FROM expenses").fetchone()
        assert (row["amount"], row["category"], row["note"]) == (3.5, "Books", None)
    finally:
        second.close()


def test_unopenable_path_raises_storage_error(tmp_path):
    db = DatabaseManager(str(tmp_path / "missing" / "dir" / "expenses.db"))
    with pytest.raises(StorageError) as info:
        db.initialize()
    assert isinstance(info.value.__cause__, sqlite3.Error)


def test_close_is_safe_twice(tmp_path):
    db = DatabaseManager(str(tmp_path / "expenses.db"))
    db.initialize()
    db.close()
    db.close()


class _FailingPragmaConnection:
    def __init__(self):
        self.closed = False
        self.row_factory = None

    def execute(self, sql, *args):
        raise sqlite3.OperationalError("disk I/O error")

    def close(self):
        self.closed = True


def test_failed_open_closes_connection(tmp_path, monkeypatch):
    opened = []

    def fake_connect(*args, **kwargs):
        conn = _FailingPragmaConnection()
        opened.append(conn)
        return conn

    monkeypatch.setattr(sqlite3, "connect", fake_connect)
    db = DatabaseManager(str(tmp_path / "expenses.db"))

    with pytest.raises(StorageError):
        db.get_connection()

    assert [c.closed for c in opened] == [True]
    assert db._conn is None
