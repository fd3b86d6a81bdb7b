import logging
import os
import sqlite3

from utils.constants import DB_FILE, DEFAULT_SETTINGS
from utils.errors import StorageError

logger = logging.getLogger(__name__)


class DatabaseManager:
    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            conn = None
            try:
                conn = sqlite3.connect(self.db_path, check_same_thread=False)
                conn.row_factory = sqlite3.Row
                conn.execute("PRAGMA journal_mode = WAL")
            except sqlite3.Error as exc:
                if conn is not None:
                    conn.close()
                raise StorageError(f"Cannot open database '{self.db_path}': {exc}") from exc
            self._conn = conn
        return self._conn

    def initialize(self):
        """Create schema and seed defaults. Safe to call on every start."""
        conn = self.get_connection()
        try:
            self._create_schema(conn)
            self._seed_defaults(conn)
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot initialize database: {exc}") from exc
        logger.debug("Schema ready in %s", self.db_path)

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS expenses (
                id       INTEGER PRIMARY KEY AUTOINCREMENT,
                amount   REAL NOT NULL,
                category TEXT NOT NULL,
                note     TEXT
            );

            CREATE TABLE IF NOT EXISTS app_settings (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        for key, value in DEFAULT_SETTINGS:
            conn.execute(
                "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
                (key, value),
            )

    def get_setting(self, key: str, default: str = "") -> str:
        conn = self.get_connection()
        try:
            row = conn.execute(
                "SELECT value FROM app_settings WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot read setting '{key}': {exc}") from exc
        return row["value"] if row else default

    @staticmethod
    def open_default() -> "DatabaseManager":
        """Startup factory: opens (creating if needed) the expenses DB in the CWD."""
        db = DatabaseManager(DB_FILE)
        db.initialize()
        logger.info("Opened expense database at %s", os.path.abspath(DB_FILE))
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
