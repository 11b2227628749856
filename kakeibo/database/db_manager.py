import os
import sqlite3

from kakeibo.utils.constants import DB_FILE
from kakeibo.utils.log import get_logger

log = get_logger(__name__)

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS local_storage (
        key   TEXT PRIMARY KEY,
        value TEXT NOT NULL
    );

    CREATE TABLE IF NOT EXISTS app_settings (
        key   TEXT PRIMARY KEY,
        value TEXT NOT NULL
    );
"""

DEFAULT_SETTINGS = {
    "appearance_mode": "system",
    "date_format": "YYYY/MM/DD",
}


class DatabaseManager:
    """Owns the single SQLite connection for one kakeibo.db file."""

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        """Lazily opened connection; rows come back as sqlite3.Row."""
        if self._conn is None:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            # WAL lets a second app instance read while this one writes
            conn.execute("PRAGMA journal_mode = WAL")
            self._conn = conn
        return self._conn

    def initialize(self):
        """Create tables on first run and fill in missing settings."""
        conn = self.get_connection()
        conn.executescript(_SCHEMA)
        conn.executemany(
            "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
            DEFAULT_SETTINGS.items(),
        )
        conn.commit()

    # ── App settings ──────────────────────────────────────────────────────────

    def get_setting(self, key: str, default: str = "") -> str:
        row = self.get_connection().execute(
            "SELECT value FROM app_settings WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return DEFAULT_SETTINGS.get(key, default)
        return row["value"]

    def set_setting(self, key: str, value: str):
        conn = self.get_connection()
        with conn:
            conn.execute(
                "INSERT OR REPLACE INTO app_settings(key, value) VALUES (?, ?)",
                (key, value),
            )
        log.debug("Setting %s = %r", key, value)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    @staticmethod
    def open_in_folder(db_folder: str) -> "DatabaseManager":
        """Open kakeibo.db inside db_folder, creating folder and schema as needed."""
        os.makedirs(db_folder, exist_ok=True)
        db = DatabaseManager(os.path.join(db_folder, DB_FILE))
        db.initialize()
        log.info("Opened database %s", db.db_path)
        return db

    def close(self):
        if self._conn is not None:
            self._conn.close()
            self._conn = None
