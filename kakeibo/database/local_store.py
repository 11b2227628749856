"""Key/value slot storage with an in-memory mirror.

Each key holds one JSON document. Reads are served from the mirror after
the first load; writes replace the whole document. Changes committed by
another connection (a second app instance) are picked up by poll() and
adopted wholesale: last writer wins.
"""
import json
import sqlite3
from typing import Any, Callable

from kakeibo.database.db_manager import DatabaseManager
from kakeibo.utils.log import get_logger

log = get_logger(__name__)

_MISSING = object()

Listener = Callable[[str, Any], None]


class LocalStore:
    def __init__(self, db: DatabaseManager):
        self._db = db
        self._mirror: dict[str, Any] = {}
        self._raw: dict[str, str | None] = {}
        self._listeners: dict[str, list[Listener]] = {}
        self._data_version = self._read_data_version()

    # ── Read / write ──────────────────────────────────────────────────────────

    def read(self, key: str, initial: Any = None) -> Any:
        """Mirrored value for key, or `initial` if nothing usable is stored.

        `initial` is never written back; it only persists once the caller
        writes.
        """
        if key not in self._mirror:
            self._load(key)
        value = self._mirror[key]
        return initial if value is _MISSING else value

    def write(self, key: str, value: Any) -> None:
        raw = json.dumps(value, ensure_ascii=False)
        self._mirror[key] = value
        self._raw[key] = raw
        conn = self._db.get_connection()
        try:
            conn.execute(
                "INSERT OR REPLACE INTO local_storage(key, value) VALUES (?, ?)",
                (key, raw),
            )
            conn.commit()
        except sqlite3.Error:
            log.exception("Could not write storage key %r; keeping in-memory value", key)
            try:
                conn.rollback()
            except sqlite3.Error:
                log.debug("Rollback after failed write also failed", exc_info=True)

    def _load(self, key: str):
        raw = self._fetch_raw(key)
        self._raw[key] = raw
        if raw is None:
            self._mirror[key] = _MISSING
            return
        try:
            self._mirror[key] = json.loads(raw)
        except ValueError:
            log.warning("Stored value for %r is not valid JSON; using initial value", key)
            self._mirror[key] = _MISSING

    def _fetch_raw(self, key: str) -> str | None:
        try:
            row = self._db.get_connection().execute(
                "SELECT value FROM local_storage WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error:
            log.exception("Could not read storage key %r", key)
            return None
        return row["value"] if row else None

    # ── External change notifications ─────────────────────────────────────────

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        """Call listener(key, value) when another connection changes key.

        Returns a function that removes the subscription.
        """
        self._listeners.setdefault(key, []).append(listener)

        def unsubscribe():
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def poll(self) -> list[str]:
        """Adopt changes committed by other connections; return changed keys."""
        version = self._read_data_version()
        if version == self._data_version:
            return []
        self._data_version = version

        changed = []
        for key, listeners in list(self._listeners.items()):
            raw = self._fetch_raw(key)
            if raw is None or raw == self._raw.get(key):
                continue
            try:
                value = json.loads(raw)
            except ValueError:
                log.warning("Ignoring external change to %r: not valid JSON", key)
                continue
            self._mirror[key] = value
            self._raw[key] = raw
            changed.append(key)
            log.info("Adopted external change to %r", key)
            for listener in list(listeners):
                listener(key, value)
        return changed

    def _read_data_version(self) -> int | None:
        try:
            row = self._db.get_connection().execute("PRAGMA data_version").fetchone()
        except sqlite3.Error:
            log.exception("Could not read data_version")
            return None
        return row[0]
