import sqlite3
from collections.abc import Iterator
from pathlib import Path

from pyresults import Err, Ok, Result

from ticklist.storage.base import KeyValueStore
from ticklist.util.logger import setup_logger

logger = setup_logger("ticklist")


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite3 backend.

    - kv table: key TEXT PRIMARY KEY -> value BLOB
    """

    def __init__(self, data_path: str) -> None:
        self.data_path = data_path
        if data_path != ":memory:":
            Path(data_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = None
        self._init_schema()

    # ---- low-level helpers ---------------------------------------------

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.data_path)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _init_schema(self) -> None:
        c = self.conn
        c.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key   TEXT PRIMARY KEY,
                value BLOB NOT NULL
            )
            """,
        )
        c.commit()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # ---- key access ----------------------------------------------------

    def get(self, key: str) -> bytes | None:
        try:
            row = self.conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error:
            logger.exception("Failed to read key %r from %s", key, self.data_path)
            return None
        if row is None:
            return None
        value = row["value"]
        # rows written by other tools may hold TEXT
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)

    def set(self, key: str, value: bytes) -> Result[None, str]:
        try:
            self.conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, sqlite3.Binary(value)),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            return Err[None, str](f"Failed to write key {key!r}: {e!s}")
        return Ok[None, str](None)

    def delete(self, key: str) -> Result[None, str]:
        try:
            self.conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            return Err[None, str](f"Failed to delete key {key!r}: {e!s}")
        return Ok[None, str](None)

    def keys(self) -> Iterator[str]:
        rows = self.conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
        return iter([row["key"] for row in rows])
