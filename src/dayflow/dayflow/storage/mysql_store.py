from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Optional

from .connection import DatabaseConnection
from .kv import KeyValueStore

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_items (
    item_key VARCHAR(191) NOT NULL PRIMARY KEY,
    item_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


class MySQLKeyValueStore(KeyValueStore):
    """Key-value backend on a single MySQL table, one row per key.

    Note: a short-lived connection per call; commit on success, rollback on error.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, ensure_schema: bool = True):
        self._conn_factory = conn_factory
        if ensure_schema:
            self.ensure_schema()

    @contextmanager
    def _cursor(self):
        conn = self._conn_factory.connect()
        try:
            cur = conn.cursor(dictionary=True)
            try:
                yield cur
                conn.commit()
            finally:
                cur.close()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def ensure_schema(self) -> None:
        with self._cursor() as cur:
            cur.execute(SCHEMA_SQL)

    def get_item(self, key: str) -> Optional[str]:
        with self._cursor() as cur:
            cur.execute("SELECT item_value FROM kv_items WHERE item_key=%s", (key,))
            row = cur.fetchone()
            return row["item_value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO kv_items(item_key, item_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE item_value=VALUES(item_value)
                """,
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with self._cursor() as cur:
            cur.execute("DELETE FROM kv_items WHERE item_key=%s", (key,))

    def keys(self) -> Iterable[str]:
        with self._cursor() as cur:
            cur.execute("SELECT item_key FROM kv_items ORDER BY item_key")
            return [r["item_key"] for r in cur.fetchall() or []]
