from __future__ import annotations

from typing import Optional

from .mysql_base import ConnectionFactory, kv_cursor
from .repository import KeyValueStore

KV_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    store_key VARCHAR(191) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


class MySQLKeyValueStore(KeyValueStore):
    """One row per store key; the payload column holds the JSON text as-is."""

    def __init__(self, conn_factory: ConnectionFactory):
        self._conn_factory = conn_factory

    def ensure_schema(self) -> None:
        with kv_cursor(self._conn_factory, "create kv_store table", dictionary=False) as cur:
            cur.execute(KV_TABLE_DDL)

    def get(self, key: str) -> Optional[str]:
        with kv_cursor(self._conn_factory, f"read {key!r}") as cur:
            cur.execute(
                """
                SELECT payload
                FROM kv_store
                WHERE store_key=%s
                """,
                (key,),
            )
            row = cur.fetchone()
        return str(row["payload"]) if row else None

    def set(self, key: str, value: str) -> None:
        with kv_cursor(self._conn_factory, f"write {key!r}") as cur:
            cur.execute(
                """
                INSERT INTO kv_store(store_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (key, value),
            )
