from __future__ import annotations

from typing import Optional

from .base import KeyValueStore
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone

KV_TABLE = "kv_store"


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @property
    def conn_factory(self) -> DatabaseConnection:
        return self._conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT store_value FROM {KV_TABLE} WHERE store_key=%s", (key,))
            row = fetchone(cur)
            if not row:
                return None
            return row["store_value"]

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {KV_TABLE}(store_key, store_value)
                VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, value),
            )
