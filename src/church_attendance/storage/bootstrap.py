from __future__ import annotations

from .connection import DatabaseConnection
from .mysql_base import db_cursor
from .mysql_store import KV_TABLE

KV_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {KV_TABLE} (
    store_key VARCHAR(64) NOT NULL PRIMARY KEY,
    store_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    with db_cursor(conn_factory, dictionary=False, with_database=False) as (_, cur):
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def apply_schema(conn_factory: DatabaseConnection) -> None:
    ensure_database_exists(conn_factory)
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(KV_SCHEMA)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
