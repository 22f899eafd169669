from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from church_attendance.storage.bootstrap import apply_schema, list_tables
from church_attendance.storage.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn_factory = DatabaseConnection.get_instance(db)

    apply_schema(conn_factory)
    tables = list_tables(conn_factory)
    print(f"OK: kv_store ready -> {db.user}@{db.host}:{db.port}/{db.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
