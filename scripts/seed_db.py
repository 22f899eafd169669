"""Reset every collection to the demo dataset (all demo passwords are "123")."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from church_attendance.container import build_container, build_store, reset_collections


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = getattr(settings, "STORAGE_BACKEND", "file")
    if backend == "memory":
        raise SystemExit("STORAGE_BACKEND=memory keeps nothing; choose file or mysql to seed.")

    store = build_store(backend=backend, data_dir=getattr(settings, "DATA_DIR", None), db_config=settings.DB_CONFIG)
    reset_collections(build_container(store=store))
    print(f"OK: Seeded demo data ({backend} backend)")


if __name__ == "__main__":
    main()
