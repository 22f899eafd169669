"""Dump every stored collection into one JSON file under backups/."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from church_attendance.container import build_store
from church_attendance.core.constants import ALL_COLLECTION_KEYS
from church_attendance.storage.adapter import PersistenceAdapter


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        backend=getattr(settings, "STORAGE_BACKEND", "file"),
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=settings.DB_CONFIG,
    )
    adapter = PersistenceAdapter(store)
    dump = {key: adapter.load(key, []) for key in ALL_COLLECTION_KEYS}

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"church_attendance_{ts}.json"
    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({', '.join(f'{k}={len(v)}' for k, v in dump.items())})")


if __name__ == "__main__":
    main()
