from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .base import KeyValueStore


class JsonFileStore(KeyValueStore):
    """One `<key>.json` file per key inside a data directory."""

    def __init__(self, data_dir: Union[str, Path]):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        # Write to a temp file first so a crash never leaves half a collection.
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, self._path(key))
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
