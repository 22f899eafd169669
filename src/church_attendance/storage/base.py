from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Durable string key/value storage.

    Values are opaque serialized strings; (de)serialization lives in the
    persistence adapter so every backend stays trivial.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
