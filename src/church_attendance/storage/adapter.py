from __future__ import annotations

import copy
import json
import logging
from typing import Any

from .base import KeyValueStore

logger = logging.getLogger(__name__)


class PersistenceAdapter:
    """Typed get/set of whole collections over a key/value store.

    A missing key, unparsable JSON, or a value of the wrong shape all fall
    back to a copy of the caller's default.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self, key: str, default: list[dict[str, Any]]) -> list[dict[str, Any]]:
        try:
            raw = self._store.get(key)
        except UnicodeDecodeError:
            logger.warning("Stored collection %r is not valid UTF-8, using defaults", key)
            return copy.deepcopy(default)
        if raw is None:
            return copy.deepcopy(default)

        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored collection %r is not valid JSON, using defaults", key)
            return copy.deepcopy(default)

        if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
            logger.warning("Stored collection %r has an unexpected shape, using defaults", key)
            return copy.deepcopy(default)
        return value

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        self._store.set(key, json.dumps(records, ensure_ascii=False))
