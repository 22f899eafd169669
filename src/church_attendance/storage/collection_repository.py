from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, Optional, Protocol, Sequence, TypeVar

from ..common.ids import new_id
from .adapter import PersistenceAdapter

logger = logging.getLogger(__name__)


class Record(Protocol):
    id: str

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "Record":
        raise NotImplementedError

    def to_record(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=Record)


class JsonCollectionRepository(Generic[T]):
    """Full-collection CRUD over one key of the persistence adapter.

    Every read loads the whole collection and every mutation rewrites it.
    There is no indexing, caching, or partial write.
    """

    def __init__(
        self,
        adapter: PersistenceAdapter,
        *,
        key: str,
        model: type[T],
        seed: Sequence[dict[str, Any]] = (),
    ):
        self._adapter = adapter
        self._key = key
        self._model = model
        self._seed = list(seed)

    @property
    def key(self) -> str:
        return self._key

    def _load(self) -> list[dict[str, Any]]:
        records = self._adapter.load(self._key, self._seed)
        try:
            for r in records:
                self._model.from_record(r)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Stored collection %r holds an invalid record (%s), using defaults", self._key, e)
            return copy.deepcopy(self._seed)
        return records

    def _save(self, records: list[dict[str, Any]]) -> None:
        self._adapter.save(self._key, records)

    def list_all(self) -> list[T]:
        return [self._model.from_record(r) for r in self._load()]

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        return [item for item in self.list_all() if predicate(item)]

    def get_by_id(self, record_id: str) -> Optional[T]:
        for item in self.list_all():
            if item.id == record_id:
                return item
        return None

    def create(self, attrs: dict[str, Any]) -> T:
        item = self._model.from_record({**attrs, "id": new_id()})
        records = self._load()
        records.append(item.to_record())
        self._save(records)
        return item

    def update(self, item: T) -> bool:
        records = self._load()
        for idx, r in enumerate(records):
            if r.get("id") == item.id:
                records[idx] = item.to_record()
                self._save(records)
                return True
        return False

    def delete(self, record_id: str) -> bool:
        records = self._load()
        kept = [r for r in records if r.get("id") != record_id]
        if len(kept) == len(records):
            return False
        self._save(kept)
        return True

    def replace_all(self, items: Sequence[dict[str, Any]]) -> None:
        """Overwrite the stored collection (seeding/reset scripts)."""
        self._save([self._model.from_record(r).to_record() for r in items])
