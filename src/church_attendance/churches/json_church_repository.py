from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.constants import CHURCHES_KEY
from ..storage.adapter import PersistenceAdapter
from ..storage.collection_repository import JsonCollectionRepository
from .model import Church
from .repository import ChurchRepository


class JsonChurchRepository(JsonCollectionRepository[Church], ChurchRepository):
    def __init__(self, adapter: PersistenceAdapter, *, seed: Sequence[dict[str, Any]] = ()):
        super().__init__(adapter, key=CHURCHES_KEY, model=Church, seed=seed)

    def get_by_code(self, code: str) -> Optional[Church]:
        for church in self.list_all():
            if church.code == code:
                return church
        return None
