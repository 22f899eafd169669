from __future__ import annotations

from typing import Any, Sequence

from ..core.constants import CLASSES_KEY, DEPARTMENTS_KEY
from ..storage.adapter import PersistenceAdapter
from ..storage.collection_repository import JsonCollectionRepository
from .model import ClassGroup, Department
from .repository import ClassRepository, DepartmentRepository


class JsonDepartmentRepository(JsonCollectionRepository[Department], DepartmentRepository):
    def __init__(self, adapter: PersistenceAdapter, *, seed: Sequence[dict[str, Any]] = ()):
        super().__init__(adapter, key=DEPARTMENTS_KEY, model=Department, seed=seed)

    def list_by_church(self, church_id: str) -> Sequence[Department]:
        return self.find(lambda d: d.church_id == church_id)


class JsonClassRepository(JsonCollectionRepository[ClassGroup], ClassRepository):
    def __init__(self, adapter: PersistenceAdapter, *, seed: Sequence[dict[str, Any]] = ()):
        super().__init__(adapter, key=CLASSES_KEY, model=ClassGroup, seed=seed)

    def list_by_departments(self, department_ids: set[str]) -> Sequence[ClassGroup]:
        return self.find(lambda c: c.department_id in department_ids)
