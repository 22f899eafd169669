from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import ClassGroup, Department


class DepartmentRepository(Protocol):
    def get_by_id(self, department_id: str) -> Optional[Department]:
        raise NotImplementedError

    def list_by_church(self, church_id: str) -> Sequence[Department]:
        raise NotImplementedError

    def create(self, attrs: dict[str, Any]) -> Department:
        raise NotImplementedError


class ClassRepository(Protocol):
    def get_by_id(self, class_id: str) -> Optional[ClassGroup]:
        raise NotImplementedError

    def list_by_departments(self, department_ids: set[str]) -> Sequence[ClassGroup]:
        raise NotImplementedError

    def create(self, attrs: dict[str, Any]) -> ClassGroup:
        raise NotImplementedError
