from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Church


class ChurchRepository(Protocol):
    def get_by_id(self, church_id: str) -> Optional[Church]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Church]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Church]:
        raise NotImplementedError

    def create(self, attrs: dict[str, Any]) -> Church:
        raise NotImplementedError
