from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete storage.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def find(self, predicate: Callable[[User], bool]) -> Sequence[User]:
        raise NotImplementedError

    def list_by_church(self, church_id: str) -> Sequence[User]:
        raise NotImplementedError

    def create(self, attrs: dict[str, Any]) -> User:
        raise NotImplementedError

    def update(self, user: User) -> bool:
        raise NotImplementedError
