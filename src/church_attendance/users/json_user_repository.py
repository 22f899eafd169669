from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.validators import normalize_email
from ..core.constants import USERS_KEY
from ..storage.adapter import PersistenceAdapter
from ..storage.collection_repository import JsonCollectionRepository
from .model import User
from .repository import UserRepository


class JsonUserRepository(JsonCollectionRepository[User], UserRepository):
    def __init__(self, adapter: PersistenceAdapter, *, seed: Sequence[dict[str, Any]] = ()):
        super().__init__(adapter, key=USERS_KEY, model=User, seed=seed)

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = normalize_email(email)
        for user in self.list_all():
            if normalize_email(user.email) == wanted:
                return user
        return None

    def list_by_church(self, church_id: str) -> Sequence[User]:
        return self.find(lambda u: u.church_id == church_id)
