from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Iterable, Optional

from ..common.validators import require_non_empty
from ..core.constants import JOIN_CODE_MAX_ATTEMPTS, JOIN_CODE_MAX_NUMBER, JOIN_CODE_PREFIX_LENGTH
from ..core.enums import Role
from ..core.exceptions import ChurchNotFoundError, NotFoundError, ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Church
from .repository import ChurchRepository

logger = logging.getLogger(__name__)


def generate_join_code(name: str, rng: Optional[random.Random] = None) -> str:
    """First letters of the name, upper-cased, followed by a number.

    "Grace" gives codes like "GRA417".
    """
    rng = rng or random.Random()
    prefix = "".join(name.split())[:JOIN_CODE_PREFIX_LENGTH].upper()
    return f"{prefix}{rng.randint(0, JOIN_CODE_MAX_NUMBER)}"


def unique_join_code(name: str, existing: Iterable[str], rng: Optional[random.Random] = None) -> str:
    taken = set(existing)
    for _ in range(JOIN_CODE_MAX_ATTEMPTS):
        code = generate_join_code(name, rng)
        if code not in taken:
            return code
    raise ValidationError("Could not generate a unique church code, try another name")


class ChurchService:
    """Use case: found a church or join one by code."""

    def __init__(self, churches: ChurchRepository, users: UserRepository, *, rng: Optional[random.Random] = None):
        self._churches = churches
        self._users = users
        self._rng = rng or random.Random()

    def get(self, church_id: str) -> Church:
        church = self._churches.get_by_id(church_id)
        if not church:
            raise NotFoundError("Church not found")
        return church

    def _fresh(self, user: User) -> User:
        current = self._users.get_by_id(user.id)
        if not current:
            raise NotFoundError("Member not found")
        if current.church_id:
            raise ValidationError("You already belong to a church")
        return current

    def found_church(self, name: str, user: User) -> tuple[Church, User]:
        name = require_non_empty(name, "Church name")
        founder = self._fresh(user)

        code = unique_join_code(name, (c.code for c in self._churches.list_all()), self._rng)
        church = self._churches.create({"name": name, "code": code, "adminId": founder.id})

        updated = replace(founder, church_id=church.id, role=Role.ADMIN)
        if not self._users.update(updated):
            raise NotFoundError("Member not found")

        logger.info("Church %s founded by %s with code %s", church.id, founder.id, code)
        return church, updated

    def join_church(self, code: str, user: User) -> User:
        code = require_non_empty(code, "Church code")
        member = self._fresh(user)

        church = self._churches.get_by_code(code)
        if not church:
            raise ChurchNotFoundError("No church matches this code")

        # Joining never grants privileges; an admin promotes the member later.
        updated = replace(member, church_id=church.id, role=Role.PENDING)
        if not self._users.update(updated):
            raise NotFoundError("Member not found")

        logger.info("Member %s joined church %s", member.id, church.id)
        return updated
