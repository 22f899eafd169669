from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..access.permissions import can_assign_department, can_assign_role, can_assign_teacher_class, can_edit
from ..access.visibility import VisibilityResolver
from ..common.validators import normalize_email, optional_text, require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: register and log in members."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, name: str, email: str, password: str) -> User:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise DuplicateEmailError("Email already exists")

        user = self._users.create(
            {
                "name": name,
                "email": email,
                "password": generate_password_hash(password),
                "role": Role.PENDING.value,
            }
        )
        logger.info("Registered member %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self._users.get_by_email(normalize_email(email))
        if not user:
            raise AuthenticationError("Wrong email or password")

        try:
            ok = check_password_hash(user.password_hash, password if isinstance(password, str) else "")
        except ValueError:
            # e.g. a malformed stored hash
            ok = False

        if not ok:
            raise AuthenticationError("Wrong email or password")
        return user


class UserService:
    """Use case: list and edit staff members."""

    def __init__(self, users: UserRepository, resolver: VisibilityResolver):
        self._users = users
        self._resolver = resolver

    def list_visible(self, actor: User) -> list[User]:
        return self._resolver.visible_users(actor)

    def update_profile(self, actor: User, target_id: str, changes: dict[str, Any]) -> User:
        """Apply a profile edit after checking record and field permissions.

        Only name, phone number, profile image, role, department and class
        can change here. Email and credential are ignored.
        """
        if target_id == actor.id:
            target: Optional[User] = actor
        else:
            target = self._resolver.find_visible_user(actor, target_id)
        if not target:
            raise NotFoundError("Member not found")
        if not can_edit(actor, target):
            raise AuthorizationError("You are not allowed to edit this member")

        updated = target
        if "name" in changes:
            updated = replace(updated, name=require_non_empty(changes.get("name"), "Name"))
        if "phoneNumber" in changes:
            updated = replace(updated, phone_number=optional_text(changes.get("phoneNumber"), "Phone number"))
        if "profileImage" in changes:
            updated = replace(updated, profile_image=optional_text(changes.get("profileImage"), "Profile image"))

        if "role" in changes:
            try:
                role = Role(changes.get("role"))
            except ValueError:
                raise ValidationError("Invalid role")
            if role != target.role:
                if not can_assign_role(actor):
                    raise AuthorizationError("Only administrators can change roles")
                updated = replace(updated, role=role)

        if "departmentId" in changes:
            department_id = optional_text(changes.get("departmentId"), "Department")
            if department_id != target.department_id:
                if not can_assign_department(actor):
                    raise AuthorizationError("Only administrators can change departments")
                if department_id and department_id not in {d.id for d in self._resolver.visible_departments(actor)}:
                    raise ValidationError("Department not found")
                updated = replace(updated, department_id=department_id)

        if "classId" in changes:
            class_id = optional_text(changes.get("classId"), "Class")
            if class_id != target.class_id:
                class_group = self._resolver.find_visible_class(actor, class_id)
                if class_id and not class_group:
                    raise ValidationError("Class not found")
                if not can_assign_teacher_class(actor, updated, class_group):
                    raise AuthorizationError("You are not allowed to assign this class")
                updated = replace(updated, class_id=class_id)

        if not self._users.update(updated):
            raise NotFoundError("Member not found")

        if updated.role != target.role:
            logger.info("Member %s role changed %s -> %s by %s", target.id, target.role.value, updated.role.value, actor.id)
        return updated
