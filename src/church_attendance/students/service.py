from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from ..access.permissions import can_edit, can_manage_students
from ..access.visibility import VisibilityResolver
from ..common.validators import require_non_empty
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..structure.model import ClassGroup
from ..users.model import User
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = {
    "dob": "dob",
    "parentPhone": "parent_phone",
    "address": "address",
    "notes": "notes",
}


class StudentService:
    """Use case: student roster of the actor's scope."""

    def __init__(self, students: StudentRepository, resolver: VisibilityResolver):
        self._students = students
        self._resolver = resolver

    def list_visible(self, actor: User) -> list[Student]:
        return self._resolver.visible_students(actor)

    def resolve_target_class(self, actor: User, class_id: Optional[str]) -> ClassGroup:
        """Class new students go to: the actor's own class, else the chosen one."""
        if not can_manage_students(actor):
            raise AuthorizationError("You are not allowed to register students")

        target_id = actor.class_id or class_id
        if not target_id:
            raise ValidationError("Select the class the student belongs to")

        class_group = self._resolver.find_assignable_class(actor, target_id)
        if not class_group:
            raise ValidationError("Class not found")
        return class_group

    def create_student(self, actor: User, attrs: dict[str, Any], *, class_id: Optional[str] = None) -> Student:
        class_group = self.resolve_target_class(actor, class_id)
        return self.create_in_class(class_group, attrs)

    def create_in_class(self, class_group: ClassGroup, attrs: dict[str, Any]) -> Student:
        record = {"name": require_non_empty(attrs.get("name"), "Name"), "classId": class_group.id}
        for key in PROFILE_FIELDS:
            record[key] = str(attrs.get(key) or "").strip()
        return self._students.create(record)

    def update_student(self, actor: User, student_id: str, changes: dict[str, Any]) -> Student:
        student = self._resolver.find_visible_student(actor, student_id)
        if not student:
            raise NotFoundError("Student not found")
        if not can_edit(actor, student):
            raise AuthorizationError("You are not allowed to edit this student")

        updated = student
        if "name" in changes:
            updated = replace(updated, name=require_non_empty(changes.get("name"), "Name"))
        for key, attr in PROFILE_FIELDS.items():
            if key in changes:
                updated = replace(updated, **{attr: str(changes.get(key) or "").strip()})

        if "classId" in changes and changes.get("classId") != student.class_id:
            class_group = self._resolver.find_assignable_class(actor, changes.get("classId"))
            if not class_group:
                raise ValidationError("Class not found")
            updated = replace(updated, class_id=class_group.id)

        if not self._students.update(updated):
            raise NotFoundError("Student not found")
        return updated
