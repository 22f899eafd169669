"""Read scope per role.

| Role                  | Users          | Students                    | Classes             |
|-----------------------|----------------|-----------------------------|---------------------|
| ADMIN / CHURCH_LEADER | whole church   | whole church                | whole church        |
| DEPT_LEADER           | whole church   | classes of own department   | own department      |
| TEACHER               | whole church   | own class                   | own department      |
| PENDING               | none           | none                        | none                |

User visibility is intentionally not narrowed for department leaders and
teachers, unlike student visibility.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Role
from ..structure.model import ClassGroup, Department
from ..structure.repository import ClassRepository, DepartmentRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from ..users.model import User
from ..users.repository import UserRepository
from .permissions import is_manager


def _has_scope(actor: User) -> bool:
    return actor.role != Role.PENDING and bool(actor.church_id)


def scope_users(actor: User, users: Iterable[User]) -> list[User]:
    if not _has_scope(actor):
        return []
    return [u for u in users if u.church_id == actor.church_id]


def scope_departments(actor: User, departments: Iterable[Department]) -> list[Department]:
    if not _has_scope(actor):
        return []
    return [d for d in departments if d.church_id == actor.church_id]


def scope_classes(actor: User, church_classes: Iterable[ClassGroup]) -> list[ClassGroup]:
    """Classes the actor may list and pick, given all classes of the church."""
    if not _has_scope(actor):
        return []
    if is_manager(actor):
        return list(church_classes)
    if actor.department_id:
        return [c for c in church_classes if c.department_id == actor.department_id]
    return []


def student_class_ids(actor: User, church_classes: Iterable[ClassGroup]) -> set[str]:
    """Ids of the classes whose students the actor may see."""
    if not _has_scope(actor):
        return set()
    if is_manager(actor):
        return {c.id for c in church_classes}
    if actor.role == Role.DEPT_LEADER and actor.department_id:
        return {c.id for c in church_classes if c.department_id == actor.department_id}
    if actor.role == Role.TEACHER and actor.class_id:
        return {c.id for c in church_classes if c.id == actor.class_id}
    return set()


def scope_students(actor: User, students: Iterable[Student], church_classes: Iterable[ClassGroup]) -> list[Student]:
    class_ids = student_class_ids(actor, church_classes)
    return [s for s in students if s.class_id in class_ids]


class VisibilityResolver:
    """Loads the actor's church slice from the repositories and scopes it."""

    def __init__(
        self,
        users: UserRepository,
        departments: DepartmentRepository,
        classes: ClassRepository,
        students: StudentRepository,
    ):
        self._users = users
        self._departments = departments
        self._classes = classes
        self._students = students

    def _church_departments(self, actor: User) -> Sequence[Department]:
        if not actor.church_id:
            return []
        return self._departments.list_by_church(actor.church_id)

    def _church_classes(self, actor: User) -> Sequence[ClassGroup]:
        dept_ids = {d.id for d in self._church_departments(actor)}
        if not dept_ids:
            return []
        return self._classes.list_by_departments(dept_ids)

    def visible_users(self, actor: User) -> list[User]:
        if not _has_scope(actor):
            return []
        return scope_users(actor, self._users.list_by_church(actor.church_id))

    def visible_departments(self, actor: User) -> list[Department]:
        return scope_departments(actor, self._church_departments(actor))

    def visible_classes(self, actor: User) -> list[ClassGroup]:
        return scope_classes(actor, self._church_classes(actor))

    def visible_students(self, actor: User) -> list[Student]:
        class_ids = student_class_ids(actor, self._church_classes(actor))
        if not class_ids:
            return []
        return list(self._students.list_by_classes(class_ids))

    def find_visible_class(self, actor: User, class_id: Optional[str]) -> Optional[ClassGroup]:
        if not class_id:
            return None
        for c in self.visible_classes(actor):
            if c.id == class_id:
                return c
        return None

    def find_assignable_class(self, actor: User, class_id: Optional[str]) -> Optional[ClassGroup]:
        """Class a student may be placed in: a listed class or the actor's own."""
        if not class_id:
            return None
        church_classes = self._church_classes(actor)
        allowed = {c.id for c in scope_classes(actor, church_classes)} | student_class_ids(actor, church_classes)
        for c in church_classes:
            if c.id == class_id and c.id in allowed:
                return c
        return None

    def find_visible_student(self, actor: User, student_id: str) -> Optional[Student]:
        for s in self.visible_students(actor):
            if s.id == student_id:
                return s
        return None

    def find_visible_user(self, actor: User, user_id: str) -> Optional[User]:
        for u in self.visible_users(actor):
            if u.id == user_id:
                return u
        return None
