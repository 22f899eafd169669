"""Role rules: who may edit what, and which sections a role may open.

All functions are pure; they look only at the records passed in.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.enums import Role, Section
from ..structure.model import ClassGroup
from ..students.model import Student
from ..users.model import User

MANAGER_ROLES = frozenset({Role.ADMIN, Role.CHURCH_LEADER})

_SECTIONS_BY_ROLE: dict[Role, frozenset[Section]] = {
    Role.ADMIN: frozenset({Section.DASHBOARD, Section.STRUCTURE, Section.PEOPLE}),
    Role.CHURCH_LEADER: frozenset({Section.DASHBOARD, Section.STRUCTURE, Section.PEOPLE}),
    Role.DEPT_LEADER: frozenset({Section.DASHBOARD, Section.CLASSES, Section.PEOPLE}),
    Role.TEACHER: frozenset({Section.DASHBOARD, Section.PEOPLE, Section.ATTENDANCE}),
    Role.PENDING: frozenset({Section.DASHBOARD}),
}


def is_manager(actor: User) -> bool:
    return actor.role in MANAGER_ROLES


def can_edit(actor: User, target: Union[User, Student]) -> bool:
    """Edit permission, first matching rule wins.

    1. Admin / church leader: everyone.
    2. Anyone: their own user record.
    3. Department leader: teachers and students.
    4. Teacher: students.
    """
    if is_manager(actor):
        return True

    is_student = isinstance(target, Student)
    if not is_student and target.id == actor.id:
        return True

    if actor.role == Role.DEPT_LEADER:
        if is_student:
            return True
        return target.role == Role.TEACHER

    if actor.role == Role.TEACHER:
        return is_student

    return False


def can_manage_students(actor: User) -> bool:
    """Create students, edit them and record their attendance."""
    return bool(actor.church_id) and actor.role in MANAGER_ROLES | {Role.DEPT_LEADER, Role.TEACHER}


def can_assign_role(actor: User) -> bool:
    return is_manager(actor)


def can_assign_department(actor: User) -> bool:
    return is_manager(actor)


def can_assign_teacher_class(actor: User, target: User, class_group: Optional[ClassGroup]) -> bool:
    """Whether `actor` may set `target`'s class.

    Managers may assign any class. A department leader may assign a teacher
    to a class of the leader's own department, and may clear the class
    (`class_group` None) only of a teacher in that department.
    """
    if is_manager(actor):
        return True
    if actor.role != Role.DEPT_LEADER or target.role != Role.TEACHER:
        return False
    if not actor.department_id:
        return False
    if class_group is None:
        return target.department_id == actor.department_id
    return class_group.department_id == actor.department_id


def allowed_sections(actor: User) -> frozenset[Section]:
    if actor.role == Role.PENDING or not actor.church_id:
        return frozenset({Section.DASHBOARD})
    return _SECTIONS_BY_ROLE[actor.role]


def can_access(actor: User, section: Section) -> bool:
    return section in allowed_sections(actor)
