from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..access.permissions import is_manager
from ..access.visibility import VisibilityResolver
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import User
from .model import ClassGroup, Department
from .repository import ClassRepository, DepartmentRepository

logger = logging.getLogger(__name__)


class StructureService:
    """Use case: departments and classes of a church."""

    def __init__(
        self,
        departments: DepartmentRepository,
        classes: ClassRepository,
        resolver: VisibilityResolver,
    ):
        self._departments = departments
        self._classes = classes
        self._resolver = resolver

    def create_department(self, actor: User, name: str) -> Department:
        if not is_manager(actor) or not actor.church_id:
            raise AuthorizationError("Only administrators can create departments")

        name = require_non_empty(name, "Department name")
        department = self._departments.create({"churchId": actor.church_id, "name": name, "leaderId": ""})
        logger.info("Department %s created in church %s", department.id, actor.church_id)
        return department

    def create_class(self, actor: User, name: str) -> ClassGroup:
        if actor.role != Role.DEPT_LEADER or not actor.department_id:
            raise AuthorizationError("Only department leaders can create classes")

        name = require_non_empty(name, "Class name")
        class_group = self._classes.create({"departmentId": actor.department_id, "name": name, "teacherId": ""})
        logger.info("Class %s created in department %s", class_group.id, actor.department_id)
        return class_group

    def list_departments_view(self, actor: User) -> list[dict]:
        users = self._resolver.visible_users(actor)
        out: list[dict] = []
        for d in self._resolver.visible_departments(actor):
            leader = _department_leader(d, users)
            out.append(
                {
                    "id": d.id,
                    "name": d.name,
                    "leaderId": leader.id if leader else "",
                    "leaderName": leader.name if leader else "",
                }
            )
        return out

    def list_classes_view(self, actor: User) -> list[dict]:
        users = {u.id: u for u in self._resolver.visible_users(actor)}
        out: list[dict] = []
        for c in self._resolver.visible_classes(actor):
            teacher = users.get(c.teacher_id or "")
            out.append(
                {
                    "id": c.id,
                    "departmentId": c.department_id,
                    "name": c.name,
                    "teacherId": c.teacher_id or "",
                    "teacherName": teacher.name if teacher else "",
                }
            )
        return out


def _department_leader(department: Department, users: Sequence[User]) -> Optional[User]:
    """Explicit leader reference first, else a department leader assigned to it."""
    for u in users:
        if department.leader_id and u.id == department.leader_id:
            return u
    for u in users:
        if u.role == Role.DEPT_LEADER and u.department_id == department.id:
            return u
    return None
