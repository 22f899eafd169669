from __future__ import annotations

import logging
from typing import Optional

from ..access.permissions import can_manage_students
from ..access.visibility import VisibilityResolver
from ..common.datetime_utils import require_iso_date, today_iso
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from ..users.model import User
from .toggle import next_status

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record attendance for visible students."""

    def __init__(self, students: StudentRepository, resolver: VisibilityResolver):
        self._students = students
        self._resolver = resolver

    def _visible_student(self, actor: User, student_id: str) -> Student:
        if not can_manage_students(actor):
            raise AuthorizationError("You are not allowed to record attendance")
        student = self._resolver.find_visible_student(actor, student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def mark_attendance(self, actor: User, student_id: str, day: str, status: AttendanceStatus | str) -> AttendanceStatus:
        day = require_iso_date(day)
        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Invalid attendance status")

        self._visible_student(actor, student_id)
        if not self._students.mark_attendance(student_id, day, status):
            raise NotFoundError("Student not found")
        return status

    def toggle_attendance(self, actor: User, student_id: str, day: Optional[str] = None) -> AttendanceStatus:
        """Advance the roll-call status of one student (teachers only)."""
        if actor.role != Role.TEACHER:
            raise AuthorizationError("Only teachers take roll call")

        day = require_iso_date(day or today_iso())
        student = self._visible_student(actor, student_id)
        status = next_status(student.status_on(day))
        if not self._students.mark_attendance(student_id, day, status):
            raise NotFoundError("Student not found")
        return status

    def roll_call(self, actor: User, day: Optional[str] = None) -> list[dict]:
        if actor.role != Role.TEACHER:
            raise AuthorizationError("Only teachers take roll call")

        day = require_iso_date(day or today_iso())
        return [
            {
                "id": s.id,
                "name": s.name,
                "parentPhone": s.parent_phone,
                "status": s.status_on(day).value,
            }
            for s in self._resolver.visible_students(actor)
        ]
