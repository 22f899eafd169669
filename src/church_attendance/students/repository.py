from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_class(self, class_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_classes(self, class_ids: set[str]) -> Sequence[Student]:
        raise NotImplementedError

    def create(self, attrs: dict[str, Any]) -> Student:
        raise NotImplementedError

    def update(self, student: Student) -> bool:
        raise NotImplementedError

    def mark_attendance(self, student_id: str, day: str, status: AttendanceStatus) -> bool:
        raise NotImplementedError
