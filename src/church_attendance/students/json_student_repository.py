from __future__ import annotations

from typing import Any, Sequence

from ..core.constants import STUDENTS_KEY
from ..core.enums import AttendanceStatus
from ..storage.adapter import PersistenceAdapter
from ..storage.collection_repository import JsonCollectionRepository
from .model import Student
from .repository import StudentRepository


class JsonStudentRepository(JsonCollectionRepository[Student], StudentRepository):
    def __init__(self, adapter: PersistenceAdapter, *, seed: Sequence[dict[str, Any]] = ()):
        super().__init__(adapter, key=STUDENTS_KEY, model=Student, seed=seed)

    def create(self, attrs: dict[str, Any]) -> Student:
        # New students always start without attendance history.
        return super().create({**attrs, "attendance": {}})

    def list_by_class(self, class_id: str) -> Sequence[Student]:
        return self.find(lambda s: s.class_id == class_id)

    def list_by_classes(self, class_ids: set[str]) -> Sequence[Student]:
        return self.find(lambda s: s.class_id in class_ids)

    def mark_attendance(self, student_id: str, day: str, status: AttendanceStatus) -> bool:
        records = self._load()
        for r in records:
            if r.get("id") == student_id:
                attendance = dict(r.get("attendance") or {})
                attendance[day] = AttendanceStatus(status).value
                r["attendance"] = attendance
                self._save(records)
                return True
        return False
