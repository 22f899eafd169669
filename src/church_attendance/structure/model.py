from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Department:
    id: str
    church_id: str
    name: str
    leader_id: Optional[str] = None

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "Department":
        return cls(
            id=str(data["id"]),
            church_id=str(data.get("churchId", "")),
            name=str(data.get("name", "")),
            leader_id=data.get("leaderId") or None,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "churchId": self.church_id,
            "name": self.name,
            "leaderId": self.leader_id or "",
        }


@dataclass(frozen=True)
class ClassGroup:
    id: str
    department_id: str
    name: str
    teacher_id: Optional[str] = None

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "ClassGroup":
        return cls(
            id=str(data["id"]),
            department_id=str(data.get("departmentId", "")),
            name=str(data.get("name", "")),
            teacher_id=data.get("teacherId") or None,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "departmentId": self.department_id,
            "name": self.name,
            "teacherId": self.teacher_id or "",
        }
