from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in one class.

    `attendance` maps an ISO date (YYYY-MM-DD) to the status recorded that
    day. Only the latest status per date is kept.
    """

    id: str
    name: str
    class_id: str
    dob: str = ""
    parent_phone: str = ""
    address: str = ""
    notes: str = ""
    attendance: dict[str, AttendanceStatus] = field(default_factory=dict)

    def status_on(self, day: str) -> AttendanceStatus:
        """Status for a day; a day without an entry reads as absent."""
        return self.attendance.get(day, AttendanceStatus.ABSENT)

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "Student":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            class_id=str(data.get("classId", "")),
            dob=str(data.get("dob") or ""),
            parent_phone=str(data.get("parentPhone") or ""),
            address=str(data.get("address") or ""),
            notes=str(data.get("notes") or ""),
            attendance={str(d): AttendanceStatus(s) for d, s in (data.get("attendance") or {}).items()},
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "classId": self.class_id,
            "dob": self.dob,
            "parentPhone": self.parent_phone,
            "address": self.address,
            "notes": self.notes,
            "attendance": {d: s.value for d, s in self.attendance.items()},
        }
