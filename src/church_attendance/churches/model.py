from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Church:
    """Domain entity: the organization at the top of the hierarchy."""

    id: str
    name: str
    code: str
    admin_id: str

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "Church":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            code=str(data.get("code", "")),
            admin_id=str(data.get("adminId", "")),
        )

    def to_record(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "code": self.code, "adminId": self.admin_id}
