from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a church member with a staff role.

    Note: Plain data object, no storage access. `church_id`, `department_id`
    and `class_id` are the member's scope ids.
    """

    id: str
    name: str
    email: str
    password_hash: str
    role: Role
    church_id: Optional[str] = None
    department_id: Optional[str] = None
    class_id: Optional[str] = None
    phone_number: Optional[str] = None
    profile_image: Optional[str] = None

    @property
    def needs_onboarding(self) -> bool:
        return self.role == Role.PENDING and not self.church_id

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            password_hash=str(data.get("password", "")),
            role=Role(data.get("role", Role.PENDING.value)),
            church_id=data.get("churchId") or None,
            department_id=data.get("departmentId") or None,
            class_id=data.get("classId") or None,
            phone_number=data.get("phoneNumber") or None,
            profile_image=data.get("profileImage") or None,
        )

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password_hash,
            "role": self.role.value,
        }
        optional = {
            "churchId": self.church_id,
            "departmentId": self.department_id,
            "classId": self.class_id,
            "phoneNumber": self.phone_number,
            "profileImage": self.profile_image,
        }
        record.update({k: v for k, v in optional.items() if v is not None})
        return record

    def to_public(self) -> dict[str, Any]:
        """Record without the credential, for API responses."""
        record = self.to_record()
        record.pop("password", None)
        return record
