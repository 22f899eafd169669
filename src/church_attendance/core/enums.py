from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Member role used for scoping and permissions."""

    ADMIN = "ADMIN"
    CHURCH_LEADER = "CHURCH_LEADER"
    DEPT_LEADER = "DEPT_LEADER"
    TEACHER = "TEACHER"
    PENDING = "PENDING"


class AttendanceStatus(str, Enum):
    """Attendance status stored per student and date."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"


class Section(str, Enum):
    """Screens of the management app, used to gate API routes by role."""

    DASHBOARD = "dashboard"
    STRUCTURE = "structure"
    CLASSES = "classes"
    PEOPLE = "people"
    ATTENDANCE = "attendance"
