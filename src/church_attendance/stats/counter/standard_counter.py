from __future__ import annotations

from .base import AttendanceCounter
from ...core.enums import AttendanceStatus


class StandardAttendanceCounter(AttendanceCounter):
    """Standard rule: present and late attend; absent and excused do not."""

    def counts_as_present(self, status: AttendanceStatus) -> bool:
        return status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)
