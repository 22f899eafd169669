from __future__ import annotations

from ..core.enums import AttendanceStatus

# Roll-call button cycle: absent -> present -> late -> absent.
_NEXT_STATUS = {
    AttendanceStatus.PRESENT: AttendanceStatus.LATE,
    AttendanceStatus.LATE: AttendanceStatus.ABSENT,
}


def next_status(current: AttendanceStatus) -> AttendanceStatus:
    return _NEXT_STATUS.get(current, AttendanceStatus.PRESENT)
