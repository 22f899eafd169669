from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import AttendanceStatus


class AttendanceCounter(ABC):
    """Counter interface (Strategy Pattern for attendance buckets)."""

    @abstractmethod
    def counts_as_present(self, status: AttendanceStatus) -> bool:
        raise NotImplementedError
