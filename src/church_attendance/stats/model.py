from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatPoint:
    """Attendance counts for one date of the dashboard series."""

    name: str
    present: int
    absent: int
    rate: int

    def to_dict(self) -> dict:
        return {"name": self.name, "present": self.present, "absent": self.absent, "rate": self.rate}


@dataclass(frozen=True)
class DashboardSummary:
    total: int
    rate: int
    absent: int

    def to_dict(self) -> dict:
        return {"total": self.total, "rate": self.rate, "absent": self.absent}
