from __future__ import annotations

from typing import Iterable, Optional

from ..access.visibility import VisibilityResolver
from ..core.constants import STATS_WINDOW_DATES
from ..students.model import Student
from ..users.model import User
from .counter.base import AttendanceCounter
from .counter.standard_counter import StandardAttendanceCounter
from .model import DashboardSummary, StatPoint


def build_series(
    students: Iterable[Student],
    *,
    window: int = STATS_WINDOW_DATES,
    counter: Optional[AttendanceCounter] = None,
) -> list[StatPoint]:
    """Per-date present/absent counts over the students' recent history.

    Each student contributes their own latest `window` recorded dates, so the
    series covers the union of those dates and is not aligned to a common
    calendar window.
    """
    counter = counter or StandardAttendanceCounter()
    buckets: dict[str, list[int]] = {}

    for s in students:
        for day in sorted(s.attendance)[-window:]:
            bucket = buckets.setdefault(day, [0, 0])
            if counter.counts_as_present(s.attendance[day]):
                bucket[0] += 1
            else:
                bucket[1] += 1

    series: list[StatPoint] = []
    for day in sorted(buckets):
        present, absent = buckets[day]
        total = present + absent
        # Round half up.
        rate = (200 * present + total) // (2 * total) if total > 0 else 0
        series.append(StatPoint(name=day, present=present, absent=absent, rate=rate))
    return series


def summarize(series: list[StatPoint]) -> DashboardSummary:
    if not series:
        return DashboardSummary(total=0, rate=0, absent=0)
    latest = series[-1]
    return DashboardSummary(total=latest.present + latest.absent, rate=latest.rate, absent=latest.absent)


class AttendanceStatsService:
    def __init__(
        self,
        resolver: VisibilityResolver,
        *,
        counter: Optional[AttendanceCounter] = None,
        window: int = STATS_WINDOW_DATES,
    ):
        self._resolver = resolver
        self._counter = counter or StandardAttendanceCounter()
        self._window = int(window)

    def series_for(self, actor: User) -> list[StatPoint]:
        students = self._resolver.visible_students(actor)
        if not students:
            return []
        return build_series(students, window=self._window, counter=self._counter)

    def dashboard(self, actor: User) -> dict:
        series = self.series_for(actor)
        return {
            "series": [p.to_dict() for p in series],
            "summary": summarize(series).to_dict(),
        }
