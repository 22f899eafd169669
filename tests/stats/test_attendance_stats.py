from church_attendance.container import build_container
from church_attendance.core.enums import AttendanceStatus
from church_attendance.stats.counter.base import AttendanceCounter
from church_attendance.stats.model import StatPoint
from church_attendance.stats.service import build_series, summarize
from church_attendance.storage.memory_store import InMemoryStore
from church_attendance.storage.seed import DEMO_ADMIN_ID
from church_attendance.students.model import Student

P, A, L, E = (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE, AttendanceStatus.EXCUSED)


def _student(sid, attendance):
    return Student(id=sid, name=sid, class_id="k", attendance=attendance)


def test_late_counts_as_present_and_absent_does_not():
    series = build_series([_student("s", {"d1": P, "d2": A, "d3": L})])

    by_day = {p.name: p for p in series}
    assert by_day["d3"] == StatPoint(name="d3", present=1, absent=0, rate=100)
    assert by_day["d2"] == StatPoint(name="d2", present=0, absent=1, rate=0)


def test_each_student_contributes_own_latest_dates():
    old_timer = _student("a", {"2024-01-07": P, "2024-01-14": P, "2024-01-21": P, "2024-01-28": P, "2024-02-04": A})
    newcomer = _student("b", {"2024-03-03": E})

    series = build_series([old_timer, newcomer])

    assert [p.name for p in series] == ["2024-01-14", "2024-01-21", "2024-01-28", "2024-02-04", "2024-03-03"]
    assert series[-1] == StatPoint(name="2024-03-03", present=0, absent=1, rate=0)


def test_rate_rounds_half_up():
    students = [_student(str(i), {"d": status}) for i, status in enumerate([P, A, A, A, A, A, A, A])]
    assert build_series(students)[0].rate == 13

    students = [_student(str(i), {"d": status}) for i, status in enumerate([P, A])]
    assert build_series(students)[0].rate == 50


def test_custom_counter():
    class ExcusedIsPresent(AttendanceCounter):
        def counts_as_present(self, status):
            return status in (P, L, E)

    series = build_series([_student("s", {"d": E})], counter=ExcusedIsPresent())
    assert series[0].present == 1


def test_summary_uses_latest_date():
    series = [StatPoint("d1", 3, 1, 75), StatPoint("d2", 1, 1, 50)]
    assert summarize(series).to_dict() == {"total": 2, "rate": 50, "absent": 1}
    assert summarize([]).to_dict() == {"total": 0, "rate": 0, "absent": 0}


def test_demo_dashboard():
    container = build_container(store=InMemoryStore())
    admin = container.users_repo.get_by_id(DEMO_ADMIN_ID)

    dashboard = container.stats_service.dashboard(admin)

    assert dashboard["series"] == [
        {"name": "2023-10-27", "present": 2, "absent": 0, "rate": 100},
        {"name": "2023-11-03", "present": 1, "absent": 1, "rate": 50},
    ]
    assert dashboard["summary"] == {"total": 2, "rate": 50, "absent": 1}


def test_pending_member_gets_empty_dashboard(world, member):
    assert world.stats_service.dashboard(member("u_pending")) == {
        "series": [],
        "summary": {"total": 0, "rate": 0, "absent": 0},
    }
