"""Example: use the service layer directly, without Flask.

Controllers stay thin; the rules live in the services wired by the container.
"""

from church_attendance.container import build_container
from church_attendance.storage.memory_store import InMemoryStore
from church_attendance.storage.seed import DEMO_ADMIN_ID


def main():
    container = build_container(store=InMemoryStore())
    admin = container.users_repo.get_by_id(DEMO_ADMIN_ID)
    print(container.stats_service.dashboard(admin))
    for s in container.student_service.list_visible(admin):
        print(s.name, s.attendance)


if __name__ == "__main__":
    main()
