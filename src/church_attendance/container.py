from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .access.visibility import VisibilityResolver
from .attendance.service import AttendanceService
from .churches.json_church_repository import JsonChurchRepository
from .churches.service import ChurchService
from .core.constants import CHURCHES_KEY, CLASSES_KEY, DEPARTMENTS_KEY, STUDENTS_KEY, USERS_KEY
from .insights.service import InsightService
from .stats.service import AttendanceStatsService
from .storage.adapter import PersistenceAdapter
from .storage.base import KeyValueStore
from .storage.connection import DatabaseConnection, DBConfig
from .storage.file_store import JsonFileStore
from .storage.memory_store import InMemoryStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.seed import build_seed_data
from .structure.json_structure_repository import JsonClassRepository, JsonDepartmentRepository
from .structure.service import StructureService
from .students.import_service import StudentImportService
from .students.json_student_repository import JsonStudentRepository
from .students.service import StudentService
from .users.json_user_repository import JsonUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    users_repo: JsonUserRepository
    churches_repo: JsonChurchRepository
    departments_repo: JsonDepartmentRepository
    classes_repo: JsonClassRepository
    students_repo: JsonStudentRepository

    resolver: VisibilityResolver

    auth_service: AuthService
    user_service: UserService
    church_service: ChurchService
    structure_service: StructureService
    student_service: StudentService
    import_service: StudentImportService
    attendance_service: AttendanceService
    stats_service: AttendanceStatsService
    insight_service: InsightService


def build_store(*, backend: str, data_dir: Optional[str] = None, db_config: Optional[dict] = None) -> KeyValueStore:
    backend = (backend or "file").lower()
    if backend == "memory":
        return InMemoryStore()
    if backend == "file":
        return JsonFileStore(Path(data_dir or "data"))
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    store: KeyValueStore,
    seed: Optional[dict[str, list[dict[str, Any]]]] = None,
    insight_service: Optional[InsightService] = None,
) -> Container:
    """Wire repositories and services over one key/value store.

    `seed` is the dataset served for collections that were never stored;
    None means the demo dataset, `{}` means empty collections.
    """
    if seed is None:
        seed = build_seed_data()
    adapter = PersistenceAdapter(store)

    users_repo = JsonUserRepository(adapter, seed=seed.get(USERS_KEY, []))
    churches_repo = JsonChurchRepository(adapter, seed=seed.get(CHURCHES_KEY, []))
    departments_repo = JsonDepartmentRepository(adapter, seed=seed.get(DEPARTMENTS_KEY, []))
    classes_repo = JsonClassRepository(adapter, seed=seed.get(CLASSES_KEY, []))
    students_repo = JsonStudentRepository(adapter, seed=seed.get(STUDENTS_KEY, []))

    resolver = VisibilityResolver(users_repo, departments_repo, classes_repo, students_repo)

    student_service = StudentService(students_repo, resolver)

    return Container(
        store=store,
        users_repo=users_repo,
        churches_repo=churches_repo,
        departments_repo=departments_repo,
        classes_repo=classes_repo,
        students_repo=students_repo,
        resolver=resolver,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo, resolver),
        church_service=ChurchService(churches_repo, users_repo),
        structure_service=StructureService(departments_repo, classes_repo, resolver),
        student_service=student_service,
        import_service=StudentImportService(student_service),
        attendance_service=AttendanceService(students_repo, resolver),
        stats_service=AttendanceStatsService(resolver),
        insight_service=insight_service or InsightService(api_key=None),
    )


def reset_collections(container: Container, seed: Optional[dict[str, list[dict[str, Any]]]] = None) -> None:
    """Overwrite every stored collection with `seed` (demo dataset when None)."""
    if seed is None:
        seed = build_seed_data()
    for repo in (
        container.users_repo,
        container.churches_repo,
        container.departments_repo,
        container.classes_repo,
        container.students_repo,
    ):
        repo.replace_all(seed.get(repo.key, []))
