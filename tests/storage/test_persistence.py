import json
import logging

import pytest

from church_attendance.container import build_container, build_store, reset_collections
from church_attendance.core.constants import STUDENTS_KEY, USERS_KEY
from church_attendance.core.enums import AttendanceStatus
from church_attendance.storage.adapter import PersistenceAdapter
from church_attendance.storage.file_store import JsonFileStore
from church_attendance.storage.memory_store import InMemoryStore
from church_attendance.students.json_student_repository import JsonStudentRepository


DEFAULT = [{"id": "a", "name": "Default"}]


def test_missing_key_returns_a_copy_of_the_default():
    adapter = PersistenceAdapter(InMemoryStore())

    loaded = adapter.load(USERS_KEY, DEFAULT)
    loaded[0]["name"] = "changed"

    assert DEFAULT[0]["name"] == "Default"


@pytest.mark.parametrize("raw", ["{not json", json.dumps({"id": "a"}), json.dumps([1, 2])])
def test_corrupt_collection_falls_back_to_default(caplog, raw):
    adapter = PersistenceAdapter(InMemoryStore({USERS_KEY: raw}))

    with caplog.at_level(logging.WARNING):
        assert adapter.load(USERS_KEY, DEFAULT) == DEFAULT
    assert USERS_KEY in caplog.text


def test_saved_collection_is_read_back():
    adapter = PersistenceAdapter(InMemoryStore())
    adapter.save(USERS_KEY, [{"id": "x", "name": "김철수"}])

    assert adapter.load(USERS_KEY, DEFAULT) == [{"id": "x", "name": "김철수"}]


def test_file_store_writes_one_file_per_key(tmp_path):
    store = JsonFileStore(tmp_path / "data")
    assert store.get(USERS_KEY) is None

    store.set(USERS_KEY, "[]")
    store.set(USERS_KEY, '[{"id": "1"}]')

    assert store.get(USERS_KEY) == '[{"id": "1"}]'
    assert sorted(p.name for p in (tmp_path / "data").iterdir()) == [f"{USERS_KEY}.json"]


def test_build_store_backends(tmp_path):
    assert isinstance(build_store(backend="memory"), InMemoryStore)
    assert isinstance(build_store(backend="file", data_dir=str(tmp_path)), JsonFileStore)
    with pytest.raises(ValueError):
        build_store(backend="redis")


def test_create_assigns_a_new_id_and_empty_attendance():
    repo = JsonStudentRepository(PersistenceAdapter(InMemoryStore()))

    student = repo.create({"id": "caller-id", "name": "Minji", "classId": "k_1", "attendance": {"2024-01-07": "LATE"}})

    assert student.id != "caller-id"
    assert student.attendance == {}
    assert repo.get_by_id(student.id) == student


def test_mark_attendance_is_idempotent():
    store = InMemoryStore()
    repo = JsonStudentRepository(PersistenceAdapter(store))
    student = repo.create({"name": "Minji", "classId": "k_1"})

    assert repo.mark_attendance(student.id, "2024-03-03", AttendanceStatus.LATE)
    first = store.get(STUDENTS_KEY)
    assert repo.mark_attendance(student.id, "2024-03-03", AttendanceStatus.LATE)

    assert store.get(STUDENTS_KEY) == first
    assert repo.get_by_id(student.id).attendance == {"2024-03-03": AttendanceStatus.LATE}


def test_update_and_delete_of_unknown_ids_report_false():
    repo = JsonStudentRepository(PersistenceAdapter(InMemoryStore()))
    student = repo.create({"name": "Minji", "classId": "k_1"})

    assert not repo.mark_attendance("missing", "2024-03-03", AttendanceStatus.PRESENT)
    assert not repo.delete("missing")
    assert repo.delete(student.id)
    assert not repo.update(student)
    assert repo.list_all() == []


def test_seed_is_served_until_first_write():
    seed = [{"id": "s_1", "name": "Seeded", "classId": "k_1", "attendance": {}}]
    store = InMemoryStore()
    repo = JsonStudentRepository(PersistenceAdapter(store), seed=seed)

    assert [s.name for s in repo.list_all()] == ["Seeded"]
    assert store.get(STUDENTS_KEY) is None

    repo.create({"name": "New", "classId": "k_1"})
    assert sorted(s.name for s in repo.list_all()) == ["New", "Seeded"]


def test_reset_collections_writes_the_demo_dataset():
    store = InMemoryStore()
    container = build_container(store=store, seed={})
    assert container.users_repo.list_all() == []

    reset_collections(container)

    assert store.get(USERS_KEY) is not None
    assert container.users_repo.get_by_email("admin@church.com") is not None
    assert [s.id for s in container.students_repo.list_all()] == ["stu_01", "stu_02"]


def test_undecodable_data_file_falls_back_to_default(tmp_path, caplog):
    (tmp_path / f"{STUDENTS_KEY}.json").write_bytes(b"\xff\xfe[garbage")
    repo = JsonStudentRepository(
        PersistenceAdapter(JsonFileStore(tmp_path)),
        seed=[{"id": "s_1", "name": "Seeded", "classId": "k_1", "attendance": {}}],
    )

    with caplog.at_level(logging.WARNING):
        assert [s.id for s in repo.list_all()] == ["s_1"]
    assert "UTF-8" in caplog.text


@pytest.mark.parametrize(
    "record",
    [
        {"classId": "k_1", "name": "No id"},
        {"id": "s_x", "classId": "k_1", "name": "Bad status", "attendance": {"2024-01-01": "HERE"}},
        {"id": "s_y", "classId": "k_1", "name": "Bad map", "attendance": ["2024-01-01"]},
    ],
)
def test_invalid_record_falls_back_to_seed(caplog, record):
    seed = [{"id": "s_1", "name": "Seeded", "classId": "k_1", "attendance": {}}]
    store = InMemoryStore({STUDENTS_KEY: json.dumps([record])})
    repo = JsonStudentRepository(PersistenceAdapter(store), seed=seed)

    with caplog.at_level(logging.WARNING):
        assert [s.id for s in repo.list_all()] == ["s_1"]
        assert repo.mark_attendance("s_1", "2024-03-03", AttendanceStatus.PRESENT)
    assert STUDENTS_KEY in caplog.text
    assert [s.id for s in repo.list_all()] == ["s_1"]


def test_unknown_role_in_users_falls_back_to_seed():
    store = InMemoryStore({USERS_KEY: json.dumps([{"id": "u", "name": "x", "email": "x@y.z", "role": "BISHOP"}])})
    container = build_container(store=store)

    assert container.users_repo.get_by_email("admin@church.com") is not None
