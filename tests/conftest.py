from __future__ import annotations

from typing import Callable

import pytest
from werkzeug.security import generate_password_hash

from church_attendance.container import Container, build_container
from church_attendance.core.constants import CHURCHES_KEY, CLASSES_KEY, DEPARTMENTS_KEY, STUDENTS_KEY, USERS_KEY
from church_attendance.storage.memory_store import InMemoryStore
from church_attendance.users.model import User

PASSWORD = "secret"
PASSWORD_HASH = generate_password_hash(PASSWORD)


def _user(uid: str, name: str, role: str, **scope) -> dict:
    return {"id": uid, "name": name, "email": f"{uid}@grace.org", "password": PASSWORD_HASH, "role": role, **scope}


def world_data() -> dict[str, list[dict]]:
    """Two churches: Grace (two departments, three classes) and an unrelated one."""
    return {
        USERS_KEY: [
            _user("u_admin", "Admin", "ADMIN", churchId="ch_1"),
            _user("u_leader", "Leader", "CHURCH_LEADER", churchId="ch_1"),
            _user("u_dept", "Dept Leader", "DEPT_LEADER", churchId="ch_1", departmentId="d_1"),
            _user("u_teacher", "Teacher", "TEACHER", churchId="ch_1", departmentId="d_1", classId="k_1"),
            _user("u_teacher2", "Kids Teacher", "TEACHER", churchId="ch_1", departmentId="d_2", classId="k_3"),
            _user("u_pending", "Pending", "PENDING", churchId="ch_1"),
            _user("u_new", "Newcomer", "PENDING"),
            _user("u_other", "Other Admin", "ADMIN", churchId="ch_2"),
        ],
        CHURCHES_KEY: [
            {"id": "ch_1", "name": "Grace", "code": "GRA100", "adminId": "u_admin"},
            {"id": "ch_2", "name": "Hope", "code": "HOP200", "adminId": "u_other"},
        ],
        DEPARTMENTS_KEY: [
            {"id": "d_1", "churchId": "ch_1", "name": "Youth", "leaderId": ""},
            {"id": "d_2", "churchId": "ch_1", "name": "Kids", "leaderId": ""},
            {"id": "d_9", "churchId": "ch_2", "name": "Hope Youth", "leaderId": ""},
        ],
        CLASSES_KEY: [
            {"id": "k_1", "departmentId": "d_1", "name": "Youth 1", "teacherId": "u_teacher"},
            {"id": "k_2", "departmentId": "d_1", "name": "Youth 2", "teacherId": ""},
            {"id": "k_3", "departmentId": "d_2", "name": "Kids 1", "teacherId": "u_teacher2"},
            {"id": "k_9", "departmentId": "d_9", "name": "Hope 1", "teacherId": ""},
        ],
        STUDENTS_KEY: [
            {"id": "s_1", "classId": "k_1", "name": "Minji", "attendance": {"2024-03-03": "PRESENT"}},
            {"id": "s_2", "classId": "k_2", "name": "Joon", "attendance": {}},
            {"id": "s_3", "classId": "k_3", "name": "Hana", "attendance": {}},
            {"id": "s_9", "classId": "k_9", "name": "Elsewhere", "attendance": {}},
        ],
    }


@pytest.fixture
def empty() -> Container:
    return build_container(store=InMemoryStore(), seed={})


@pytest.fixture
def world() -> Container:
    return build_container(store=InMemoryStore(), seed=world_data())


@pytest.fixture
def member(world: Container) -> Callable[[str], User]:
    def _get(user_id: str) -> User:
        user = world.users_repo.get_by_id(user_id)
        assert user is not None
        return user

    return _get


@pytest.fixture
def password() -> str:
    return PASSWORD
