"""Demo dataset used when a collection has never been stored."""

from __future__ import annotations

from typing import Any

from werkzeug.security import generate_password_hash

from ..core.constants import CHURCHES_KEY, CLASSES_KEY, DEPARTMENTS_KEY, STUDENTS_KEY, USERS_KEY

DEMO_CHURCH_ID = "church_001"
DEMO_ADMIN_ID = "user_admin"
DEMO_PASSWORD = "123"


def build_seed_data(password: str = DEMO_PASSWORD) -> dict[str, list[dict[str, Any]]]:
    password_hash = generate_password_hash(password)

    users = [
        {"id": DEMO_ADMIN_ID, "name": "김목사", "email": "admin@church.com", "password": password_hash,
         "role": "ADMIN", "churchId": DEMO_CHURCH_ID},
        {"id": "user_leader", "name": "박장로", "email": "sarah@church.com", "password": password_hash,
         "role": "CHURCH_LEADER", "churchId": DEMO_CHURCH_ID},
        {"id": "user_dept", "name": "이부장", "email": "mike@church.com", "password": password_hash,
         "role": "DEPT_LEADER", "churchId": DEMO_CHURCH_ID, "departmentId": "dept_01"},
        {"id": "user_teacher", "name": "최선생", "email": "jane@church.com", "password": password_hash,
         "role": "TEACHER", "churchId": DEMO_CHURCH_ID, "departmentId": "dept_01", "classId": "class_01"},
    ]
    churches = [
        {"id": DEMO_CHURCH_ID, "name": "은혜 한인 교회", "code": "GRACE2024", "adminId": DEMO_ADMIN_ID},
    ]
    departments = [
        {"id": "dept_01", "churchId": DEMO_CHURCH_ID, "name": "중고등부", "leaderId": "user_dept"},
        {"id": "dept_02", "churchId": DEMO_CHURCH_ID, "name": "유초등부", "leaderId": ""},
    ]
    classes = [
        {"id": "class_01", "departmentId": "dept_01", "name": "고등부 1반", "teacherId": "user_teacher"},
        {"id": "class_02", "departmentId": "dept_01", "name": "고등부 2반", "teacherId": ""},
    ]
    students = [
        {"id": "stu_01", "classId": "class_01", "name": "김철수", "dob": "2008-05-12",
         "parentPhone": "010-1234-5678", "address": "서울시 강남구", "notes": "기타 연주 가능",
         "attendance": {"2023-10-27": "PRESENT", "2023-11-03": "ABSENT"}},
        {"id": "stu_02", "classId": "class_01", "name": "이영희", "dob": "2009-02-14",
         "parentPhone": "010-9876-5432", "address": "서울시 서초구", "notes": "",
         "attendance": {"2023-10-27": "PRESENT", "2023-11-03": "PRESENT"}},
    ]

    return {
        USERS_KEY: users,
        CHURCHES_KEY: churches,
        DEPARTMENTS_KEY: departments,
        CLASSES_KEY: classes,
        STUDENTS_KEY: students,
    }
