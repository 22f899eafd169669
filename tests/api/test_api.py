import io

import pytest

from church_attendance.main import create_app
from church_attendance.storage.seed import DEMO_PASSWORD


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


def _login(client, email, password=DEMO_PASSWORD):
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def test_requires_login(client):
    resp = client.get("/api/students")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_wrong_password(client):
    resp = client.post("/api/auth/login", json={"email": "admin@church.com", "password": "nope"})
    assert resp.status_code == 401


def test_admin_dashboard(client):
    body = _login(client, "admin@church.com")
    assert body["user"]["role"] == "ADMIN"
    assert "password" not in body["user"]

    resp = client.get("/api/dashboard")
    assert resp.status_code == 200
    assert resp.get_json()["summary"] == {"total": 2, "rate": 50, "absent": 1}


def test_register_then_onboard(client):
    resp = client.post("/api/auth/register", json={"name": "New", "email": "new@church.com", "password": "abc"})
    assert resp.status_code == 201
    assert resp.get_json()["needsOnboarding"] is True

    resp = client.post("/api/auth/register", json={"name": "Again", "email": "new@church.com", "password": "abc"})
    assert resp.status_code == 400

    assert client.get("/api/students").status_code == 403

    resp = client.post("/api/churches/join", json={"code": "NOPE"})
    assert resp.status_code == 404

    resp = client.post("/api/churches/join", json={"code": "GRACE2024"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "PENDING"


def test_teacher_roll_call(client):
    _login(client, "jane@church.com")

    resp = client.post("/api/attendance/stu_01/toggle", json={"date": "2023-11-03"})
    assert resp.get_json()["status"] == "PRESENT"

    rows = client.get("/api/attendance?date=2023-11-03").get_json()["students"]
    assert {r["id"]: r["status"] for r in rows} == {"stu_01": "PRESENT", "stu_02": "PRESENT"}


def test_admin_cannot_take_roll_call(client):
    _login(client, "admin@church.com")
    assert client.get("/api/attendance").status_code == 403


def test_student_import_and_template(client):
    _login(client, "jane@church.com")

    template = client.get("/api/students/import/template")
    assert template.status_code == 200
    assert template.data[:2] == b"PK"

    csv = "이름,연락처\n민수,010-1\n,\n하늘,010-2\n".encode("utf-8")
    resp = client.post(
        "/api/students/import",
        data={"file": (io.BytesIO(csv), "roster.csv")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    assert resp.get_json()["created"] == 2

    names = {s["name"] for s in client.get("/api/students").get_json()["students"]}
    assert {"민수", "하늘"} <= names


def test_insight_without_key(client):
    _login(client, "admin@church.com")

    resp = client.post("/api/dashboard/insight")
    assert resp.status_code == 200
    assert resp.get_json()["insight"] == "API 키가 설정되지 않았습니다."


def test_non_text_json_values_are_bad_requests(client):
    resp = client.post("/api/auth/register", json={"name": 5, "email": "n@church.com", "password": "abc"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    _login(client, "admin@church.com")
    assert client.post("/api/departments", json={"name": 5}).status_code == 400
