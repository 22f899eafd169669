import requests

from church_attendance.core.enums import Role
from church_attendance.insights.service import FALLBACK_MESSAGES, InsightService
from church_attendance.stats.model import StatPoint

SERIES = [StatPoint("2024-03-03", 8, 2, 80)]


class FakeResponse:
    def __init__(self, data, status=200):
        self._data = data
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._data


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_without_api_key_no_request_is_made():
    session = FakeSession()
    svc = InsightService(api_key=None, session=session)

    assert svc.generate(SERIES, Role.ADMIN) == FALLBACK_MESSAGES["ko"]["not_configured"]
    assert session.calls == []


def test_generate_returns_model_text():
    data = {"candidates": [{"content": {"parts": [{"text": " 출석률이 좋습니다. "}]}}]}
    session = FakeSession(FakeResponse(data))
    svc = InsightService(api_key="k", model="m", timeout=3, session=session)

    assert svc.generate(SERIES, Role.TEACHER) == "출석률이 좋습니다."
    url, kwargs = session.calls[0]
    assert url.endswith("/models/m:generateContent")
    assert kwargs["headers"]["x-goog-api-key"] == "k"
    assert kwargs["timeout"] == 3
    assert "담임교사" in kwargs["json"]["contents"][0]["parts"][0]["text"]


def test_network_and_quota_failures_degrade_to_fixed_text():
    timeout = InsightService(api_key="k", session=FakeSession(error=requests.Timeout("slow")))
    quota = InsightService(api_key="k", language="en", session=FakeSession(FakeResponse({}, status=429)))

    assert timeout.generate(SERIES, Role.ADMIN) == FALLBACK_MESSAGES["ko"]["unavailable"]
    assert quota.generate(SERIES, Role.ADMIN) == FALLBACK_MESSAGES["en"]["unavailable"]


def test_empty_answer():
    svc = InsightService(api_key="k", session=FakeSession(FakeResponse({"candidates": []})))
    assert svc.generate(SERIES, Role.ADMIN) == FALLBACK_MESSAGES["ko"]["empty"]


def test_prompt_contains_series_and_role():
    prompt = InsightService(api_key=None, language="en").build_prompt(SERIES, Role.DEPT_LEADER)

    assert "department leader" in prompt
    assert '"rate": 80' in prompt


def test_unexpected_answer_shapes_read_as_empty():
    for body in ([{"candidates": []}], {"candidates": ["text"]}, {"candidates": [{"content": "text"}]}, "plain"):
        svc = InsightService(api_key="k", session=FakeSession(FakeResponse(body)))
        assert svc.generate(SERIES, Role.ADMIN) == FALLBACK_MESSAGES["ko"]["empty"]
