from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

import requests

from ..core.constants import DEFAULT_INSIGHT_MODEL, DEFAULT_INSIGHT_TIMEOUT_SECONDS, INSIGHT_MAX_CHARS
from ..core.enums import Role
from ..stats.model import StatPoint

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

ROLE_LABELS = {
    "ko": {
        Role.ADMIN: "관리자",
        Role.CHURCH_LEADER: "교회장",
        Role.DEPT_LEADER: "부서장",
        Role.TEACHER: "담임교사",
        Role.PENDING: "승인 대기",
    },
    "en": {
        Role.ADMIN: "administrator",
        Role.CHURCH_LEADER: "church leader",
        Role.DEPT_LEADER: "department leader",
        Role.TEACHER: "homeroom teacher",
        Role.PENDING: "pending member",
    },
}

FALLBACK_MESSAGES = {
    "ko": {
        "not_configured": "API 키가 설정되지 않았습니다.",
        "empty": "인사이트를 생성할 수 없습니다.",
        "unavailable": "AI 서비스에 연결할 수 없습니다.",
    },
    "en": {
        "not_configured": "The insight service is not configured.",
        "empty": "Could not generate an insight.",
        "unavailable": "Could not reach the AI service.",
    },
}

PROMPTS = {
    "ko": (
        "당신은 교회 출결 관리 앱의 AI 비서입니다.\n"
        "다음은 {role}를 위한 출석 통계 데이터입니다:\n{stats}\n\n"
        "이 데이터를 바탕으로 한국어로 짧고 격려가 되는 분석 인사이트를 제공해주세요 (최대 {max_chars}자).\n"
        "성장한 부분과 주의가 필요한 부분을 짚어주고, 출석률을 높일 수 있는 실질적인 조언을 하나 해주세요.\n"
        "어조: 전문적이면서도 목회적이고 따뜻하게."
    ),
    "en": (
        "You are the assistant of a church attendance app.\n"
        "Here is attendance data prepared for a {role}:\n{stats}\n\n"
        "Write a short, encouraging insight in English (at most {max_chars} characters).\n"
        "Point out what grew and what needs attention, and give one practical tip to raise attendance.\n"
        "Tone: professional, pastoral and warm."
    ),
}


class InsightService:
    """Free-text commentary on a dashboard series from the Gemini API.

    Never raises: a missing key, a network or quota failure, or an empty
    answer all return a fixed message in the configured language.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str = DEFAULT_INSIGHT_MODEL,
        language: str = "ko",
        timeout: float = DEFAULT_INSIGHT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key or ""
        self._model = model
        self._language = language if language in PROMPTS else "ko"
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _message(self, name: str) -> str:
        return FALLBACK_MESSAGES[self._language][name]

    def build_prompt(self, series: Sequence[StatPoint], role: Role) -> str:
        stats = json.dumps([p.to_dict() for p in series], ensure_ascii=False)
        label = ROLE_LABELS[self._language].get(role, role.value)
        return PROMPTS[self._language].format(role=label, stats=stats, max_chars=INSIGHT_MAX_CHARS)

    def generate(self, series: Sequence[StatPoint], role: Role) -> str:
        if not self.configured:
            return self._message("not_configured")

        payload = {"contents": [{"parts": [{"text": self.build_prompt(series, role)}]}]}
        try:
            resp = self._session.post(
                GEMINI_URL.format(model=self._model),
                headers={"x-goog-api-key": self._api_key, "Content-Type": "application/json"},
                json=payload,
                timeout=self._timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Insight request failed: %s", e)
            return self._message("unavailable")

        text = _extract_text(data)
        return text or self._message("empty")


def _extract_text(data: Any) -> str:
    """Text of the first candidate; anything not shaped like a Gemini answer reads as empty."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    return "".join(str(p.get("text", "")) for p in parts if isinstance(p, dict)).strip()
