from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_text(value: Any, field_name: str) -> str:
    """JSON bodies are untyped; reject numbers, lists and objects early."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    value = require_text(value, field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str) -> Optional[str]:
    return require_text(value, field_name).strip() or None


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    value = require_text(value, field_name)
    if len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Any, field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def normalize_email(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()
