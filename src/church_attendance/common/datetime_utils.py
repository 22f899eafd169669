from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: str, field_name: str = "Date") -> str:
    """Validate a YYYY-MM-DD string and return it unchanged."""
    try:
        parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format")
    return value


def today_iso() -> str:
    """Today's date as stored in attendance maps.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today().isoformat()
