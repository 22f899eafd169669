from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque unique id for a new record."""
    return uuid.uuid4().hex
