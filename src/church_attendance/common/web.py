from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING

from flask import Flask, current_app, g, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..access.permissions import can_access
from ..core.enums import Section
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

CONTAINER_EXTENSION = "church_attendance"


def get_container() -> "Container":
    return current_app.extensions[CONTAINER_EXTENSION]


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    """Load the acting member from storage into `g.actor` on every request."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user_id = session.get("user_id")
        if not user_id:
            return fail("Please log in to continue", 401)

        actor = get_container().users_repo.get_by_id(user_id)
        if not actor:
            session.clear()
            return fail("Please log in to continue", 401)

        g.actor = actor
        return view(*args, **kwargs)

    return wrapper


def section_required(section: Section):
    def decorator(view):
        @login_required
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not can_access(g.actor, section):
                return fail("You do not have access to this page", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return fail(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return fail(str(e), 403)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), 404)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return fail(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return fail("Internal server error", 500)
