from __future__ import annotations

from flask import Flask, g, jsonify, session

from ..access.permissions import allowed_sections
from ..common.web import json_body, login_required, section_required
from ..container import Container
from ..core.enums import Section
from .model import User


def _session_payload(user: User) -> dict:
    return {
        "user": user.to_public(),
        "needsOnboarding": user.needs_onboarding,
        "sections": sorted(s.value for s in allowed_sections(user)),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = json_body()
        user = container.auth_service.register(data.get("name", ""), data.get("email", ""), data.get("password", ""))
        session.clear()
        session["user_id"] = user.id
        return jsonify({"success": True, **_session_payload(user)}), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        session.clear()
        session.permanent = bool(data.get("remember"))
        session["user_id"] = user.id
        return jsonify({"success": True, **_session_payload(user)})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify({"success": True, **_session_payload(g.actor)})

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @section_required(Section.PEOPLE)
    def list_users():
        users = container.user_service.list_visible(g.actor)
        return jsonify({"success": True, "users": [u.to_public() for u in users]})

    @app.route("/api/users/<user_id>", methods=["PUT", "PATCH"], endpoint="update_user")
    @login_required
    def update_user(user_id: str):
        user = container.user_service.update_profile(g.actor, user_id, json_body())
        return jsonify({"success": True, "user": user.to_public()})
