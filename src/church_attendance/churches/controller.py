from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import fail, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/churches", methods=["POST"], endpoint="found_church")
    @login_required
    def found_church():
        church, user = container.church_service.found_church(json_body().get("name", ""), g.actor)
        return jsonify({"success": True, "church": church.to_record(), "user": user.to_public()}), 201

    @app.route("/api/churches/join", methods=["POST"], endpoint="join_church")
    @login_required
    def join_church():
        user = container.church_service.join_church(json_body().get("code", ""), g.actor)
        return jsonify({"success": True, "user": user.to_public()})

    @app.route("/api/church", methods=["GET"], endpoint="my_church")
    @login_required
    def my_church():
        if not g.actor.church_id:
            return fail("You do not belong to a church yet", 404)
        church = container.church_service.get(g.actor.church_id)
        return jsonify({"success": True, "church": church.to_record()})
