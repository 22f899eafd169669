from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import section_required
from ..container import Container
from ..core.enums import Section


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @section_required(Section.DASHBOARD)
    def dashboard():
        return jsonify({"success": True, **container.stats_service.dashboard(g.actor)})

    @app.route("/api/dashboard/insight", methods=["POST"], endpoint="dashboard_insight")
    @section_required(Section.DASHBOARD)
    def dashboard_insight():
        series = container.stats_service.series_for(g.actor)
        if not series:
            return jsonify({"success": True, "insight": None})
        text = container.insight_service.generate(series, g.actor.role)
        return jsonify({"success": True, "insight": text})
