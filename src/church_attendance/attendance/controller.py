from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import today_iso
from ..common.web import json_body, section_required
from ..container import Container
from ..core.enums import Section


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="roll_call")
    @section_required(Section.ATTENDANCE)
    def roll_call():
        day = request.args.get("date") or today_iso()
        rows = container.attendance_service.roll_call(g.actor, day)
        return jsonify({"success": True, "date": day, "students": rows})

    @app.route("/api/attendance/<student_id>", methods=["PUT"], endpoint="mark_attendance")
    @section_required(Section.PEOPLE)
    def mark_attendance(student_id: str):
        data = json_body()
        day = data.get("date") or today_iso()
        status = container.attendance_service.mark_attendance(g.actor, student_id, day, data.get("status", ""))
        return jsonify({"success": True, "date": day, "status": status.value})

    @app.route("/api/attendance/<student_id>/toggle", methods=["POST"], endpoint="toggle_attendance")
    @section_required(Section.ATTENDANCE)
    def toggle_attendance(student_id: str):
        day = json_body().get("date") or today_iso()
        status = container.attendance_service.toggle_attendance(g.actor, student_id, day)
        return jsonify({"success": True, "date": day, "status": status.value})
