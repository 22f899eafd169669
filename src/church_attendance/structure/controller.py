from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import json_body, login_required, section_required
from ..container import Container
from ..core.enums import Section


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @login_required
    def list_departments():
        return jsonify({"success": True, "departments": container.structure_service.list_departments_view(g.actor)})

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @section_required(Section.STRUCTURE)
    def create_department():
        department = container.structure_service.create_department(g.actor, json_body().get("name", ""))
        return jsonify({"success": True, "department": department.to_record()}), 201

    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    @login_required
    def list_classes():
        return jsonify({"success": True, "classes": container.structure_service.list_classes_view(g.actor)})

    @app.route("/api/classes", methods=["POST"], endpoint="create_class")
    @section_required(Section.CLASSES)
    def create_class():
        class_group = container.structure_service.create_class(g.actor, json_body().get("name", ""))
        return jsonify({"success": True, "class": class_group.to_record()}), 201
