from __future__ import annotations

import io

from flask import Flask, g, jsonify, request, send_file

from ..common.web import fail, json_body, section_required
from ..container import Container
from ..core.enums import Section
from .import_service import TEMPLATE_FILENAME, build_template

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @section_required(Section.PEOPLE)
    def list_students():
        students = container.student_service.list_visible(g.actor)
        return jsonify({"success": True, "students": [s.to_record() for s in students]})

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    @section_required(Section.PEOPLE)
    def create_student():
        data = json_body()
        student = container.student_service.create_student(g.actor, data, class_id=data.get("classId"))
        return jsonify({"success": True, "student": student.to_record()}), 201

    @app.route("/api/students/<student_id>", methods=["PUT", "PATCH"], endpoint="update_student")
    @section_required(Section.PEOPLE)
    def update_student(student_id: str):
        student = container.student_service.update_student(g.actor, student_id, json_body())
        return jsonify({"success": True, "student": student.to_record()})

    @app.route("/api/students/import", methods=["POST"], endpoint="import_students")
    @section_required(Section.PEOPLE)
    def import_students():
        upload = request.files.get("file")
        if not upload or not upload.filename:
            return fail("Choose a file to upload", 400)

        result = container.import_service.import_file(
            g.actor,
            upload.stream,
            upload.filename,
            class_id=request.form.get("classId") or None,
        )
        return jsonify(
            {
                "success": True,
                "created": result.created,
                "skipped": result.skipped,
                "message": f"{result.created} students registered",
            }
        )

    @app.route("/api/students/import/template", methods=["GET"], endpoint="student_import_template")
    @section_required(Section.PEOPLE)
    def student_import_template():
        buf = io.BytesIO(build_template())
        return send_file(buf, mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=TEMPLATE_FILENAME)
