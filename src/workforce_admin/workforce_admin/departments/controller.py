from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, json_body, permission_required, pick
from ..common.serialization import to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    store = container.store
    manage_employees = permission_required(lambda: store.state.current_user, "manage_employees")

    @app.route("/api/departments", methods=["GET"], endpoint="api_departments")
    @api_errors
    @manage_employees
    def list_departments():
        return jsonify({"success": True, "departments": to_jsonable(store.state.departments)})

    @app.route("/api/departments", methods=["POST"], endpoint="api_departments_create")
    @api_errors
    @manage_employees
    def create_department():
        result = store.add_department(**pick(json_body(), "name", "description", "manager_id"))
        return jsonify({"success": True, "id": result.value}), 201

    @app.route("/api/departments/<department_id>", methods=["PATCH"], endpoint="api_departments_update")
    @api_errors
    @manage_employees
    def update_department(department_id: str):
        store.update_department(department_id, **pick(json_body(), "name", "description", "manager_id"))
        return jsonify({"success": True})
