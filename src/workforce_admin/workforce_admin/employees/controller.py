from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body, permission_required, pick
from ..common.serialization import to_jsonable
from ..container import Container
from ..core.exceptions import ValidationError
from ..reports import metrics

_EMPLOYEE_FIELDS = ("name", "email", "phone", "role", "department_id", "status", "hourly_rate")
_REQUIRED_ON_CREATE = ("name", "email", "role", "start_date", "hourly_rate")


def register(app: Flask, container: Container) -> None:
    store = container.store
    manage_employees = permission_required(lambda: store.state.current_user, "manage_employees")

    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    @api_errors
    @manage_employees
    def list_employees():
        found = metrics.search_employees(
            store.state.employees,
            request.args.get("q", ""),
            request.args.get("department", "all"),
        )
        return jsonify({"success": True, "employees": to_jsonable(found)})

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    @api_errors
    @manage_employees
    def create_employee():
        body = json_body()
        # Absent required keys go through as None so the validators reject them.
        fields = {n: body.get(n) for n in _REQUIRED_ON_CREATE}
        fields.update(pick(body, *_EMPLOYEE_FIELDS))
        result = store.add_employee(**fields)
        return jsonify({"success": True, "id": result.value}), 201

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="api_employees_update")
    @api_errors
    @manage_employees
    def update_employee(employee_id: str):
        store.update_employee(employee_id, **pick(json_body(), *_EMPLOYEE_FIELDS))
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_employees_delete")
    @api_errors
    @manage_employees
    def delete_employee(employee_id: str):
        store.delete_employee(employee_id)
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>/permissions", methods=["PUT"], endpoint="api_employee_permissions")
    @api_errors
    @manage_employees
    def replace_permissions(employee_id: str):
        permission_ids = json_body().get("permission_ids")
        if not isinstance(permission_ids, list):
            raise ValidationError("permission_ids must be a list")
        store.update_employee_permissions(employee_id, permission_ids)
        return jsonify({"success": True})

    @app.route("/api/permissions", methods=["GET"], endpoint="api_permissions")
    @api_errors
    @manage_employees
    def list_permissions():
        return jsonify({"success": True, "permissions": to_jsonable(store.state.permissions)})
