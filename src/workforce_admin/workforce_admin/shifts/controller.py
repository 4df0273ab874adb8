from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date, week_start
from ..common.http import api_errors, json_body, permission_required, pick
from ..common.serialization import to_jsonable
from ..container import Container
from ..reports import metrics


def register(app: Flask, container: Container) -> None:
    store = container.store

    def current_user():
        return store.state.current_user

    manage_schedules = permission_required(current_user, "manage_schedules")
    view_schedules = permission_required(current_user, "manage_schedules", "view_own_schedule")

    @app.route("/api/shifts", methods=["GET"], endpoint="api_shifts")
    @api_errors
    @view_schedules
    def list_shifts():
        """All shifts, one day (``?date=``) or the Monday-start week around ``?week=``."""

        shifts = list(store.state.shifts)
        if request.args.get("date"):
            shifts = metrics.shifts_on(shifts, parse_iso_date(request.args["date"]))
        elif request.args.get("week"):
            start = week_start(parse_iso_date(request.args["week"]))
            end = start + timedelta(days=6)
            shifts = [s for s in shifts if start <= s.date <= end]

        user = store.state.current_user
        if not user.has_permission("manage_schedules"):
            shifts = [s for s in shifts if s.employee_id == user.id]

        return jsonify(
            {
                "success": True,
                "shifts": to_jsonable(shifts),
                "week": metrics.week_schedule_counts(store.state.shifts, now_local().date()),
            }
        )

    @app.route("/api/shifts", methods=["POST"], endpoint="api_shifts_create")
    @api_errors
    @manage_schedules
    def create_shift():
        body = json_body()
        fields = {n: body.get(n, "") for n in ("employee_id", "start_time", "end_time")}
        fields.update(pick(body, "status", "notes"))
        fields["work_date"] = body.get("date", "")
        result = store.add_shift(**fields)
        return jsonify({"success": True, "id": result.value}), 201

    @app.route("/api/shifts/<shift_id>", methods=["PATCH"], endpoint="api_shifts_update")
    @api_errors
    @manage_schedules
    def update_shift(shift_id: str):
        store.update_shift(shift_id, **pick(json_body(), "start_time", "end_time", "status", "notes"))
        return jsonify({"success": True})

    @app.route("/api/shifts/<shift_id>", methods=["DELETE"], endpoint="api_shifts_delete")
    @api_errors
    @manage_schedules
    def delete_shift(shift_id: str):
        store.delete_shift(shift_id)
        return jsonify({"success": True})
