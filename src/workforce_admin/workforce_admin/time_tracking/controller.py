from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import api_errors, json_body, permission_required
from ..common.serialization import to_jsonable
from ..container import Container
from ..core.exceptions import ValidationError
from ..reports import metrics


def register(app: Flask, container: Container) -> None:
    store = container.store
    clock_in_out = permission_required(lambda: store.state.current_user, "clock_in_out")

    def _employee_id() -> str:
        employee_id = str(json_body().get("employee_id") or "").strip()
        if not employee_id:
            raise ValidationError("employee_id is required")
        return employee_id

    def _outcome_response(action: str, outcome):
        # A refused clock action is a normal outcome, not an HTTP error.
        return jsonify(
            {
                "success": outcome.changed,
                "action": action,
                "message": outcome.notification.message,
                "notification": to_jsonable(outcome.notification),
                "entry_id": outcome.entry_id,
                "total_hours": outcome.total_hours,
                "overtime": outcome.overtime,
            }
        )

    @app.route("/api/time/clock-in", methods=["POST"], endpoint="api_clock_in")
    @api_errors
    @clock_in_out
    def clock_in():
        result = store.clock_in(_employee_id())
        return _outcome_response("clock_in", result.value)

    @app.route("/api/time/clock-out", methods=["POST"], endpoint="api_clock_out")
    @api_errors
    @clock_in_out
    def clock_out():
        result = store.clock_out(_employee_id())
        return _outcome_response("clock_out", result.value)

    @app.route("/api/time-entries", methods=["GET"], endpoint="api_time_entries")
    @api_errors
    @clock_in_out
    def list_time_entries():
        raw = request.args.get("date")
        day = parse_iso_date(raw) if raw else now_local().date()
        entries = metrics.entries_on(store.state.time_entries, day)
        return jsonify(
            {
                "success": True,
                "entries": to_jsonable(entries),
                "summary": metrics.day_summary(store.state.time_entries, day),
            }
        )
