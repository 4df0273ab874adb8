from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..common.http import api_errors, fail, permission_required
from ..common.serialization import to_jsonable
from ..container import Container
from .access import user_to_dict, visible_sections


def register(app: Flask, container: Container) -> None:
    store = container.store
    view_dashboard = permission_required(lambda: store.state.current_user, "view_dashboard")

    @app.route("/api/me", methods=["GET"], endpoint="api_me")
    @api_errors
    def me():
        user = store.state.current_user
        if user is None:
            return fail("No active user", 401)
        return jsonify({"success": True, "user": user_to_dict(user)})

    @app.route("/api/me/navigation", methods=["GET"], endpoint="api_me_navigation")
    @api_errors
    def navigation():
        return jsonify({"success": True, "sections": visible_sections(store.state.current_user)})

    @app.route("/api/state", methods=["GET"], endpoint="api_state")
    @api_errors
    @view_dashboard
    def state():
        """Dashboard snapshot: stats, unread count and the last load error, if any."""

        snapshot = store.state
        return jsonify(
            {
                "success": snapshot.error is None,
                "loading": snapshot.loading,
                "error": snapshot.error,
                "user": user_to_dict(snapshot.current_user),
                "unread_notifications": len(snapshot.unread_notifications),
                "dashboard": container.report_service.dashboard(snapshot, today=now_local().date()),
                "counts": {
                    "employees": len(snapshot.employees),
                    "departments": len(snapshot.departments),
                    "shifts": len(snapshot.shifts),
                    "time_entries": len(snapshot.time_entries),
                },
                "settings": to_jsonable(snapshot.settings),
            }
        )
