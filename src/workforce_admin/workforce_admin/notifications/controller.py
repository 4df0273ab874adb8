from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, permission_required
from ..common.serialization import to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    store = container.store
    signed_in = permission_required(lambda: store.state.current_user, "view_dashboard", "view_own_schedule")

    @app.route("/api/notifications", methods=["GET"], endpoint="api_notifications")
    @api_errors
    @signed_in
    def list_notifications():
        state = store.state
        return jsonify(
            {
                "success": True,
                "unread": len(state.unread_notifications),
                "notifications": to_jsonable(state.notifications),
            }
        )

    @app.route("/api/notifications/<notification_id>/read", methods=["POST"], endpoint="api_notification_read")
    @api_errors
    @signed_in
    def mark_read(notification_id: str):
        state = store.mark_notification_read(notification_id).state
        return jsonify({"success": True, "unread": len(state.unread_notifications)})
