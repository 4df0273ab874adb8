from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, json_body, permission_required
from ..container import Container
from .service import SettingsService


def register(app: Flask, container: Container) -> None:
    store = container.store
    manage_settings = permission_required(lambda: store.state.current_user, "manage_settings")

    @app.route("/api/settings", methods=["GET"], endpoint="api_settings")
    @api_errors
    @manage_settings
    def get_settings():
        return jsonify({"success": True, "settings": SettingsService.to_dict(store.state.settings)})

    @app.route("/api/settings", methods=["PUT"], endpoint="api_settings_save")
    @api_errors
    @manage_settings
    def save_settings():
        result = store.save_settings(json_body())
        return jsonify({"success": True, "settings": SettingsService.to_dict(result.value)})
