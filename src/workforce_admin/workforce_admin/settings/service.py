from __future__ import annotations

import logging
from dataclasses import asdict, fields, replace
from typing import Any, Mapping

from ..common.validators import require_non_empty, require_non_negative
from ..core.exceptions import ValidationError
from ..notifications.policy import ConsoleEvent
from ..notifications.service import NotificationService
from .model import ConsoleSettings

logger = logging.getLogger(__name__)

WEEKDAYS = {"monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"}


class SettingsService:
    def __init__(self, notifications: NotificationService):
        self._notifications = notifications

    def save(self, current: ConsoleSettings, changes: Mapping[str, Any]) -> ConsoleSettings:
        """Validate ``changes`` against ``current`` and return the new settings."""

        known = {f.name for f in fields(ConsoleSettings)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ValidationError(f"Unknown settings: {', '.join(unknown)}")

        cleaned: dict[str, Any] = {}
        for key, value in changes.items():
            default = getattr(current, key)
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise ValidationError(f"{key} must be true or false")
                cleaned[key] = value
            elif isinstance(default, int):
                cleaned[key] = int(require_non_negative(value, key))
            else:
                cleaned[key] = require_non_empty(value, key)

        if "work_week_start" in cleaned:
            cleaned["work_week_start"] = cleaned["work_week_start"].lower()
            if cleaned["work_week_start"] not in WEEKDAYS:
                raise ValidationError("work_week_start must be a weekday name")

        updated = replace(current, **cleaned)
        logger.info("Settings saved: %s", sorted(cleaned))
        self._notifications.notify(ConsoleEvent.SETTINGS_SAVED)
        return updated

    @staticmethod
    def to_dict(settings: ConsoleSettings) -> dict:
        return asdict(settings)
