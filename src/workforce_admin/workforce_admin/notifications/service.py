from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import NOTIFICATION_HISTORY_LIMIT
from ..core.exceptions import NotFoundError
from .model import Notification
from .policy import POLICY, ConsoleEvent
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def notify(self, event: ConsoleEvent, *, user_id: Optional[str] = None, **fields) -> Notification:
        """Append the notification the policy assigns to ``event``."""

        template = POLICY[event]
        notification = self._notifications.append(
            title=template.title,
            message=template.render(**fields),
            type=template.type,
            user_id=user_id,
        )
        logger.info("Notification [%s] %s: %s", notification.type.value, notification.title, notification.message)
        return notification

    def list_recent(self, limit: int = NOTIFICATION_HISTORY_LIMIT) -> Sequence[Notification]:
        return self._notifications.list_recent(limit)

    def mark_read(self, notification_id: str) -> None:
        if not self._notifications.get_by_id(notification_id):
            raise NotFoundError("Notification not found")
        self._notifications.mark_read(notification_id)
