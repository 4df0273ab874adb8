from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import NotificationType
from .model import Notification


class NotificationRepository(Protocol):
    def list_recent(self, limit: int) -> Sequence[Notification]:
        raise NotImplementedError

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        raise NotImplementedError

    def append(
        self,
        *,
        title: str,
        message: str,
        type: NotificationType,
        user_id: Optional[str] = None,
    ) -> Notification:
        raise NotImplementedError

    def mark_read(self, notification_id: str) -> None:
        raise NotImplementedError
