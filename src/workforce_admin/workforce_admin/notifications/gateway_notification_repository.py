from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import NotificationType
from ..database.gateway import DataGateway
from .model import Notification
from .repository import NotificationRepository


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def to_notification(row: Mapping[str, Any]) -> Notification:
    return Notification(
        id=str(row["id"]),
        title=row["title"],
        message=row["message"],
        type=NotificationType(row["type"]),
        read=bool(row.get("read")),
        created_at=_as_datetime(row["created_at"]),
        user_id=row.get("user_id"),
    )


class GatewayNotificationRepository(NotificationRepository):
    def __init__(self, gateway: DataGateway):
        self._gateway = gateway

    def list_recent(self, limit: int) -> Sequence[Notification]:
        rows = self._gateway.list("notifications", order_by="created_at", descending=True, limit=int(limit))
        return [to_notification(r) for r in rows]

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        rows = self._gateway.list("notifications", {"id": notification_id})
        return to_notification(rows[0]) if rows else None

    def append(
        self,
        *,
        title: str,
        message: str,
        type: NotificationType,
        user_id: Optional[str] = None,
    ) -> Notification:
        row = self._gateway.insert(
            "notifications",
            {"title": title, "message": message, "type": type.value, "read": False, "user_id": user_id},
        )
        return to_notification(row)

    def mark_read(self, notification_id: str) -> None:
        self._gateway.update("notifications", notification_id, {"read": True})
