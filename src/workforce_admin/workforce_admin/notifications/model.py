from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    """Domain entity: an append-only console message. Only ``read`` ever changes."""

    id: str
    title: str
    message: str
    type: NotificationType
    read: bool
    created_at: datetime
    user_id: Optional[str] = None
