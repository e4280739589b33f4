"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Kinds of in-app notifications, also used as fan-out triggers."""

    EVENT_CREATED = "EVENT_CREATED"
    EVENT_REMINDER = "EVENT_REMINDER"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    title: str
    message: str
    notification_type: NotificationType
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None
    event_id: int | None = None
    group_id: int | None = None


__all__ = ["Notification", "NotificationType"]
