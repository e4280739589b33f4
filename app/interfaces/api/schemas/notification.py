"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.domain.entities import NotificationType


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipient_id: int
    title: str
    message: str
    notification_type: NotificationType
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None
    event_id: int | None = None
    group_id: int | None = None


class UnreadCountRead(BaseModel):
    count: int


class NotificationBulkResult(BaseModel):
    """Number of notifications affected by a bulk operation."""

    affected: int


__all__ = ["NotificationBulkResult", "NotificationRead", "UnreadCountRead"]
