"""Use cases toggling the read state of notifications."""

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

from .get_notification import get_owned_notification


def mark_notification_read(
    session: Session,
    notification_id: int,
    *,
    user_id: int,
    now: datetime | None = None,
) -> Notification:
    """Mark one of the user's notifications as read, stamping ``read_at``."""

    get_owned_notification(session, notification_id, user_id=user_id)
    return NotificationRepository(session).set_read(notification_id, True, at=now)


def mark_notification_unread(
    session: Session, notification_id: int, *, user_id: int
) -> Notification:
    """Mark one of the user's notifications as unread, clearing ``read_at``."""

    get_owned_notification(session, notification_id, user_id=user_id)
    return NotificationRepository(session).set_read(notification_id, False)


def mark_all_notifications_read(
    session: Session, user_id: int, *, now: datetime | None = None
) -> int:
    """Mark every unread notification of the user as read; return how many changed."""

    return NotificationRepository(session).mark_all_read(user_id, at=now)
