"""Use cases listing a user's notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, user_id: int, *, limit: int | None = None
) -> Sequence[Notification]:
    """Return every notification of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id, limit=limit)


def list_unread_notifications(
    session: Session, user_id: int, *, limit: int | None = None
) -> Sequence[Notification]:
    return NotificationRepository(session).list_unread_for_user(user_id, limit=limit)


def count_unread_notifications(session: Session, user_id: int) -> int:
    return NotificationRepository(session).count_unread_for_user(user_id)
