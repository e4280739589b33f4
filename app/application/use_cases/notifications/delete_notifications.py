"""Use cases removing notifications."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository

from .get_notification import get_owned_notification


def delete_notification(session: Session, notification_id: int, *, user_id: int) -> None:
    """Delete one notification; only its recipient may do so."""

    get_owned_notification(session, notification_id, user_id=user_id)
    NotificationRepository(session).delete(notification_id)


def delete_all_notifications(session: Session, user_id: int) -> int:
    return NotificationRepository(session).delete_all_for_user(user_id)
