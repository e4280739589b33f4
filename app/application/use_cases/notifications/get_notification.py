"""Use case for loading a notification owned by the acting user."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.domain.exceptions import NotFoundError, PermissionDeniedError
from app.infrastructure.repositories import NotificationRepository


def get_owned_notification(
    session: Session, notification_id: int, *, user_id: int
) -> Notification:
    """Return the notification or raise when it is missing or not ``user_id``'s."""

    notification = NotificationRepository(session).get(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.recipient_id != user_id:
        raise PermissionDeniedError(
            "You don't have permission to access this notification"
        )
    return notification
