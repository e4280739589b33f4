"""Use case for changing a user's preferences."""

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreference
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import (
    NotificationPreferenceRepository,
    UserRepository,
)


def update_preferences(
    session: Session,
    user_id: int,
    *,
    notify_on_new_event: bool,
    notify_on_reminder: bool,
    email_enabled: bool,
) -> NotificationPreference:
    """Replace every flag of the user's preference row, creating it if needed."""

    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User not found")

    preference = NotificationPreference(
        user_id=user_id,
        notify_on_new_event=notify_on_new_event,
        notify_on_reminder=notify_on_reminder,
        email_enabled=email_enabled,
    )
    return NotificationPreferenceRepository(session).save(preference)
