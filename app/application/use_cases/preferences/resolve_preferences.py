"""Read-only preference lookup used when deciding deliveries."""

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreference
from app.infrastructure.repositories import NotificationPreferenceRepository


def resolve_preferences(session: Session, user_id: int) -> NotificationPreference:
    """Return the stored preferences or the all-enabled defaults without writing."""

    stored = NotificationPreferenceRepository(session).get_for_user(user_id)
    if stored is None:
        return NotificationPreference.defaults_for(user_id)
    return stored
