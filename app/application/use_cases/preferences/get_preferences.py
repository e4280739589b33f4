"""Use case for reading a user's preferences."""

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreference
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import (
    NotificationPreferenceRepository,
    UserRepository,
)


def get_preferences(session: Session, user_id: int) -> NotificationPreference:
    """Return the preferences of ``user_id``, storing the defaults on first read."""

    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User not found")

    repository = NotificationPreferenceRepository(session)
    stored = repository.get_for_user(user_id)
    if stored is not None:
        return stored
    return repository.save(NotificationPreference.defaults_for(user_id))
