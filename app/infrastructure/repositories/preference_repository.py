"""Persistence helpers for notification preferences."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreference
from app.infrastructure.models import NotificationPreferenceModel


class NotificationPreferenceRepository:
    """Read and upsert the single preference row of a user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user(self, user_id: int) -> NotificationPreference | None:
        model = self._get_model(user_id)
        return self._to_entity(model) if model else None

    def save(self, preference: NotificationPreference) -> NotificationPreference:
        model = self._get_model(preference.user_id)
        if model is None:
            model = NotificationPreferenceModel(user_id=preference.user_id)
        model.notify_on_new_event = preference.notify_on_new_event
        model.notify_on_reminder = preference.notify_on_reminder
        model.email_enabled = preference.email_enabled
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, user_id: int) -> NotificationPreferenceModel | None:
        return (
            self.session.query(NotificationPreferenceModel)
            .filter(NotificationPreferenceModel.user_id == user_id)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: NotificationPreferenceModel) -> NotificationPreference:
        return NotificationPreference(
            user_id=model.user_id,
            notify_on_new_event=bool(model.notify_on_new_event),
            notify_on_reminder=bool(model.notify_on_reminder),
            email_enabled=bool(model.email_enabled),
        )


__all__ = ["NotificationPreferenceRepository"]
