"""Domain entity holding per-user delivery preferences."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationPreference:
    """Delivery flags for a user. Missing records behave as all-enabled."""

    user_id: int
    notify_on_new_event: bool = True
    notify_on_reminder: bool = True
    email_enabled: bool = True

    @classmethod
    def defaults_for(cls, user_id: int) -> "NotificationPreference":
        return cls(user_id=user_id)

    def wants_created_email(self) -> bool:
        return self.notify_on_new_event and self.email_enabled

    def wants_reminder(self) -> bool:
        return self.notify_on_reminder

    def wants_reminder_email(self) -> bool:
        return self.notify_on_reminder and self.email_enabled


__all__ = ["NotificationPreference"]
