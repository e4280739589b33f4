"""Domain entity describing a scheduled group study event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass
class Event:
    """Time-boxed study session owned by a group."""

    id: int | None
    title: str
    description: str | None
    start_time: datetime
    end_time: datetime
    location: str | None
    group_id: int
    created_by: int
    created_at: datetime | None = None
    reminder_sent_at: datetime | None = None

    def reminder_due_at(self, offset: timedelta) -> datetime:
        """Return the UTC instant at which the reminder for this event is due."""

        return self.start_time.astimezone(timezone.utc) - offset

    def starts_within(self, now: datetime, offset: timedelta) -> bool:
        """Return ``True`` when the event starts strictly inside ``(now, now + offset)``."""

        now = now.astimezone(timezone.utc)
        return now < self.start_time.astimezone(timezone.utc) < now + offset


__all__ = ["Event"]
