"""Persistence helpers for scheduled events."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.entities import Event, GroupMemberStatus
from app.infrastructure.models import EventModel, GroupMemberModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
    to_utc,
)

# Start times are stored as app-local wall clock, which drifts from UTC by at
# most this much across a DST change.
_UTC_OFFSET_DRIFT = timedelta(hours=2)


class EventRepository:
    """Provide CRUD and scheduling queries for :class:`Event` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel(
            title=event.title,
            description=event.description,
            start_time=ensure_app_naive_datetime(event.start_time),
            end_time=ensure_app_naive_datetime(event.end_time),
            location=event.location,
            group_id=event.group_id,
            created_by=event.created_by,
            created_at=ensure_app_naive_datetime(event.created_at or now_in_app_timezone()),
            reminder_sent_at=ensure_app_naive_datetime(event.reminder_sent_at),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, event_id: int) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            msg = f"Event with id {event_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def list_for_group(self, group_id: int) -> Sequence[Event]:
        query = (
            self.session.query(EventModel)
            .filter(EventModel.group_id == group_id)
            .order_by(EventModel.start_time.asc(), EventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(self, user_id: int) -> Sequence[Event]:
        """Return events of every group where ``user_id`` is an active member."""

        active_groups = select(GroupMemberModel.group_id).where(
            GroupMemberModel.user_id == user_id,
            GroupMemberModel.status == GroupMemberStatus.ACTIVE.value,
        )
        query = (
            self.session.query(EventModel)
            .filter(EventModel.group_id.in_(active_groups))
            .order_by(EventModel.start_time.asc(), EventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def find_starting_between(self, start: datetime, end: datetime) -> Sequence[Event]:
        """Return events whose start instant falls inside ``[start, end]``."""

        return self._starting_in_band(self.session.query(EventModel), start, end)

    def find_unsent_starting_between(
        self, after: datetime, until: datetime
    ) -> Sequence[Event]:
        """Return unreminded events whose start instant falls inside ``(after, until]``."""

        query = self.session.query(EventModel).filter(EventModel.reminder_sent_at.is_(None))
        return self._starting_in_band(query, after, until, include_lower=False)

    def _starting_in_band(
        self,
        query,
        lower: datetime,
        upper: datetime,
        *,
        include_lower: bool = True,
    ) -> list[Event]:
        lower = to_utc(lower)
        upper = to_utc(upper)
        query = query.filter(
            EventModel.start_time >= ensure_app_naive_datetime(lower - _UTC_OFFSET_DRIFT),
            EventModel.start_time <= ensure_app_naive_datetime(upper + _UTC_OFFSET_DRIFT),
        )
        events = []
        for model in query.all():
            event = self._to_entity(model)
            start = to_utc(event.start_time)
            if (lower <= start if include_lower else lower < start) and start <= upper:
                events.append(event)
        return events

    def claim_reminder(self, event_id: int, claimed_at: datetime) -> bool:
        """Atomically mark the reminder of ``event_id`` as dispatched.

        Returns ``False`` when another tick or the creation path already
        claimed it.
        """

        updated = (
            self.session.query(EventModel)
            .filter(EventModel.id == event_id, EventModel.reminder_sent_at.is_(None))
            .update(
                {EventModel.reminder_sent_at: ensure_app_naive_datetime(claimed_at)},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated == 1

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            description=model.description,
            start_time=ensure_app_timezone(model.start_time),
            end_time=ensure_app_timezone(model.end_time),
            location=model.location,
            group_id=model.group_id,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            reminder_sent_at=ensure_app_timezone(model.reminder_sent_at),
        )


__all__ = ["EventRepository"]
