"""Use case for scheduling a study event and announcing it."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import fan_out
from app.application.use_cases.reminders import dispatch_immediate_reminder
from app.domain.entities import Event, NotificationType
from app.domain.exceptions import NotFoundError, PermissionDeniedError
from app.infrastructure.delivery import DeliveryDispatcher
from app.infrastructure.repositories import (
    EventRepository,
    GroupRepository,
    UserRepository,
)
from app.utils import ensure_app_timezone, now_in_app_timezone, to_utc


def create_event(
    session: Session,
    *,
    creator_id: int,
    group_id: int,
    title: str,
    start_time: datetime,
    end_time: datetime,
    description: str | None = None,
    location: str | None = None,
    now: datetime | None = None,
    dispatcher: DeliveryDispatcher | None = None,
) -> Event:
    """Create an event in ``group_id`` and notify the group.

    The group always receives the creation announcement. When the event
    starts inside the reminder lead time its reminder goes out right away too.
    """

    group_repository = GroupRepository(session)
    if group_repository.get(group_id) is None:
        raise NotFoundError("Group not found")
    if UserRepository(session).get(creator_id) is None:
        raise NotFoundError("User not found")

    membership = group_repository.get_membership(group_id, creator_id)
    if membership is None or not membership.is_active():
        raise PermissionDeniedError("User is not a member of this group")
    if not membership.is_admin():
        raise PermissionDeniedError("Only group admins can create events")

    now = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    start_time = ensure_app_timezone(start_time)
    end_time = ensure_app_timezone(end_time)
    if to_utc(start_time) < to_utc(now):
        raise ValueError("Event start time cannot be in the past")
    if to_utc(end_time) < to_utc(start_time):
        raise ValueError("Event end time cannot be before start time")

    event = EventRepository(session).create(
        Event(
            id=None,
            title=title,
            description=description,
            start_time=start_time,
            end_time=end_time,
            location=location,
            group_id=group_id,
            created_by=creator_id,
            created_at=now,
        )
    )

    fan_out(session, event, NotificationType.EVENT_CREATED, dispatcher=dispatcher)
    dispatch_immediate_reminder(session, event, now=now, dispatcher=dispatcher)
    return event
