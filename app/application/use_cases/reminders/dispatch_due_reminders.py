"""One scheduler tick: find events whose reminder is due and fan them out."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import fan_out
from app.config import get_settings
from app.domain.entities import Event, NotificationType
from app.infrastructure.delivery import DeliveryDispatcher
from app.infrastructure.repositories import EventRepository
from app.utils import ensure_app_timezone, now_in_app_timezone, to_utc

logger = logging.getLogger(__name__)


def is_reminder_due(
    event: Event, now: datetime, *, offset: timedelta, period: timedelta
) -> bool:
    """Return ``True`` when ``now`` lies in ``[start - offset, start - offset + period)``.

    A tick landing exactly on the due instant fires; a tick one full period
    later does not.
    """

    due = event.reminder_due_at(offset)
    return due <= to_utc(now) < due + period


def _collect_due_events(
    repository: EventRepository,
    now: datetime,
    *,
    offset: timedelta,
    period: timedelta,
    catch_up: bool,
) -> list[Event]:
    instant = to_utc(now)
    candidates = repository.find_starting_between(
        instant + offset - period, instant + offset
    )
    due = {
        event.id: event
        for event in candidates
        if is_reminder_due(event, now, offset=offset, period=period)
    }
    if catch_up:
        # Windows skipped by a late tick: still upcoming and never reminded.
        for event in repository.find_unsent_starting_between(instant, instant + offset):
            due.setdefault(event.id, event)
    return sorted(due.values(), key=lambda event: (to_utc(event.start_time), event.id))


def dispatch_due_reminders(
    session: Session,
    *,
    now: datetime | None = None,
    offset: timedelta | None = None,
    period: timedelta | None = None,
    catch_up: bool | None = None,
    dispatcher: DeliveryDispatcher | None = None,
) -> list[int]:
    """Send the reminders that became due at ``now`` and return their event ids.

    Every due event is claimed through its ``reminder_sent_at`` marker before
    fanning out, so overlapping ticks and the creation shortcut never remind
    twice. A failure while handling one event is logged and does not stop the
    remaining events of the tick.
    """

    settings = get_settings()
    now = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    offset = offset if offset is not None else settings.reminder_offset
    period = period if period is not None else settings.reminder_period
    catch_up = settings.reminder_catch_up if catch_up is None else catch_up

    repository = EventRepository(session)
    due_events = _collect_due_events(
        repository, now, offset=offset, period=period, catch_up=catch_up
    )

    dispatched: list[int] = []
    for event in due_events:
        try:
            if not repository.claim_reminder(event.id, now):
                logger.debug("Reminder for event %s already dispatched", event.id)
                continue
            fan_out(session, event, NotificationType.EVENT_REMINDER, dispatcher=dispatcher)
        except Exception:
            session.rollback()
            logger.exception("Failed to dispatch reminder for event %s", event.id)
            continue
        dispatched.append(event.id)

    if dispatched:
        logger.info("Dispatched reminders for %d event(s): %s", len(dispatched), dispatched)
    return dispatched
