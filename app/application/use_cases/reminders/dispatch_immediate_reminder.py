"""Reminder shortcut for events created inside the reminder lead time."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import fan_out
from app.config import get_settings
from app.domain.entities import Event, NotificationType
from app.infrastructure.delivery import DeliveryDispatcher
from app.infrastructure.repositories import EventRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def dispatch_immediate_reminder(
    session: Session,
    event: Event,
    *,
    now: datetime | None = None,
    offset: timedelta | None = None,
    dispatcher: DeliveryDispatcher | None = None,
) -> bool:
    """Remind right away when ``event`` starts within ``(now, now + offset)``.

    Its due instant is already past, so no scheduler tick would ever catch it.
    Returns ``True`` when the reminder was fanned out.
    """

    now = now or now_in_app_timezone()
    offset = offset if offset is not None else get_settings().reminder_offset
    if not event.starts_within(now, offset):
        return False

    if not EventRepository(session).claim_reminder(event.id, now):
        logger.debug("Reminder for event %s already dispatched", event.id)
        return False

    logger.info("Event %s starts within %s; sending reminder immediately", event.id, offset)
    fan_out(session, event, NotificationType.EVENT_REMINDER, dispatcher=dispatcher)
    return True
