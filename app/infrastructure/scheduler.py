"""Recurring background job that sends event reminders."""

from __future__ import annotations

import logging
import threading
from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import Session, sessionmaker

from app.application.use_cases.reminders import dispatch_due_reminders
from app.config import get_settings
from app.infrastructure.database import SessionLocal
from app.infrastructure.delivery import DeliveryDispatcher
from app.utils import get_app_timezone

logger = logging.getLogger(__name__)

REMINDER_JOB_ID = "send_event_reminders"

# Process-wide singleton; a second start is ignored.
_scheduler: BackgroundScheduler | None = None
_scheduler_lock = threading.Lock()


def start_scheduler() -> BackgroundScheduler | None:
    """Start the reminder scheduler unless disabled or already running.

    The job runs with ``max_instances=1`` so ticks never overlap, and with
    ``coalesce=True`` so ticks that piled up behind a slow one collapse into a
    single queued run.
    """

    global _scheduler

    settings = get_settings()
    if not settings.enable_scheduler:
        logger.info("Reminder scheduler disabled via settings (ENABLE_SCHEDULER=False)")
        return None

    with _scheduler_lock:
        if _scheduler is not None:
            logger.info("Reminder scheduler already running, skipping initialization")
            return _scheduler

        scheduler = BackgroundScheduler(timezone=get_app_timezone())
        scheduler.add_job(
            run_reminder_tick,
            trigger="interval",
            seconds=settings.reminder_tick_seconds,
            id=REMINDER_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            misfire_grace_time=settings.reminder_tick_seconds,
        )
        scheduler.start()
        _scheduler = scheduler

    logger.info(
        "Reminder scheduler started: tick every %s second(s), reminders %s minute(s) ahead",
        settings.reminder_tick_seconds,
        settings.reminder_offset_minutes,
    )
    return scheduler


def stop_scheduler() -> None:
    """Stop the scheduler and wait for an in-flight tick to finish."""

    global _scheduler

    with _scheduler_lock:
        scheduler, _scheduler = _scheduler, None
    if scheduler is None:
        return
    scheduler.shutdown(wait=True)
    logger.info("Reminder scheduler stopped")


def get_scheduler() -> BackgroundScheduler | None:
    return _scheduler


def run_reminder_tick(
    *,
    now: datetime | None = None,
    session_factory: sessionmaker[Session] | None = None,
    dispatcher: DeliveryDispatcher | None = None,
) -> list[int]:
    """Run one tick in a fresh session and return the reminded event ids."""

    factory = session_factory or SessionLocal
    session = factory()
    try:
        return dispatch_due_reminders(session, now=now, dispatcher=dispatcher)
    finally:
        session.close()


__all__ = [
    "REMINDER_JOB_ID",
    "get_scheduler",
    "run_reminder_tick",
    "start_scheduler",
    "stop_scheduler",
]
