from __future__ import annotations

import pytest

from app.config import get_settings
from app.infrastructure import scheduler as scheduler_module


@pytest.fixture(autouse=True)
def _no_running_scheduler():
    yield
    scheduler_module.stop_scheduler()


def test_scheduler_stays_off_when_disabled() -> None:
    assert scheduler_module.start_scheduler() is None
    assert scheduler_module.get_scheduler() is None


def test_scheduler_registers_single_non_overlapping_job(monkeypatch: pytest.MonkeyPatch) -> None:
    enabled = get_settings().model_copy(
        update={"enable_scheduler": True, "reminder_tick_seconds": 15}
    )
    monkeypatch.setattr(scheduler_module, "get_settings", lambda: enabled)

    scheduler = scheduler_module.start_scheduler()

    assert scheduler is not None
    assert scheduler.running
    assert scheduler_module.start_scheduler() is scheduler

    job = scheduler.get_job(scheduler_module.REMINDER_JOB_ID)
    assert job.max_instances == 1
    assert job.coalesce is True
    assert job.misfire_grace_time == 15
    assert job.trigger.interval.total_seconds() == 15

    scheduler_module.stop_scheduler()
    assert scheduler_module.get_scheduler() is None
    assert not scheduler.running
