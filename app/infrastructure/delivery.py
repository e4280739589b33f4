"""Fire-and-forget dispatch of per-recipient email deliveries."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait

from app.config import get_settings
from app.domain.exceptions import DeliveryError
from app.infrastructure.email import DeliverySink, SendGridEmailSink

logger = logging.getLogger(__name__)


class DeliveryDispatcher:
    """Run sink calls on a worker pool, isolating each call's failure.

    With ``max_workers=0`` every delivery runs inline in the caller's thread,
    still isolated. Pending futures are only awaited by :meth:`drain` and
    :meth:`shutdown`; callers never observe a delivery result.
    """

    def __init__(self, sink: DeliverySink, *, max_workers: int = 4) -> None:
        self._sink = sink
        self._executor = (
            ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="delivery")
            if max_workers > 0
            else None
        )
        self._pending: set[Future] = set()
        self._lock = threading.Lock()

    @property
    def sink(self) -> DeliverySink:
        return self._sink

    def dispatch(self, address: str, subject: str, body: str) -> None:
        """Schedule one delivery to ``address``."""

        if self._executor is None:
            self._deliver(address, subject, body)
            return

        future = self._executor.submit(self._deliver, address, subject, body)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)

    def drain(self, timeout: float | None = None) -> int:
        """Wait for deliveries scheduled so far; return how many are still pending."""

        with self._lock:
            pending = list(self._pending)
        if not pending:
            return 0
        _, not_done = wait(pending, timeout=timeout)
        return len(not_done)

    def shutdown(self, *, wait_for_pending: bool = True) -> None:
        """Release the pool; without ``wait_for_pending`` queued deliveries are dropped."""

        if self._executor is not None:
            self._executor.shutdown(wait=wait_for_pending, cancel_futures=not wait_for_pending)

    def _deliver(self, address: str, subject: str, body: str) -> bool:
        try:
            self._sink.send(address, subject, body)
        except DeliveryError as exc:
            logger.warning("Email delivery to %s failed: %s", address, exc)
            return False
        except Exception:
            logger.exception("Unexpected error delivering email to %s", address)
            return False
        return True

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)


_dispatcher: DeliveryDispatcher | None = None
_dispatcher_lock = threading.Lock()


def get_delivery_dispatcher() -> DeliveryDispatcher:
    """Return the process-wide dispatcher, creating it from settings on first use."""

    global _dispatcher

    with _dispatcher_lock:
        if _dispatcher is None:
            settings = get_settings()
            _dispatcher = DeliveryDispatcher(
                SendGridEmailSink(), max_workers=settings.delivery_workers
            )
        return _dispatcher


def shutdown_delivery_dispatcher(timeout: float | None = None) -> None:
    """Wait up to ``timeout`` seconds for pending deliveries, then release the pool.

    ``timeout`` defaults to ``DELIVERY_TIMEOUT_SECONDS``, the bound of a single
    SendGrid request.
    """

    global _dispatcher

    with _dispatcher_lock:
        dispatcher, _dispatcher = _dispatcher, None
    if dispatcher is None:
        return

    if timeout is None:
        timeout = get_settings().delivery_timeout_seconds
    remaining = dispatcher.drain(timeout=timeout)
    dispatcher.shutdown(wait_for_pending=False)
    if remaining:
        logger.warning(
            "Delivery dispatcher stopped with %d delivery(ies) still pending", remaining
        )
    else:
        logger.info("Delivery dispatcher stopped")


__all__ = [
    "DeliveryDispatcher",
    "get_delivery_dispatcher",
    "shutdown_delivery_dispatcher",
]
