"""Run a single reminder tick outside the API process."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.database import initialize_database
from app.infrastructure.delivery import shutdown_delivery_dispatcher
from app.infrastructure.scheduler import run_reminder_tick


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the reminder tick."""

    parser = argparse.ArgumentParser(
        description="Send the event reminders that are due right now.",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="ISO timestamp to evaluate instead of the current time (naive values use APP_TIMEZONE)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every step of the tick.",
    )
    return parser.parse_args()


def main() -> None:
    """Evaluate one tick and print the events that were reminded."""

    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    initialize_database()
    try:
        dispatched = run_reminder_tick(now=args.now)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not read events from the database: {exc}") from exc
    finally:
        shutdown_delivery_dispatcher()

    if dispatched:
        print("Reminders sent for events: " + ", ".join(str(event_id) for event_id in dispatched))
    else:
        print("No reminders due.")


if __name__ == "__main__":
    main()
