"""Shared fixtures: an in-memory database, a seeded study group and a fake sink."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["ENABLE_SCHEDULER"] = "false"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.domain.entities import Event, Group, GroupMemberRole, GroupMemberStatus, User
from app.domain.exceptions import DeliveryError
from app.infrastructure.database import initialize_database
from app.infrastructure.delivery import DeliveryDispatcher
from app.infrastructure.repositories import EventRepository, GroupRepository, UserRepository

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class RecordingSink:
    """Delivery sink that remembers every attempt and fails for chosen addresses."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = set(failing or ())
        self.attempts: list[tuple[str, str, str]] = []
        self.sent: list[tuple[str, str, str]] = []
        self._lock = threading.Lock()

    def send(self, address: str, subject: str, body: str) -> None:
        with self._lock:
            self.attempts.append((address, subject, body))
        if address in self.failing:
            raise DeliveryError(f"mailbox {address} rejected the message")
        with self._lock:
            self.sent.append((address, subject, body))

    def addresses(self) -> list[str]:
        return sorted(address for address, _, _ in self.sent)


@dataclass
class StudyGroup:
    group: Group
    admin: User
    bob: User
    carol: User
    pending: User

    @property
    def active_users(self) -> list[User]:
        return [self.admin, self.bob, self.carol]

    @property
    def active_emails(self) -> list[str]:
        return sorted(user.email for user in self.active_users)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def dispatcher(sink: RecordingSink) -> DeliveryDispatcher:
    return DeliveryDispatcher(sink, max_workers=0)


@pytest.fixture()
def study_group(session) -> StudyGroup:
    """A group with an admin, two active members and one pending request."""

    users = UserRepository(session)
    admin = users.create(User(id=None, name="Alice", email="alice@example.com"))
    bob = users.create(User(id=None, name="Bob", email="bob@example.com"))
    carol = users.create(User(id=None, name="Carol", email="carol@example.com"))
    pending = users.create(User(id=None, name="Dave", email="dave@example.com"))

    groups = GroupRepository(session)
    group = groups.create(Group(id=None, name="Linear Algebra", created_by=admin.id))
    groups.add_member(group.id, admin.id, role=GroupMemberRole.ADMIN)
    groups.add_member(group.id, bob.id)
    groups.add_member(group.id, carol.id)
    groups.add_member(group.id, pending.id, status=GroupMemberStatus.PENDING)

    return StudyGroup(group=group, admin=admin, bob=bob, carol=carol, pending=pending)


def store_event(session, study_group: StudyGroup, start: datetime, *, title: str = "Eigenvalues") -> Event:
    """Persist an event directly, bypassing the creation notifications."""

    return EventRepository(session).create(
        Event(
            id=None,
            title=title,
            description="Chapter 5 exercises",
            start_time=start,
            end_time=start + timedelta(hours=1),
            location="Library room 2",
            group_id=study_group.group.id,
            created_by=study_group.admin.id,
        )
    )
