"""HTTP tests for the event, notification and preference endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.infrastructure import delivery as delivery_module
from app.infrastructure.database import get_db
from app.infrastructure.delivery import DeliveryDispatcher
from app.infrastructure.security import create_access_token
from main import create_app


@pytest.fixture()
def client(session_factory, sink, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(delivery_module, "_dispatcher", DeliveryDispatcher(sink, max_workers=0))

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = _get_test_db
    return TestClient(app)


def _auth(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}


def _event_payload(group_id: int, start: datetime) -> dict:
    return {
        "group_id": group_id,
        "title": "Eigenvalues",
        "description": "Chapter 5",
        "location": "Library room 2",
        "start_time": start.isoformat(),
        "end_time": (start + timedelta(hours=1)).isoformat(),
    }


def test_requests_without_token_are_rejected(client) -> None:
    response = client.get("/notifications/")

    assert response.status_code == 401


def test_admin_creates_event_and_members_are_notified(client, study_group, sink) -> None:
    start = datetime.now(timezone.utc) + timedelta(days=2)

    response = client.post(
        "/events/",
        json=_event_payload(study_group.group.id, start),
        headers=_auth(study_group.admin),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Eigenvalues"
    assert body["reminder_sent_at"] is None
    assert sink.addresses() == study_group.active_emails

    inbox = client.get("/notifications/", headers=_auth(study_group.bob)).json()
    assert [item["notification_type"] for item in inbox] == ["EVENT_CREATED"]
    assert inbox[0]["event_id"] == body["id"]

    count = client.get("/notifications/unread-count", headers=_auth(study_group.bob)).json()
    assert count == {"count": 1}


def test_member_cannot_create_event(client, study_group) -> None:
    start = datetime.now(timezone.utc) + timedelta(days=2)

    response = client.post(
        "/events/",
        json=_event_payload(study_group.group.id, start),
        headers=_auth(study_group.bob),
    )

    assert response.status_code == 403


def test_event_in_the_past_is_a_bad_request(client, study_group) -> None:
    start = datetime.now(timezone.utc) - timedelta(hours=1)

    response = client.post(
        "/events/",
        json=_event_payload(study_group.group.id, start),
        headers=_auth(study_group.admin),
    )

    assert response.status_code == 400


def test_unknown_event_is_not_found(client, study_group) -> None:
    response = client.get("/events/4242", headers=_auth(study_group.bob))

    assert response.status_code == 404


def test_notification_read_state_endpoints(client, study_group) -> None:
    start = datetime.now(timezone.utc) + timedelta(days=2)
    client.post(
        "/events/",
        json=_event_payload(study_group.group.id, start),
        headers=_auth(study_group.admin),
    )
    (notification,) = client.get("/notifications/", headers=_auth(study_group.carol)).json()

    forbidden = client.post(
        f"/notifications/{notification['id']}/read", headers=_auth(study_group.bob)
    )
    assert forbidden.status_code == 403

    read = client.post(
        f"/notifications/{notification['id']}/read", headers=_auth(study_group.carol)
    ).json()
    assert read["is_read"] is True
    assert read["read_at"] is not None
    assert client.get("/notifications/unread", headers=_auth(study_group.carol)).json() == []

    unread = client.post(
        f"/notifications/{notification['id']}/unread", headers=_auth(study_group.carol)
    ).json()
    assert unread["is_read"] is False
    assert unread["read_at"] is None

    marked = client.post("/notifications/mark-all-read", headers=_auth(study_group.carol))
    assert marked.json() == {"affected": 1}

    deleted = client.delete(
        f"/notifications/{notification['id']}", headers=_auth(study_group.carol)
    )
    assert deleted.status_code == 204
    assert client.delete("/notifications/", headers=_auth(study_group.carol)).json() == {
        "affected": 0
    }


def test_preferences_round_trip(client, study_group) -> None:
    defaults = client.get("/user/preferences/", headers=_auth(study_group.bob))
    assert defaults.json() == {
        "notify_on_new_event": True,
        "notify_on_reminder": True,
        "email_enabled": True,
    }

    updated = client.put(
        "/user/preferences/",
        json={"notify_on_new_event": True, "notify_on_reminder": False, "email_enabled": False},
        headers=_auth(study_group.bob),
    )
    assert updated.status_code == 200
    assert updated.json()["notify_on_reminder"] is False
    assert client.get("/user/preferences/", headers=_auth(study_group.bob)).json() == updated.json()
