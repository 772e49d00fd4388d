"""Integration tests for the notification endpoints."""

from __future__ import annotations

import time

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from backoffice.config import Settings
from backoffice.main import create_app


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    app = create_app(Settings(notification_default_duration_ms=100))
    with TestClient(app) as test_client:
        yield test_client


def _create(client: TestClient, **overrides) -> str:
    payload = {
        "kind": "info",
        "title": "New order received",
        "message": "Order #ORD-2024-004 for GHS 156.99 requires review",
        "persistent": True,
    }
    payload.update(overrides)
    response = client.post("/notifications/", json=payload)
    assert response.status_code == 201
    return response.json()["id"]


def test_notification_lifecycle(client: TestClient) -> None:
    """Exercise add, list, read, remove and clear through the API."""

    first = _create(client, title="A")
    second = _create(
        client,
        kind="warning",
        title="B",
        action_label="View inventory",
        action_target="/warehouse",
    )

    listing = client.get("/notifications/").json()
    assert [n["id"] for n in listing["notifications"]] == [second, first]
    assert listing["unread_count"] == 2
    assert listing["notifications"][0]["action_target"] == "/warehouse"
    assert listing["notifications"][0]["created_ago"] == "less than a minute ago"

    assert client.post(f"/notifications/{first}/read").status_code == 204
    assert client.get("/notifications/unread-count").json() == {"unread_count": 1}

    assert client.post("/notifications/read-all").status_code == 204
    assert client.get("/notifications/unread-count").json() == {"unread_count": 0}

    assert client.delete(f"/notifications/{second}").status_code == 204
    remaining = client.get("/notifications/").json()["notifications"]
    assert [n["id"] for n in remaining] == [first]

    assert client.delete("/notifications/").status_code == 204
    assert client.get("/notifications/").json() == {"notifications": [], "unread_count": 0}


def test_unknown_ids_are_accepted(client: TestClient) -> None:
    _create(client)

    assert client.post("/notifications/nonexistent/read").status_code == 204
    assert client.delete("/notifications/nonexistent").status_code == 204
    assert client.get("/notifications/unread-count").json() == {"unread_count": 1}


def test_latest_feed_respects_limit(client: TestClient) -> None:
    ids = [_create(client, title=f"Event {index}") for index in range(7)]

    default_feed = client.get("/notifications/latest").json()
    limited_feed = client.get("/notifications/latest", params={"limit": 2}).json()

    assert [n["id"] for n in default_feed] == list(reversed(ids))[:5]
    assert [n["id"] for n in limited_feed] == list(reversed(ids))[:2]
    assert client.get("/notifications/latest", params={"limit": 0}).status_code == 422


def test_latest_feed_uses_application_settings() -> None:
    app = create_app(Settings(notification_latest_limit=2))

    with TestClient(app) as client:
        ids = [_create(client, title=f"Event {index}") for index in range(4)]
        feed = client.get("/notifications/latest").json()

    assert [n["id"] for n in feed] == list(reversed(ids))[:2]


def test_timestamps_use_configured_timezone() -> None:
    app = create_app(Settings(app_timezone="UTC+03:00"))

    with TestClient(app) as client:
        _create(client)
        created_at = client.get("/notifications/").json()["notifications"][0]["created_at"]

    assert created_at.endswith("+03:00")


@pytest.mark.parametrize(
    "overrides",
    [
        {"kind": "critical"},
        {"title": ""},
        {"title": "   "},
        {"duration_ms": 0},
        {"duration_ms": -5},
        {"action_label": "View order"},
    ],
)
def test_malformed_notifications_are_rejected(client: TestClient, overrides) -> None:
    payload = {"kind": "info", "title": "Title", "message": "Message"}
    payload.update(overrides)

    response = client.post("/notifications/", json=payload)

    assert response.status_code == 422
    assert client.get("/notifications/").json()["notifications"] == []


def test_transient_notifications_expire(client: TestClient) -> None:
    persistent_id = _create(client, title="Stays")
    _create(client, title="Custom", persistent=False, duration_ms=50)
    _create(client, title="Default", persistent=False)

    time.sleep(0.4)

    remaining = client.get("/notifications/").json()["notifications"]
    assert [n["id"] for n in remaining] == [persistent_id]


def test_websocket_streams_changes(client: TestClient) -> None:
    existing = _create(client, title="Existing")

    with client.websocket_connect("/notifications/ws") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert [n["id"] for n in init["data"]["notifications"]] == [existing]
        assert init["data"]["unread_count"] == 1

        created = _create(client, kind="success", title="Payment received")
        added = websocket.receive_json()
        assert added["type"] == "notification.added"
        assert added["data"]["id"] == created
        assert added["data"]["kind"] == "success"

        websocket.send_json({"type": "ack", "ids": [created]})
        read = websocket.receive_json()
        assert read["type"] == "notification.read"
        assert read["data"]["id"] == created
        assert read["data"]["read"] is True

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        client.delete(f"/notifications/{existing}")
        removed = websocket.receive_json()
        assert removed == {
            "type": "notification.removed",
            "data": {"id": existing, "reason": "removed"},
        }

        client.delete("/notifications/")
        assert websocket.receive_json() == {"type": "notifications.cleared", "data": None}

    assert client.get("/notifications/").json()["notifications"] == []
