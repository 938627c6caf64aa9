"""Integration tests for the notification API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from notification_service.application.use_cases.notifications import NotificationManager
from notification_service.infrastructure import database
from notification_service.interfaces.api.dependencies import get_notification_manager

ALERT = "X-notificationService-alert"
ERROR = "X-notificationService-error"
PARAMS = "X-notificationService-params"


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    from notification_service.infrastructure import models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


def test_notification_crud_flow(client: TestClient) -> None:
    """Exercise the full lifecycle of a notification over HTTP."""

    response = client.post("/notifications", json={"name": "alert1"})
    assert response.status_code == 201
    created = response.json()
    notification_id = created["id"]
    assert notification_id
    assert created["name"] == "alert1"
    assert response.headers["Location"] == f"/notifications/{notification_id}"
    assert response.headers[ALERT] == "notificationService.notification.created"
    assert response.headers[PARAMS] == notification_id

    detail_response = client.get(f"/notifications/{notification_id}")
    assert detail_response.status_code == 200
    assert detail_response.json() == created

    update_response = client.put(
        "/notifications", json={"id": notification_id, "name": "alert1-v2"}
    )
    assert update_response.status_code == 200
    assert update_response.json()["name"] == "alert1-v2"
    assert update_response.headers[ALERT] == "notificationService.notification.updated"

    detail_response = client.get(f"/notifications/{notification_id}")
    assert detail_response.json()["name"] == "alert1-v2"

    delete_response = client.delete(f"/notifications/{notification_id}")
    assert delete_response.status_code == 204
    assert delete_response.content == b""
    assert delete_response.headers[ALERT] == "notificationService.notification.deleted"

    not_found_response = client.get(f"/notifications/{notification_id}")
    assert not_found_response.status_code == 404
    assert not_found_response.json()["detail"]["kind"] == "not-found"

    second_delete = client.delete(f"/notifications/{notification_id}")
    assert second_delete.status_code == 204


def test_list_notifications(client: TestClient) -> None:
    assert client.get("/notifications").json() == []

    first = client.post("/notifications", json={"name": "first", "channel": "email"}).json()
    second = client.post(
        "/notifications", json={"name": "second", "metadata": {"priority": 2}}
    ).json()

    response = client.get("/notifications")
    assert response.status_code == 200
    listed = response.json()
    assert len(listed) == 2
    assert sorted(listed, key=lambda item: item["name"]) == [first, second]


def test_create_with_id_is_rejected(client: TestClient) -> None:
    response = client.post("/notifications", json={"id": "n1", "name": "alert1"})

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "kind": "id-already-present",
        "message": "A new notification cannot already have an ID",
    }
    assert response.headers[ERROR] == "error.id-already-present"
    assert response.headers[PARAMS] == "notification"
    assert client.get("/notifications").json() == []


def test_update_without_id_is_rejected(client: TestClient) -> None:
    response = client.put("/notifications", json={"name": "alert1"})

    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "id-missing"


@pytest.mark.parametrize("method", ["get", "delete"])
def test_blank_path_identifier_is_rejected(client: TestClient, method) -> None:
    response = getattr(client, method)("/notifications/%20")

    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "id-missing"
    assert response.headers[ERROR] == "error.id-missing"


def test_update_of_unknown_id_is_a_server_error(client: TestClient) -> None:
    response = client.put("/notifications", json={"id": "missing", "name": "alert1"})

    assert response.status_code == 500
    assert response.json()["detail"]["kind"] == "update-failed"
    assert client.get("/notifications").json() == []


def test_update_replaces_omitted_fields(client: TestClient) -> None:
    created = client.post(
        "/notifications",
        json={"name": "alert1", "message": "hello", "recipient": "ops@example.com"},
    ).json()

    updated = client.put(
        "/notifications", json={"id": created["id"], "name": "alert1"}
    ).json()

    assert updated["message"] is None
    assert updated["recipient"] is None
    assert updated["metadata"] == {}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": ""},
        {"name": "alert1", "metadata": "not-an-object"},
    ],
)
def test_malformed_payload_is_a_bad_request(client: TestClient, payload) -> None:
    response = client.post("/notifications", json=payload)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["kind"] == "invalid-payload"
    assert detail["message"]
    assert response.headers[ERROR] == "error.invalid-payload"


def test_store_outage_is_reported(client: TestClient, unavailable_store) -> None:
    client.app.dependency_overrides[get_notification_manager] = lambda: NotificationManager(
        unavailable_store
    )
    try:
        response = client.get("/notifications")
    finally:
        client.app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["detail"]["kind"] == "unavailable"


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
