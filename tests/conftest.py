"""Shared pytest configuration for the notification service tests."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "notification_service_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.pop("API_PREFIX", None)
os.environ.pop("CLIENT_APP_NAME", None)
os.environ.pop("ALERT_HEADERS_ENABLED", None)

from notification_service.application.store import NotificationStoreError  # noqa: E402
from notification_service.config import reset_settings_cache  # noqa: E402
from notification_service.domain.entities import Notification  # noqa: E402

reset_settings_cache()


class InMemoryNotificationStore:
    """Dictionary backed store recording every call it receives."""

    def __init__(self) -> None:
        self.records: dict[str, Notification] = {}
        self.calls: list[str] = []

    def insert(self, notification: Notification) -> Notification:
        self.calls.append("insert")
        stored = replace(notification, id=uuid4().hex)
        self.records[stored.id] = stored
        return stored

    def overwrite(self, notification_id: str, notification: Notification) -> Notification | None:
        self.calls.append("overwrite")
        if notification_id not in self.records:
            return None
        stored = replace(notification, id=notification_id)
        self.records[notification_id] = stored
        return stored

    def find_by_id(self, notification_id: str) -> Notification | None:
        self.calls.append("find_by_id")
        return self.records.get(notification_id)

    def find_all(self) -> Sequence[Notification]:
        self.calls.append("find_all")
        return list(self.records.values())

    def delete_by_id(self, notification_id: str) -> None:
        self.calls.append("delete_by_id")
        self.records.pop(notification_id, None)


class UnavailableNotificationStore:
    """Store whose every operation fails as if the database were down."""

    def _fail(self, *_args, **_kwargs):
        raise NotificationStoreError("connection refused")

    insert = overwrite = find_by_id = find_all = delete_by_id = _fail


@pytest.fixture()
def store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore()


@pytest.fixture()
def unavailable_store() -> UnavailableNotificationStore:
    return UnavailableNotificationStore()
