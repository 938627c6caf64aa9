"""Persistence contract consumed by the notification lifecycle manager."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from notification_service.domain.entities import Notification


class NotificationStoreError(Exception):
    """Raised by store implementations when the backing storage fails."""


class NotificationStore(Protocol):
    """Key-addressable storage for :class:`Notification` records."""

    def insert(self, notification: Notification) -> Notification:
        """Persist ``notification`` under a freshly assigned id and return it."""
        ...

    def overwrite(
        self, notification_id: str, notification: Notification
    ) -> Notification | None:
        """Replace the record stored under ``notification_id``.

        Returns ``None`` when no record exists under that key.
        """
        ...

    def find_by_id(self, notification_id: str) -> Notification | None:
        ...

    def find_all(self) -> Sequence[Notification]:
        ...

    def delete_by_id(self, notification_id: str) -> None:
        """Remove the record if present; missing keys are ignored."""
        ...


__all__ = ["NotificationStore", "NotificationStoreError"]
