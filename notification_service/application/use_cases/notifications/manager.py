"""Lifecycle operations for notification records."""

from __future__ import annotations

import logging
from dataclasses import replace

from notification_service.application.store import (
    NotificationStore,
    NotificationStoreError,
)
from notification_service.domain.entities import Notification
from notification_service.domain.outcomes import (
    KIND_UNAVAILABLE,
    KIND_UPDATE_FAILED,
    Created,
    CreateOutcome,
    Deleted,
    DeleteOutcome,
    Found,
    GetOutcome,
    NotFound,
    StoreError,
    Updated,
    UpdateOutcome,
)
from .validators import (
    check_existing_notification,
    check_identifier,
    check_new_notification,
)

logger = logging.getLogger(__name__)


def _unavailable(action: str, exc: NotificationStoreError) -> StoreError:
    logger.warning("Notification store failed to %s: %s", action, exc, exc_info=exc)
    return StoreError(
        kind=KIND_UNAVAILABLE,
        message=f"The notification store could not {action}: {exc}",
        cause=exc,
    )


class NotificationManager:
    """Validate notification records and translate store results into outcomes.

    The manager keeps no state of its own, so a single instance can serve
    concurrent callers as long as the injected store can.
    """

    def __init__(self, store: NotificationStore) -> None:
        self.store = store

    def create(self, notification: Notification) -> CreateOutcome:
        violation = check_new_notification(notification)
        if violation is not None:
            logger.info("Rejected notification creation: %s", violation.message)
            return violation

        # A blank id counts as unset; the store only ever sees ``None``.
        try:
            stored = self.store.insert(replace(notification, id=None))
        except NotificationStoreError as exc:
            return _unavailable("save the notification", exc)
        logger.info("Created notification %s", stored.id)
        return Created(stored)

    def update(self, notification: Notification) -> UpdateOutcome:
        violation = check_existing_notification(notification)
        if violation is not None:
            logger.info("Rejected notification update: %s", violation.message)
            return violation

        notification_id = notification.id
        try:
            stored = self.store.overwrite(notification_id, notification)
        except NotificationStoreError as exc:
            return _unavailable(f"update notification {notification_id}", exc)
        if stored is None:
            return StoreError(
                kind=KIND_UPDATE_FAILED,
                message=f"Notification {notification_id} does not exist and cannot be updated",
            )
        logger.info("Updated notification %s", stored.id)
        return Updated(stored)

    def list(self) -> list[Notification] | StoreError:
        """Return every stored notification; ordering is up to the store."""

        try:
            return list(self.store.find_all())
        except NotificationStoreError as exc:
            return _unavailable("list notifications", exc)

    def get(self, notification_id: str) -> GetOutcome:
        violation = check_identifier(notification_id)
        if violation is not None:
            return violation

        try:
            notification = self.store.find_by_id(notification_id)
        except NotificationStoreError as exc:
            return _unavailable(f"read notification {notification_id}", exc)
        if notification is None:
            return NotFound(notification_id)
        return Found(notification)

    def delete(self, notification_id: str) -> DeleteOutcome:
        """Delete a notification; deleting a missing id still reports ``Deleted``."""

        violation = check_identifier(notification_id)
        if violation is not None:
            return violation

        try:
            self.store.delete_by_id(notification_id)
        except NotificationStoreError as exc:
            return _unavailable(f"delete notification {notification_id}", exc)
        logger.info("Deleted notification %s", notification_id)
        return Deleted(notification_id)


__all__ = ["NotificationManager"]
