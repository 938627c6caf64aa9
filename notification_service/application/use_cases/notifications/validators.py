"""Identity and structural checks applied before touching the store."""

from __future__ import annotations

from notification_service.domain.entities import Notification
from notification_service.domain.outcomes import (
    KIND_ID_ALREADY_PRESENT,
    KIND_ID_MISSING,
    KIND_REQUIRED_FIELD_MISSING,
    ValidationError,
)


def check_new_notification(notification: Notification) -> ValidationError | None:
    """Return a violation when ``notification`` cannot be created."""

    if notification.has_id():
        return ValidationError(
            kind=KIND_ID_ALREADY_PRESENT,
            message="A new notification cannot already have an ID",
        )
    return check_required_fields(notification)


def check_existing_notification(notification: Notification) -> ValidationError | None:
    """Return a violation when ``notification`` cannot be used for an update."""

    if not notification.has_id():
        return ValidationError(
            kind=KIND_ID_MISSING,
            message="An updated notification must carry its ID",
        )
    return check_required_fields(notification)


def check_required_fields(notification: Notification) -> ValidationError | None:
    if not isinstance(notification.name, str) or not notification.name.strip():
        return ValidationError(
            kind=KIND_REQUIRED_FIELD_MISSING,
            message="The notification name is required",
        )
    return None


def check_identifier(notification_id: str | None) -> ValidationError | None:
    if not notification_id or not notification_id.strip():
        return ValidationError(
            kind=KIND_ID_MISSING,
            message="A notification ID is required",
        )
    return None


__all__ = [
    "check_existing_notification",
    "check_identifier",
    "check_new_notification",
    "check_required_fields",
]
