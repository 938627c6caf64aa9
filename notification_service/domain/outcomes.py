"""Outcome values returned by the notification lifecycle operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .entities.notification import Notification

KIND_ID_ALREADY_PRESENT = "id-already-present"
KIND_ID_MISSING = "id-missing"
KIND_REQUIRED_FIELD_MISSING = "required-field-missing"
KIND_INVALID_PAYLOAD = "invalid-payload"
KIND_UNAVAILABLE = "unavailable"
KIND_UPDATE_FAILED = "update-failed"


@dataclass(frozen=True)
class Created:
    """A new notification was persisted with a store-assigned id."""

    notification: Notification


@dataclass(frozen=True)
class Updated:
    """An existing notification was fully replaced."""

    notification: Notification


@dataclass(frozen=True)
class Found:
    notification: Notification


@dataclass(frozen=True)
class NotFound:
    """No notification is stored under ``id``. Not an error."""

    id: str


@dataclass(frozen=True)
class Deleted:
    id: str


@dataclass(frozen=True)
class ValidationError:
    """The request broke an identity or structural rule; the store was not called."""

    kind: str
    message: str


@dataclass(frozen=True)
class StoreError:
    """The store failed or refused the operation."""

    kind: str
    message: str
    cause: BaseException | None = None


CreateOutcome = Union[Created, ValidationError, StoreError]
UpdateOutcome = Union[Updated, ValidationError, StoreError]
GetOutcome = Union[Found, NotFound, ValidationError, StoreError]
DeleteOutcome = Union[Deleted, ValidationError, StoreError]


__all__ = [
    "KIND_ID_ALREADY_PRESENT",
    "KIND_ID_MISSING",
    "KIND_INVALID_PAYLOAD",
    "KIND_REQUIRED_FIELD_MISSING",
    "KIND_UNAVAILABLE",
    "KIND_UPDATE_FAILED",
    "Created",
    "CreateOutcome",
    "Deleted",
    "DeleteOutcome",
    "Found",
    "GetOutcome",
    "NotFound",
    "StoreError",
    "Updated",
    "UpdateOutcome",
    "ValidationError",
]
