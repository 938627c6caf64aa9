"""Pydantic models describing notification payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from notification_service.domain.entities import Notification


class NotificationPayload(BaseModel):
    """Body accepted by the create and update endpoints.

    Creation requires ``id`` to be absent; updates require it. Updates replace
    the whole record, so omitted optional fields are cleared.
    """

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=120)
    message: str | None = None
    recipient: str | None = Field(default=None, max_length=255)
    channel: str | None = Field(default=None, max_length=50)
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_entity(self) -> Notification:
        return Notification(
            id=self.id,
            name=self.name,
            message=self.message,
            recipient=self.recipient,
            channel=self.channel,
            metadata=dict(self.metadata),
        )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    name: str
    message: str | None = None
    recipient: str | None = None
    channel: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        return cls(
            id=notification.id or "",
            name=notification.name,
            message=notification.message,
            recipient=notification.recipient,
            channel=notification.channel,
            metadata=notification.metadata or {},
        )


__all__ = ["NotificationPayload", "NotificationRead"]
