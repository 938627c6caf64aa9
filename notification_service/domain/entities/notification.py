"""Domain entity representing a notification record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Notification:
    """Notification record exchanged between callers and the store.

    ``id`` is assigned by the store on creation and never changes afterwards.
    Everything else is opaque content the service persists as-is.
    """

    id: str | None
    name: str
    message: str | None = None
    recipient: str | None = None
    channel: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def has_id(self) -> bool:
        """Return ``True`` when the record carries a non-blank identifier."""

        return bool(self.id and self.id.strip())


__all__ = ["Notification"]
