"""Use cases for managing notification records."""

from .manager import NotificationManager
from .validators import (
    check_existing_notification,
    check_identifier,
    check_new_notification,
)

__all__ = [
    "NotificationManager",
    "check_existing_notification",
    "check_identifier",
    "check_new_notification",
]
