"""Domain entities exposed by the application."""

from .notification import Notification

__all__ = ["Notification"]
