"""Aggregate application use cases."""

from .notifications import NotificationManager

__all__ = ["NotificationManager"]
