from .notification import NotificationPayload, NotificationRead

__all__ = ["NotificationPayload", "NotificationRead"]
