"""FastAPI dependency utilities."""

from fastapi import Depends
from sqlalchemy.orm import Session

from notification_service.application.use_cases.notifications import NotificationManager
from notification_service.config import get_settings
from notification_service.infrastructure.database import get_db
from notification_service.infrastructure.repositories import NotificationRepository
from notification_service.interfaces.api.routes_helpers import AlertHeaders


def get_notification_manager(db: Session = Depends(get_db)) -> NotificationManager:
    """Return a manager bound to a repository over the request session."""

    return NotificationManager(NotificationRepository(db))


def get_alert_headers() -> AlertHeaders:
    return AlertHeaders.from_settings(get_settings())
