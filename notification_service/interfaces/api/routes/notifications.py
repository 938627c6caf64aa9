"""REST endpoints for managing notification records."""

from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Response, status

from notification_service.application.use_cases.notifications import NotificationManager
from notification_service.config import get_settings
from notification_service.domain.outcomes import (
    Created,
    Deleted,
    Found,
    NotFound,
    StoreError,
    Updated,
    ValidationError,
)
from notification_service.interfaces.api.dependencies import (
    get_alert_headers,
    get_notification_manager,
)
from notification_service.interfaces.api.routes_helpers import (
    AlertHeaders,
    notification_location,
)
from notification_service.interfaces.api.schemas import (
    NotificationPayload,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = logging.getLogger(__name__)


def _raise_for_failure(
    outcome: ValidationError | StoreError, alerts: AlertHeaders
) -> NoReturn:
    detail = {"kind": outcome.kind, "message": outcome.message}
    if isinstance(outcome, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            headers=alerts.failure(outcome.kind),
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
    ) from outcome.cause


@router.post("", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationPayload,
    response: Response,
    manager: NotificationManager = Depends(get_notification_manager),
    alerts: AlertHeaders = Depends(get_alert_headers),
) -> NotificationRead:
    """Create a new notification; the body must not carry an id."""

    logger.debug("REST request to save Notification : %s", notification_in)
    outcome = manager.create(notification_in.to_entity())
    if not isinstance(outcome, Created):
        _raise_for_failure(outcome, alerts)

    notification_id = outcome.notification.id or ""
    response.headers["Location"] = notification_location(
        get_settings().api_prefix, notification_id
    )
    response.headers.update(alerts.created(notification_id))
    return NotificationRead.from_entity(outcome.notification)


@router.put("", response_model=NotificationRead)
def update_notification(
    notification_in: NotificationPayload,
    response: Response,
    manager: NotificationManager = Depends(get_notification_manager),
    alerts: AlertHeaders = Depends(get_alert_headers),
) -> NotificationRead:
    """Replace an existing notification identified by the id in the body."""

    logger.debug("REST request to update Notification : %s", notification_in)
    outcome = manager.update(notification_in.to_entity())
    if not isinstance(outcome, Updated):
        _raise_for_failure(outcome, alerts)

    response.headers.update(alerts.updated(outcome.notification.id or ""))
    return NotificationRead.from_entity(outcome.notification)


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    manager: NotificationManager = Depends(get_notification_manager),
    alerts: AlertHeaders = Depends(get_alert_headers),
) -> list[NotificationRead]:
    logger.debug("REST request to get all Notifications")
    outcome = manager.list()
    if isinstance(outcome, StoreError):
        _raise_for_failure(outcome, alerts)
    return [NotificationRead.from_entity(notification) for notification in outcome]


@router.get("/{notification_id}", response_model=NotificationRead)
def read_notification(
    notification_id: str,
    manager: NotificationManager = Depends(get_notification_manager),
    alerts: AlertHeaders = Depends(get_alert_headers),
) -> NotificationRead:
    """Return the notification identified by ``notification_id`` or 404."""

    logger.debug("REST request to get Notification : %s", notification_id)
    outcome = manager.get(notification_id)
    if isinstance(outcome, NotFound):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "kind": "not-found",
                "message": f"Notification {outcome.id} not found",
            },
        )
    if not isinstance(outcome, Found):
        _raise_for_failure(outcome, alerts)
    return NotificationRead.from_entity(outcome.notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: str,
    manager: NotificationManager = Depends(get_notification_manager),
    alerts: AlertHeaders = Depends(get_alert_headers),
) -> Response:
    logger.debug("REST request to delete Notification : %s", notification_id)
    outcome = manager.delete(notification_id)
    if not isinstance(outcome, Deleted):
        _raise_for_failure(outcome, alerts)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=alerts.deleted(outcome.id),
    )
