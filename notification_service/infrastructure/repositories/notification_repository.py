"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notification_service.application.store import NotificationStoreError
from notification_service.domain.entities import Notification
from notification_service.infrastructure.models import NotificationModel


class NotificationRepository:
    """SQLAlchemy-backed store for :class:`Notification` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert(self, notification: Notification) -> Notification:
        model = NotificationModel(id=str(uuid4()))
        self._apply_entity_to_model(model, notification)
        try:
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise NotificationStoreError("Could not insert notification") from exc
        return self._to_entity(model)

    def overwrite(
        self, notification_id: str, notification: Notification
    ) -> Notification | None:
        try:
            model = self.session.get(NotificationModel, notification_id)
            if model is None:
                return None
            self._apply_entity_to_model(model, notification)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as exc:
            self.session.rollback()
            msg = f"Could not overwrite notification {notification_id}"
            raise NotificationStoreError(msg) from exc
        return self._to_entity(model)

    def find_by_id(self, notification_id: str) -> Notification | None:
        try:
            model = self.session.get(NotificationModel, notification_id)
        except SQLAlchemyError as exc:
            self.session.rollback()
            msg = f"Could not read notification {notification_id}"
            raise NotificationStoreError(msg) from exc
        return self._to_entity(model) if model else None

    def find_all(self) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).order_by(
            NotificationModel.name, NotificationModel.id
        )
        try:
            models = query.all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise NotificationStoreError("Could not list notifications") from exc
        return [self._to_entity(model) for model in models]

    def delete_by_id(self, notification_id: str) -> None:
        try:
            self.session.query(NotificationModel).filter(
                NotificationModel.id == notification_id
            ).delete(synchronize_session=False)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            msg = f"Could not delete notification {notification_id}"
            raise NotificationStoreError(msg) from exc

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.name = notification.name
        model.message = notification.message
        model.recipient = notification.recipient
        model.channel = notification.channel
        model.metadata_json = dict(notification.metadata or {})

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            name=model.name,
            message=model.message,
            recipient=model.recipient,
            channel=model.channel,
            metadata=dict(model.metadata_json or {}),
        )


__all__ = ["NotificationRepository"]
