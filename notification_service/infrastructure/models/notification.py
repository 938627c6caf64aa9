"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import JSON, Column, String, Text

from notification_service.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation of notification records."""

    __tablename__ = "notification"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    message = Column(Text, nullable=True)
    recipient = Column(String(255), nullable=True)
    channel = Column(String(50), nullable=True)
    # ``metadata`` is reserved on declarative classes.
    metadata_json = Column("metadata", JSON, nullable=False, default=dict)


__all__ = ["NotificationModel"]
