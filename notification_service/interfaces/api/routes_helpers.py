"""Helper utilities shared across API route handlers."""

from dataclasses import dataclass

from notification_service.config import Settings

ENTITY_NAME = "notification"


@dataclass(frozen=True)
class AlertHeaders:
    """Build the ``X-<app>-*`` headers the client application displays as alerts."""

    application_name: str
    enabled: bool = True
    entity_name: str = ENTITY_NAME

    @classmethod
    def from_settings(cls, settings: Settings) -> "AlertHeaders":
        return cls(
            application_name=settings.client_app_name,
            enabled=settings.alert_headers_enabled,
        )

    def alert(self, message: str, param: str) -> dict[str, str]:
        if not self.enabled:
            return {}
        return {
            f"X-{self.application_name}-alert": message,
            f"X-{self.application_name}-params": param,
        }

    def created(self, entity_id: str) -> dict[str, str]:
        return self.alert(f"{self.application_name}.{self.entity_name}.created", entity_id)

    def updated(self, entity_id: str) -> dict[str, str]:
        return self.alert(f"{self.application_name}.{self.entity_name}.updated", entity_id)

    def deleted(self, entity_id: str) -> dict[str, str]:
        return self.alert(f"{self.application_name}.{self.entity_name}.deleted", entity_id)

    def failure(self, error_kind: str) -> dict[str, str]:
        if not self.enabled:
            return {}
        return {
            f"X-{self.application_name}-error": f"error.{error_kind}",
            f"X-{self.application_name}-params": self.entity_name,
        }


def notification_location(api_prefix: str, notification_id: str) -> str:
    """Return the URL path of a single notification resource."""

    return f"{api_prefix}/notifications/{notification_id}"
