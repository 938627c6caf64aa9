"""Utility script to store a notification without going through HTTP."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence

from notification_service.application.use_cases.notifications import NotificationManager
from notification_service.domain.entities import Notification
from notification_service.domain.outcomes import Created
from notification_service.infrastructure.database import SessionLocal, initialize_database
from notification_service.infrastructure.repositories import NotificationRepository


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for notification creation."""

    parser = argparse.ArgumentParser(
        description="Create a notification record in the configured database.",
    )
    parser.add_argument("name", help="Name of the notification")
    parser.add_argument("--message", default=None, help="Body of the notification")
    parser.add_argument("--recipient", default=None, help="Recipient address (optional)")
    parser.add_argument("--channel", default=None, help="Delivery channel (optional)")
    parser.add_argument(
        "--metadata",
        default="{}",
        help="JSON object stored alongside the notification (default: {})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Create a notification using the provided command line arguments."""

    args = parse_args(argv)

    try:
        metadata = json.loads(args.metadata)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"--metadata is not valid JSON: {exc}") from exc
    if not isinstance(metadata, dict):
        raise SystemExit("--metadata must be a JSON object")

    initialize_database()

    session = SessionLocal()
    try:
        outcome = NotificationManager(NotificationRepository(session)).create(
            Notification(
                id=None,
                name=args.name,
                message=args.message,
                recipient=args.recipient,
                channel=args.channel,
                metadata=metadata,
            )
        )
    finally:
        session.close()

    if not isinstance(outcome, Created):
        raise SystemExit(f"Could not create the notification ({outcome.kind}): {outcome.message}")

    notification = outcome.notification
    print(
        "Notification created:\n"
        f"  ID: {notification.id}\n"
        f"  Name: {notification.name}\n"
        f"  Recipient: {notification.recipient or '-'}"
    )


if __name__ == "__main__":
    main()
