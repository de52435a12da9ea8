"""Factories for test data generation."""

import uuid
from typing import Any

from faker import Faker

from notifications.models import Notification
from notifications.repositories.notification_repository import NotificationRepository

fake = Faker()


def notification_payload(**overrides: Any) -> dict[str, Any]:
    """Build a valid camelCase creation payload.

    Keyword arguments override top-level keys; ``recipient_id`` and
    ``recipient_role`` set the nested recipient.
    """
    recipient_id = overrides.pop("recipient_id", None) or uuid.uuid4()
    recipient_role = overrides.pop("recipient_role", "customer")
    payload = {
        "recipient": {"id": str(recipient_id), "role": recipient_role},
        "type": "order_update",
        "title": fake.sentence(nb_words=4),
        "message": fake.text(max_nb_chars=120),
    }
    payload.update(overrides)
    return payload


def create_notification(**overrides: Any) -> Notification:
    """Persist a notification built from ``notification_payload``."""
    return NotificationRepository.create(notification_payload(**overrides))
