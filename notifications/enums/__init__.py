"""Enumerations for the notifications app."""

from notifications.enums.notification import (
    TRACKED_CHANNELS,
    DeliveryOutcome,
    NotificationCategory,
    NotificationChannel,
    NotificationPriority,
    NotificationType,
)

__all__ = [
    "TRACKED_CHANNELS",
    "DeliveryOutcome",
    "NotificationCategory",
    "NotificationChannel",
    "NotificationPriority",
    "NotificationType",
]
