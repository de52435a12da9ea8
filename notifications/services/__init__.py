"""Services for the notifications app."""

from notifications.services.delivery_tracker import DeliveryTracker, delivery_tracker
from notifications.services.notification_service import (
    NotificationService,
    notification_service,
)

__all__ = [
    "DeliveryTracker",
    "NotificationService",
    "delivery_tracker",
    "notification_service",
]
