"""Database models for the notifications app."""

from notifications.models.delivery_status import DeliveryStatus
from notifications.models.notification import Notification

__all__ = ["DeliveryStatus", "Notification"]
