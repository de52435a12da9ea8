"""Schemas for the notifications app."""

from notifications.schemas.notification import (
    DeliveryOutcomeRequest,
    MarkAllReadResponse,
    NotificationCreate,
    NotificationDetail,
    UnreadCountResponse,
    UnreadNotificationListResponse,
)

__all__ = [
    "DeliveryOutcomeRequest",
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationDetail",
    "UnreadCountResponse",
    "UnreadNotificationListResponse",
]
