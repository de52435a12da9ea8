"""Notification schemas."""

from notifications.schemas.notification.notification_create import NotificationCreate
from notifications.schemas.notification.notification_detail import NotificationDetail
from notifications.schemas.notification.notification_parts import (
    ChannelDeliveryStatus,
    ChannelSelection,
    DeliveryStatusMap,
    NotificationAction,
    Recipient,
)
from notifications.schemas.notification.request.delivery_outcome_request import (
    DeliveryOutcomeRequest,
)
from notifications.schemas.notification.response.mark_all_read_response import (
    MarkAllReadResponse,
)
from notifications.schemas.notification.response.unread_count_response import (
    UnreadCountResponse,
)
from notifications.schemas.notification.response.unread_notification_list_response import (
    UnreadNotificationListResponse,
)

__all__ = [
    "ChannelDeliveryStatus",
    "ChannelSelection",
    "DeliveryOutcomeRequest",
    "DeliveryStatusMap",
    "MarkAllReadResponse",
    "NotificationAction",
    "NotificationCreate",
    "NotificationDetail",
    "Recipient",
    "UnreadCountResponse",
    "UnreadNotificationListResponse",
]
