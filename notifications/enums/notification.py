"""Notification-related enumerations.

This module contains the closed vocabularies a notification record is
validated against (type, category, priority), the delivery channels, and
the shared delivery outcome vocabulary used by dispatchers.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Domain event that triggered the notification."""

    ORDER_UPDATE = "order_update"
    PROMOTION = "promotion"
    DELIVERY_ASSIGNED = "delivery_assigned"
    PAYMENT_RECEIVED = "payment_received"
    ORDER_CANCELLED = "order_cancelled"
    ORDER_DELIVERED = "order_delivered"
    RATING_REQUEST = "rating_request"
    LOYALTY_EARNED = "loyalty_earned"
    NEW_ORDER = "new_order"


class NotificationCategory(str, Enum):
    """Delivery policy class of a notification.

    Promotional notifications may be suppressed by user preference; that
    policy lives with the dispatcher.
    """

    TRANSACTIONAL = "transactional"
    PROMOTIONAL = "promotional"
    INFORMATIONAL = "informational"


class NotificationPriority(str, Enum):
    """Notification priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class NotificationChannel(str, Enum):
    """Channels through which a notification can be delivered.

    Values use the external (JSON) spelling. IN_APP is delivered by the
    record's presence in the store and has no delivery status.
    """

    PUSH = "push"
    SMS = "sms"
    EMAIL = "email"
    IN_APP = "inApp"


# Channels with a per-channel delivery status record.
TRACKED_CHANNELS: tuple[str, ...] = (
    NotificationChannel.PUSH.value,
    NotificationChannel.SMS.value,
    NotificationChannel.EMAIL.value,
)


class DeliveryOutcome(str, Enum):
    """Shared delivery status vocabulary.

    Delivery status is stored as a free-form string so provider specific
    values are accepted; these are the values dispatchers agree on.
    """

    QUEUED = "queued"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"
    BOUNCED = "bounced"
