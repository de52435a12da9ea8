"""Schema for creating notifications."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from notifications.enums import (
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)
from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.notification_parts import (
    ChannelSelection,
    NotificationAction,
    Recipient,
)


class NotificationCreate(BaseSchemaModel):
    """Schema for creating a new notification record.

    Required fields are the recipient, the type, the title and the message.
    Enumerated fields are checked against their closed sets; ``data`` is an
    opaque payload whose structure is agreed between producer and consumer.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "recipient": {
                    "id": "2c1b7f3e-4a43-4b8e-9b0e-2f5d0f6f1a11",
                    "role": "customer",
                },
                "type": "new_order",
                "title": "Order placed",
                "message": "Your order #1042 has been placed.",
                "channels": {"push": True, "sms": False, "email": False, "inApp": True},
                "priority": "high",
            }
        }
    )

    recipient: Recipient = Field(..., description="Notification recipient")
    notification_type: NotificationType = Field(
        ..., alias="type", description="Domain event that triggered the notification"
    )
    category: NotificationCategory = Field(
        default=NotificationCategory.TRANSACTIONAL.value,
        description="Delivery policy class",
    )
    title: str = Field(..., min_length=1, max_length=255, description="Title")
    message: str = Field(..., min_length=1, description="Message body")
    data: dict[str, Any] | None = Field(None, description="Opaque payload")
    channels: ChannelSelection = Field(
        default_factory=ChannelSelection, description="Channels to attempt"
    )
    priority: NotificationPriority = Field(
        default=NotificationPriority.MEDIUM.value, description="Notification priority"
    )
    related_order: UUID | None = Field(None, description="Related order ID")
    related_menu_item: UUID | None = Field(None, description="Related menu item ID")
    action: NotificationAction | None = Field(None, description="Attached action")
    expires_at: datetime | None = Field(
        None, description="Record is purged after this time"
    )
    scheduled_for: datetime | None = Field(
        None, description="Deferred delivery time"
    )

    @field_validator("expires_at", "scheduled_for")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        """Treat naive timestamps as UTC.

        Args:
            value: Parsed timestamp.

        Returns:
            Timezone-aware timestamp, or None.
        """
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
