"""Schema for notification details."""

from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.notification_parts import (
    ChannelDeliveryStatus,
    ChannelSelection,
    DeliveryStatusMap,
    NotificationAction,
    Recipient,
)

if TYPE_CHECKING:
    from notifications.models import Notification


class NotificationDetail(BaseSchemaModel):
    """Full representation of a notification record.

    ``delivery_status`` always carries the three tracked channels; entries
    for channels without a reported attempt have every field null.
    """

    notification_id: UUID = Field(..., description="Unique notification identifier")
    recipient: Recipient = Field(..., description="Notification recipient")
    notification_type: str = Field(..., alias="type", description="Triggering event")
    category: str = Field(..., description="Delivery policy class")
    title: str = Field(..., description="Title")
    message: str = Field(..., description="Message body")
    data: dict[str, Any] | None = Field(None, description="Opaque payload")
    channels: ChannelSelection = Field(..., description="Channels to attempt")
    delivery_status: DeliveryStatusMap = Field(
        ..., description="Latest outcome per tracked channel"
    )
    priority: str = Field(..., description="Notification priority")
    is_read: bool = Field(..., description="Whether the notification was read")
    read_at: datetime | None = Field(None, description="When it was marked read")
    related_order: UUID | None = Field(None, description="Related order ID")
    related_menu_item: UUID | None = Field(None, description="Related menu item ID")
    action: NotificationAction | None = Field(None, description="Attached action")
    expires_at: datetime | None = Field(None, description="Expiry time")
    scheduled_for: datetime | None = Field(None, description="Deferred delivery time")
    created_at: datetime = Field(..., description="When the record was created")
    updated_at: datetime = Field(..., description="When the record was last updated")

    @classmethod
    def from_model(cls, notification: "Notification") -> "NotificationDetail":
        """Build the schema from a Notification model instance.

        Args:
            notification: The Notification model instance.

        Returns:
            NotificationDetail populated from the record and its
            delivery status rows.
        """
        action = notification.action
        return cls(
            notification_id=notification.notification_id,
            recipient=Recipient(**notification.recipient),
            notification_type=notification.notification_type,
            category=notification.category,
            title=notification.title,
            message=notification.message,
            data=notification.data,
            channels=ChannelSelection(**notification.channels),
            delivery_status=DeliveryStatusMap(
                **{
                    channel: ChannelDeliveryStatus(**outcome)
                    for channel, outcome in notification.delivery_status.items()
                }
            ),
            priority=notification.priority,
            is_read=notification.is_read,
            read_at=notification.read_at,
            related_order=notification.related_order_id,
            related_menu_item=notification.related_menu_item_id,
            action=(
                NotificationAction(
                    action_type=action["type"],
                    url=action["url"],
                    label=action["label"],
                )
                if action
                else None
            ),
            expires_at=notification.expires_at,
            scheduled_for=notification.scheduled_for,
            created_at=notification.created_at,
            updated_at=notification.updated_at,
        )
