"""Sub-documents of a notification: recipient, channels, action, outcome."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class Recipient(BaseSchemaModel):
    """The user a notification targets, with their role at time of sending."""

    id: UUID = Field(..., description="User receiving the notification")
    role: str = Field(
        default="", max_length=100, description="Recipient role (customer, ...)"
    )


class ChannelSelection(BaseSchemaModel):
    """Channels that should be attempted for a notification."""

    push: bool = Field(default=True, description="Attempt push delivery")
    sms: bool = Field(default=False, description="Attempt SMS delivery")
    email: bool = Field(default=False, description="Attempt email delivery")
    in_app: bool = Field(default=True, description="Show in the in-app inbox")


class NotificationAction(BaseSchemaModel):
    """A single callable action attached to a notification."""

    action_type: str | None = Field(
        None, alias="type", max_length=50, description="Action type"
    )
    url: str | None = Field(None, max_length=500, description="Action target URL")
    label: str | None = Field(None, max_length=100, description="Button label")


class ChannelDeliveryStatus(BaseSchemaModel):
    """Latest delivery outcome of one tracked channel.

    All fields are null until the dispatcher reports an attempt.
    """

    status: str | None = Field(None, description="Free-form delivery status")
    sent_at: datetime | None = Field(
        None, description="When the latest outcome was recorded"
    )
    error: str | None = Field(None, description="Error from the latest failure")


class DeliveryStatusMap(BaseSchemaModel):
    """Delivery outcomes keyed by tracked channel."""

    push: ChannelDeliveryStatus = Field(default_factory=ChannelDeliveryStatus)
    sms: ChannelDeliveryStatus = Field(default_factory=ChannelDeliveryStatus)
    email: ChannelDeliveryStatus = Field(default_factory=ChannelDeliveryStatus)
