"""Schema for the unread notification list response."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.notification_detail import NotificationDetail


class UnreadNotificationListResponse(BaseSchemaModel):
    """Unread notifications of one recipient, newest first.

    Returned by GET /users/<recipient_id>/notifications/unread.
    """

    notifications: list[NotificationDetail] = Field(
        ..., description="Unread notifications, newest first"
    )
    count: int = Field(..., ge=0, description="Number of notifications returned")
    limit: int = Field(..., ge=1, description="Maximum number of results requested")
