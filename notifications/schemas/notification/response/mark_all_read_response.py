"""Schema for the mark-all-as-read response."""

from uuid import UUID

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class MarkAllReadResponse(BaseSchemaModel):
    """Notifications transitioned to read by a mark-all request."""

    notification_ids: list[UUID] = Field(
        ..., description="IDs of the notifications marked as read"
    )
    count: int = Field(..., ge=0, description="Number of notifications marked")
