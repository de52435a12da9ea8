"""Schema for the unread notification count response."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class UnreadCountResponse(BaseSchemaModel):
    """Unread badge count for one recipient."""

    unread_count: int = Field(..., ge=0, description="Number of unread notifications")
