"""Request schema for reporting a delivery outcome."""

from pydantic import ConfigDict, Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class DeliveryOutcomeRequest(BaseSchemaModel):
    """Outcome of one delivery attempt on one channel.

    ``status`` is not restricted to a closed set so provider specific values
    pass through; the shared vocabulary is
    ``queued | sent | delivered | failed | bounced``.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": "failed", "error": "Invalid token"}}
    )

    status: str = Field(..., min_length=1, description="Status")
    error: str | None = Field(None, description="Error detail for failed attempts")
