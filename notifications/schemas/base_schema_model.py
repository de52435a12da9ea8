"""Base pydantic model shared by every notification schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of schema definitions.

    Fields are snake_case in Python and camelCase on the wire
    (``inApp``, ``sentAt``, ``scheduledFor``); either spelling is accepted
    on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
