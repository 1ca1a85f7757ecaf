"""Shared pydantic configuration and the error response body."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class RequestModel(BaseModel):
    """Base for inbound payloads: camelCase keys, no type coercion, unknown keys ignored."""

    model_config = ConfigDict(
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Mutable fields an update may stage; empty for create payloads.
    mutable_fields: ClassVar[tuple[str, ...]] = ()

    def present_fields(self) -> dict[str, str]:
        """Return the mutable fields that were supplied, keyed by column name."""
        return {
            name: getattr(self, name)
            for name in self.mutable_fields
            if name in self.model_fields_set
        }


class RecordModel(BaseModel):
    """Base for stored records rendered back to clients."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ErrorResponse(BaseModel):
    """Error body returned by the HTTP API."""

    message: str


def clean_string(value):
    """Reject explicit nulls and trim strings ahead of field constraints."""
    if value is None:
        raise PydanticCustomError("null_value", "value cannot be null")
    if isinstance(value, str):
        return value.strip()
    return value
