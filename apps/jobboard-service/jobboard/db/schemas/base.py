"""Shared Pydantic configuration and field checks for the API schemas."""
from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Primary keys are 32-bit INTEGER columns
MAX_ID = 2**31 - 1


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys (accepted either way on input)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def ensure_present(value):
    """Reject explicit nulls and blank strings for required fields."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("blank", "Field must not be empty")
    return value


def as_utc(value: datetime | None) -> datetime | None:
    """Normalise to aware UTC; naive values are taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
