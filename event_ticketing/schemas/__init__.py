from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Integer columns are 64-bit; larger values never reach the store.
StoreInt = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


def _to_utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDateTime = Annotated[datetime, PlainSerializer(_to_utc_iso, when_used="json")]


class ApiSchema(BaseModel):
    """camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )
