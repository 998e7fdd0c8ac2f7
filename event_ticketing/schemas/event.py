from pydantic import Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from event_ticketing.schemas import INT64_MAX, ApiSchema, StoreInt, UtcDateTime, to_naive_utc


class EventBaseSchema(ApiSchema):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    event_date: datetime
    location: str = Field(..., min_length=1, max_length=300)
    total_seats: int = Field(..., ge=0, le=INT64_MAX)
    available_seats: StoreInt
    base_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)

    @field_validator("event_date")
    @classmethod
    def event_date_to_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class EventCreateSchema(EventBaseSchema):
    # Accepted for compatibility, always replaced by the generated key.
    id: Optional[StoreInt] = None


class EventUpdateSchema(EventBaseSchema):
    id: StoreInt


class EventSummarySchema(ApiSchema):
    id: int
    name: str
    description: Optional[str] = None
    event_date: UtcDateTime
    location: str
    total_seats: int
    available_seats: int
    base_price: Decimal
    created_at: UtcDateTime
    updated_at: Optional[UtcDateTime] = None


class EventResponseSchema(EventSummarySchema):
    tickets: List["TicketSummarySchema"] = []


from event_ticketing.schemas.tickets import TicketSummarySchema  # noqa: E402

EventResponseSchema.model_rebuild()
