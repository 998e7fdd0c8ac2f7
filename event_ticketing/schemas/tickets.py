from pydantic import Field
from decimal import Decimal
from typing import Optional

from event_ticketing.models.tickets import TicketStatus
from event_ticketing.schemas import ApiSchema, StoreInt, UtcDateTime


class TicketBaseSchema(ApiSchema):
    event_id: StoreInt
    attendee_email: str = Field(..., min_length=1, max_length=100)
    attendee_full_name: str = Field(..., min_length=1, max_length=200)
    seat_number: str = Field(..., min_length=1, max_length=20)
    price_paid: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    status: TicketStatus = TicketStatus.RESERVED


class TicketCreateSchema(TicketBaseSchema):
    id: Optional[StoreInt] = None


class TicketUpdateSchema(TicketBaseSchema):
    id: StoreInt


class TicketSummarySchema(ApiSchema):
    id: int
    event_id: int
    attendee_email: str
    attendee_full_name: str
    seat_number: str
    price_paid: Decimal
    status: TicketStatus
    purchased_at: UtcDateTime


class TicketResponseSchema(TicketSummarySchema):
    event: Optional["EventSummarySchema"] = None


from event_ticketing.schemas.event import EventSummarySchema  # noqa: E402

TicketResponseSchema.model_rebuild()
