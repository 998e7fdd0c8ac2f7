from enum import IntEnum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from event_ticketing.models import Base, Money


class TicketStatus(IntEnum):
    """Stored as its integer code. Transitions between values are not enforced."""

    RESERVED = 0
    PAID = 1
    CANCELLED = 2
    CHECKED_IN = 3


class Ticket(Base):
    __tablename__ = "Tickets"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("Events.id", ondelete="CASCADE"), nullable=False, index=True)
    attendee_email = Column(String(100), nullable=False, index=True)
    attendee_full_name = Column(String(200), nullable=False)
    seat_number = Column(String(20), nullable=False)
    price_paid = Column(Money, nullable=False, default=0)
    status = Column(Integer, nullable=False, default=int(TicketStatus.RESERVED))
    purchased_at = Column(DateTime, nullable=False)

    # Back-reference only; populated when a query eager-loads it, never lazy-loaded.
    event = relationship("Event", back_populates="tickets", lazy="raise")
