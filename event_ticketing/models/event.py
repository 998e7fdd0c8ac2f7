from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from event_ticketing.models import Base, Money


class Event(Base):
    __tablename__ = "Events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    event_date = Column(DateTime, nullable=False, index=True)
    location = Column(String(300), nullable=False)
    total_seats = Column(Integer, nullable=False, default=0)
    # Not derived from the ticket count; nothing decrements it on ticket creation.
    available_seats = Column(Integer, nullable=False, default=0)
    base_price = Column(Money, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # raise: tickets are only attached when a query asks for them with selectinload.
    # Deletion is left to the ON DELETE CASCADE foreign key.
    tickets = relationship(
        "Ticket",
        back_populates="event",
        lazy="raise",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
