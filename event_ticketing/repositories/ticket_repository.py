from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func
from sqlalchemy.orm import selectinload
from typing import List, Optional

from event_ticketing.models import fill_unloaded, utcnow
from event_ticketing.models.tickets import Ticket


class TicketRepository:
    """Reads and writes of Ticket rows.

    ``create`` neither checks that ``event_id`` exists nor touches the
    event's ``available_seats``; callers check the event first.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, ticket_id: int) -> Optional[Ticket]:
        result = await self.db.execute(
            select(Ticket).options(selectinload(Ticket.event)).where(Ticket.id == ticket_id)
        )
        return result.scalars().first()

    async def get_all(self) -> List[Ticket]:
        result = await self.db.execute(
            select(Ticket).options(selectinload(Ticket.event)).order_by(Ticket.purchased_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_event(self, event_id: int) -> List[Ticket]:
        result = await self.db.execute(
            select(Ticket).where(Ticket.event_id == event_id).order_by(Ticket.seat_number)
        )
        tickets = list(result.scalars().all())
        for ticket in tickets:
            fill_unloaded(ticket, "event", None)
        return tickets

    async def get_by_email(self, email: str) -> List[Ticket]:
        result = await self.db.execute(
            select(Ticket)
            .options(selectinload(Ticket.event))
            .where(Ticket.attendee_email == email)
            .order_by(Ticket.purchased_at.desc())
        )
        return list(result.scalars().all())

    async def create(self, ticket: Ticket) -> Ticket:
        ticket.id = None
        ticket.purchased_at = utcnow()
        self.db.add(ticket)
        await self.db.commit()
        await self.db.refresh(ticket)
        fill_unloaded(ticket, "event", None)
        return ticket

    async def update(self, ticket: Ticket) -> None:
        await self.db.execute(
            update(Ticket)
            .where(Ticket.id == ticket.id)
            .values(
                event_id=ticket.event_id,
                attendee_email=ticket.attendee_email,
                attendee_full_name=ticket.attendee_full_name,
                seat_number=ticket.seat_number,
                price_paid=ticket.price_paid,
                status=int(ticket.status),
            )
        )
        await self.db.commit()

    async def delete(self, ticket_id: int) -> None:
        ticket = await self.db.get(Ticket, ticket_id)
        if ticket is None:
            return
        await self.db.delete(ticket)
        await self.db.commit()

    async def get_ticket_count_by_event(self, event_id: int) -> int:
        """Number of tickets for the event, whatever their status."""
        result = await self.db.execute(
            select(func.count()).select_from(Ticket).where(Ticket.event_id == event_id)
        )
        return result.scalar_one()
