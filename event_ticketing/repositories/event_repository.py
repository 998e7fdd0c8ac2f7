"""Reads and writes of Event rows.

Existence checks before update/delete are the caller's job: ``update`` and
``delete`` quietly do nothing when the id is unknown.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, exists
from sqlalchemy.orm import selectinload
from typing import List, Optional

from event_ticketing.models import fill_unloaded, utcnow
from event_ticketing.models.event import Event


class EventRepository:

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, event_id: int) -> Optional[Event]:
        """Return the event with its tickets loaded, or None."""
        result = await self.db.execute(
            select(Event).options(selectinload(Event.tickets)).where(Event.id == event_id)
        )
        return result.scalars().first()

    async def get_all(self) -> List[Event]:
        result = await self.db.execute(
            select(Event).options(selectinload(Event.tickets)).order_by(Event.event_date)
        )
        return list(result.scalars().all())

    async def get_upcoming(self) -> List[Event]:
        """Events dated strictly after now, earliest first.

        Unlike get_by_id and get_all, tickets are not loaded here; an event
        whose collection was not already loaded in this session comes back
        with an empty ``tickets`` list.
        """
        result = await self.db.execute(
            select(Event).where(Event.event_date > utcnow()).order_by(Event.event_date)
        )
        events = list(result.scalars().all())
        for event in events:
            fill_unloaded(event, "tickets", [])
        return events

    async def create(self, event: Event) -> Event:
        event.id = None
        event.created_at = utcnow()
        event.updated_at = None
        self.db.add(event)
        await self.db.commit()
        await self.db.refresh(event)
        fill_unloaded(event, "tickets", [])
        return event

    async def update(self, event: Event) -> None:
        """Replace every writable column of the row with ``event.id``.

        ``created_at`` is never overwritten.
        """
        event.updated_at = utcnow()
        await self.db.execute(
            update(Event)
            .where(Event.id == event.id)
            .values(
                name=event.name,
                description=event.description,
                event_date=event.event_date,
                location=event.location,
                total_seats=event.total_seats,
                available_seats=event.available_seats,
                base_price=event.base_price,
                updated_at=event.updated_at,
            )
        )
        await self.db.commit()

    async def delete(self, event_id: int) -> None:
        event = await self.db.get(Event, event_id)
        if event is None:
            return
        await self.db.delete(event)
        await self.db.commit()

    async def exists(self, event_id: int) -> bool:
        result = await self.db.execute(select(exists().where(Event.id == event_id)))
        return bool(result.scalar())
