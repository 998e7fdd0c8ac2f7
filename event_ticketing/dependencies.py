from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from event_ticketing.database import get_db
from event_ticketing.repositories import EventRepository, TicketRepository
from event_ticketing.schemas import INT64_MAX, INT64_MIN

# Ids outside the 64-bit column range are rejected as malformed (400).
RowId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


async def get_event_repository(db: AsyncSession = Depends(get_db)) -> EventRepository:
    return EventRepository(db)


async def get_ticket_repository(db: AsyncSession = Depends(get_db)) -> TicketRepository:
    return TicketRepository(db)
