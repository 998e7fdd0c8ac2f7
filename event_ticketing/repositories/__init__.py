from event_ticketing.repositories.event_repository import EventRepository
from event_ticketing.repositories.ticket_repository import TicketRepository

__all__ = ["EventRepository", "TicketRepository"]
