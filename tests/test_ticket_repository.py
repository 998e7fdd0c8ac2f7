"""Tests for TicketRepository against a real (in-memory SQLite) store."""

from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, InvalidRequestError

from event_ticketing.models import utcnow
from event_ticketing.models.tickets import Ticket, TicketStatus
from event_ticketing.repositories import EventRepository, TicketRepository
from tests.factories import make_event, make_ticket


@pytest.fixture
async def event_id(session_factory):
    async with session_factory() as db:
        event = await EventRepository(db).create(make_event())
    return event.id


class TestCreate:

    async def test_create_assigns_id_and_purchased_at(self, session_factory, event_id):
        before = utcnow()
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(make_ticket(event_id, id=77))
        after = utcnow()

        assert ticket.id and ticket.id != 77
        assert before <= ticket.purchased_at <= after

    async def test_create_leaves_available_seats_untouched(self, session_factory, event_id):
        async with session_factory() as db:
            await TicketRepository(db).create(make_ticket(event_id, seat_number="A1"))
            await TicketRepository(db).create(make_ticket(event_id, seat_number="A2"))

        async with session_factory() as db:
            event = await EventRepository(db).get_by_id(event_id)

        assert event.available_seats == 100
        assert len(event.tickets) == 2

    async def test_status_is_stored_as_integer_code(self, session_factory, event_id):
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(
                make_ticket(event_id, status=int(TicketStatus.CHECKED_IN))
            )
            stored = await db.scalar(
                text('SELECT status FROM "Tickets" WHERE id = :id'), {"id": ticket.id}
            )

        assert stored == 3

    async def test_store_rejects_unknown_event(self, session_factory):
        async with session_factory() as db:
            with pytest.raises(IntegrityError):
                await TicketRepository(db).create(make_ticket(4242))


class TestReads:

    async def test_get_by_id_loads_event(self, session_factory, event_id):
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(make_ticket(event_id))

        async with session_factory() as db:
            loaded = await TicketRepository(db).get_by_id(ticket.id)

        assert loaded.event is not None
        assert loaded.event.id == event_id
        assert loaded.event.name == "Conf"

    async def test_get_by_id_missing_returns_none(self, session_factory):
        async with session_factory() as db:
            assert await TicketRepository(db).get_by_id(1) is None

    async def test_get_all_most_recent_first_with_event(self, session_factory, event_id):
        async with session_factory() as db:
            repo = TicketRepository(db)
            first = await repo.create(make_ticket(event_id, seat_number="A1"))
            second = await repo.create(make_ticket(event_id, seat_number="A2"))
            third = await repo.create(make_ticket(event_id, seat_number="A3"))

        async with session_factory() as db:
            tickets = await TicketRepository(db).get_all()

        assert [t.id for t in tickets] == [third.id, second.id, first.id]
        assert all(t.event is not None and t.event.id == event_id for t in tickets)

    async def test_get_by_event_orders_by_seat_text_without_event(self, session_factory, event_id):
        async with session_factory() as db:
            other = await EventRepository(db).create(make_event(name="Other"))
            repo = TicketRepository(db)
            for seat in ("B2", "A10", "A2"):
                await repo.create(make_ticket(event_id, seat_number=seat))
            await repo.create(make_ticket(other.id, seat_number="A1"))

        async with session_factory() as db:
            tickets = await TicketRepository(db).get_by_event(event_id)

        assert [t.seat_number for t in tickets] == ["A10", "A2", "B2"]
        assert all(t.event is None for t in tickets)

    async def test_get_by_email_exact_match_most_recent_first(self, session_factory, event_id):
        async with session_factory() as db:
            repo = TicketRepository(db)
            older = await repo.create(make_ticket(event_id, attendee_email="fan@example.com", seat_number="A1"))
            await repo.create(make_ticket(event_id, attendee_email="other@example.com", seat_number="A2"))
            newer = await repo.create(make_ticket(event_id, attendee_email="fan@example.com", seat_number="A3"))

        async with session_factory() as db:
            tickets = await TicketRepository(db).get_by_email("fan@example.com")
            assert await TicketRepository(db).get_by_email("fan@example") == []

        assert [t.id for t in tickets] == [newer.id, older.id]
        assert all(t.event is not None for t in tickets)

    async def test_count_includes_cancelled_tickets(self, session_factory, event_id):
        async with session_factory() as db:
            repo = TicketRepository(db)
            await repo.create(make_ticket(event_id, seat_number="A1", status=int(TicketStatus.PAID)))
            await repo.create(make_ticket(event_id, seat_number="A2", status=int(TicketStatus.CANCELLED)))
            await repo.create(make_ticket(event_id, seat_number="A3", status=int(TicketStatus.CANCELLED)))
            await repo.create(make_ticket(event_id, seat_number="A4", status=int(TicketStatus.RESERVED)))

        async with session_factory() as db:
            repo = TicketRepository(db)
            assert await repo.get_ticket_count_by_event(event_id) == 4
            assert len(await repo.get_by_event(event_id)) == 4
            assert await repo.get_ticket_count_by_event(event_id + 1) == 0

    async def test_event_is_never_lazy_loaded(self, session_factory, event_id):
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(make_ticket(event_id))

        async with session_factory() as db:
            plain = await db.get(Ticket, ticket.id)
            with pytest.raises(InvalidRequestError):
                plain.event

    async def test_price_paid_keeps_every_digit(self, session_factory, event_id):
        price = Decimal("1234567890123456.78")
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(make_ticket(event_id, price_paid=price))

        async with session_factory() as db:
            loaded = await TicketRepository(db).get_by_id(ticket.id)

        assert loaded.price_paid == price


class TestUpdateAndDelete:

    async def test_update_replaces_fields_but_keeps_purchased_at(self, session_factory, event_id):
        async with session_factory() as db:
            created = await TicketRepository(db).create(make_ticket(event_id))

        replacement = Ticket(
            id=created.id,
            event_id=event_id,
            attendee_email="new@example.com",
            attendee_full_name="Grace Hopper",
            seat_number="Z9",
            price_paid=Decimal("0.00"),
            status=TicketStatus.CANCELLED,
            purchased_at=utcnow(),
        )
        async with session_factory() as db:
            await TicketRepository(db).update(replacement)

        async with session_factory() as db:
            loaded = await TicketRepository(db).get_by_id(created.id)

        assert loaded.attendee_email == "new@example.com"
        assert loaded.attendee_full_name == "Grace Hopper"
        assert loaded.seat_number == "Z9"
        assert loaded.price_paid == Decimal("0.00")
        assert loaded.status == TicketStatus.CANCELLED
        assert loaded.purchased_at == created.purchased_at

    async def test_any_status_change_is_allowed(self, session_factory, event_id):
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(
                make_ticket(event_id, status=int(TicketStatus.CHECKED_IN))
            )
            ticket.status = int(TicketStatus.RESERVED)
            await TicketRepository(db).update(ticket)

        async with session_factory() as db:
            loaded = await TicketRepository(db).get_by_id(ticket.id)

        assert loaded.status == TicketStatus.RESERVED

    async def test_delete_and_missing_delete(self, session_factory, event_id):
        async with session_factory() as db:
            ticket = await TicketRepository(db).create(make_ticket(event_id))

        async with session_factory() as db:
            repo = TicketRepository(db)
            await repo.delete(ticket.id)
            await repo.delete(ticket.id)
            assert await repo.get_by_id(ticket.id) is None
            assert await EventRepository(db).exists(event_id) is True
