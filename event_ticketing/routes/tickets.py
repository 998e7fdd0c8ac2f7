from fastapi import APIRouter, Depends, HTTPException, status, Request, Response
from typing import List
import logging

from event_ticketing.dependencies import RowId, get_event_repository, get_ticket_repository
from event_ticketing.models.tickets import Ticket
from event_ticketing.repositories import EventRepository, TicketRepository
from event_ticketing.schemas.tickets import (
    TicketCreateSchema,
    TicketUpdateSchema,
    TicketResponseSchema
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tickets",
    tags=["Tickets"]
)


def _to_model(ticket_data) -> Ticket:
    data = ticket_data.model_dump()
    data["status"] = int(data["status"])
    return Ticket(**data)


@router.get(
    "",
    response_model=List[TicketResponseSchema],
    summary="Get all tickets, most recent purchase first"
)
async def get_all_tickets(repository: TicketRepository = Depends(get_ticket_repository)):
    try:
        return await repository.get_all()
    except Exception as e:
        logger.error(f"Error fetching all tickets: {str(e)}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred.")


@router.get(
    "/event/{event_id}",
    response_model=List[TicketResponseSchema],
    summary="Get all tickets for a specific event, ordered by seat number"
)
async def get_tickets_by_event(
    event_id: RowId,
    repository: TicketRepository = Depends(get_ticket_repository),
    event_repository: EventRepository = Depends(get_event_repository)
):
    try:
        if not await event_repository.exists(event_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Event with ID {event_id} not found")
        return await repository.get_by_event(event_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching tickets for event_id {event_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred.")


@router.get(
    "/email/{email}",
    response_model=List[TicketResponseSchema],
    summary="Get all tickets bought under an attendee email"
)
async def get_tickets_by_email(
    email: str,
    repository: TicketRepository = Depends(get_ticket_repository)
):
    try:
        return await repository.get_by_email(email)
    except Exception as e:
        logger.error(f"Error fetching tickets for email {email}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred.")


@router.get(
    "/{ticket_id}",
    name="get_ticket",
    response_model=TicketResponseSchema,
    summary="Get a specific ticket by ID"
)
async def get_ticket(
    ticket_id: RowId,
    repository: TicketRepository = Depends(get_ticket_repository)
):
    try:
        ticket = await repository.get_by_id(ticket_id)
    except Exception as e:
        logger.error(f"Error fetching ticket with id {ticket_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred.")

    if not ticket:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Ticket with ID {ticket_id} not found")
    return ticket


@router.post(
    "",
    response_model=TicketResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a ticket for an existing event"
)
async def create_ticket(
    ticket_data: TicketCreateSchema,
    request: Request,
    response: Response,
    repository: TicketRepository = Depends(get_ticket_repository),
    event_repository: EventRepository = Depends(get_event_repository)
):
    try:
        if not await event_repository.exists(ticket_data.event_id):
            logger.warning(f"Ticket creation rejected: event_id {ticket_data.event_id} does not exist.")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Event with ID {ticket_data.event_id} not found"
            )
        # available_seats on the event is left as is.
        db_ticket = await repository.create(_to_model(ticket_data))
        logger.info(f"Ticket (ID: {db_ticket.id}) seat {db_ticket.seat_number} created for event_id {db_ticket.event_id}.")
    except HTTPException:
        raise
    except Exception as e_general:
        logger.error(
            f"Unexpected error creating ticket {ticket_data.model_dump_json()}: {str(e_general)}", exc_info=True
        )
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An unexpected error occurred.")
    response.headers["Location"] = str(request.url_for("get_ticket", ticket_id=db_ticket.id))
    return db_ticket


@router.put(
    "/{ticket_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace all fields of a ticket (purchase time is kept)"
)
async def update_ticket(
    ticket_id: RowId,
    ticket_data: TicketUpdateSchema,
    repository: TicketRepository = Depends(get_ticket_repository),
    event_repository: EventRepository = Depends(get_event_repository)
):
    if ticket_id != ticket_data.id:
        logger.warning(f"ID mismatch updating ticket: path {ticket_id}, body {ticket_data.id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID mismatch")

    try:
        if not await repository.get_by_id(ticket_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Ticket with ID {ticket_id} not found")
        if not await event_repository.exists(ticket_data.event_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Event with ID {ticket_data.event_id} not found"
            )
        await repository.update(_to_model(ticket_data))
        logger.info(f"Ticket (ID: {ticket_id}) updated, status {ticket_data.status.name}.")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Error updating ticket id {ticket_id} with payload {ticket_data.model_dump_json()}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred.")


@router.delete(
    "/{ticket_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a ticket"
)
async def delete_ticket(
    ticket_id: RowId,
    repository: TicketRepository = Depends(get_ticket_repository)
):
    try:
        ticket = await repository.get_by_id(ticket_id)
        if not ticket:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Ticket with ID {ticket_id} not found")
        ticket_info_for_log = f"ID: {ticket_id}, event: {ticket.event_id}, seat: {ticket.seat_number}"
        await repository.delete(ticket_id)
        logger.info(f"Ticket ({ticket_info_for_log}) deleted.")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting ticket with id {ticket_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred.")
