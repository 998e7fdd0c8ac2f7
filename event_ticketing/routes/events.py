from fastapi import APIRouter, Depends, HTTPException, status, Request, Response
from typing import List
import logging

from event_ticketing.dependencies import RowId, get_event_repository
from event_ticketing.models.event import Event
from event_ticketing.repositories import EventRepository
from event_ticketing.schemas.event import (
    EventCreateSchema,
    EventUpdateSchema,
    EventResponseSchema
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/events",
    tags=["Events"]
)


@router.get(
    "",
    response_model=List[EventResponseSchema],
    summary="Get all events with their tickets, ordered by event date"
)
async def get_all_events(repository: EventRepository = Depends(get_event_repository)):
    try:
        return await repository.get_all()
    except Exception as e:
        logger.error(f"Error fetching events: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching events."
        )


@router.get(
    "/upcoming",
    response_model=List[EventResponseSchema],
    summary="Get events dated after now (tickets are not included)"
)
async def get_upcoming_events(repository: EventRepository = Depends(get_event_repository)):
    try:
        return await repository.get_upcoming()
    except Exception as e:
        logger.error(f"Error fetching upcoming events: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching upcoming events."
        )


@router.get(
    "/{event_id}",
    name="get_event",
    response_model=EventResponseSchema,
    summary="Get a specific event by ID"
)
async def get_event(
    event_id: RowId,
    repository: EventRepository = Depends(get_event_repository)
):
    try:
        event = await repository.get_by_id(event_id)
    except Exception as e:
        logger.error(f"Error fetching event with id {event_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while fetching event {event_id}."
        )
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Event with ID {event_id} not found"
        )
    return event


@router.post(
    "",
    response_model=EventResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new event"
)
async def create_event(
    event_data: EventCreateSchema,
    request: Request,
    response: Response,
    repository: EventRepository = Depends(get_event_repository)
):
    db_event = Event(**event_data.model_dump(exclude={"id"}))
    try:
        db_event = await repository.create(db_event)
        logger.info(f"Event '{db_event.name}' created with ID {db_event.id}")
    except Exception as e_general:
        logger.error(
            f"Unexpected error creating event with name '{event_data.name}': {str(e_general)}",
            exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while creating the event."
        )
    response.headers["Location"] = str(request.url_for("get_event", event_id=db_event.id))
    return db_event


@router.put(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace all fields of an event"
)
async def update_event(
    event_id: RowId,
    event_data: EventUpdateSchema,
    repository: EventRepository = Depends(get_event_repository)
):
    if event_id != event_data.id:
        logger.warning(f"ID mismatch updating event: path {event_id}, body {event_data.id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID mismatch")

    try:
        if not await repository.exists(event_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Event with ID {event_id} not found"
            )
        await repository.update(Event(**event_data.model_dump()))
        logger.info(f"Event ID {event_id} (name: '{event_data.name}') updated.")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e_general:
        logger.error(
            f"Unexpected error updating event id {event_id} with payload {event_data.model_dump_json()}: {str(e_general)}",
            exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An unexpected error occurred while updating event {event_id}."
        )


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event and all of its tickets"
)
async def delete_event(
    event_id: RowId,
    repository: EventRepository = Depends(get_event_repository)
):
    try:
        if not await repository.exists(event_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Event with ID {event_id} not found"
            )
        await repository.delete(event_id)
        logger.info(f"Event ID {event_id} deleted along with its tickets.")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting event with id {event_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while deleting event {event_id}."
        )
