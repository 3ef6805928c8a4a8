"""Event scheduling endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intered.application.schemas import EventCreate, EventResponse
from intered.application.services import EventService
from intered.domain.exceptions import InvalidReferenceError
from intered.infrastructure.dependencies import get_event_service

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
async def list_events(service: EventService = Depends(get_event_service)) -> list[EventResponse]:
    return [EventResponse.model_validate(e) for e in await service.list_events()]


@router.get("/student/{student_id}", response_model=list[EventResponse])
async def list_events_for_student(
    student_id: int,
    service: EventService = Depends(get_event_service),
) -> list[EventResponse]:
    return [EventResponse.model_validate(e) for e in await service.list_for_student(student_id)]


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def schedule_event(data: EventCreate, service: EventService = Depends(get_event_service)) -> EventResponse:
    try:
        event = await service.schedule_event(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return EventResponse.model_validate(event)
