"""Event API routes — delegates to event_service for invariant enforcement."""
import logging
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from homies.database import get_db
from homies.schemas.event import (
    EventCreated,
    EventDetails,
    EventForm,
    EventFormIn,
    EventInfo,
    ParticipationOut,
)
from homies.services import event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=list[EventInfo])
def list_events(db: Session = Depends(get_db)):
    """List every event."""
    return event_service.list_all(db)


@router.get("/joined", response_model=list[EventInfo])
def list_joined_events(
    actor_user_id: str = Query(..., description="ID of the requesting user"),
    db: Session = Depends(get_db),
):
    """List the events the requesting user has joined."""
    return event_service.list_joined(db, actor_user_id)


@router.get("/form", response_model=EventForm)
def get_blank_form(db: Session = Depends(get_db)):
    """Empty create form with the available event types."""
    return event_service.get_blank_form(db)


@router.post("/", response_model=EventCreated, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventFormIn,
    actor_user_id: str = Query(..., description="ID of the organiser"),
    db: Session = Depends(get_db),
):
    """Create a new event organised by the requesting user."""
    event_id = event_service.create_event(
        db,
        organiser_id=actor_user_id,
        name=payload.name,
        description=payload.description,
        start=payload.start,
        end=payload.end,
        type_id=payload.type_id,
    )
    return EventCreated(id=event_id)


@router.get("/{event_id}", response_model=EventDetails)
def get_event(event_id: int, db: Session = Depends(get_db)):
    return event_service.get_details(db, event_id)


@router.get("/{event_id}/edit", response_model=EventForm)
def get_edit_form(
    event_id: int,
    actor_user_id: str = Query(..., description="ID of the requesting user"),
    db: Session = Depends(get_db),
):
    """Pre-filled edit form (organiser only)."""
    return event_service.get_editable_form(db, event_id, actor_user_id)


@router.put("/{event_id}", response_model=EventDetails)
def update_event(
    event_id: int,
    payload: EventFormIn,
    actor_user_id: str = Query(..., description="ID of the user performing the update"),
    db: Session = Depends(get_db),
):
    """Update an event (organiser only) and return its new details."""
    event_service.edit_event(
        db,
        event_id=event_id,
        requester_id=actor_user_id,
        name=payload.name,
        description=payload.description,
        start=payload.start,
        end=payload.end,
        type_id=payload.type_id,
    )
    return event_service.get_details(db, event_id)


@router.post("/{event_id}/join", response_model=ParticipationOut)
def join_event(
    event_id: int,
    actor_user_id: str = Query(..., description="ID of the joining user"),
    db: Session = Depends(get_db),
):
    """Join an event. Joining again is accepted and changes nothing."""
    event_service.join_event(db, event_id, actor_user_id)
    return ParticipationOut(event_id=event_id, user_id=actor_user_id, joined=True)


@router.post("/{event_id}/leave", response_model=ParticipationOut)
def leave_event(
    event_id: int,
    actor_user_id: str = Query(..., description="ID of the leaving user"),
    db: Session = Depends(get_db),
):
    event_service.leave_event(db, event_id, actor_user_id)
    return ParticipationOut(event_id=event_id, user_id=actor_user_id, joined=False)
