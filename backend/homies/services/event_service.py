"""Core event service — listing, participation and organiser-only editing.

Responsibilities:
- Listing summaries / details shaped for the client
- Join / leave with one participation row per (event, user)
- Create / edit with accumulating field validation
- Authorization hook: only the organiser may edit
"""
import logging
from datetime import datetime
from typing import Optional

import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from homies.config import settings
from homies.constants import MAX_ID, MIN_ID, UNKNOWN_TYPE_MESSAGE
from homies.errors import EventNotFound, ParticipationNotFound, Unauthorized, ValidationError
from homies.models.event import Event
from homies.models.event_participant import EventParticipant
from homies.models.event_type import EventType
from homies.schemas.event import EventDetails, EventForm, EventInfo, TypeOption
from homies.services.validation import format_event_date, validate_event_form

logger = logging.getLogger(__name__)


def _now() -> datetime:
    """Current wall-clock time in the configured timezone, without tzinfo."""
    return datetime.now(pytz.timezone(settings.TIMEZONE)).replace(tzinfo=None)


def _event_info(event: Event) -> EventInfo:
    return EventInfo(
        id=event.id,
        name=event.name,
        start=format_event_date(event.start),
        type=event.type.name,
        organiser=event.organiser.user_name,
    )


def _storable_id(value: int) -> bool:
    return MIN_ID <= value <= MAX_ID


def _get_event(db: Session, event_id: int, with_participants: bool = False) -> Event:
    if not _storable_id(event_id):
        logger.info("Event %s not found", event_id)
        raise EventNotFound(event_id)
    query = db.query(Event).filter(Event.id == event_id)
    if with_participants:
        query = query.options(selectinload(Event.participants))
    event = query.first()
    if event is None:
        logger.info("Event %s not found", event_id)
        raise EventNotFound(event_id)
    return event


def is_owner(event: Event, requester_id: str) -> bool:
    return event.organiser_id == requester_id


def _check_authorization(event: Event, requester_id: str) -> None:
    if not is_owner(event, requester_id):
        logger.info("User %s is not the organiser of event %s", requester_id, event.id)
        raise Unauthorized(event.id, requester_id)


def get_types(db: Session) -> list[TypeOption]:
    types = db.query(EventType).order_by(EventType.id).all()
    return [TypeOption.model_validate(t) for t in types]


def list_all(db: Session) -> list[EventInfo]:
    """Summaries of every event, oldest first."""
    events = (
        db.query(Event)
        .options(joinedload(Event.organiser), joinedload(Event.type))
        .order_by(Event.id)
        .all()
    )
    return [_event_info(e) for e in events]


def list_joined(db: Session, user_id: str) -> list[EventInfo]:
    """Summaries of the events ``user_id`` participates in."""
    events = (
        db.query(Event)
        .join(EventParticipant, EventParticipant.event_id == Event.id)
        .filter(EventParticipant.helper_id == user_id)
        .options(joinedload(Event.organiser), joinedload(Event.type))
        .order_by(Event.id)
        .all()
    )
    return [_event_info(e) for e in events]


def join_event(db: Session, event_id: int, user_id: str) -> bool:
    """Add ``user_id`` to the event's participants.

    Joining twice is a no-op. Returns True when a row was inserted.
    """
    event = _get_event(db, event_id, with_participants=True)

    if any(p.helper_id == user_id for p in event.participants):
        logger.info("User %s already joined event %s", user_id, event_id)
        return False

    event.participants.append(EventParticipant(event_id=event_id, helper_id=user_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = (
            db.query(EventParticipant)
            .filter(EventParticipant.event_id == event_id, EventParticipant.helper_id == user_id)
            .first()
        )
        if existing is None:
            # Not a duplicate: unknown user or another constraint.
            raise
        logger.warning("Concurrent join of event %s by user %s; keeping existing row", event_id, user_id)
        return False

    logger.info("User %s joined event %s", user_id, event_id)
    return True


def leave_event(db: Session, event_id: int, user_id: str) -> None:
    """Remove ``user_id`` from the event's participants."""
    event = _get_event(db, event_id, with_participants=True)

    participant = next((p for p in event.participants if p.helper_id == user_id), None)
    if participant is None:
        logger.info("User %s tried to leave event %s without joining", user_id, event_id)
        raise ParticipationNotFound(event_id, user_id)

    event.participants.remove(participant)
    db.commit()
    logger.info("User %s left event %s", user_id, event_id)


def get_blank_form(db: Session) -> EventForm:
    return EventForm(types=get_types(db))


def _validate(
    db: Session,
    name: Optional[str],
    description: Optional[str],
    start: Optional[str],
    end: Optional[str],
    type_id: Optional[int],
) -> tuple[datetime, datetime]:
    """Validate a submitted form; raise ValidationError carrying the form back."""
    errors, start_dt, end_dt = validate_event_form(name, description, start, end, type_id)

    if "type_id" not in errors and (not _storable_id(type_id) or db.get(EventType, type_id) is None):
        errors["type_id"] = UNKNOWN_TYPE_MESSAGE

    if errors:
        form = EventForm(
            name=name or "",
            description=description or "",
            start=start or "",
            end=end or "",
            type_id=type_id,
            types=get_types(db),
        )
        logger.info("Rejected event form: %s", ", ".join(sorted(errors)))
        raise ValidationError(errors, form)

    return start_dt, end_dt


def create_event(
    db: Session,
    organiser_id: str,
    name: Optional[str],
    description: Optional[str],
    start: Optional[str],
    end: Optional[str],
    type_id: Optional[int],
) -> int:
    """Create an event owned by ``organiser_id`` and return its id."""
    start_dt, end_dt = _validate(db, name, description, start, end, type_id)

    event = Event(
        name=name,
        description=description,
        created_on=_now(),
        start=start_dt,
        end=end_dt,
        organiser_id=organiser_id,
        type_id=type_id,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event '%s' (%s) by organiser %s", name, event.id, organiser_id)
    return event.id


def get_editable_form(db: Session, event_id: int, requester_id: str) -> EventForm:
    """Pre-filled edit form; only the organiser may open it."""
    event = _get_event(db, event_id)
    _check_authorization(event, requester_id)

    return EventForm(
        name=event.name,
        description=event.description,
        start=format_event_date(event.start),
        end=format_event_date(event.end),
        type_id=event.type_id,
        types=get_types(db),
    )


def edit_event(
    db: Session,
    event_id: int,
    requester_id: str,
    name: Optional[str],
    description: Optional[str],
    start: Optional[str],
    end: Optional[str],
    type_id: Optional[int],
) -> None:
    """Overwrite the editable fields. Organiser and created_on never change."""
    event = _get_event(db, event_id)
    _check_authorization(event, requester_id)

    start_dt, end_dt = _validate(db, name, description, start, end, type_id)

    event.name = name
    event.description = description
    event.start = start_dt
    event.end = end_dt
    event.type_id = type_id

    db.commit()
    logger.info("Updated event %s by organiser %s", event_id, requester_id)


def get_details(db: Session, event_id: int) -> EventDetails:
    if not _storable_id(event_id):
        logger.info("Event %s not found", event_id)
        raise EventNotFound(event_id)

    event = (
        db.query(Event)
        .options(joinedload(Event.organiser), joinedload(Event.type))
        .filter(Event.id == event_id)
        .first()
    )
    if event is None:
        logger.info("Event %s not found", event_id)
        raise EventNotFound(event_id)

    return EventDetails(
        id=event.id,
        name=event.name,
        description=event.description,
        created_on=format_event_date(event.created_on),
        start=format_event_date(event.start),
        end=format_event_date(event.end),
        organiser=event.organiser.user_name,
        type=event.type.name,
    )
