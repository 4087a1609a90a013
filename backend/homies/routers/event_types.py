"""Event type lookup routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from homies.database import get_db
from homies.schemas.event import TypeOption
from homies.services import event_service

router = APIRouter()


@router.get("/", response_model=list[TypeOption])
def list_types(db: Session = Depends(get_db)):
    """List the event types an event may be tagged with."""
    return event_service.get_types(db)
