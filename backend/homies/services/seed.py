"""Reference data bootstrap for development databases."""
import logging

from sqlalchemy.orm import Session

from homies.config import settings
from homies.constants import TYPE_MAX_NAME, TYPE_MIN_NAME
from homies.models.event_type import EventType
from homies.services.validation import check_length

logger = logging.getLogger(__name__)


def seed_event_types(db: Session, names: list[str]) -> int:
    """Insert ``names`` as event types when the table is empty.

    Returns the number of rows inserted. Names outside the type name bounds
    are skipped with a warning.
    """
    if db.query(EventType).first() is not None:
        return 0

    inserted = 0
    for name in names:
        message = check_length("Name", name, TYPE_MIN_NAME, TYPE_MAX_NAME)
        if message:
            logger.warning("Skipping event type %r: %s", name, message)
            continue
        db.add(EventType(name=name))
        inserted += 1
    db.commit()
    logger.info("Seeded %d event types", inserted)
    return inserted


def default_event_type_names() -> list[str]:
    return [n.strip() for n in settings.DEFAULT_EVENT_TYPES.split(",") if n.strip()]
