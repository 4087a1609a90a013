"""Field validation and event date handling.

Every function here is pure: no database access, no exceptions for bad
input. Callers collect the returned messages and decide what to raise.
"""
import re
from datetime import datetime
from typing import Optional

from homies.constants import (
    EVENT_MAX_DESCRIPTION,
    EVENT_MAX_NAME,
    EVENT_MIN_DESCRIPTION,
    EVENT_MIN_NAME,
    INVALID_DATE_MESSAGE,
    REQUIRED_ERROR_MESSAGE,
    STRING_LENGTH_ERROR_MESSAGE,
)

# yyyy-MM-dd H:mm: the hour takes one or two digits, everything else is fixed width.
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{1,2}):(\d{2})", re.ASCII)


def check_required(label: str, value) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return REQUIRED_ERROR_MESSAGE.format(label)
    return None


def check_length(label: str, value: Optional[str], minimum: int, maximum: int) -> Optional[str]:
    """Return an error message if ``value`` is blank or outside [minimum, maximum]."""
    missing = check_required(label, value)
    if missing:
        return missing
    if not minimum <= len(value) <= maximum:
        return STRING_LENGTH_ERROR_MESSAGE.format(label, maximum, minimum)
    return None


def parse_event_date(text: Optional[str]) -> Optional[datetime]:
    """Parse ``text`` in the exact ``yyyy-MM-dd H:mm`` format, or return None."""
    if not isinstance(text, str):
        return None
    match = _DATE_RE.fullmatch(text)
    if not match:
        return None
    year, month, day, hour, minute = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        # 2024-02-30, 24:00, 12:60 ...
        return None


def format_event_date(value: datetime) -> str:
    return f"{value.year:04d}-{value:%m-%d} {value.hour}:{value:%M}"


def _check_date(label: str, text: Optional[str]) -> tuple[Optional[str], Optional[datetime]]:
    missing = check_required(label, text)
    if missing:
        return missing, None
    parsed = parse_event_date(text)
    if parsed is None:
        return INVALID_DATE_MESSAGE, None
    return None, parsed


def validate_event_form(
    name: Optional[str],
    description: Optional[str],
    start: Optional[str],
    end: Optional[str],
    type_id: Optional[int],
) -> tuple[dict[str, str], Optional[datetime], Optional[datetime]]:
    """Check every event form field and collect all problems at once.

    Returns ``(errors, start_dt, end_dt)``. ``errors`` maps field name to a
    message and is empty when the form is valid. No ordering between start
    and end is enforced.
    """
    errors: dict[str, str] = {}

    message = check_length("Name", name, EVENT_MIN_NAME, EVENT_MAX_NAME)
    if message:
        errors["name"] = message

    message = check_length("Description", description, EVENT_MIN_DESCRIPTION, EVENT_MAX_DESCRIPTION)
    if message:
        errors["description"] = message

    message, start_dt = _check_date("Start", start)
    if message:
        errors["start"] = message

    message, end_dt = _check_date("End", end)
    if message:
        errors["end"] = message

    message = check_required("TypeId", type_id)
    if message:
        errors["type_id"] = message

    return errors, start_dt, end_dt
