"""Domain errors raised by the event service.

Each error is terminal for the request. The application maps them to HTTP
responses in ``homies.main``; services never build responses themselves.
"""
from typing import Any, Optional


class HomiesError(Exception):
    """Base class for every error the event service raises."""

    status_code = 400
    detail = "Bad request"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class EventNotFound(HomiesError):
    detail = "Event not found"

    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class ParticipationNotFound(HomiesError):
    detail = "User has not joined this event"

    def __init__(self, event_id: int, user_id: str):
        super().__init__(f"User {user_id} has not joined event {event_id}")
        self.event_id = event_id
        self.user_id = user_id


class Unauthorized(HomiesError):
    """Requester is not the organiser of the event."""

    status_code = 401
    detail = "Only the organiser may modify this event"

    def __init__(self, event_id: int, user_id: str):
        super().__init__()
        self.event_id = event_id
        self.user_id = user_id


class ValidationError(HomiesError):
    """One or more submitted fields are invalid.

    ``errors`` maps field name to message. ``form`` is the submitted form
    (values as entered plus the available types) so the client can
    re-display it with the messages next to each field.
    """

    status_code = 422
    detail = "Submitted event form is invalid"

    def __init__(self, errors: dict[str, str], form: Any = None):
        super().__init__()
        self.errors = errors
        self.form = form
