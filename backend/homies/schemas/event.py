"""Pydantic schemas for Events — the view models handed to clients."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel


class TypeOption(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class EventInfo(BaseModel):
    """Summary row used by the "all" and "joined" listings."""

    id: int
    name: str
    start: str
    type: str
    organiser: str


class EventDetails(BaseModel):
    id: int
    name: str
    description: str
    created_on: str
    start: str
    end: str
    organiser: str
    type: str


class EventForm(BaseModel):
    """Create/edit form: the entered values plus the type choices."""

    name: str = ""
    description: str = ""
    start: str = ""
    end: str = ""
    type_id: Optional[int] = None
    types: list[TypeOption] = []


class EventFormIn(BaseModel):
    # Every field is optional here; the event service reports missing ones.
    name: Optional[str] = None
    description: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    type_id: Optional[int] = None


class EventCreated(BaseModel):
    id: int


class ParticipationOut(BaseModel):
    event_id: int
    user_id: str
    joined: bool
