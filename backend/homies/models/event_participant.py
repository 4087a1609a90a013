"""EventParticipant ORM model — one row per (event, helper) pair.

The composite primary key is the uniqueness guarantee for joins.
"""
from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from homies.database import Base


class EventParticipant(Base):
    __tablename__ = "events_participants"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    helper_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)

    event = relationship("Event", back_populates="participants")
