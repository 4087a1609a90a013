"""Event ORM model."""
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship
from homies.constants import EVENT_MAX_NAME, EVENT_MAX_DESCRIPTION
from homies.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(EVENT_MAX_NAME), nullable=False)
    description = Column(String(EVENT_MAX_DESCRIPTION), nullable=False)
    created_on = Column(DateTime, nullable=False)
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=False)
    organiser_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    type_id = Column(Integer, ForeignKey("types.id"), nullable=False)

    organiser = relationship("User")
    type = relationship("EventType")
    participants = relationship("EventParticipant", back_populates="event", cascade="all, delete-orphan")
