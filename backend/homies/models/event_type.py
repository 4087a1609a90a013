"""EventType ORM model — lookup data attached to every event."""
from sqlalchemy import Column, Integer, String
from homies.constants import TYPE_MAX_NAME
from homies.database import Base


class EventType(Base):
    __tablename__ = "types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(TYPE_MAX_NAME), nullable=False)
