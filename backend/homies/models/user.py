"""User ORM model — identities are provisioned externally."""
import uuid
from sqlalchemy import Column, String
from homies.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_name = Column(String(100), nullable=False, unique=True)
