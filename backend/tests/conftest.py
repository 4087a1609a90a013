"""Pytest fixtures — in-memory SQLite database for fast, isolated tests."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from homies.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from homies.main import app  # noqa: E402

# Import all models so they register with Base.metadata
from homies.models.user import User                          # noqa: E402
from homies.models.event_type import EventType               # noqa: E402
from homies.models.event import Event                        # noqa: E402
from homies.models.event_participant import EventParticipant  # noqa: E402, F401


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh in-memory SQLite engine for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: seed reference data and events straight through the ORM
# ---------------------------------------------------------------------------
def create_test_user(db, name: str = "Test User") -> User:
    """Helper — insert a user and return it."""
    user = User(user_name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_test_type(db, name: str = "Games") -> EventType:
    event_type = EventType(name=name)
    db.add(event_type)
    db.commit()
    db.refresh(event_type)
    return event_type


def create_test_event(
    db,
    organiser: User,
    event_type: EventType,
    name: str = "Picnic Day",
    description: str = "Bring food and a blanket",
    start: datetime = datetime(2024, 6, 1, 12, 0),
    end: datetime = datetime(2024, 6, 1, 16, 30),
) -> Event:
    """Helper — insert an event directly, bypassing validation."""
    event = Event(
        name=name,
        description=description,
        created_on=datetime(2024, 5, 1, 9, 15),
        start=start,
        end=end,
        organiser_id=organiser.user_id,
        type_id=event_type.id,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event
