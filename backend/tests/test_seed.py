"""Tests for the event type bootstrap."""
from homies.models.event_type import EventType
from homies.services.seed import default_event_type_names, seed_event_types
from tests.conftest import create_test_type


def test_seed_empty_table(db):
    assert seed_event_types(db, ["Animals", "Games"]) == 2
    assert [t.name for t in db.query(EventType).order_by(EventType.id)] == ["Animals", "Games"]


def test_seed_skips_when_types_exist(db):
    create_test_type(db, name="Animals")
    assert seed_event_types(db, ["Games"]) == 0
    assert db.query(EventType).count() == 1


def test_seed_skips_names_out_of_bounds(db):
    assert seed_event_types(db, ["Fun", "Discussion", "An overly long type"]) == 1
    assert [t.name for t in db.query(EventType)] == ["Discussion"]


def test_default_names_are_valid(db):
    names = default_event_type_names()
    assert seed_event_types(db, names) == len(names)
