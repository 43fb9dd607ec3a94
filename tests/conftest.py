import pytest

from tarot_engine.deck import default_catalog
from tarot_engine.sessions import SessionStore
from tarot_engine.tarot_core import DrawnCard


@pytest.fixture
def card():
    """Build a DrawnCard from a card name."""
    def _card(name, orientation="upright", position=""):
        found = default_catalog.find_by_name(name)
        assert found is not None, name
        return DrawnCard(card=found, orientation=orientation, position=position)
    return _card


@pytest.fixture
def oriented():
    """Build minor-arcana DrawnCards from a pattern like "UURU" (U = upright, R = reversed)."""
    minors = [c for c in default_catalog.cards if c.arcana == "minor"]

    def _oriented(pattern):
        return [
            DrawnCard(card=minors[i], orientation="upright" if ch == "U" else "reversed")
            for i, ch in enumerate(pattern)
        ]
    return _oriented


@pytest.fixture
def store():
    return SessionStore()
