import pytest

from tarot_engine.spreads import (
    SPREAD_REGISTRY,
    get_spread,
    is_valid_spread_type,
    list_spreads,
)
from tarot_engine.tarot_core import InvalidSpreadError, Position, Spread

EXPECTED_SIZES = {
    "single_card": 1,
    "three_card": 3,
    "celtic_cross": 10,
    "horseshoe": 7,
    "relationship_cross": 7,
    "career_path": 6,
    "decision_making": 5,
    "spiritual_guidance": 6,
    "year_ahead": 13,
    "chakra_alignment": 7,
    "shadow_work": 5,
    "venus_love": 7,
    "tree_of_life": 10,
    "astrological_houses": 12,
    "mandala": 9,
    "pentagram": 5,
    "mirror_of_truth": 4,
}


def test_registry_contains_expected_spreads():
    assert {s.id: s.card_count for s in list_spreads()} == EXPECTED_SIZES


@pytest.mark.parametrize("spread", list_spreads(), ids=lambda s: s.id)
def test_positions_match_card_count(spread):
    assert len(spread.positions) == spread.card_count
    assert 1 <= spread.card_count <= 78
    assert all(p.name and p.meaning for p in spread.positions)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SPREAD_REGISTRY["new"] = SPREAD_REGISTRY["single_card"]  # type: ignore[index]


def test_lookup_helpers():
    assert is_valid_spread_type("celtic_cross")
    assert not is_valid_spread_type("bogus_spread")
    assert get_spread("bogus_spread") is None
    assert get_spread("mandala").name == "Mandala Spread"


def test_spread_rejects_count_mismatch():
    with pytest.raises(InvalidSpreadError):
        Spread(id="x", name="X", description="", card_count=2, positions=(Position("a", "b"),))


def test_year_ahead_months_in_order():
    names = [p.name for p in get_spread("year_ahead").positions]
    assert names[0] == "Overall Theme"
    assert names[1] == "January" and names[-1] == "December"
