import pytest

from tarot_engine import analyzers
from tarot_engine.analyzers import (
    ANALYZERS,
    SPREAD_ANALYZERS,
    AnalyzerKind,
    analyzer_for_custom_name,
    analyzer_for_spread,
    run_structural_analysis,
)
from tarot_engine.spreads import SPREAD_REGISTRY


@pytest.mark.parametrize("kind", list(AnalyzerKind), ids=lambda k: k.value)
@pytest.mark.parametrize("size", [0, 2, 14])
def test_wrong_size_yields_empty_text(kind, size, oriented):
    assert ANALYZERS[kind](oriented("U" * size)) == ""


@pytest.mark.parametrize("spread_id, kind", list(SPREAD_ANALYZERS.items()))
def test_mapped_analyzer_fits_its_spread(spread_id, kind, oriented):
    spread = SPREAD_REGISTRY[spread_id]
    assert ANALYZERS[kind](oriented("U" * spread.card_count)) != ""


class TestDispatch:
    @pytest.mark.parametrize("spread_id", ["single_card", "horseshoe", "decision_making", "shadow_work"])
    def test_spreads_without_analyzer(self, spread_id):
        assert spread_id in SPREAD_REGISTRY
        assert analyzer_for_spread(spread_id) is None

    def test_builtin_mapping(self):
        assert analyzer_for_spread("celtic_cross") is AnalyzerKind.CELTIC_CROSS
        assert analyzer_for_spread("relationship_cross") is AnalyzerKind.RELATIONSHIP

    @pytest.mark.parametrize(
        "name, kind",
        [
            ("Mini Celtic Cross", AnalyzerKind.CELTIC_CROSS),
            ("My Three Card Check-in", AnalyzerKind.THREE_CARD),
            ("Relationship and love", AnalyzerKind.RELATIONSHIP),
            ("爱情 spread", AnalyzerKind.VENUS_LOVE),
            ("Ten Card Journey", None),
            ("", None),
        ],
    )
    def test_custom_names(self, name, kind):
        assert analyzer_for_custom_name(name) is kind

    def test_run_without_kind(self, oriented):
        assert run_structural_analysis(None, oriented("UUU")) == ""
        assert run_structural_analysis(AnalyzerKind.CELTIC_CROSS, oriented("UUU")) == ""


class TestThreeCard:
    @pytest.mark.parametrize(
        "pattern, phrase",
        [
            ("RUU", "from difficulty to resolution"),
            ("URU", "temporary setback"),
            ("UUU", "consistently positive"),
            ("RRR", "complex journey"),
            ("UUR", "complex journey"),
        ],
    )
    def test_flow(self, pattern, phrase, oriented):
        text = analyzers.analyze_three_card(oriented(pattern))
        assert text.startswith("**Three Card Flow Analysis:**\n\n")
        assert phrase in text


class TestCelticCross:
    def test_above_and_below_cards(self, oriented):
        cards = oriented("UUUUUUUUUU")
        text = analyzers.analyze_celtic_cross(cards)
        assert f"The {cards[4].card.name} above" in text
        assert f"the {cards[5].card.name} below" in text
        assert "These are aligned" in text

    def test_below_reversed_means_tension(self, oriented):
        cards = oriented("UUUUUR" + "UUUU")
        text = analyzers.analyze_celtic_cross(cards)
        assert "some tension" in text
        assert f"The {cards[3].card.name} in your near future will support" in text

    def test_reversed_near_future(self, oriented):
        cards = oriented("UUUR" + "UUUUUU")
        text = analyzers.analyze_celtic_cross(cards)
        assert "These are aligned" in text
        assert f"The {cards[3].card.name} in your near future will present challenges" in text


class TestRelationship:
    def test_positive(self, oriented):
        text = analyzers.analyze_relationship(oriented("UUURRRR"))
        assert "similar emotional states" in text
        assert "positive and supportive" in text

    def test_needs_attention(self, oriented):
        text = analyzers.analyze_relationship(oriented("URRUUUU"))
        assert "different emotional phases" in text
        assert "may need attention" in text


class TestCareerSpiritual:
    def test_career_branches(self, oriented):
        assert "favorable time" in analyzers.analyze_career(oriented("RURURR"))
        assert "obstacles are clearing" in analyzers.analyze_career(oriented("RRRURR"))
        assert "developing your skills" in analyzers.analyze_career(oriented("RRUURR"))

    def test_spiritual_blocks(self, oriented):
        text = analyzers.analyze_spiritual(oriented("URRUUU"))
        assert "positive phase" in text
        assert "blocks are dissolving" in text
        assert "dissolving" not in analyzers.analyze_spiritual(oriented("RRUUUU"))


class TestChakra:
    @pytest.mark.parametrize(
        "pattern, phrase",
        [
            ("UUUUURR", "well-balanced"),
            ("UUUURRR", "moderate balance"),
            ("UUURRRR", "need healing"),
        ],
    )
    def test_balance_thresholds(self, pattern, phrase, oriented):
        assert phrase in analyzers.analyze_chakra(oriented(pattern))

    def test_lower_vs_upper(self, oriented):
        assert "grounding and physical" in analyzers.analyze_chakra(oriented("UUURRRR"))
        assert "spiritual and intuitive" in analyzers.analyze_chakra(oriented("RRRUUUU"))

    def test_heart_is_not_counted_in_either_group(self, oriented):
        text = analyzers.analyze_chakra(oriented("RRRURRR"))
        assert "grounding and physical" not in text
        assert "spiritual and intuitive" not in text


def test_year_ahead_quarters(oriented):
    text = analyzers.analyze_year_ahead(oriented("U" + "UUR" + "URR" + "RRR" + "UUU"))
    assert "positive and growth-oriented" in text
    assert "**First Quarter:** A positive" in text
    assert "**Second Quarter:** A time for patience" in text
    assert "**Third Quarter:** A time for patience" in text
    assert "**Fourth Quarter:** A positive" in text


def test_venus_love(oriented):
    cards = oriented("URUUUUR")
    text = analyzers.analyze_venus_love(cards)
    assert "positive romantic vibrations" in text
    assert "self-compassion" in text
    assert f"({cards[2].card.name})" in text and f"({cards[3].card.name})" in text
    assert "patience and continued inner work" in text


class TestTreeOfLife:
    def test_mercy_dominates(self, oriented):
        text = analyzers.analyze_tree_of_life(oriented("RURURRURRR"))
        assert "Pillar of Mercy dominates" in text
        assert "alignment between your highest purpose" in text

    def test_balanced_pillars(self, oriented):
        text = analyzers.analyze_tree_of_life(oriented("UUUUUUUUUR"))
        assert "pillars are balanced" in text
        assert "bridge the gap" in text


class TestAstrologicalHouses:
    def test_tie_goes_to_fire(self, oriented):
        text = analyzers.analyze_astrological_houses(oriented("URRURRURRURR"))
        assert "Fire (Identity/Creativity/Philosophy) energy is strongest" in text
        assert "4 out of 4 angular houses" in text
        assert "strong momentum" in text

    def test_earth_strongest(self, oriented):
        text = analyzers.analyze_astrological_houses(oriented("RURRRRRRRRRR"))
        assert "Earth (Resources/Work/Career) energy is strongest" in text
        assert "stronger foundations" in text


class TestMandala:
    def test_balanced_opposites(self, oriented):
        text = analyzers.analyze_mandala(oriented("R" + "URURURUR"))
        assert "inner healing" in text
        assert "4 out of 8 directions" in text
        assert "good balance" in text
        assert "4 out of 4 opposite pairs" in text
        assert "excellent integration" in text

    def test_opposed_pairs(self, oriented):
        text = analyzers.analyze_mandala(oriented("U" + "UUUURRRR"))
        assert "0 out of 4 opposite pairs" in text
        assert "harmonize conflicting energies" in text


class TestPentagram:
    def test_full_harmony(self, oriented):
        text = analyzers.analyze_pentagram(oriented("UUUUU"))
        assert "perfect harmony" in text
        for sentence in analyzers._ELEMENT_FLOW:
            assert sentence in text

    def test_partial(self, oriented):
        text = analyzers.analyze_pentagram(oriented("RUURR"))
        assert "moderate balance" in text
        assert "strengthen your spiritual foundation" in text
        assert "Clear thinking" in text and "Passionate energy" in text
        assert "Practical foundations" not in text


class TestMirrorOfTruth:
    def test_all_clear(self, oriented):
        text = analyzers.analyze_mirror_of_truth(oriented("UUUU"))
        assert text.startswith("**Mirror of Truth - Four Beams of Light Analysis:**")
        assert "4 out of 4 lights" in text
        assert "complete truth" in text
        assert "synchronicity" in text

    def test_all_fog(self, oriented):
        text = analyzers.analyze_mirror_of_truth(oriented("RRRR"))
        assert "0 out of 4 lights" in text
        assert "fog" in text
