import pytest

from tarot_engine import synthesis
from tarot_engine.synthesis import CLOSING, OVERALL_HEADING, OVERALL_RULES


class TestArcanaAndOrientation:
    def test_arcana_balance(self, card):
        assert "strongly influenced" in synthesis.arcana_balance([card("The Fool"), card("The Magician")])
        assert "only Minor Arcana" in synthesis.arcana_balance([card("Ace of Cups")])
        assert "balance of Major and Minor" in synthesis.arcana_balance([card("The Fool"), card("Ace of Cups")])

    @pytest.mark.parametrize(
        "pattern, phrase",
        [
            ("UUUUR", "dominance of upright"),
            ("UUURR", "Most cards are upright"),
            ("UURRR", "balance of upright and reversed"),
            ("URRRR", "Most cards are reversed"),
            ("RRRRR", "dominance of reversed"),
        ],
    )
    def test_orientation_buckets(self, pattern, phrase, oriented):
        assert phrase in synthesis.orientation_balance(oriented(pattern))

    def test_empty_input(self):
        assert synthesis.arcana_balance([]) == ""
        assert synthesis.orientation_balance([]) == ""


class TestElementsAndSuits:
    def test_dominant_and_missing(self, card):
        text = synthesis.elemental_balance([card("Ace of Wands"), card("Two of Wands"), card("Ace of Cups")])
        assert "dominance of Fire" in text
        assert "The lack of air and earth energy" in text

    def test_all_elements_present(self, card):
        cards = [card("Ace of Wands"), card("Ace of Cups"), card("Ace of Swords"), card("Ace of Pentacles")]
        assert synthesis.elemental_balance(cards) == ""
        assert synthesis.suit_emphasis(cards) == ""

    def test_suit_emphasis(self, card):
        assert "Several Cups" in synthesis.suit_emphasis([card("Ace of Cups"), card("Two of Cups"), card("The Fool")])
        assert synthesis.suit_emphasis([card("The Fool"), card("The Magician")]) == ""


class TestNumbers:
    def test_average_of_five_is_middle(self, card):
        text = synthesis.numerical_patterns([card("Four of Wands"), card("Five of Cups"), card("Six of Swords")])
        assert text.startswith("Middle numbers")
        assert "repetition" not in text

    def test_average_of_three_is_low(self, card):
        assert synthesis.numerical_patterns([card("Two of Wands"), card("Four of Cups")]).startswith("Low numbers")

    def test_upper_buckets(self, card):
        assert synthesis.numerical_patterns([card("Seven of Cups"), card("Nine of Cups")]).startswith("Higher numbers")
        assert synthesis.numerical_patterns([card("Ten of Wands"), card("The Sun")]).startswith("High numbers")

    def test_repeated_numbers(self, card):
        cards = [card("Three of Wands"), card("Three of Cups"), card("Seven of Swords"), card("Seven of Pentacles")]
        assert synthesis.numerical_patterns(cards) == (
            "Middle numbers suggest the situation is in a developmental phase that requires steady progress "
            "and patience. The repetition of the numbers 3 and 7 emphasizes these themes: creativity and "
            "growth, spiritual development and introspection."
        )

    def test_needs_two_numbered_cards(self, card):
        assert synthesis.numerical_patterns([card("Ace of Cups"), card("Page of Wands")]) == ""


class TestCourtAndArchetypes:
    def test_court_cards(self, card):
        assert "a court card" in synthesis.court_cards([card("Page of Wands")])
        assert synthesis.court_cards([card("Queen of Cups"), card("King of Swords"), card("Ace of Cups")]).startswith(
            "2 court cards"
        )
        assert synthesis.court_cards([card("Ace of Cups")]) == ""

    def test_fool_and_magician(self, card):
        text = synthesis.major_arcana_archetypes([card("The Fool"), card("The Magician")])
        assert "close grouping" in text
        assert "The Fool and The Magician together" in text

    def test_priestess_and_hierophant(self, card):
        text = synthesis.major_arcana_archetypes([card("The High Priestess"), card("The Hierophant")])
        assert "inner wisdom and traditional teachings" in text

    def test_span(self, card):
        assert "wide span" in synthesis.major_arcana_archetypes([card("The Fool"), card("The World")])
        assert synthesis.major_arcana_archetypes([card("The Fool"), card("The Chariot")]) == ""
        assert synthesis.major_arcana_archetypes([card("The Fool")]) == ""


class TestAssembly:
    def test_overall_layout_and_order(self, card):
        cards = [card("The Fool"), card("The Magician"), card("Ace of Cups", "reversed")]
        text = synthesis.synthesize_overall(cards)
        assert text.startswith(OVERALL_HEADING + "\n\n")
        assert text.endswith("\n\n" + CLOSING)
        assert text.index("strongly influenced") < text.index("Most cards are upright")

    def test_rules_are_independent(self, card):
        cards = [card("Queen of Cups"), card("Three of Cups", "reversed"), card("The Star")]
        expected_body = " ".join(f for f in (rule(cards) for rule in OVERALL_RULES) if f)
        assert synthesis.synthesize_overall(cards) == f"{OVERALL_HEADING}\n\n{expected_body}\n\n{CLOSING}"

    def test_combination_of_nothing(self):
        assert synthesis.synthesize_combination([]) == CLOSING
