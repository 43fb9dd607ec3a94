# -*- coding: utf-8 -*-
"""
synthesis.py — cross-card interpretation, independent of spread shape.

Every rule below looks at the whole set of drawn cards and returns one
sentence (or "" when it has nothing to say). The rules are joined in the
order they are declared in OVERALL_RULES / COMBINATION_RULES, so no rule can
see or alter another rule's output.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, List, Sequence, Tuple

from .tarot_core import ELEMENTS, DrawnCard

Cards = Sequence[DrawnCard]
Rule = Callable[[Cards], str]

OVERALL_HEADING = "**Overall Interpretation:**"
CLOSING = ("Trust your intuition as you reflect on these insights and how they apply "
           "to your specific situation.")


# =========================
# Arcana / orientation balance
# =========================

def arcana_balance(cards: Cards) -> str:
    if not cards:
        return ""
    major = sum(1 for c in cards if c.card.arcana == "major")
    if major > len(cards) / 2:
        return ("This reading is strongly influenced by the Major Arcana, indicating that significant "
                "spiritual forces, life lessons, and karmic influences are at work. The universe is "
                "guiding you through an important transformation.")
    if major == 0:
        return ("This reading contains only Minor Arcana cards, suggesting the situation is largely "
                "within your control and tied to everyday matters and practical concerns.")
    return ("The balance of Major and Minor Arcana suggests the need to combine spiritual guidance "
            "with practical action.")


def orientation_balance(cards: Cards) -> str:
    if not cards:
        return ""
    upright_pct = sum(1 for c in cards if c.is_upright) / len(cards) * 100
    if upright_pct >= 80:
        return ("The dominance of upright cards indicates positive energy, clear direction, and "
                "favorable circumstances. You are aligned with the natural flow of events.")
    if upright_pct >= 60:
        return ("Most cards are upright, suggesting generally positive energy, though some areas "
                "need attention or inner work.")
    if upright_pct >= 40:
        return ("A balance of upright and reversed cards indicates a complex situation with both "
                "opportunities and challenges.")
    if upright_pct >= 20:
        return ("Most cards are reversed, pointing to inner obstacles, delays, or the need for "
                "significant introspection and inner work.")
    return ("The dominance of reversed cards indicates a period of deep inner transformation, "
            "spiritual crisis, or major obstacles that calls for patience and self-reflection.")


# =========================
# Elements / suits
# =========================

_ELEMENT_SENTENCES: Dict[str, str] = {
    "fire": ("The dominance of Fire suggests a time that calls for action, creativity, and "
             "passionate pursuit of your goals."),
    "water": ("The prevalence of Water shows this situation is deeply emotional and intuitive, "
              "asking you to trust your feelings."),
    "air": ("The abundance of Air indicates this is primarily a mental matter, calling for clear "
            "thinking, communication, and a rational approach."),
    "earth": ("The strength of Earth shows this situation calls for practical action, patience, "
              "and attention to material concerns."),
}


def count_elements(cards: Cards) -> Dict[str, int]:
    counts = {element: 0 for element in ELEMENTS}
    for c in cards:
        if c.card.element:
            counts[c.card.element] += 1
    return counts


def elemental_balance(cards: Cards) -> str:
    counts = count_elements(cards)
    total = sum(counts.values())
    if total == 0:
        return ""

    parts: List[str] = []
    dominant, dominant_count = max(counts.items(), key=lambda kv: kv[1])
    if dominant_count > total / 2:
        parts.append(_ELEMENT_SENTENCES[dominant])

    missing = [element for element, n in counts.items() if n == 0]
    if missing:
        parts.append(f"The lack of {' and '.join(missing)} energy suggests you may need to cultivate "
                     "these qualities to find balance.")
    return " ".join(parts)


_SUIT_SENTENCES: Dict[str, str] = {
    "wands": ("Multiple Wands point to creative projects, career ambitions, and the need for "
              "decisive action."),
    "cups": ("Several Cups show this is fundamentally about emotions, relationships, and "
             "spiritual matters."),
    "swords": ("The prominence of Swords reveals mental challenges, conflict, and the need for "
               "clear communication."),
    "pentacles": ("Multiple Pentacles emphasize material concerns, financial matters, and the "
                  "need for practical, grounded action."),
}


def suit_emphasis(cards: Cards) -> str:
    counts = Counter(c.card.suit for c in cards if c.card.suit)
    if not counts:
        return ""
    suit, n = max(counts.items(), key=lambda kv: kv[1])
    if n <= 1:
        return ""
    return _SUIT_SENTENCES[suit]


# =========================
# Numbers
# =========================

_NUMBER_THEMES: Dict[int, str] = {
    1: "new beginnings and potential",
    2: "balance and partnership",
    3: "creativity and growth",
    4: "stability and foundation",
    5: "change and challenge",
    6: "harmony and responsibility",
    7: "spiritual development and introspection",
    8: "material mastery and achievement",
    9: "completion and wisdom",
    10: "fulfilment and new cycles",
}


def numerical_patterns(cards: Cards) -> str:
    numbers = [c.card.number for c in cards if c.card.number is not None]
    if len(numbers) < 2:
        return ""

    average = sum(numbers) / len(numbers)
    if average <= 3:
        stage = "Low numbers indicate the situation is in its early stages, full of potential and new energy."
    elif average <= 6:
        stage = ("Middle numbers suggest the situation is in a developmental phase that requires "
                 "steady progress and patience.")
    elif average <= 9:
        stage = ("Higher numbers indicate the situation is nearing completion or mastery and calls "
                 "for a final effort.")
    else:
        stage = "High numbers point to mastery, completion, or the involvement of important people."

    repeated = sorted(n for n, k in Counter(numbers).items() if k > 1 and n in _NUMBER_THEMES)
    if not repeated:
        return stage

    themes = ", ".join(_NUMBER_THEMES[n] for n in repeated)
    label = "number" if len(repeated) == 1 else "numbers"
    return (f"{stage} The repetition of the {label} {' and '.join(str(n) for n in repeated)} "
            f"emphasizes these themes: {themes}.")


# =========================
# Court cards / major arcana
# =========================

COURT_TOKENS: Tuple[str, ...] = ("Page", "Knight", "Queen", "King", "侍从", "骑士", "王后", "国王")


def court_cards(cards: Cards) -> str:
    n = sum(1 for c in cards if any(token in c.card.name for token in COURT_TOKENS))
    if n == 0:
        return ""
    if n == 1:
        return ("The presence of a court card suggests a specific person or personality aspect "
                "is significant in this situation.")
    return f"{n} court cards suggest multiple people or personality aspects are influencing this situation."


ARCHETYPE_PAIRS: Tuple[Tuple[str, str, str], ...] = (
    ("the fool", "the magician",
     "The Fool and The Magician together signal a powerful combination of new beginnings and "
     "the ability to manifest your desires."),
    ("the high priestess", "the hierophant",
     "The High Priestess and The Hierophant together indicate a balance between inner wisdom "
     "and traditional teachings."),
)


def major_arcana_archetypes(cards: Cards) -> str:
    majors = [c.card for c in cards if c.card.arcana == "major"]
    if not majors:
        return ""

    parts: List[str] = []
    numbers = sorted(card.number for card in majors if card.number is not None)
    if len(numbers) >= 2:
        span = numbers[-1] - numbers[0]
        if span > 10:
            parts.append("The wide span of Major Arcana cards suggests you are going through a sweeping "
                         "life transformation that touches many aspects of your spiritual journey.")
        elif span < 5:
            parts.append("The close grouping of Major Arcana cards suggests you are moving through a "
                         "concentrated stage of spiritual development.")

    names = {card.name.lower() for card in majors}
    for first, second, sentence in ARCHETYPE_PAIRS:
        if first in names and second in names:
            parts.append(sentence)
    return " ".join(parts)


# =========================
# Assembly
# =========================

COMBINATION_RULES: Tuple[Rule, ...] = (
    elemental_balance,
    suit_emphasis,
    numerical_patterns,
    court_cards,
    major_arcana_archetypes,
)

OVERALL_RULES: Tuple[Rule, ...] = (arcana_balance, orientation_balance) + COMBINATION_RULES


def _join(rules: Sequence[Rule], cards: Cards) -> str:
    return " ".join(fragment for fragment in (rule(cards) for rule in rules) if fragment)


def synthesize_combination(cards: Cards) -> str:
    """Elemental, suit, number, court and archetype insights plus the closing line."""
    body = _join(COMBINATION_RULES, cards)
    return f"{body}\n\n{CLOSING}" if body else CLOSING


def synthesize_overall(cards: Cards) -> str:
    """The full closing section of a reading's interpretation."""
    body = _join(OVERALL_RULES, cards)
    return f"{OVERALL_HEADING}\n\n{body}\n\n{CLOSING}"
