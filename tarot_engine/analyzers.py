# -*- coding: utf-8 -*-
"""
analyzers.py — spread-shape analysis.

Each analyzer is a pure function of the drawn cards of one spread shape. It
reads cards at fixed indices, compares orientations and counts, and renders a
short paragraph. An analyzer given the wrong number of cards returns "" so the
reading pipeline can call it without knowing the spread's size.

Dispatch is explicit: built-in spreads map by id, custom spreads map by a
declared alias table over their name. Spreads that map to nothing (single
card, horseshoe, decision making, shadow work, most custom spreads) get no
structural paragraph.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .tarot_core import DrawnCard

logger = logging.getLogger(__name__)

Cards = Sequence[DrawnCard]


class AnalyzerKind(enum.Enum):
    THREE_CARD = "three_card"
    CELTIC_CROSS = "celtic_cross"
    RELATIONSHIP = "relationship"
    CAREER = "career"
    SPIRITUAL = "spiritual"
    CHAKRA = "chakra"
    YEAR_AHEAD = "year_ahead"
    VENUS_LOVE = "venus_love"
    TREE_OF_LIFE = "tree_of_life"
    ASTROLOGICAL_HOUSES = "astrological_houses"
    MANDALA = "mandala"
    PENTAGRAM = "pentagram"
    MIRROR_OF_TRUTH = "mirror_of_truth"


# =========================
# Helpers
# =========================

def _paragraph(title: str, parts: List[str]) -> str:
    return f"**{title}:**\n\n" + " ".join(parts) + "\n\n"


def _upright_count(cards: Cards) -> int:
    return sum(1 for c in cards if c.is_upright)


def cards_have_similar_energy(a: DrawnCard, b: DrawnCard) -> bool:
    """Same orientation, and either the same suit or the same arcana."""
    if a.orientation != b.orientation:
        return False
    if a.card.suit and b.card.suit and a.card.suit == b.card.suit:
        return True
    return a.card.arcana == b.card.arcana


# =========================
# Analyzers
# =========================

def analyze_celtic_cross(cards: Cards) -> str:
    if len(cards) != 10:
        return ""

    near_future = cards[3]
    above = cards[4]     # conscious goal
    below = cards[5]     # subconscious drives
    outcome = cards[9]

    parts = [
        f"**Conscious vs Subconscious:** The {above.card.name} above represents your conscious goals, "
        f"while the {below.card.name} below reveals your subconscious drives."
    ]
    if above.orientation == below.orientation:
        parts.append("These are aligned, suggesting harmony between your conscious desires "
                     "and unconscious motivations.")
    else:
        parts.append("The different orientations suggest some tension between what you consciously "
                     "want and what unconsciously drives you.")

    if cards_have_similar_energy(above, outcome):
        parts.append(f"**Goal vs Outcome:** Your conscious goal ({above.card.name}) aligns well with "
                     "the likely outcome, suggesting you're on the right path.")
    else:
        parts.append(f"**Goal vs Outcome:** Your conscious goal ({above.card.name}) differs from the "
                     "projected outcome, indicating you may need to adjust your approach.")

    if near_future.is_upright:
        parts.append(f"**Near Future Impact:** The {near_future.card.name} in your near future will "
                     "support your journey toward the final outcome.")
    else:
        parts.append(f"**Near Future Impact:** The {near_future.card.name} in your near future will "
                     "present challenges that need to be navigated carefully to reach your desired outcome.")

    return _paragraph("Celtic Cross Analysis", parts)


def analyze_three_card(cards: Cards) -> str:
    if len(cards) != 3:
        return ""

    past, present, future = cards
    flow = (past.is_upright, present.is_upright, future.is_upright)
    journey = (f"**The Journey:** From {past.card.name} in the past, through {present.card.name} "
               f"in the present, to {future.card.name} in the future,")

    if flow == (False, True, True):
        journey += " shows a clear progression from difficulty to resolution and success."
    elif flow == (True, False, True):
        journey += " indicates a temporary setback that will resolve positively."
    elif flow == (True, True, True):
        journey += " reveals a consistently positive trajectory with continued growth."
    else:
        journey += " shows a complex journey requiring careful attention to the lessons each phase offers."

    return _paragraph("Three Card Flow Analysis", [journey])


def analyze_relationship(cards: Cards) -> str:
    if len(cards) != 7:
        return ""

    you, partner, relationship, unites = cards[0], cards[1], cards[2], cards[3]
    parts = ["**Compatibility Assessment:**"]
    if you.orientation == partner.orientation:
        parts.append("You and your partner are currently in similar emotional states, "
                     "which can create harmony.")
    else:
        parts.append("You and your partner are in different emotional phases, "
                     "which requires understanding and patience.")

    if _upright_count([you, partner, relationship, unites]) >= 3:
        parts.append("The overall energy of the relationship is positive and supportive.")
    else:
        parts.append("The relationship may need attention and conscious effort to improve dynamics.")

    return _paragraph("Relationship Dynamics Analysis", parts)


def analyze_career(cards: Cards) -> str:
    if len(cards) != 6:
        return ""

    skills, challenges, opportunities = cards[1], cards[2], cards[3]
    parts = ["**Career Readiness:**"]
    if skills.is_upright and opportunities.is_upright:
        parts.append("You have strong skills and good opportunities ahead. "
                     "This is a favorable time for career advancement.")
    elif not challenges.is_upright:
        parts.append("Previous obstacles are clearing, making way for new professional growth.")
    else:
        parts.append("Focus on developing your skills and overcoming current challenges "
                     "before pursuing new opportunities.")

    return _paragraph("Career Path Analysis", parts)


def analyze_spiritual(cards: Cards) -> str:
    if len(cards) != 6:
        return ""

    state, blocks = cards[0], cards[2]
    parts = ["**Spiritual Progress:**"]
    if state.is_upright:
        parts.append("You are in a positive phase of spiritual growth and awareness.")
    else:
        parts.append("You may be experiencing spiritual challenges or confusion that require inner work.")
    if not blocks.is_upright:
        parts.append("Previous spiritual blocks are dissolving, allowing for greater growth.")

    return _paragraph("Spiritual Development Analysis", parts)


def analyze_chakra(cards: Cards) -> str:
    if len(cards) != 7:
        return ""

    balance = _upright_count(cards) / len(cards)
    parts = ["**Overall Energy Balance:**"]
    if balance >= 0.70:
        parts.append("Your chakras are well-balanced with strong energy flow.")
    elif balance >= 0.50:
        parts.append("Your energy centers have moderate balance with some areas needing attention.")
    else:
        parts.append("Several chakras need healing and rebalancing for optimal energy flow.")

    lower = _upright_count(cards[0:3])
    upper = _upright_count(cards[4:7])
    if lower > upper:
        parts.append("Your grounding and physical energy centers are stronger than your spiritual centers.")
    elif upper > lower:
        parts.append("Your spiritual and intuitive centers are more active than your grounding centers.")

    return _paragraph("Chakra Energy Analysis", parts)


_QUARTER_NAMES = ("First Quarter", "Second Quarter", "Third Quarter", "Fourth Quarter")


def analyze_year_ahead(cards: Cards) -> str:
    if len(cards) != 13:
        return ""

    theme = cards[0]
    months = cards[1:]
    parts = [f"**Year Theme:** The {theme.card.name} sets the tone for your year,"]
    if theme.is_upright:
        parts.append("indicating a positive and growth-oriented period ahead.")
    else:
        parts.append("suggesting a year of inner work and overcoming challenges.")

    for index, name in enumerate(_QUARTER_NAMES):
        quarter = months[index * 3:index * 3 + 3]
        if _upright_count(quarter) >= 2:
            parts.append(f"**{name}:** A positive and productive period.")
        else:
            parts.append(f"**{name}:** A time for patience and inner work.")

    return _paragraph("Year Ahead Overview", parts)


def analyze_venus_love(cards: Cards) -> str:
    if len(cards) != 7:
        return ""

    current, self_love, attraction, blocks, _enhancement, _desires, future = cards
    parts = [f"**Love Energy Flow:** Your current relationship energy ({current.card.name})"]
    if current.is_upright:
        parts.append("shows positive romantic vibrations and openness to love.")
    else:
        parts.append("suggests some healing or inner work is needed before fully opening to love.")

    parts.append(f"Your self-love foundation ({self_love.card.name})")
    if self_love.is_upright:
        parts.append("indicates healthy self-worth that attracts genuine love.")
    else:
        parts.append("reveals areas where self-compassion and self-acceptance need attention.")

    parts.append(f"What attracts love to you ({attraction.card.name}) works in harmony with "
                 f"overcoming blocks ({blocks.card.name}) to create a path forward.")

    parts.append(f"The future potential ({future.card.name})")
    if future.is_upright:
        parts.append("promises beautiful developments in your love life.")
    else:
        parts.append("suggests patience and continued inner work will lead to love.")

    return _paragraph("Venus Love Energy Analysis", parts)


def analyze_tree_of_life(cards: Cards) -> str:
    if len(cards) != 10:
        return ""

    kether, chokmah, binah, chesed, geburah, _tiphareth, netzach, hod, _yesod, malkuth = cards
    severity = _upright_count([binah, geburah, hod])
    mercy = _upright_count([chokmah, chesed, netzach])

    parts = ["**Pillar Balance:**"]
    if mercy > severity:
        parts.append("The Pillar of Mercy dominates, indicating expansion, growth, and positive energy.")
    elif severity > mercy:
        parts.append("The Pillar of Severity is prominent, suggesting discipline, boundaries, "
                     "and necessary restrictions.")
    else:
        parts.append("The pillars are balanced, showing harmony between expansion and contraction.")

    parts.append(f"**Divine Flow:** From Kether ({kether.card.name}) to Malkuth ({malkuth.card.name}),")
    if kether.orientation == malkuth.orientation:
        parts.append("there's alignment between your highest purpose and material manifestation.")
    else:
        parts.append("there's a need to bridge the gap between spiritual ideals and earthly reality.")

    return _paragraph("Tree of Life Spiritual Analysis", parts)


# houses grouped by the element of their natural sign (0-based indices)
_HOUSE_ELEMENTS: Tuple[Tuple[str, Tuple[int, int, int]], ...] = (
    ("Fire (Identity/Creativity/Philosophy)", (0, 4, 8)),
    ("Earth (Resources/Work/Career)", (1, 5, 9)),
    ("Air (Communication/Partnerships/Community)", (2, 6, 10)),
    ("Water (Home/Transformation/Spirituality)", (3, 7, 11)),
)
_ANGULAR_HOUSES = (0, 3, 6, 9)


def analyze_astrological_houses(cards: Cards) -> str:
    if len(cards) != 12:
        return ""

    counts = [(name, _upright_count([cards[i] for i in idx])) for name, idx in _HOUSE_ELEMENTS]
    strongest = counts[0]
    for entry in counts[1:]:
        if entry[1] > strongest[1]:
            strongest = entry

    parts = [f"**Elemental Balance:** {strongest[0]} energy is strongest in your chart, "
             "indicating focus in these life areas."]

    angular = _upright_count([cards[i] for i in _ANGULAR_HOUSES])
    parts.append(f"**Life Direction:** With {angular} out of 4 angular houses upright,")
    if angular >= 3:
        parts.append("you have strong momentum and clear direction in major life areas.")
    elif angular >= 2:
        parts.append("you have moderate stability with some areas needing attention.")
    else:
        parts.append("focus on building stronger foundations in key life areas.")

    return _paragraph("Astrological Houses Analysis", parts)


# north/south, east/west, northeast/southwest, southeast/northwest
_MANDALA_OPPOSITES = ((1, 5), (3, 7), (2, 6), (4, 8))


def analyze_mandala(cards: Cards) -> str:
    if len(cards) != 9:
        return ""

    center = cards[0]
    parts = [f"**Core Integration:** Your center ({center.card.name})"]
    if center.is_upright:
        parts.append("shows a strong, balanced core that can integrate the surrounding energies.")
    else:
        parts.append("suggests the need for inner healing before achieving wholeness.")

    directions = _upright_count(cards[1:])
    parts.append(f"**Directional Balance:** With {directions} out of 8 directions upright,")
    if directions >= 6:
        parts.append("your life energies are well-balanced and flowing harmoniously.")
    elif directions >= 4:
        parts.append("you have good balance with some areas needing attention.")
    else:
        parts.append("focus on healing and balancing multiple life areas.")

    balanced = sum(1 for a, b in _MANDALA_OPPOSITES if cards[a].orientation == cards[b].orientation)
    parts.append(f"**Polarity Integration:** {balanced} out of 4 opposite pairs are balanced,")
    if balanced >= 3:
        parts.append("showing excellent integration of opposing forces.")
    else:
        parts.append("indicating opportunities to harmonize conflicting energies.")

    return _paragraph("Mandala Wholeness Analysis", parts)


_ELEMENT_FLOW = (
    "Clear thinking and communication support your goals.",
    "Passionate energy drives your actions.",
    "Practical foundations support manifestation.",
    "Emotional wisdom guides your intuition.",
)


def analyze_pentagram(cards: Cards) -> str:
    if len(cards) != 5:
        return ""

    spirit = cards[0]
    elements = cards[1:]  # air, fire, earth, water
    upright = _upright_count(elements)

    parts = [f"**Elemental Harmony:** With {upright} out of 4 elements upright,"]
    if upright == 4:
        parts.append("all elements are in perfect harmony, creating powerful manifestation energy.")
    elif upright >= 3:
        parts.append("strong elemental balance with minor adjustments needed.")
    elif upright >= 2:
        parts.append("moderate balance requiring attention to weaker elements.")
    else:
        parts.append("significant elemental imbalance requiring healing and rebalancing.")

    parts.append(f"**Divine Connection:** Spirit ({spirit.card.name})")
    if spirit.is_upright:
        parts.append("shows strong divine connection guiding your elemental balance.")
    else:
        parts.append("suggests the need to strengthen your spiritual foundation.")

    parts.append("**Elemental Flow:**")
    parts.extend(text for card, text in zip(elements, _ELEMENT_FLOW) if card.is_upright)

    return _paragraph("Pentagram Elemental Analysis", parts)


_MIRROR_LIGHTS = (
    ("First Light - Illuminate Yourself",
     "Your current emotional state and inner filters show:",
     "Your perception of the situation is relatively clear, your emotional state is stable, "
     "and you can view the problem objectively.",
     "Your perspective may be influenced by strong emotions, anxiety, or expectations, "
     "requiring inner calm to see the truth clearly."),
    ("Second Light - Explore Their Heart",
     "Their true intentions and inner state indicate:",
     "Their motivations are relatively positive and sincere, with good intentions "
     "or at least neutral intent behind their actions.",
     "They may have complex inner states, their true intentions might not align with "
     "surface behavior, or they themselves are confused."),
    ("Third Light - Restore Original Truth",
     "Stripping away all subjective emotions, the truth is:",
     "The situation itself is relatively simple and clear, you and the other person may have "
     "over-interpreted it. The facts are more direct than imagined.",
     "The situation does have complexity and hidden layers, requiring more time and "
     "information to fully understand."),
    ("Fourth Light - Guide Future Direction",
     "Based on understanding the truth, you should:",
     "Take positive and proactive action, now is a good time to clarify misunderstandings, "
     "improve relationships, or make decisions.",
     "Maintain patience and observation, don't rush into action, let time and more "
     "information reveal the best path forward."),
)

_MIRROR_CLARITY = {
    4: "all dimensions are clear, this is a moment of complete truth where decisive action can be taken.",
    3: "most of the truth has been revealed, requiring only patience and understanding in one dimension.",
    2: "truth is gradually emerging, requiring balance of information from different dimensions "
       "to make judgments.",
    1: "currently only one dimension is relatively clear, more time is needed for other truths to surface.",
    0: "all dimensions are still in fog, this is a period requiring great patience and inner calm.",
}


def analyze_mirror_of_truth(cards: Cards) -> str:
    if len(cards) != 4:
        return ""

    out = "**Mirror of Truth - Four Beams of Light Analysis:**\n\n"
    for card, (title, lead, upright, reversed_) in zip(cards, _MIRROR_LIGHTS):
        out += f"**{title}:** {card.card.name} ({card.orientation})\n"
        out += f"{lead} {upright if card.is_upright else reversed_}\n\n"

    perspective, intention, truth, guidance = cards
    out += "**Comprehensive Insights from Four Lights:**\n"
    if perspective.orientation == intention.orientation:
        out += ("Your perception and their intention are in similar energy states, "
                "indicating some synchronicity between you. ")
    else:
        out += ("Your perception and their intention have energy differences, "
                "which may be the source of misunderstanding. ")
    if truth.orientation == guidance.orientation:
        out += "The nature of the facts aligns with future guidance, indicating you can trust this direction."
    else:
        out += "The complexity of the facts requires flexibility and openness in your actions."

    upright = _upright_count(cards)
    out += f"\n\n**Clarity of Truth:** {upright} out of 4 lights shine clearly, {_MIRROR_CLARITY[upright]}\n\n"
    return out


# =========================
# Dispatch
# =========================

ANALYZERS: Mapping[AnalyzerKind, Callable[[Cards], str]] = {
    AnalyzerKind.THREE_CARD: analyze_three_card,
    AnalyzerKind.CELTIC_CROSS: analyze_celtic_cross,
    AnalyzerKind.RELATIONSHIP: analyze_relationship,
    AnalyzerKind.CAREER: analyze_career,
    AnalyzerKind.SPIRITUAL: analyze_spiritual,
    AnalyzerKind.CHAKRA: analyze_chakra,
    AnalyzerKind.YEAR_AHEAD: analyze_year_ahead,
    AnalyzerKind.VENUS_LOVE: analyze_venus_love,
    AnalyzerKind.TREE_OF_LIFE: analyze_tree_of_life,
    AnalyzerKind.ASTROLOGICAL_HOUSES: analyze_astrological_houses,
    AnalyzerKind.MANDALA: analyze_mandala,
    AnalyzerKind.PENTAGRAM: analyze_pentagram,
    AnalyzerKind.MIRROR_OF_TRUTH: analyze_mirror_of_truth,
}

# no entry: single_card, horseshoe, decision_making, shadow_work
SPREAD_ANALYZERS: Mapping[str, AnalyzerKind] = {
    "three_card": AnalyzerKind.THREE_CARD,
    "celtic_cross": AnalyzerKind.CELTIC_CROSS,
    "relationship_cross": AnalyzerKind.RELATIONSHIP,
    "career_path": AnalyzerKind.CAREER,
    "spiritual_guidance": AnalyzerKind.SPIRITUAL,
    "chakra_alignment": AnalyzerKind.CHAKRA,
    "year_ahead": AnalyzerKind.YEAR_AHEAD,
    "venus_love": AnalyzerKind.VENUS_LOVE,
    "tree_of_life": AnalyzerKind.TREE_OF_LIFE,
    "astrological_houses": AnalyzerKind.ASTROLOGICAL_HOUSES,
    "mandala": AnalyzerKind.MANDALA,
    "pentagram": AnalyzerKind.PENTAGRAM,
    "mirror_of_truth": AnalyzerKind.MIRROR_OF_TRUTH,
}

# Custom spread names are matched against these aliases, first hit wins.
CUSTOM_NAME_ALIASES: Tuple[Tuple[AnalyzerKind, Tuple[str, ...]], ...] = (
    (AnalyzerKind.CELTIC_CROSS, ("celtic cross", "凯尔特十字")),
    (AnalyzerKind.THREE_CARD, ("three card", "三张牌")),
    (AnalyzerKind.RELATIONSHIP, ("relationship", "关系")),
    (AnalyzerKind.CAREER, ("career", "职业", "事业")),
    (AnalyzerKind.SPIRITUAL, ("spiritual", "灵性")),
    (AnalyzerKind.CHAKRA, ("chakra", "脉轮")),
    (AnalyzerKind.YEAR_AHEAD, ("year ahead", "年度展望")),
    (AnalyzerKind.VENUS_LOVE, ("venus", "love", "金星", "爱情")),
    (AnalyzerKind.TREE_OF_LIFE, ("tree of life", "生命之树")),
    (AnalyzerKind.ASTROLOGICAL_HOUSES, ("astrological", "占星")),
    (AnalyzerKind.MANDALA, ("mandala", "曼陀罗")),
    (AnalyzerKind.PENTAGRAM, ("pentagram", "五芒星")),
    (AnalyzerKind.MIRROR_OF_TRUTH, ("mirror of truth", "真相之镜")),
)


def analyzer_for_spread(spread_id: str) -> Optional[AnalyzerKind]:
    """Analyzer kind of a built-in spread, or None."""
    return SPREAD_ANALYZERS.get(spread_id)


def analyzer_for_custom_name(spread_name: str) -> Optional[AnalyzerKind]:
    """Analyzer kind for a user-named spread, resolved through CUSTOM_NAME_ALIASES."""
    lowered = (spread_name or "").lower()
    for kind, aliases in CUSTOM_NAME_ALIASES:
        if any(alias in lowered for alias in aliases):
            return kind
    return None


def run_structural_analysis(kind: Optional[AnalyzerKind], cards: Cards) -> str:
    """Run the analyzer for `kind`; "" when there is none or the size does not fit."""
    if kind is None:
        return ""
    text = ANALYZERS[kind](cards)
    if not text:
        logger.debug("Analyzer %s skipped: %d cards do not fit its shape", kind.value, len(cards))
    return text

