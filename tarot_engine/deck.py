# -*- coding: utf-8 -*-
"""
deck.py — Rider–Waite–Smith card catalog.

Builds the 78-card registry once at import (stable order; useful for tests and
reproducible seeds) and serves it through RWSCatalog, which implements the
CardCatalog contract used by the draw service.

Minor arcana content is composed from a rank theme and a suit domain; the
major arcana carry their own keywords and core meanings.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from .tarot_core import (
    CardDef,
    Element,
    InvalidParameterError,
    MeaningBundle,
    Suit,
    fisher_yates_shuffle,
)


def _slug(s: str) -> str:
    return (
        s.lower()
        .replace(" ", "_")
        .replace("-", "_")
        .replace("’", "")
        .replace("'", "")
    )


# =========================
# Card content
# =========================

# name, element, upright keywords, reversed keywords, upright core, reversed core
_MAJORS: List[Tuple[str, Element, Tuple[str, ...], Tuple[str, ...], str, str]] = [
    ("The Fool", "air",
     ("beginnings", "innocence", "spontaneity", "free spirit"),
     ("recklessness", "hesitation", "naivety", "risk-taking"),
     "a fresh start taken with an open heart and a leap of faith",
     "hesitation before a leap, or a leap taken without looking"),
    ("The Magician", "air",
     ("manifestation", "willpower", "skill", "resourcefulness"),
     ("manipulation", "untapped talent", "trickery", "poor planning"),
     "the skill and willpower to turn intention into reality",
     "talents left unused or power turned toward manipulation"),
    ("The High Priestess", "water",
     ("intuition", "mystery", "inner voice", "the subconscious"),
     ("secrets", "disconnection from intuition", "withdrawal", "silence"),
     "quiet intuition and knowledge that lies beneath the surface",
     "an inner voice that is being ignored or secrets kept too long"),
    ("The Empress", "earth",
     ("abundance", "nurturing", "fertility", "beauty"),
     ("dependence", "smothering", "creative block", "neglect"),
     "abundance, nurture and creative fertility",
     "creative blocks or care that has tipped into dependence"),
    ("The Emperor", "fire",
     ("authority", "structure", "stability", "leadership"),
     ("domination", "rigidity", "lack of discipline", "control"),
     "structure, leadership and steady authority",
     "rigid control or a lack of needed discipline"),
    ("The Hierophant", "earth",
     ("tradition", "conformity", "institutions", "teaching"),
     ("rebellion", "unconventional paths", "dogma", "restriction"),
     "tradition, shared values and wise teaching",
     "a challenge to convention or teaching that has become dogma"),
    ("The Lovers", "air",
     ("love", "harmony", "union", "alignment of values"),
     ("disharmony", "imbalance", "misalignment", "difficult choices"),
     "union, harmony and choices made from aligned values",
     "disharmony or a choice that pulls against your values"),
    ("The Chariot", "water",
     ("determination", "control", "victory", "momentum"),
     ("scattered direction", "lack of control", "aggression", "stalling"),
     "determined momentum that carries you to victory",
     "scattered direction or forces pulling against each other"),
    ("Strength", "fire",
     ("courage", "compassion", "inner strength", "patience"),
     ("self-doubt", "weakness", "insecurity", "raw emotion"),
     "gentle courage and the inner strength to tame what is wild",
     "self-doubt or strength that has not yet found its footing"),
    ("The Hermit", "earth",
     ("introspection", "solitude", "inner guidance", "wisdom"),
     ("isolation", "loneliness", "withdrawal", "avoidance"),
     "a season of introspection that lights the way from within",
     "withdrawal that has turned into isolation"),
    ("Wheel of Fortune", "fire",
     ("cycles", "destiny", "turning point", "luck"),
     ("bad luck", "resistance to change", "broken cycles", "setbacks"),
     "a turning point as life's cycles move in your favour",
     "resistance to change or a cycle that repeats until learned"),
    ("Justice", "air",
     ("fairness", "truth", "law", "cause and effect"),
     ("unfairness", "dishonesty", "unaccountability", "bias"),
     "fairness, truth and consequences that follow actions",
     "imbalance, bias or avoided accountability"),
    ("The Hanged Man", "water",
     ("surrender", "new perspective", "pause", "letting go"),
     ("stalling", "indecision", "resistance", "needless sacrifice"),
     "a pause that reveals a new perspective through surrender",
     "stalling, or a sacrifice that no longer serves"),
    ("Death", "water",
     ("endings", "transformation", "transition", "release"),
     ("resistance to change", "stagnation", "fear of endings", "decay"),
     "an ending that clears the ground for transformation",
     "clinging to what is already over"),
    ("Temperance", "fire",
     ("balance", "moderation", "patience", "purpose"),
     ("imbalance", "excess", "impatience", "discord"),
     "balance, moderation and patient blending of opposites",
     "excess or haste that upsets a delicate balance"),
    ("The Devil", "earth",
     ("attachment", "temptation", "materialism", "shadow self"),
     ("release", "breaking free", "detachment", "reclaiming power"),
     "attachments and temptations that quietly bind you",
     "chains loosening as you reclaim your power"),
    ("The Tower", "fire",
     ("sudden upheaval", "revelation", "disruption", "awakening"),
     ("averted disaster", "fear of change", "delayed upheaval", "inner collapse"),
     "sudden upheaval that tears down what was built on false ground",
     "an upheaval delayed, resisted or happening within"),
    ("The Star", "air",
     ("hope", "renewal", "inspiration", "serenity"),
     ("despair", "disconnection", "lack of faith", "discouragement"),
     "hope and quiet renewal after the storm",
     "discouragement or faith that needs rekindling"),
    ("The Moon", "water",
     ("illusion", "intuition", "uncertainty", "dreams"),
     ("clarity returning", "released fear", "confusion lifting", "truth revealed"),
     "illusion and uncertainty that ask you to trust your intuition",
     "confusion lifting as hidden truths come to light"),
    ("The Sun", "fire",
     ("joy", "success", "vitality", "positivity"),
     ("temporary sadness", "dimmed optimism", "delayed success", "overconfidence"),
     "joy, vitality and success in full light",
     "optimism dimmed for a while, or success delayed"),
    ("Judgement", "fire",
     ("rebirth", "inner calling", "reckoning", "absolution"),
     ("self-doubt", "ignoring the call", "harsh self-judgement", "stagnation"),
     "an awakening call to rise and begin again",
     "a call ignored or judgement turned harshly inward"),
    ("The World", "earth",
     ("completion", "integration", "accomplishment", "wholeness"),
     ("incompletion", "lack of closure", "shortcuts", "delays"),
     "completion, wholeness and a cycle fulfilled",
     "a cycle left without closure"),
]

_SUITS: List[Tuple[Suit, str, Element, str]] = [
    ("wands", "Wands", "fire", "creativity and ambition"),
    ("cups", "Cups", "water", "emotions and relationships"),
    ("swords", "Swords", "air", "thought and conflict"),
    ("pentacles", "Pentacles", "earth", "money and material security"),
]

# rank key, display name, number, upright keywords, reversed keywords, upright theme, reversed theme
_RANKS: List[Tuple[str, str, Optional[int], Tuple[str, ...], Tuple[str, ...], str, str]] = [
    ("ace", "Ace", 1, ("new beginning", "potential", "opportunity"),
     ("missed chance", "false start", "delay"),
     "a seed of new potential", "a false start or delayed potential"),
    ("2", "Two", 2, ("balance", "partnership", "choice"),
     ("imbalance", "indecision", "tension"),
     "balance and partnership", "indecision and strained balance"),
    ("3", "Three", 3, ("growth", "collaboration", "expansion"),
     ("setbacks", "miscommunication", "isolation"),
     "growth through collaboration", "setbacks in shared efforts"),
    ("4", "Four", 4, ("stability", "foundation", "rest"),
     ("restlessness", "stagnation", "insecurity"),
     "stability and a solid foundation", "stagnation or shaky footing"),
    ("5", "Five", 5, ("conflict", "change", "challenge"),
     ("recovery", "reconciliation", "release"),
     "conflict and necessary change", "recovery after conflict"),
    ("6", "Six", 6, ("harmony", "generosity", "progress"),
     ("imbalance", "debt", "nostalgia"),
     "harmony and generous exchange", "uneven give and take"),
    ("7", "Seven", 7, ("reflection", "perseverance", "assessment"),
     ("doubt", "impatience", "distraction"),
     "reflection and perseverance", "doubt and impatience"),
    ("8", "Eight", 8, ("movement", "mastery", "dedication"),
     ("stagnation", "restriction", "burnout"),
     "focused movement toward mastery", "restriction or burnout"),
    ("9", "Nine", 9, ("fulfilment", "resilience", "near completion"),
     ("anxiety", "dissatisfaction", "exhaustion"),
     "resilience near the goal", "anxiety close to the finish line"),
    ("10", "Ten", 10, ("completion", "culmination", "legacy"),
     ("burden", "overload", "collapse"),
     "the culmination of a cycle", "a burden carried too far"),
    ("page", "Page", None, ("curiosity", "messages", "study"),
     ("immaturity", "bad news", "distraction"),
     "a curious message or a student's eagerness", "immaturity or unwelcome news"),
    ("knight", "Knight", None, ("action", "pursuit", "adventure"),
     ("haste", "recklessness", "inertia"),
     "bold pursuit and action", "haste or stalled pursuit"),
    ("queen", "Queen", None, ("nurture", "maturity", "receptivity"),
     ("insecurity", "coldness", "dependence"),
     "mature, nurturing mastery", "insecurity or withheld care"),
    ("king", "King", None, ("authority", "leadership", "command"),
     ("tyranny", "rigidity", "misused power"),
     "confident leadership and command", "misused power or rigidity"),
]


def _meaning_bundle(core: str, reversed_: bool) -> MeaningBundle:
    lead = "Reversed, this card signals" if reversed_ else "This card speaks of"
    angle = "the reversal points to" if reversed_ else "this card points to"
    return MeaningBundle(
        general=f"{lead} {core}.",
        love=f"In love and relationships, {angle} {core} in how you connect with others.",
        career=f"In work and finances, {angle} {core} in your professional life.",
        health=f"For health and wellbeing, {angle} {core} in how you care for your body and energy.",
        spirituality=f"On the spiritual path, {angle} {core} as a lesson for your inner growth.",
    )


def _card(
    cid: str,
    name: str,
    *,
    arcana: str,
    suit: Optional[Suit],
    element: Element,
    number: Optional[int],
    rank: str,
    up_kw: Tuple[str, ...],
    rev_kw: Tuple[str, ...],
    up_core: str,
    rev_core: str,
) -> CardDef:
    return CardDef(
        id=cid,
        name=name,
        arcana=arcana,  # type: ignore[arg-type]
        suit=suit,
        element=element,
        number=number,
        rank=rank,
        keywords={"upright": up_kw, "reversed": rev_kw},
        meanings={
            "upright": _meaning_bundle(up_core, reversed_=False),
            "reversed": _meaning_bundle(rev_core, reversed_=True),
        },
    )


def _build_rws_registry() -> List[CardDef]:
    """Build the RWS 78-card registry (stable order; useful for tests/repro)."""
    registry: List[CardDef] = []
    for i, (name, element, up_kw, rev_kw, up_core, rev_core) in enumerate(_MAJORS):
        registry.append(_card(
            f"major_{i:02d}_{_slug(name)}", name,
            arcana="major", suit=None, element=element, number=i, rank=str(i),
            up_kw=up_kw, rev_kw=rev_kw, up_core=up_core, rev_core=rev_core,
        ))

    for suit_key, suit_name, element, domain in _SUITS:
        for rank_key, rank_name, number, up_kw, rev_kw, up_theme, rev_theme in _RANKS:
            registry.append(_card(
                f"minor_{suit_key}_{rank_key}", f"{rank_name} of {suit_name}",
                arcana="minor", suit=suit_key, element=element, number=number, rank=rank_key,
                up_kw=up_kw, rev_kw=rev_kw,
                up_core=f"{up_theme} in {domain}",
                rev_core=f"{rev_theme} in {domain}",
            ))

    assert len(registry) == 78, f"RWS registry size should be 78, got {len(registry)}"
    return registry


CARD_REGISTRY: Tuple[CardDef, ...] = tuple(_build_rws_registry())


# =========================
# Catalog
# =========================

class RWSCatalog:
    """In-memory card catalog over an ordered card registry."""

    def __init__(self, cards: Tuple[CardDef, ...] = CARD_REGISTRY):
        self._cards = cards
        self._by_name: Dict[str, CardDef] = {c.name.lower(): c for c in cards}

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> Tuple[CardDef, ...]:
        return self._cards

    def find_by_name(self, name: str) -> Optional[CardDef]:
        """Case-insensitive exact name match."""
        return self._by_name.get((name or "").strip().lower())

    def sample_distinct(self, n: int, rng: random.Random) -> List[CardDef]:
        """Uniformly sample n distinct cards (shuffle, then take from the top)."""
        if n > len(self._cards):
            raise InvalidParameterError(
                f"cannot sample {n} distinct cards from a deck of {len(self._cards)}"
            )
        return fisher_yates_shuffle(self._cards, rng)[:n]


default_catalog = RWSCatalog()
