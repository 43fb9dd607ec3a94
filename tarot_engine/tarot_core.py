# -*- coding: utf-8 -*-
"""
tarot_core.py — Core Tarot types and mechanisms (cards / spreads / draw)

Responsibilities:
- Define the value types shared by the engine (Position / Spread / CardDef /
  DrawnCard / Reading) and the error hierarchy
- Provide reproducible randomness (seed can be int or str; str will be hashed)
- Provide unbiased shuffling (Fisher–Yates) and the Card Draw Service:
  sample N distinct cards and give each an independent orientation

Note:
- Randomness comes from random.Random. It is uniform and independent per
  call, but it is NOT a cryptographic source and must not be described as one.
- Card content lives in deck.py, spread definitions in spreads.py.
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Mapping, Optional, Protocol, Sequence, Tuple, Union, Literal


# =========================
# Types & Error classes
# =========================

class TarotCoreError(Exception):
    """Base class for tarot-core errors."""


class InvalidSpreadError(TarotCoreError):
    """Raised when a spread and its cards or positions do not fit together."""


class InvalidParameterError(TarotCoreError):
    """Raised when an input parameter is invalid."""


Orientation = Literal["upright", "reversed"]
Arcana = Literal["major", "minor"]
Suit = Literal["wands", "cups", "swords", "pentacles"]
Element = Literal["fire", "water", "air", "earth"]

ORIENTATIONS: Tuple[Orientation, Orientation] = ("upright", "reversed")
SUITS: Tuple[Suit, ...] = ("wands", "cups", "swords", "pentacles")
ELEMENTS: Tuple[Element, ...] = ("fire", "water", "air", "earth")

SeedLike = Optional[Union[int, str]]


@dataclass(frozen=True)
class Position:
    """A slot in a spread with a fixed semantic role."""
    name: str
    meaning: str


@dataclass(frozen=True)
class Spread:
    """Spread definition. positions are ordered and their order is significant."""
    id: str
    name: str
    description: str
    card_count: int
    positions: Tuple[Position, ...]

    def __post_init__(self) -> None:
        if len(self.positions) != self.card_count:
            raise InvalidSpreadError(
                f"Spread '{self.id}' declares {self.card_count} cards "
                f"but defines {len(self.positions)} positions"
            )


@dataclass(frozen=True)
class MeaningBundle:
    """Orientation-specific meanings, one text per life area."""
    general: str
    love: str
    career: str
    health: str
    spirituality: str


@dataclass(frozen=True)
class CardDef:
    """Card definition (owned by the catalog, read-only for the engine)."""
    id: str              # e.g., "major_00_the_fool", "minor_wands_ace"
    name: str            # e.g., "The Fool", "Ace of Wands"
    arcana: Arcana
    suit: Optional[Suit]
    element: Optional[Element]
    number: Optional[int]   # major: 0..21; pips: 1..10; court cards: None
    rank: str               # major: "0".."21"; minor: "ace","2",...,"king"
    keywords: Mapping[str, Tuple[str, ...]] = field(hash=False, compare=False)
    meanings: Mapping[str, MeaningBundle] = field(hash=False, compare=False)

    def keywords_for(self, orientation: Orientation) -> Tuple[str, ...]:
        return self.keywords[orientation]

    def meanings_for(self, orientation: Orientation) -> MeaningBundle:
        return self.meanings[orientation]


@dataclass(frozen=True)
class DrawnCard:
    """A card bound to a spread position. The card itself is a shared reference."""
    card: CardDef
    orientation: Orientation
    position: str = ""
    position_meaning: str = ""

    @property
    def is_upright(self) -> bool:
        return self.orientation == "upright"


@dataclass(frozen=True)
class Reading:
    """The complete record of a single draw."""
    id: str
    spread_type: str
    question: str
    cards: Tuple[DrawnCard, ...]
    interpretation: str
    timestamp: datetime
    session_id: Optional[str] = None


class CardCatalog(Protocol):
    """Contract the engine expects from the card content database."""

    def __len__(self) -> int: ...

    def sample_distinct(self, n: int, rng: random.Random) -> List[CardDef]: ...

    def find_by_name(self, name: str) -> Optional[CardDef]: ...


# =========================
# RNG / Shuffling
# =========================

def _norm_seed(seed: SeedLike) -> Optional[int]:
    """
    Normalize seed to int. If str, hash with sha256 and take the first 8 bytes
    as an unsigned 64-bit integer. None stays None.
    """
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise InvalidParameterError("seed must be int | str | None")
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        h = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(h[:8], byteorder="big", signed=False)
    raise InvalidParameterError("seed must be int | str | None")


def make_rng(seed: SeedLike = None) -> random.Random:
    """Build a generator; a None seed gives a fresh, OS-seeded stream."""
    return random.Random(_norm_seed(seed))


def fisher_yates_shuffle(items: Sequence[CardDef], rng: random.Random) -> List[CardDef]:
    """
    Fisher–Yates (Knuth) shuffle.
    Returns a new list and does not mutate the input.
    """
    arr = list(items)
    n = len(arr)
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)  # inclusive
        arr[i], arr[j] = arr[j], arr[i]
    return arr


# =========================
# Draw
# =========================

def draw_orientation(rng: random.Random) -> Orientation:
    """Unbiased Bernoulli(0.5): one uniform value in [0, 1) per card."""
    return "upright" if rng.random() < 0.5 else "reversed"


def draw_cards(
    count: int,
    catalog: CardCatalog,
    rng: Optional[random.Random] = None,
) -> List[Tuple[CardDef, Orientation]]:
    """
    Card Draw Service: sample `count` distinct cards and orient each one.

    Args:
        count: number of cards to draw (1 <= count <= catalog size)
        catalog: card source providing sample_distinct()
        rng: generator to use; a fresh unseeded one when omitted

    Returns:
        Ordered list of (card, orientation) pairs, in draw order.

    Raises:
        InvalidParameterError: count is not a positive int or exceeds the deck.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidParameterError("count must be a positive integer")
    if count > len(catalog):
        raise InvalidParameterError(
            f"count cannot exceed deck size ({len(catalog)}); got {count}"
        )

    rng = rng or make_rng()
    cards = catalog.sample_distinct(count, rng)
    return [(card, draw_orientation(rng)) for card in cards]
