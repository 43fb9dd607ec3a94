"""
logic.py — Orchestration layer that ties the engine pieces to UI/API needs.

Responsibilities:
- Provide the high-level entry points `perform_reading(...)` and
  `perform_custom_reading(...)` for the UI/API.
- Draw via tarot_core, bind cards to positions, build the interpretation
  (meaning selector + structural analyzer + global synthesis), stamp the
  Reading and hand it to the session store.
- Return plain Markdown text. User-facing validation failures come back as
  text as well; nothing here raises for bad caller input.

Notes:
- Card content comes from deck.default_catalog and history goes to
  sessions.default_session_store unless the caller passes its own.
- Appending to a session is fire-and-forget: a failing store is logged and
  never changes the returned text.
"""

from __future__ import annotations

import logging
import random
import re
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from . import analyzers, synthesis
from .config import DEFAULT_SEED
from .deck import default_catalog
from .formatter import format_card_list, format_reading, format_spread_list
from .meanings import select_meaning
from .sessions import SessionStore, default_session_store
from .spreads import get_spread, is_valid_spread_type, list_spreads
from .tarot_core import (
    ORIENTATIONS,
    CardCatalog,
    CardDef,
    DrawnCard,
    InvalidSpreadError,
    Orientation,
    Position,
    Reading,
    SeedLike,
    Spread,
    draw_cards,
    make_rng,
)

logger = logging.getLogger(__name__)

MAX_CUSTOM_POSITIONS = 15

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


# -----------------------------------------------------------------------------
# Identity helpers
# -----------------------------------------------------------------------------

def _base36(n: int) -> str:
    if n == 0:
        return "0"
    digits: List[str] = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_BASE36[r])
    return "".join(reversed(digits))


def generate_reading_id(rng: Optional[random.Random] = None, now: Optional[datetime] = None) -> str:
    """`reading_<epoch millis>_<base36 of a uniform int in [0, 1e9)>`."""
    rng = rng or make_rng()
    now = now or datetime.now()
    millis = int(now.timestamp() * 1000)
    return f"reading_{millis}_{_base36(rng.randrange(1_000_000_000))}"


def custom_spread_type(spread_name: str) -> str:
    """Spread-type tag for a user-defined spread, e.g. "My Spread" -> "custom_my_spread"."""
    return "custom_" + re.sub(r"\s+", "_", spread_name.lower())


# -----------------------------------------------------------------------------
# Interpretation & assembly
# -----------------------------------------------------------------------------

def build_interpretation(
    cards: Sequence[DrawnCard],
    question: str,
    spread_name: str,
    analyzer: Optional[analyzers.AnalyzerKind] = None,
) -> str:
    """
    Interpretation body for a set of positioned cards.

    Layout: an opening line quoting the question, one paragraph per card in
    position order, the structural paragraph for `analyzer` (if any), then the
    overall synthesis. Pure: identical input gives identical text.
    """
    parts: List[str] = [f'This {spread_name} reading answers your question: "{question}"\n\n']
    for dc in cards:
        position = dc.position or "General"
        meaning = select_meaning(dc.card.meanings_for(dc.orientation), position, question)
        parts.append(f"**{dc.position}**: {dc.card.name} ({dc.orientation})\n{meaning}\n\n")
    parts.append(analyzers.run_structural_analysis(analyzer, cards))
    parts.append(synthesis.synthesize_overall(cards))
    return "".join(parts)


def _record_in_session(store: SessionStore, session_id: str, reading: Reading) -> None:
    try:
        store.append_reading(session_id, reading)
    except Exception:
        logger.warning("Could not append reading %s to session %s", reading.id, session_id, exc_info=True)


def assemble_reading(
    spread: Spread,
    drawn: Sequence[Tuple[CardDef, Orientation]],
    question: str,
    session_id: Optional[str] = None,
    *,
    analyzer: Optional[analyzers.AnalyzerKind] = None,
    store: Optional[SessionStore] = None,
    now: Optional[datetime] = None,
) -> Reading:
    """
    Bind drawn cards to the spread's positions (by index) and build the Reading.

    The id suffix comes from its own unseeded generator, so seeded draws still
    get distinct ids.

    Raises:
        InvalidSpreadError: the number of drawn cards differs from spread.card_count.
    """
    if len(drawn) != spread.card_count:
        raise InvalidSpreadError(
            f"Spread '{spread.id}' needs {spread.card_count} cards, got {len(drawn)}"
        )

    cards = tuple(
        DrawnCard(card=card, orientation=orientation, position=pos.name, position_meaning=pos.meaning)
        for (card, orientation), pos in zip(drawn, spread.positions)
    )
    now = now or datetime.now()
    reading = Reading(
        id=generate_reading_id(make_rng(), now),
        spread_type=spread.id,
        question=question,
        cards=cards,
        interpretation=build_interpretation(cards, question, spread.name, analyzer),
        timestamp=now,
        session_id=session_id,
    )

    if session_id:
        _record_in_session(store or default_session_store, session_id, reading)
    return reading


def _draw_and_assemble(
    spread: Spread,
    question: str,
    session_id: Optional[str],
    analyzer: Optional[analyzers.AnalyzerKind],
    seed: SeedLike,
    catalog: CardCatalog,
    store: Optional[SessionStore],
) -> Reading:
    rng = make_rng(seed if seed is not None else DEFAULT_SEED)
    drawn = draw_cards(spread.card_count, catalog, rng)
    reading = assemble_reading(spread, drawn, question, session_id, analyzer=analyzer, store=store)
    logger.info(
        "Reading %s: spread=%s cards=%d session=%s",
        reading.id, reading.spread_type, len(reading.cards), session_id or "-",
    )
    return reading


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def perform_reading(
    spread_type: str,
    question: str = "",
    session_id: Optional[str] = None,
    *,
    seed: SeedLike = None,
    catalog: CardCatalog = default_catalog,
    store: Optional[SessionStore] = None,
) -> str:
    """
    Perform a reading with one of the built-in spreads.

    Args:
        spread_type: Spread id (e.g., "single_card", "three_card", "celtic_cross").
        question: The querent's question (may be empty).
        session_id: When given, the reading is appended to that session.
        seed: Reproducibility seed (int or str); falls back to TAROT_SEED.
        catalog: Card source (defaults to the 78-card Rider-Waite-Smith deck).
        store: Session store (defaults to the process-wide in-memory one).

    Returns:
        The formatted reading, or an error text for an unknown spread id.
    """
    if not is_valid_spread_type(spread_type):
        logger.warning("Rejected unknown spread type %r", spread_type)
        return f"Invalid spread type: {spread_type}. Use list_available_spreads to see valid options."
    spread = get_spread(spread_type)

    reading = _draw_and_assemble(
        spread, question, session_id, analyzers.analyzer_for_spread(spread.id), seed, catalog, store
    )
    return format_reading(reading, spread.name, spread.description)


def _validate_custom(spread_name: Any, description: Any, positions: Any, question: Any) -> Optional[str]:
    """First validation failure as user-facing text, or None when the input is usable."""
    if not spread_name or not isinstance(spread_name, str):
        return "Error: spread name is required and must be a string."
    if not description or not isinstance(description, str):
        return "Error: spread description is required and must be a string."
    if not isinstance(positions, (list, tuple)) or len(positions) == 0:
        return "Error: positions must be a non-empty array."
    if len(positions) > MAX_CUSTOM_POSITIONS:
        return f"Error: custom spreads allow at most {MAX_CUSTOM_POSITIONS} positions."
    if not question or not isinstance(question, str):
        return "Error: question is required and must be a string."

    for i, position in enumerate(positions, start=1):
        if not position or not isinstance(position, Mapping):
            return f"Error: position {i} must be an object with 'name' and 'meaning' properties."
        name = position.get("name")
        if not name or not isinstance(name, str):
            return f"Error: position {i} must have a string 'name' property."
        meaning = position.get("meaning")
        if not meaning or not isinstance(meaning, str):
            return f"Error: position {i} must have a string 'meaning' property."
    return None


def perform_custom_reading(
    spread_name: str,
    description: str,
    positions: Sequence[Mapping[str, str]],
    question: str,
    session_id: Optional[str] = None,
    *,
    seed: SeedLike = None,
    catalog: CardCatalog = default_catalog,
    store: Optional[SessionStore] = None,
) -> str:
    """
    Perform a reading over a caller-defined list of positions (1..15).

    Input is validated eagerly in a fixed order and the first problem is
    returned as text. Any unexpected failure afterwards is logged and also
    returned as text.
    """
    error = _validate_custom(spread_name, description, positions, question)
    if error:
        logger.warning("Rejected custom spread %r: %s", spread_name, error)
        return error

    try:
        spread = Spread(
            id=custom_spread_type(spread_name),
            name=spread_name,
            description=description,
            card_count=len(positions),
            positions=tuple(Position(name=p["name"], meaning=p["meaning"]) for p in positions),
        )
        reading = _draw_and_assemble(
            spread, question, session_id, analyzers.analyzer_for_custom_name(spread_name),
            seed, catalog, store,
        )
        return format_reading(reading, spread.name, spread.description)
    except Exception as e:
        logger.exception("Custom reading %r failed", spread_name)
        return f"Error creating custom spread: {e}"


def list_available_spreads() -> str:
    """Markdown listing of every built-in spread and its positions."""
    return format_spread_list(list_spreads())


def interpret_card_combination(
    cards: Sequence[Mapping[str, str]],
    context: str,
    *,
    catalog: CardCatalog = default_catalog,
) -> str:
    """
    Interpret a caller-chosen set of cards without a spread.

    Each item is {"name": ..., "orientation": "upright" | "reversed"}; the
    orientation defaults to upright. Cards are looked up by name.
    """
    drawn: List[DrawnCard] = []
    for item in cards:
        name = item.get("name") or ""
        card = catalog.find_by_name(name)
        if card is None:
            return f'Card "{name}" not found. Check the card name (for example "The Fool" or "Ace of Cups").'
        orientation = item.get("orientation") or "upright"
        if orientation not in ORIENTATIONS:
            return f"Error: orientation for \"{card.name}\" must be 'upright' or 'reversed'."
        drawn.append(DrawnCard(card=card, orientation=orientation))  # type: ignore[arg-type]

    return (
        "# Card Combination Interpretation\n\n"
        f"**Context:** {context}\n\n"
        "## Cards in This Reading\n\n"
        f"{format_card_list(drawn)}"
        "## Interpretation\n\n"
        f"{synthesis.synthesize_combination(drawn)}"
    )
