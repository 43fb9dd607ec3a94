# -*- coding: utf-8 -*-
"""
formatter.py — render readings and spread listings as Markdown text.

Pure functions of their inputs; no I/O and no randomness.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .tarot_core import DrawnCard, Reading, Spread

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _card_block(index: int, dc: DrawnCard) -> str:
    lines = [f"### {index}. {dc.position}\n"]
    if dc.position_meaning:
        lines.append(f"*{dc.position_meaning}*\n\n")
    lines.append(f"**{dc.card.name}** ({dc.orientation})\n\n")
    lines.append(f"*Keywords: {', '.join(dc.card.keywords_for(dc.orientation))}*\n\n")
    return "".join(lines)


def format_reading(reading: Reading, spread_name: str, spread_description: str) -> str:
    """Render a completed reading: header, one block per position, then the interpretation."""
    out: List[str] = [
        f"# {spread_name} Reading\n\n",
        f"**Question:** {reading.question}\n",
        f"**Date:** {reading.timestamp.strftime(DATE_FORMAT)}\n",
        f"**Reading ID:** {reading.id}\n\n",
        f"*{spread_description}*\n\n",
        "## Your Cards\n\n",
    ]
    out.extend(_card_block(i, dc) for i, dc in enumerate(reading.cards, start=1))
    out.append("## Interpretation\n\n")
    out.append(reading.interpretation)
    return "".join(out)


def format_card_list(cards: Sequence[DrawnCard]) -> str:
    """Numbered card list with orientation keywords, used by combination readings."""
    out: List[str] = []
    for i, dc in enumerate(cards, start=1):
        out.append(f"{i}. **{dc.card.name}** ({dc.orientation})\n")
        out.append(f"   *Keywords: {', '.join(dc.card.keywords_for(dc.orientation))}*\n\n")
    return "".join(out)


def format_spread_list(spreads: Iterable[Spread]) -> str:
    out: List[str] = ["# Available Tarot Spreads\n\n"]
    for spread in spreads:
        out.append(f"## {spread.name} ({spread.card_count} cards)\n\n")
        out.append(f"*id: `{spread.id}`*\n\n")
        out.append(f"{spread.description}\n\n")
        out.append("**Positions:**\n")
        for i, position in enumerate(spread.positions, start=1):
            out.append(f"{i}. **{position.name}**: {position.meaning}\n")
        out.append("\n")
    out.append("Use `perform_reading` with one of these spread ids to get a reading.")
    return "".join(out)
