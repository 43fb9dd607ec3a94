# -*- coding: utf-8 -*-
"""
meanings.py — pick the life-area meaning that best fits a question.

The question decides first; only when it matches no topic does the position
name get a say (love, then career). Everything else falls back to the general
meaning. Matching is a case-insensitive substring test against fixed English
and Chinese keyword sets, first rule wins.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .tarot_core import MeaningBundle

Topic = str

# (topic, keywords) in priority order
QUESTION_TOPICS: Tuple[Tuple[Topic, Tuple[str, ...]], ...] = (
    ("love", ("love", "relationship", "romance", "爱情", "感情", "恋爱", "关系")),
    ("career", ("career", "job", "work", "money", "职业", "工作", "事业", "金钱", "财富")),
    ("health", ("health", "wellness", "body", "健康", "身体", "养生")),
    ("spirituality", ("spiritual", "purpose", "meaning", "灵性", "精神", "目的", "意义")),
)

POSITION_TOPICS: Tuple[Tuple[Topic, Tuple[str, ...]], ...] = (
    ("love", ("love", "relationship", "爱情", "感情", "关系")),
    ("career", ("career", "work", "职业", "工作", "事业")),
)


def _match(text: str, topics: Sequence[Tuple[Topic, Tuple[str, ...]]]) -> Optional[Topic]:
    lowered = text.lower()
    for topic, keywords in topics:
        if any(k in lowered for k in keywords):
            return topic
    return None


def classify_topic(position: str, question: str) -> Topic:
    """Return one of love / career / health / spirituality / general."""
    return (
        _match(question or "", QUESTION_TOPICS)
        or _match(position or "", POSITION_TOPICS)
        or "general"
    )


def select_meaning(meanings: MeaningBundle, position: str, question: str) -> str:
    """Select the orientation-specific meaning text relevant to this position."""
    return getattr(meanings, classify_topic(position, question))
