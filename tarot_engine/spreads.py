# -*- coding: utf-8 -*-
"""
spreads.py — Spread registry.

The registry is an immutable mapping built once at import time. Keys are the
spread identifiers accepted by perform_reading(); position order is the order
in which drawn cards are laid out.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from .tarot_core import Position, Spread


def _spread(spread_id: str, name: str, description: str, positions: Sequence[Tuple[str, str]]) -> Spread:
    return Spread(
        id=spread_id,
        name=name,
        description=description,
        card_count=len(positions),
        positions=tuple(Position(name=n, meaning=m) for n, m in positions),
    )


_MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

_HOUSES = (
    ("1st House - Self", "Identity, appearance, and how you begin things"),
    ("2nd House - Resources", "Money, possessions, and what you value"),
    ("3rd House - Communication", "Thinking, siblings, and everyday exchanges"),
    ("4th House - Home", "Family, roots, and emotional foundations"),
    ("5th House - Creativity", "Romance, play, children, and self-expression"),
    ("6th House - Work and Health", "Daily routines, service, and wellbeing"),
    ("7th House - Partnerships", "Marriage, close partners, and open rivals"),
    ("8th House - Transformation", "Shared resources, intimacy, and rebirth"),
    ("9th House - Philosophy", "Higher learning, travel, and beliefs"),
    ("10th House - Career", "Vocation, reputation, and public standing"),
    ("11th House - Community", "Friends, groups, and hopes for the future"),
    ("12th House - Spirituality", "The hidden, the unconscious, and retreat"),
)


_SPREADS: Tuple[Spread, ...] = (
    _spread("single_card", "Single Card",
            "A simple one-card draw for quick insight or daily guidance", [
                ("The Message", "The main insight, guidance, or energy for your question"),
            ]),
    _spread("three_card", "Three Card Spread",
            "A versatile three-card spread that can represent past/present/future, "
            "situation/action/outcome, or mind/body/spirit", [
                ("Past/Situation", "What has led to this situation or the foundation of the matter"),
                ("Present/Action", "The current state or what action should be taken"),
                ("Future/Outcome", "The likely outcome or future development"),
            ]),
    _spread("celtic_cross", "Celtic Cross",
            "The most famous tarot spread, providing comprehensive insight into a situation with 10 cards", [
                ("Present Situation", "The heart of the matter, your current situation or state of mind"),
                ("Challenge/Cross", "The challenge you face or what crosses you in this situation"),
                ("Distant Past/Foundation", "The foundation of the situation, distant past influences"),
                ("Recent Past", "Recent events or influences that are now passing away"),
                ("Possible Outcome", "One possible outcome if things continue as they are"),
                ("Near Future", "What is approaching in the immediate future"),
                ("Your Approach", "Your approach to the situation, how you see yourself"),
                ("External Influences", "How others see you or external influences affecting the situation"),
                ("Hopes and Fears", "Your inner feelings, hopes, and fears about the situation"),
                ("Final Outcome", "The final outcome, the culmination of all influences"),
            ]),
    _spread("horseshoe", "Horseshoe Spread",
            "A 7-card spread that provides guidance on a specific situation, showing past influences, "
            "present circumstances, and future possibilities", [
                ("Past Influences", "Past events and influences that have led to the current situation"),
                ("Present Situation", "Your current circumstances and state of mind"),
                ("Hidden Influences", "Hidden factors or subconscious influences affecting the situation"),
                ("Obstacles", "Challenges or obstacles you may face"),
                ("External Influences", "Outside influences, other people's attitudes, or environmental factors"),
                ("Advice", "What you should do or the best approach to take"),
                ("Likely Outcome", "The most probable outcome if you follow the advice given"),
            ]),
    _spread("relationship_cross", "Relationship Cross",
            "A 7-card spread specifically designed for examining relationships, whether romantic, "
            "friendship, or family", [
                ("You", "Your role, feelings, and contribution to the relationship"),
                ("Your Partner", "Their role, feelings, and contribution to the relationship"),
                ("The Relationship", "The current state and dynamic of the relationship itself"),
                ("What Unites You", "Common ground, shared values, and what brings you together"),
                ("What Divides You", "Differences, conflicts, and what creates tension"),
                ("Advice", "Guidance for improving and nurturing the relationship"),
                ("Future Potential", "Where the relationship is heading and its potential outcome"),
            ]),
    _spread("career_path", "Career Path Spread",
            "A 6-card spread for career guidance, exploring your professional journey and opportunities", [
                ("Current Career Situation", "Your present professional circumstances and feelings about work"),
                ("Your Skills and Talents", "Your natural abilities and developed skills that serve your career"),
                ("Career Challenges", "Obstacles or difficulties you face in your professional life"),
                ("Hidden Opportunities", "Unseen possibilities or potential career paths to explore"),
                ("Action to Take", "Specific steps or approaches to advance your career"),
                ("Career Outcome", "The likely result of following the guidance provided"),
            ]),
    _spread("decision_making", "Decision Making Spread",
            "A 5-card spread to help you make important decisions by examining all aspects of your choices", [
                ("The Situation", "The current circumstances requiring a decision"),
                ("Option A", "The first choice and its potential consequences"),
                ("Option B", "The second choice and its potential consequences"),
                ("What You Need to Know", "Hidden factors or important information to consider"),
                ("Recommended Path", "The best course of action based on all factors"),
            ]),
    _spread("spiritual_guidance", "Spiritual Guidance Spread",
            "A 6-card spread for spiritual development and connecting with your higher self", [
                ("Your Spiritual State", "Your current spiritual condition and level of awareness"),
                ("Spiritual Lessons", "What the universe is trying to teach you right now"),
                ("Blocks to Growth", "What is hindering your spiritual development"),
                ("Spiritual Gifts", "Your natural spiritual abilities and intuitive talents"),
                ("Guidance from Above", "Messages from your higher self or spiritual guides"),
                ("Next Steps", "How to advance on your spiritual journey"),
            ]),
    _spread("year_ahead", "Year Ahead Spread",
            "A 13-card spread providing insights for the coming year, with one card for each month "
            "plus an overall theme",
            [("Overall Theme", "The main theme and energy for the entire year")]
            + [(m, f"What to expect and focus on in {m}") for m in _MONTHS]),
    _spread("chakra_alignment", "Chakra Alignment Spread",
            "A 7-card spread examining the energy centers of your body for healing and balance", [
                ("Root Chakra", "Your foundation, security, and connection to the physical world"),
                ("Sacral Chakra", "Your creativity, sexuality, and emotional expression"),
                ("Solar Plexus Chakra", "Your personal power, confidence, and sense of self"),
                ("Heart Chakra", "Your capacity for love, compassion, and connection"),
                ("Throat Chakra", "Your communication, truth, and authentic expression"),
                ("Third Eye Chakra", "Your intuition, wisdom, and spiritual insight"),
                ("Crown Chakra", "Your connection to the divine and higher consciousness"),
            ]),
    _spread("shadow_work", "Shadow Work Spread",
            "A 5-card spread for exploring and integrating your shadow self for personal growth", [
                ("Your Shadow", "The hidden or repressed aspects of yourself"),
                ("How It Manifests", "How your shadow shows up in your life and relationships"),
                ("The Gift Within", "The positive potential hidden within your shadow"),
                ("Integration Process", "How to acknowledge and integrate this aspect of yourself"),
                ("Transformation", "The growth and healing that comes from shadow work"),
            ]),
    _spread("venus_love", "Venus Love Spread",
            "A 7-card spread guided by Venus for exploring love, attraction, and romantic potential", [
                ("Current Love Energy", "The romantic energy surrounding you right now"),
                ("Self-Love", "How you value and care for yourself"),
                ("What Attracts Love", "The qualities that draw love toward you"),
                ("Blocks to Love", "What stands in the way of the love you seek"),
                ("Enhancing Love", "How to strengthen and invite love into your life"),
                ("Hidden Desires", "What your heart truly longs for"),
                ("Love Future", "Where your love life is heading"),
            ]),
    _spread("tree_of_life", "Tree of Life Spread",
            "A 10-card Kabbalistic spread mapping your situation onto the ten Sephiroth", [
                ("Kether - Crown", "Your highest purpose and divine spark"),
                ("Chokmah - Wisdom", "Creative force and dynamic inspiration"),
                ("Binah - Understanding", "Structure, form, and deep comprehension"),
                ("Chesed - Mercy", "Expansion, generosity, and what you build"),
                ("Geburah - Severity", "Discipline, strength, and necessary boundaries"),
                ("Tiphareth - Beauty", "The harmonious heart of the matter"),
                ("Netzach - Victory", "Emotions, desire, and endurance"),
                ("Hod - Splendor", "Intellect, communication, and reason"),
                ("Yesod - Foundation", "The subconscious and your inner foundation"),
                ("Malkuth - Kingdom", "Material manifestation and the physical outcome"),
            ]),
    _spread("astrological_houses", "Astrological Houses Spread",
            "A 12-card spread with one card for each astrological house, covering every area of life",
            _HOUSES),
    _spread("mandala", "Mandala Spread",
            "A 9-card circular spread exploring wholeness, with a center card surrounded by the eight directions", [
                ("Center", "Your core self and the heart of the matter"),
                ("North", "Wisdom, guidance, and what is above you"),
                ("Northeast", "New ideas and emerging inspiration"),
                ("East", "Beginnings, clarity, and fresh perspective"),
                ("Southeast", "Growth, passion, and active energy"),
                ("South", "Emotions, trust, and what grounds you"),
                ("Southwest", "Relationships and what you have learned"),
                ("West", "Introspection and what you must release"),
                ("Northwest", "Transition and preparation for what comes next"),
            ]),
    _spread("pentagram", "Pentagram Spread",
            "A 5-card spread aligned with the points of the pentagram: spirit and the four elements", [
                ("Spirit", "Your divine connection and higher purpose"),
                ("Air", "Your thoughts, ideas, and communication"),
                ("Fire", "Your passion, will, and drive to act"),
                ("Earth", "Your material foundation and practical matters"),
                ("Water", "Your emotions, intuition, and relationships"),
            ]),
    _spread("mirror_of_truth", "Mirror of Truth Spread",
            "A 4-card spread that shines four beams of light on a situation to reveal what is really happening", [
                ("Your Perspective", "How you currently see the situation, and your inner filters"),
                ("Their Intention", "The other person's true intentions and inner state"),
                ("Objective Truth", "The facts of the situation, stripped of subjective emotion"),
                ("Future Guidance", "How to act once the truth is understood"),
            ]),
)


SPREAD_REGISTRY: Mapping[str, Spread] = MappingProxyType({s.id: s for s in _SPREADS})


def is_valid_spread_type(spread_id: str) -> bool:
    """Whether spread_id names a built-in spread."""
    return spread_id in SPREAD_REGISTRY


def get_spread(spread_id: str) -> Optional[Spread]:
    """Get a single spread definition, or None when it is not registered."""
    return SPREAD_REGISTRY.get(spread_id)


def list_spreads() -> List[Spread]:
    """Return all available spreads, in registry order."""
    return list(SPREAD_REGISTRY.values())
