"""Preflop hand scoring and chart suggestions."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from .cards import Card, HoleCards, RANK_STR
from .charts import (
    ChartTier,
    DEFAULT_CHART_TIER,
    DEFAULT_PREFLOP_RANK,
    DEFAULT_WIN_PERCENTAGE,
    MAX_PREFLOP_RANK,
    PLAYER_COUNT_PENALTY,
    POSITION_MULTIPLIERS,
    PREFLOP_CHART,
    PREFLOP_RANKINGS,
    PREFLOP_WIN_PERCENTAGES,
    check_player_count,
)
from .models import Position

SUITED_CONNECTOR_BOOST = 1.2


class PreflopCategory(Enum):
    """Shape of a two-card starting hand."""
    PAIR = "pair"
    CONNECTORS = "connectors"
    BROADWAY = "broadway"
    SUITED = "suited"
    HIGH_CARD = "high-card"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ChartSuggestion:
    """Chart tier for a canonical starting hand."""
    notation: str
    tier: ChartTier

    @property
    def action(self) -> str:
        return self.tier.action

    @property
    def color(self) -> str:
        return self.tier.color


@dataclass(frozen=True)
class PreflopEvaluation:
    """Strength estimate for an unresolved two-card hand."""
    notation: str
    category: PreflopCategory
    description: str
    score: float  # Adjusted for position and player count
    preflop_rank: int
    normalized_rank: float
    suited: bool
    high_card: int
    low_card: int
    position: Position
    player_count: int
    chart: ChartSuggestion

    def __repr__(self) -> str:
        return (
            f"PreflopEvaluation({self.notation}, {self.category}, "
            f"score={self.score:.3f}, chart={self.chart.tier})"
        )


HoleInput = Union[HoleCards, Iterable]


def _as_hole(hole: HoleInput) -> HoleCards:
    if isinstance(hole, HoleCards):
        return hole
    return HoleCards.from_cards(hole)


def canonical_notation(card1: Card, card2: Card) -> str:
    """Canonical notation for two cards: 'AKs', 'QJo', '88'."""
    return HoleCards(card1, card2).canonical


def preflop_win_percentage(notation: str) -> float:
    """Heads-up win percentage for a canonical hand (50.0 when unlisted)."""
    return PREFLOP_WIN_PERCENTAGES.get(notation, DEFAULT_WIN_PERCENTAGE)


def chart_suggestion(hole: HoleInput) -> ChartSuggestion:
    """Look up the chart tier for a starting hand; unlisted hands fold."""
    notation = _as_hole(hole).canonical
    return ChartSuggestion(notation, PREFLOP_CHART.get(notation, DEFAULT_CHART_TIER))


def strength_percent(score: float) -> int:
    """Score as a whole percentage, rounding halves up."""
    return math.floor(score * 100 + 0.5)


def _categorize(hole: HoleCards) -> tuple[PreflopCategory, str]:
    notation = hole.canonical
    if hole.is_pair:
        return PreflopCategory.PAIR, f"Pair of {RANK_STR[hole.card1.rank]}s"
    if hole.gap == 1:
        if hole.is_suited:
            return PreflopCategory.CONNECTORS, f"Suited Connectors {notation}"
        return PreflopCategory.CONNECTORS, f"Connectors {notation}"
    if hole.card2.rank >= 10:
        return PreflopCategory.BROADWAY, f"Broadway {notation}"
    if hole.is_suited:
        return PreflopCategory.SUITED, f"Suited {notation}"
    return PreflopCategory.HIGH_CARD, notation


def evaluate_preflop(
    hole: HoleInput,
    player_count: int = 6,
    position: Position = Position.MIDDLE,
) -> PreflopEvaluation:
    """
    Score a two-card starting hand.

    The score is the chart ordinal normalized by the largest ordinal,
    scaled by the position multiplier and shifted by the player count
    penalty. Suited connectors get a further 1.2x.

    Args:
        hole: Two hole cards
        player_count: Players dealt in (2-9)
        position: Hero's seat

    Returns:
        PreflopEvaluation with score, category and chart suggestion
    """
    hand = _as_hole(hole)
    check_player_count(player_count)

    notation = hand.canonical
    preflop_rank = PREFLOP_RANKINGS.get(notation, DEFAULT_PREFLOP_RANK)
    normalized = preflop_rank / MAX_PREFLOP_RANK

    score = normalized * POSITION_MULTIPLIERS[position] + PLAYER_COUNT_PENALTY[player_count]

    category, label = _categorize(hand)
    if category is PreflopCategory.CONNECTORS and hand.is_suited:
        score *= SUITED_CONNECTOR_BOOST

    return PreflopEvaluation(
        notation=notation,
        category=category,
        description=f"{label} ({strength_percent(score)}% strength)",
        score=score,
        preflop_rank=preflop_rank,
        normalized_rank=normalized,
        suited=hand.is_suited,
        high_card=hand.card1.rank,
        low_card=hand.card2.rank,
        position=position,
        player_count=player_count,
        chart=chart_suggestion(hand),
    )
