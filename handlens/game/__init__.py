"""Game representation and hand evaluation module."""

from .cards import (
    Card,
    CardError,
    HoleCards,
    Rank,
    Suit,
    full_deck,
    remaining_deck,
    parse_cards,
)
from .models import HandCategory, Position, Street
from .classifier import EvaluatedHand, classify
from .charts import ChartTier, adjusted_rank
from .preflop import (
    ChartSuggestion,
    PreflopCategory,
    PreflopEvaluation,
    evaluate_preflop,
    chart_suggestion,
)
from .draws import OutsBreakdown, count_outs, drawing_odds
from .odds import pot_odds, implied_odds
from .equity import EquityMethod, EquityResult, EquitySimulator, calculate_equity

__all__ = [
    "Card",
    "CardError",
    "HoleCards",
    "Rank",
    "Suit",
    "full_deck",
    "remaining_deck",
    "parse_cards",
    "HandCategory",
    "Position",
    "Street",
    "EvaluatedHand",
    "classify",
    "ChartTier",
    "adjusted_rank",
    "ChartSuggestion",
    "PreflopCategory",
    "PreflopEvaluation",
    "evaluate_preflop",
    "chart_suggestion",
    "OutsBreakdown",
    "count_outs",
    "drawing_odds",
    "pot_odds",
    "implied_odds",
    "EquityMethod",
    "EquityResult",
    "EquitySimulator",
    "calculate_equity",
]
