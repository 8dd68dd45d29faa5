"""Hand analysis: combines every evaluator into one record.

The analyzer holds no per-hand state. Each call builds its own
simulator, so snapshots can be analyzed concurrently.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

import numpy as np

from handlens.config import AnalyzerConfig
from handlens.game.charts import adjusted_rank
from handlens.game.classifier import EvaluatedHand, classify
from handlens.game.draws import OutsBreakdown, count_outs, drawing_odds
from handlens.game.equity import EquityResult, EquitySimulator
from handlens.game.models import Position, Street
from handlens.game.odds import implied_odds, pot_odds
from handlens.game.preflop import PreflopEvaluation, evaluate_preflop

from .snapshot import GameSnapshot

logger = logging.getLogger(__name__)

# Drawing odds always look two cards ahead, whatever the street
DRAWING_STREETS = 2


class AnalysisStatus(Enum):
    """Whether a snapshot could be evaluated."""
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HandAnalysis:
    """Everything known about hero's hand at one snapshot."""
    status: AnalysisStatus
    description: str
    street: Street

    # Echoed snapshot fields
    pot: float
    current_bet: float
    player_count: int
    position: Position

    # Postflop classification
    hand: Optional[EvaluatedHand] = None
    adjusted_rank: Optional[float] = None

    # Preflop evaluation
    preflop: Optional[PreflopEvaluation] = None

    pot_odds: float = 0.0
    implied_odds: float = 0.0
    outs: OutsBreakdown = field(default_factory=OutsBreakdown)
    drawing_odds: float = 0.0
    equity: Optional[EquityResult] = None

    @property
    def is_complete(self) -> bool:
        return self.status is AnalysisStatus.COMPLETE

    @property
    def win_probability(self) -> Optional[float]:
        return self.equity.win_probability if self.equity else None

    def to_dict(self) -> dict[str, Any]:
        """Plain data for presentation layers."""
        data: dict[str, Any] = {
            "status": self.status.value,
            "description": self.description,
            "phase": str(self.street),
            "pot": self.pot,
            "currentBet": self.current_bet,
            "playerCount": self.player_count,
            "position": self.position.value,
            "potOdds": self.pot_odds,
            "impliedOdds": self.implied_odds,
            "outs": self.outs.total,
            "drawingOdds": self.drawing_odds,
            "hand": None,
            "preflop": None,
            "equity": None,
        }
        if self.hand is not None:
            data["hand"] = {
                "category": self.hand.category.label,
                "description": self.hand.description,
                "cards": [str(c) for c in self.hand.cards],
                "kickers": [str(c) for c in self.hand.kickers],
                "adjustedRank": self.adjusted_rank,
            }
        if self.preflop is not None:
            data["preflop"] = {
                "notation": self.preflop.notation,
                "category": self.preflop.category.value,
                "description": self.preflop.description,
                "score": self.preflop.score,
                "chartTier": self.preflop.chart.tier.value,
                "chartAction": self.preflop.chart.action,
            }
        if self.equity is not None:
            data["equity"] = {
                "winProbability": self.equity.win_probability,
                "method": self.equity.method.value,
                "phase": str(self.equity.street),
            }
        return data


@dataclass(frozen=True)
class AnalysisError:
    """Result returned when a snapshot record is malformed."""
    message: str
    error_type: str

    @property
    def is_complete(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"status": "error", "description": self.message, "errorType": self.error_type}


AnalysisResult = Union[HandAnalysis, AnalysisError]


class HandAnalyzer:
    """
    Runs the preflop or postflop evaluators on a snapshot.

    With an injected numpy Generator the caller owns the random state;
    otherwise each call draws a fresh generator from config.seed
    (identical results for a fixed seed).
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or AnalyzerConfig()
        self.rng = rng

    def _simulator(self) -> EquitySimulator:
        rng = self.rng if self.rng is not None else np.random.default_rng(self.config.seed)
        return EquitySimulator(
            num_trials=self.config.num_trials,
            rng=rng,
            river_cap=self.config.river_cap,
        )

    def analyze(self, snapshot: GameSnapshot) -> HandAnalysis:
        """
        Analyze one snapshot.

        Args:
            snapshot: Validated game snapshot

        Returns:
            HandAnalysis (INCOMPLETE when hole cards or the street
            are not yet known)
        """
        position = snapshot.position or self.config.default_position
        street = snapshot.street
        base = dict(
            street=street,
            pot=snapshot.pot,
            current_bet=snapshot.current_bet,
            player_count=snapshot.player_count,
            position=position,
        )

        if not snapshot.has_hole_cards:
            return HandAnalysis(
                status=AnalysisStatus.INCOMPLETE,
                description="Waiting for hole cards",
                **base,
            )
        if street is Street.UNKNOWN:
            return HandAnalysis(
                status=AnalysisStatus.INCOMPLETE,
                description="Unknown game phase",
                **base,
            )

        logger.debug("Analyzing %r", snapshot)
        odds = pot_odds(snapshot.pot, snapshot.current_bet)
        equity = self._simulator().estimate(
            snapshot.hole_cards, snapshot.community_cards, snapshot.player_count
        )

        if street is Street.PREFLOP:
            preflop = evaluate_preflop(snapshot.hole_cards, snapshot.player_count, position)
            return HandAnalysis(
                status=AnalysisStatus.COMPLETE,
                description=preflop.description,
                preflop=preflop,
                pot_odds=odds,
                equity=equity,
                **base,
            )

        cards = list(snapshot.hole_cards) + list(snapshot.community_cards)
        hand = classify(cards)
        outs = count_outs(snapshot.hole_cards, snapshot.community_cards)

        return HandAnalysis(
            status=AnalysisStatus.COMPLETE,
            description=hand.description,
            hand=hand,
            adjusted_rank=adjusted_rank(hand.category, snapshot.player_count),
            pot_odds=odds,
            implied_odds=implied_odds(
                snapshot.pot,
                snapshot.current_bet,
                outs.total,
                snapshot.player_count,
                factor=self.config.implied_odds_factor,
            ),
            outs=outs,
            drawing_odds=drawing_odds(outs.total, DRAWING_STREETS),
            equity=equity,
            **base,
        )

    def analyze_record(self, record: dict) -> AnalysisResult:
        """
        Analyze a raw table reader record.

        A malformed record (bad card data, impossible counts) yields an
        AnalysisError instead of raising, so a polling host keeps going.
        """
        try:
            snapshot = GameSnapshot.from_dict(record)
        except (ValueError, TypeError) as e:
            logger.warning("Rejected snapshot record: %s", e)
            return AnalysisError(message=str(e), error_type=type(e).__name__)
        return self.analyze(snapshot)


def analyze_snapshot(
    snapshot: GameSnapshot,
    config: Optional[AnalyzerConfig] = None,
) -> HandAnalysis:
    """Convenience wrapper around HandAnalyzer.analyze."""
    return HandAnalyzer(config).analyze(snapshot)
