"""Analyzer configuration."""

from dataclasses import dataclass, replace
from typing import Optional

from .game.equity import DEFAULT_TRIALS, RIVER_HIGH_CARD_CAP
from .game.models import Position
from .game.odds import IMPLIED_ODDS_FACTOR


@dataclass(frozen=True)
class AnalyzerConfig:
    """Tunable settings for a HandAnalyzer."""

    # Equity simulation
    num_trials: int = DEFAULT_TRIALS  # Lower this for tighter latency
    seed: Optional[int] = None  # None seeds from system entropy
    river_cap: float = RIVER_HIGH_CARD_CAP  # Max win probability for high card on the river

    # Odds
    implied_odds_factor: float = IMPLIED_ODDS_FACTOR

    # Used when the snapshot carries no position
    default_position: Position = Position.MIDDLE

    def __post_init__(self):
        if self.num_trials <= 0:
            raise ValueError(f"num_trials must be positive, got {self.num_trials}")
        if not 0.0 <= self.river_cap <= 1.0:
            raise ValueError(f"river_cap must be within [0, 1], got {self.river_cap}")

    def with_overrides(self, **changes) -> "AnalyzerConfig":
        """Return a copy with some settings replaced."""
        return replace(self, **changes)
