"""Win probability estimation.

Preflop hands use the static heads-up table. Postflop hands are
estimated by Monte Carlo: sample an opponent hand from the unseen
cards and compare made-hand categories on the current board.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from .cards import HoleCards, ensure_unique, parse_cards, remaining_deck
from .charts import check_player_count
from .classifier import classify
from .models import HandCategory, Street
from .preflop import preflop_win_percentage

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 1000
RIVER_HIGH_CARD_CAP = 0.15


class EquityMethod(Enum):
    """How a win probability was produced."""
    TABLE_LOOKUP = "table-lookup"
    SIMULATION = "simulation"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EquityResult:
    """Estimated win probability."""
    win_probability: float  # 0-1
    method: EquityMethod
    street: Street
    trials: int = 0
    raw_probability: float = 0.0  # Before multiway correction and river cap
    capped: bool = False

    def __repr__(self) -> str:
        return (
            f"EquityResult({self.win_probability:.1%}, {self.method}, "
            f"{self.street}, trials={self.trials})"
        )


def adjust_for_players(percent: float, player_count: int) -> float:
    """
    Pull a heads-up win percentage toward 50 for extra opponents.

    Each player beyond two halves the distance from 50%. This is a
    heuristic decay, not an n-player equity calculation.

    Args:
        percent: Win percentage (0-100)
        player_count: Players in the hand

    Returns:
        Adjusted win percentage (0-100)
    """
    if player_count <= 2:
        return percent
    return 50 + (percent - 50) * 0.5 ** (player_count - 2)


class EquitySimulator:
    """
    Estimates hero's chance of winning against a random hand.

    The random source is a numpy Generator. Pass `rng` or `seed` to pin
    the sampled opponent hands; otherwise the generator is seeded from
    system entropy.
    """

    def __init__(
        self,
        num_trials: int = DEFAULT_TRIALS,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        river_cap: float = RIVER_HIGH_CARD_CAP,
    ):
        if num_trials <= 0:
            raise ValueError(f"num_trials must be positive, got {num_trials}")
        self.num_trials = num_trials
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.river_cap = river_cap

    def estimate(
        self,
        hole: Iterable,
        board: Iterable = (),
        player_count: int = 2,
    ) -> EquityResult:
        """
        Estimate hero's win probability.

        Args:
            hole: Hero's two hole cards
            board: Community cards (0, 3, 4 or 5)
            player_count: Players in the hand (2-9)

        Returns:
            EquityResult with probability, method and street
        """
        hero = parse_cards(hole)
        community = parse_cards(board)
        check_player_count(player_count)

        if len(hero) != 2:
            raise ValueError(f"Hero hand must be 2 cards, got {len(hero)}")
        ensure_unique(hero + community)

        street = Street.from_board_size(len(community))
        if street is Street.PREFLOP:
            return self._table_lookup(HoleCards(hero[0], hero[1]), player_count)
        if street is Street.UNKNOWN:
            raise ValueError(f"Cannot simulate with {len(community)} community cards")
        return self._simulate(hero, community, player_count, street)

    def _table_lookup(self, hole: HoleCards, player_count: int) -> EquityResult:
        raw = preflop_win_percentage(hole.canonical)
        percent = adjust_for_players(raw, player_count)
        return EquityResult(
            win_probability=percent / 100,
            method=EquityMethod.TABLE_LOOKUP,
            street=Street.PREFLOP,
            raw_probability=raw / 100,
        )

    def _simulate(self, hero, community, player_count: int, street: Street) -> EquityResult:
        deck = remaining_deck(hero, community)
        hero_hand = classify(hero + community)

        credits = 0.0
        for _ in range(self.num_trials):
            i, j = self.rng.choice(len(deck), size=2, replace=False)
            villain = classify([deck[i], deck[j]] + community)

            # Category only: kickers are ignored
            if hero_hand.category > villain.category:
                credits += 1.0
            elif hero_hand.category == villain.category:
                credits += 0.5

        raw = credits / self.num_trials * 100
        percent = adjust_for_players(raw, player_count)

        capped = False
        if street is Street.RIVER and hero_hand.category is HandCategory.HIGH_CARD:
            cap = self.river_cap * 100
            if percent > cap:
                percent = cap
                capped = True

        logger.debug(
            "Simulated %d trials on the %s: hero %s, raw %.1f%%, adjusted %.1f%%",
            self.num_trials, street, hero_hand.category, raw, percent,
        )

        return EquityResult(
            win_probability=percent / 100,
            method=EquityMethod.SIMULATION,
            street=street,
            trials=self.num_trials,
            raw_probability=raw / 100,
            capped=capped,
        )


def calculate_equity(
    hole: Iterable,
    board: Iterable = (),
    player_count: int = 2,
    num_trials: int = DEFAULT_TRIALS,
    seed: Optional[int] = None,
) -> EquityResult:
    """
    Calculate hero's win probability against a random opponent.

    Args:
        hole: Hero's hole cards
        board: Community cards
        player_count: Players in the hand
        num_trials: Monte Carlo trials for postflop boards
        seed: Optional seed for reproducible sampling

    Returns:
        EquityResult
    """
    simulator = EquitySimulator(num_trials=num_trials, seed=seed)
    return simulator.estimate(hole, board, player_count)
