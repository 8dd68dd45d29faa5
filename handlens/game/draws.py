"""Outs counting and drawing odds."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from .cards import parse_cards
from .classifier import classify, paired_rank

FLUSH_DRAW_OUTS = 9
OPEN_ENDED_OUTS = 8
GUTSHOT_OUTS = 4
OVERCARD_OUTS = 3

# Unseen pool assumed by the drawing odds: 52 - 2 hole - 5 board
UNSEEN_POOL = 52 - 2 - 5


@dataclass(frozen=True)
class OutsBreakdown:
    """Outs by draw type."""
    flush: int = 0
    straight: int = 0
    straight_draw: Optional[str] = None  # "open-ended" or "gutshot"
    overcards: int = 0

    @property
    def total(self) -> int:
        return self.flush + self.straight + self.overcards

    def __int__(self) -> int:
        return self.total


def _flush_outs(cards) -> int:
    suit_counts = Counter(c.suit for c in cards)
    if any(count == 4 for count in suit_counts.values()):
        return FLUSH_DRAW_OUTS
    return 0


def _straight_outs(cards) -> tuple[int, Optional[str]]:
    values = sorted({c.rank for c in cards})

    for i in range(len(values) - 3):
        if values[i + 3] - values[i] == 3:
            return OPEN_ENDED_OUTS, "open-ended"

    for i in range(len(values) - 2):
        if values[i + 2] - values[i] == 2:
            return GUTSHOT_OUTS, "gutshot"

    return 0, None


def _overcard_outs(cards) -> int:
    paired = paired_rank(classify(cards))
    if paired is None:
        return 0
    present = {c.rank for c in cards}
    overcards = [r for r in range(paired + 1, 15) if r not in present]
    return len(overcards) * OVERCARD_OUTS


def count_outs(hole: Iterable, board: Iterable) -> OutsBreakdown:
    """
    Heuristic outs count for hero's hand.

    Flush draws (exactly four of a suit) add 9, an open-ended run of
    four adds 8, otherwise a run of three adds 4 as a gutshot. When the
    made hand has a paired rank, every unseen higher rank adds 3.

    Args:
        hole: Hero's hole cards
        board: Community cards

    Returns:
        OutsBreakdown (empty before the flop)
    """
    hole_cards = parse_cards(hole)
    board_cards = parse_cards(board)
    if len(board_cards) < 3:
        return OutsBreakdown()

    cards = hole_cards + board_cards
    straight, draw = _straight_outs(cards)
    return OutsBreakdown(
        flush=_flush_outs(cards),
        straight=straight,
        straight_draw=draw,
        overcards=_overcard_outs(cards),
    )


def drawing_odds(outs: int, streets: int) -> float:
    """
    Probability of hitting one of `outs` within `streets` cards.

    The unseen pool is fixed at 45 cards regardless of the board size.

    Args:
        outs: Number of outs
        streets: Cards to come (1 or 2; 0 gives 0.0)

    Returns:
        Hit probability (0-1)
    """
    if streets not in (0, 1, 2):
        raise ValueError(f"Streets must be 0, 1 or 2, got {streets}")
    if outs < 0:
        raise ValueError(f"Outs cannot be negative, got {outs}")
    if outs == 0 or streets == 0:
        return 0.0

    pool = UNSEEN_POOL
    capped = min(outs, pool)

    if streets == 1:
        return capped / pool

    miss_first = (pool - capped) / pool
    miss_second = (pool - capped - 1) / (pool - 1)
    return 1 - miss_first * miss_second
