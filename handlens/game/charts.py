"""Static preflop charts and strength adjustment tables.

All tables are built once at import time and exposed as read-only
mappings. They are shared by every evaluation and never mutated.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .cards import get_all_hands
from .models import HandCategory, Position


class ChartTier(Enum):
    """Preflop chart action tiers."""
    STRONG_RAISE = "strong-raise"
    RAISE_OR_CALL = "raise-or-call"
    SPECULATIVE_CALL = "speculative-call"
    FOLD = "fold"

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]

    @property
    def action(self) -> str:
        return _TIER_ACTIONS[self]

    @classmethod
    def from_color(cls, color: str) -> "ChartTier":
        for tier, tier_color in _TIER_COLORS.items():
            if tier_color == color:
                return tier
        raise ValueError(f"Unknown chart color: {color}")

    def __str__(self) -> str:
        return self.value


_TIER_COLORS = {
    ChartTier.STRONG_RAISE: "red",
    ChartTier.RAISE_OR_CALL: "yellow",
    ChartTier.SPECULATIVE_CALL: "blue",
    ChartTier.FOLD: "green",
}

_TIER_ACTIONS = {
    ChartTier.STRONG_RAISE: "Raise (Any Position)",
    ChartTier.RAISE_OR_CALL: "Raise/Call (Mid/Late)",
    ChartTier.SPECULATIVE_CALL: "Call (Late)",
    ChartTier.FOLD: "Fold",
}


# Strength ordinals for the 50 traditionally strong hands (1 = best)
PREFLOP_RANKINGS: Mapping[str, int] = MappingProxyType({
    "AA": 1, "KK": 2, "QQ": 3, "JJ": 4, "TT": 5, "99": 6, "88": 7, "77": 8,
    "AKs": 9, "AQs": 10, "AJs": 11, "ATs": 12, "A9s": 13, "A8s": 14, "A7s": 15,
    "AKo": 16, "AQo": 17, "AJo": 18, "ATo": 19, "A9o": 20, "A8o": 21, "A7o": 22,
    "KQs": 23, "KJs": 24, "KTs": 25, "KQo": 26, "KJo": 27, "KTo": 28,
    "QJs": 29, "QTs": 30, "QJo": 31, "QTo": 32,
    "JTs": 33, "JTo": 34, "T9s": 35, "T9o": 36,
    "98s": 37, "98o": 38, "87s": 39, "87o": 40,
    "76s": 41, "76o": 42, "65s": 43, "65o": 44,
    "54s": 45, "54o": 46, "43s": 47, "43o": 48,
    "32s": 49, "32o": 50,
})

DEFAULT_PREFLOP_RANK = 100
MAX_PREFLOP_RANK = max(PREFLOP_RANKINGS.values())


# Heads-up win percentages vs a random hand
PREFLOP_WIN_PERCENTAGES: Mapping[str, float] = MappingProxyType({
    # Pairs
    "AA": 85.3, "KK": 82.4, "QQ": 79.9, "JJ": 77.2, "TT": 74.6,
    "99": 71.7, "88": 68.8, "77": 65.9, "66": 62.9, "55": 59.9,
    "44": 56.9, "33": 53.9, "22": 50.9,

    # Suited broadway
    "AKs": 67.0, "AQs": 66.4, "AJs": 65.4, "ATs": 64.4, "A9s": 63.4,
    "KQs": 63.4, "KJs": 62.4, "KTs": 61.4, "QJs": 61.4, "QTs": 60.4,
    "JTs": 59.4,

    # Offsuit broadway
    "AKo": 65.4, "AQo": 64.9, "AJo": 63.9, "ATo": 62.9, "A9o": 61.9,
    "KQo": 61.9, "KJo": 60.9, "KTo": 59.9, "QJo": 59.9, "QTo": 58.9,
    "JTo": 57.9,

    # Suited connectors
    "T9s": 58.4, "98s": 57.4, "87s": 56.4, "76s": 55.4, "65s": 54.4,
    "54s": 53.4, "43s": 52.4, "32s": 51.4,

    # Offsuit connectors
    "T9o": 56.9, "98o": 55.9, "87o": 54.9, "76o": 53.9, "65o": 52.9,
    "54o": 51.9, "43o": 50.9, "32o": 49.9,

    # Suited one-gappers
    "J9s": 57.4, "T8s": 56.4, "97s": 55.4, "86s": 54.4, "75s": 53.4,
    "64s": 52.4, "53s": 51.4, "42s": 50.4,

    # Offsuit one-gappers
    "J9o": 55.9, "T8o": 54.9, "97o": 53.9, "86o": 52.9, "75o": 51.9,
    "64o": 50.9, "53o": 49.9, "42o": 48.9,
})

DEFAULT_WIN_PERCENTAGE = 50.0


# Reference opening chart, one line per chart row.
# Later entries override earlier ones (KTo is listed twice).
_CHART_ROWS = (
    "AA:red KK:red QQ:red JJ:red TT:red 99:red 88:red 77:red 66:yellow 55:yellow 44:blue 33:blue 22:blue",
    "AKs:red AQs:red AJs:red ATs:red A9s:yellow A8s:yellow A7s:yellow A6s:yellow A5s:blue A4s:blue A3s:blue A2s:blue",
    "KQs:red KJs:red KTs:red K9s:yellow K8s:blue K7s:blue K6s:blue K5s:blue K4s:blue K3s:blue K2s:blue",
    "QJs:red QTs:red Q9s:yellow Q8s:yellow Q7s:green Q6s:green Q5s:green Q4s:green Q3s:green Q2s:green",
    "JTs:red J9s:red J8s:yellow J7s:blue J6s:green J5s:green J4s:green J3s:green J2s:green",
    "T9s:red T8s:yellow T7s:blue T6s:green T5s:green T4s:green T3s:green T2s:green",
    "98s:yellow 97s:blue 96s:blue 95s:green 94s:green 93s:green 92s:green",
    "87s:blue 86s:blue 85s:green 84s:green 83s:green 82s:green",
    "76s:blue 75s:blue 74s:green 73s:green 72s:green",
    "65s:blue 64s:green 63s:green 62s:green",
    "54s:blue 53s:green 52s:green",
    "43s:green 42s:green",
    "32s:green",
    "AKo:red AQo:red AJo:red ATo:red KQo:red KJo:red KTo:red QJo:yellow JTo:yellow QTo:yellow KTo:yellow",
    "A9o:blue A8o:blue A7o:blue",
    "Q9o:blue J9o:blue J8o:blue",
    "T9o:blue T8o:blue 98o:blue 97o:blue 87o:blue",
    "A6o:green A5o:green A4o:green A3o:green A2o:green",
    "K9o:green K8o:green K7o:green K6o:green K5o:green K4o:green K3o:green K2o:green",
    "Q8o:green Q7o:green Q6o:green Q5o:green Q4o:green Q3o:green Q2o:green",
    "J7o:green J6o:green J5o:green J4o:green J3o:green J2o:green",
    "T7o:green T6o:green T5o:green T4o:green T3o:green T2o:green",
    "96o:green 95o:green 94o:green 93o:green 92o:green",
    "86o:green 85o:green 84o:green 83o:green 82o:green",
    "76o:green 75o:green 74o:green 73o:green 72o:green",
    "65o:green 64o:green 63o:green 62o:green",
    "54o:green 53o:green 52o:green",
    "43o:green 42o:green",
    "32o:green",
)


def _build_chart(rows: tuple[str, ...]) -> dict[str, ChartTier]:
    chart: dict[str, ChartTier] = {}
    for row in rows:
        for entry in row.split():
            hand, color = entry.split(":")
            chart[hand] = ChartTier.from_color(color)
    return chart


PREFLOP_CHART: Mapping[str, ChartTier] = MappingProxyType(_build_chart(_CHART_ROWS))

DEFAULT_CHART_TIER = ChartTier.FOLD


POSITION_MULTIPLIERS: Mapping[Position, float] = MappingProxyType({
    Position.EARLY: 0.8,
    Position.MIDDLE: 1.0,
    Position.LATE: 1.2,
    Position.BUTTON: 1.3,
    Position.SMALL_BLIND: 1.1,
    Position.BIG_BLIND: 0.9,
})

# Offset added to the normalized preflop rank, by player count
PLAYER_COUNT_PENALTY: Mapping[int, float] = MappingProxyType({
    2: -0.2, 3: -0.3, 4: -0.4, 5: -0.5, 6: -0.6, 7: -0.7, 8: -0.8, 9: -0.9,
})

MIN_PLAYERS = 2
MAX_PLAYERS = 9


def _player_row(*offsets: float) -> Mapping[int, float]:
    return MappingProxyType(dict(zip(range(MIN_PLAYERS, MAX_PLAYERS + 1), offsets)))


# Made-hand rank offsets by player count: weak hands lose value multiway
CATEGORY_PLAYER_ADJUSTMENTS: Mapping[HandCategory, Mapping[int, float]] = MappingProxyType({
    HandCategory.HIGH_CARD: _player_row(-0.3, -0.5, -0.7, -0.8, -0.9, -1.0, -1.0, -1.1),
    HandCategory.PAIR: _player_row(-0.2, -0.3, -0.4, -0.5, -0.6, -0.7, -0.8, -0.9),
    HandCategory.TWO_PAIR: _player_row(-0.1, -0.2, -0.3, -0.4, -0.5, -0.6, -0.7, -0.8),
    HandCategory.THREE_OF_A_KIND: _player_row(0.0, -0.1, -0.2, -0.3, -0.4, -0.5, -0.6, -0.7),
    HandCategory.STRAIGHT: _player_row(0.1, 0.0, -0.1, -0.2, -0.3, -0.4, -0.5, -0.6),
    HandCategory.FLUSH: _player_row(0.2, 0.1, 0.0, -0.1, -0.2, -0.3, -0.4, -0.5),
    HandCategory.FULL_HOUSE: _player_row(0.3, 0.2, 0.1, 0.0, -0.1, -0.2, -0.3, -0.4),
    HandCategory.FOUR_OF_A_KIND: _player_row(0.4, 0.3, 0.2, 0.1, 0.0, -0.1, -0.2, -0.3),
    HandCategory.STRAIGHT_FLUSH: _player_row(0.5, 0.4, 0.3, 0.2, 0.1, 0.0, -0.1, -0.2),
    HandCategory.ROYAL_FLUSH: _player_row(0.6, 0.5, 0.4, 0.3, 0.2, 0.1, 0.0, -0.1),
})


def _check_tables() -> None:
    missing = [c for c in HandCategory if c not in CATEGORY_PLAYER_ADJUSTMENTS]
    if missing:
        raise RuntimeError(f"No player adjustment for categories: {missing}")
    for category, row in CATEGORY_PLAYER_ADJUSTMENTS.items():
        if sorted(row) != list(range(MIN_PLAYERS, MAX_PLAYERS + 1)):
            raise RuntimeError(f"Incomplete player adjustment row for {category.label}")
    missing_positions = [p for p in Position if p not in POSITION_MULTIPLIERS]
    if missing_positions:
        raise RuntimeError(f"No multiplier for positions: {missing_positions}")
    canonical = set(get_all_hands())
    for name, table in (
        ("rankings", PREFLOP_RANKINGS),
        ("win percentages", PREFLOP_WIN_PERCENTAGES),
        ("chart", PREFLOP_CHART),
    ):
        unknown = sorted(set(table) - canonical)
        if unknown:
            raise RuntimeError(f"Non-canonical hands in preflop {name}: {unknown}")


_check_tables()


def check_player_count(player_count: int) -> int:
    """Validate a player count against the supported table sizes."""
    if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
        raise ValueError(
            f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count}"
        )
    return player_count


def adjusted_rank(category: HandCategory, player_count: int) -> float:
    """
    Category rank shifted by the multiway adjustment.

    Args:
        category: Classified hand category
        player_count: Players in the hand (2-9)

    Returns:
        Category rank (1-10) plus the table offset
    """
    check_player_count(player_count)
    return category.value + CATEGORY_PLAYER_ADJUSTMENTS[category][player_count]
