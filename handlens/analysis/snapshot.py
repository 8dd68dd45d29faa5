"""Game snapshot passed in by the table reader."""

from dataclasses import dataclass, field
from typing import Any, Optional

from handlens.game.cards import Card, CardError, ensure_unique, parse_cards
from handlens.game.charts import check_player_count
from handlens.game.models import Position, Street


def _pick(record: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def _parse_card_list(value: Any, name: str) -> list[Card]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple, str)):
        raise CardError(f"{name} must be a list of cards, got {type(value).__name__}")
    return parse_cards(value)


@dataclass(frozen=True)
class GameSnapshot:
    """
    Cards, pot and table size at one moment of a hand.

    Hole cards are 0-2 cards (anything other than 2 cannot be evaluated
    yet). The board is 0-5 cards; the street is derived from its size
    and counts other than 0/3/4/5 map to Street.UNKNOWN.
    """
    hole_cards: tuple[Card, ...] = field(default_factory=tuple)
    community_cards: tuple[Card, ...] = field(default_factory=tuple)
    pot: float = 0
    current_bet: float = 0
    player_count: int = 2
    position: Optional[Position] = None

    def __post_init__(self):
        hole = tuple(parse_cards(self.hole_cards))
        board = tuple(parse_cards(self.community_cards))
        object.__setattr__(self, "hole_cards", hole)
        object.__setattr__(self, "community_cards", board)

        if len(hole) > 2:
            raise ValueError(f"At most 2 hole cards, got {len(hole)}")
        if len(board) > 5:
            raise ValueError(f"At most 5 community cards, got {len(board)}")
        ensure_unique(hole + board)

        if self.pot < 0:
            raise ValueError(f"Pot cannot be negative, got {self.pot}")
        if self.current_bet < 0:
            raise ValueError(f"Current bet cannot be negative, got {self.current_bet}")
        check_player_count(self.player_count)

        if isinstance(self.position, str):
            object.__setattr__(self, "position", Position.from_string(self.position))
        elif self.position is not None and not isinstance(self.position, Position):
            raise ValueError(f"Invalid position: {self.position!r}")

    @property
    def street(self) -> Street:
        return Street.from_board_size(len(self.community_cards))

    @property
    def has_hole_cards(self) -> bool:
        return len(self.hole_cards) == 2

    @classmethod
    def from_dict(cls, record: dict) -> "GameSnapshot":
        """
        Build a snapshot from a table reader record.

        Accepts camelCase or snake_case keys. Cards may be strings
        ('As', 'K♠') or {"rank": ..., "suit": ...} records.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Snapshot record must be a dict, got {type(record).__name__}")

        return cls(
            hole_cards=tuple(_parse_card_list(
                _pick(record, "holeCards", "hole_cards"), "holeCards")),
            community_cards=tuple(_parse_card_list(
                _pick(record, "communityCards", "community_cards"), "communityCards")),
            pot=_pick(record, "pot", default=0),
            current_bet=_pick(record, "currentBet", "current_bet", default=0),
            player_count=int(_pick(record, "playerCount", "player_count", default=2)),
            position=_pick(record, "position") or None,
        )

    def __repr__(self) -> str:
        hole = "".join(str(c) for c in self.hole_cards) or "-"
        board = " ".join(str(c) for c in self.community_cards) or "-"
        return (
            f"GameSnapshot({hole} | {board}, pot={self.pot}, "
            f"bet={self.current_bet}, players={self.player_count})"
        )
