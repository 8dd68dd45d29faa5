"""Card and hand representation utilities."""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union

from treys import Card as TreysCard


class CardError(ValueError):
    """Raised when card data is missing or cannot be parsed."""


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

# Table software renders suits as symbols
SUIT_SYMBOLS = {"♣": 0, "♦": 1, "♥": 2, "♠": 3}
SUIT_NAMES = {"clubs": 0, "diamonds": 1, "hearts": 2, "spades": 3}


def _parse_rank(value) -> int:
    if value is None or value == "":
        raise CardError("Card is missing a rank")
    if isinstance(value, int) and not isinstance(value, bool):
        if 2 <= value <= 14:
            return value
        raise CardError(f"Invalid rank: {value}")
    token = str(value).strip().upper()
    if token == "10":
        token = "T"
    if token not in STR_RANK:
        raise CardError(f"Invalid rank: {value}")
    return STR_RANK[token]


def _parse_suit(value) -> int:
    if value is None or value == "":
        raise CardError("Card is missing a suit")
    token = str(value).strip()
    if token in SUIT_SYMBOLS:
        return SUIT_SYMBOLS[token]
    token = token.lower()
    if token in STR_SUIT:
        return STR_SUIT[token]
    if token in SUIT_NAMES:
        return SUIT_NAMES[token]
    raise CardError(f"Invalid suit: {value}")


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def rank_char(self) -> str:
        return RANK_STR[self.rank]

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Parse card from string like 'As', 'Th', '2c', '10d' or 'K♠'.
        """
        s = s.strip()
        if len(s) < 2:
            raise CardError(f"Invalid card string: {s!r}")
        rank_part, suit_part = s[:-1], s[-1]
        if len(rank_part) > 2:
            raise CardError(f"Invalid card string: {s!r}")
        return cls(rank=_parse_rank(rank_part), suit=_parse_suit(suit_part))

    @classmethod
    def from_dict(cls, data: dict) -> "Card":
        """Build a card from a {"rank": ..., "suit": ...} record."""
        if not isinstance(data, dict):
            raise CardError(f"Expected a card record, got {type(data).__name__}")
        return cls(rank=_parse_rank(data.get("rank")), suit=_parse_suit(data.get("suit")))

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


CardLike = Union[Card, str, dict]


def to_card(value: CardLike) -> Card:
    """Coerce a card, card string or card record to a Card."""
    if isinstance(value, Card):
        return value
    if isinstance(value, str):
        return Card.from_string(value)
    if isinstance(value, dict):
        return Card.from_dict(value)
    raise CardError(f"Cannot interpret {value!r} as a card")


# One rank (including "10") followed by one suit character
_JOINED_CARD = re.compile(r"(10|[2-9TJQKA])(.)", re.IGNORECASE)


def _split_joined(chunk: str) -> list[str]:
    """Split "AsKh7d" or "10s10h" into cards; unparseable chunks stay whole."""
    tokens = [rank + suit for rank, suit in _JOINED_CARD.findall(chunk)]
    if "".join(tokens) != chunk:
        return [chunk]
    return tokens


def parse_cards(cards: Optional[Union[str, Iterable[CardLike]]]) -> list[Card]:
    """
    Parse a collection of cards.

    Accepts a list of cards/strings/records, or a single string such
    as "AsKh" or "As Kh 7d".
    """
    if cards is None:
        return []
    if isinstance(cards, str):
        text = cards.replace(",", " ").split()
        tokens = [token for chunk in text for token in _split_joined(chunk)]
        return [Card.from_string(t) for t in tokens]
    return [to_card(c) for c in cards]


def ensure_unique(cards: Iterable[Card]) -> None:
    """Raise ValueError if any card appears more than once."""
    seen: set[Card] = set()
    for card in cards:
        if card in seen:
            raise ValueError(f"Duplicate cards detected: {card}")
        seen.add(card)


@dataclass(frozen=True)
class HoleCards:
    """Hero's two private cards, stored high card first."""
    card1: Card
    card2: Card

    def __post_init__(self):
        if self.card1 == self.card2:
            raise ValueError(f"Duplicate cards detected: {self.card1}")
        if self.card2.rank > self.card1.rank:
            high, low = self.card2, self.card1
            object.__setattr__(self, "card1", high)
            object.__setattr__(self, "card2", low)

    @property
    def is_pair(self) -> bool:
        return self.gap == 0

    @property
    def is_suited(self) -> bool:
        return self.card1.suit == self.card2.suit

    @property
    def gap(self) -> int:
        """Rank distance between the two cards (1 for connectors)."""
        return self.card1.rank - self.card2.rank

    @property
    def canonical(self) -> str:
        """Suit-free notation used by the preflop tables: 'AKs', 'QJo', '88'."""
        ranks = self.card1.rank_char + self.card2.rank_char
        if self.is_pair:
            return ranks
        return ranks + ("s" if self.is_suited else "o")

    @property
    def cards(self) -> list[Card]:
        return [self.card1, self.card2]

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"HoleCards({self.card1}, {self.card2})"

    @classmethod
    def from_cards(cls, cards: Iterable[CardLike]) -> "HoleCards":
        parsed = parse_cards(cards)
        if len(parsed) != 2:
            raise ValueError(f"Hole cards must be exactly 2 cards, got {len(parsed)}")
        return cls(parsed[0], parsed[1])

    @classmethod
    def from_string(cls, s: str) -> "HoleCards":
        """
        Parse exact cards ('AsKh', 'As Kh') or chart notation ('AKs', 'AKo', 'QQ').

        Chart notation picks representative suits: spades for the high
        card, spades or hearts for the low card.
        """
        text = s.strip()
        notation = text.upper()
        if len(notation) == 2 and notation[0] == notation[1]:
            rank = _parse_rank(notation[0])
            return cls(Card(rank, Suit.SPADES), Card(rank, Suit.HEARTS))
        if len(notation) == 3 and notation[2] in ("S", "O") and notation[1] in STR_RANK:
            high, low = _parse_rank(notation[0]), _parse_rank(notation[1])
            low_suit = Suit.SPADES if notation[2] == "S" else Suit.HEARTS
            return cls(Card(high, Suit.SPADES), Card(low, low_suit))
        try:
            return cls.from_cards(text)
        except CardError as e:
            raise ValueError(f"Invalid hand string: {s} ({e})") from e


def full_deck() -> list[Card]:
    """All 52 cards, ordered by rank then suit."""
    return [Card(rank, suit) for rank in Rank for suit in Suit]


def remaining_deck(*known: Iterable[Card]) -> list[Card]:
    """
    Full deck minus every known card.

    Args:
        *known: Any number of card groups (hole cards, board,
            other visible cards)

    Returns:
        Unseen cards in full_deck() order
    """
    seen = {card for group in known for card in group}
    return [card for card in full_deck() if card not in seen]


def get_all_hands() -> list[str]:
    """The 169 canonical starting hands: pairs, then suited/offsuit by high card."""
    order = [RANK_STR[rank] for rank in sorted(RANK_STR, reverse=True)]
    pairs = [r + r for r in order]
    unpaired = [
        high + low + suffix
        for i, high in enumerate(order)
        for low in order[i + 1:]
        for suffix in ("s", "o")
    ]
    return pairs + unpaired
