"""Best five-card hand classification.

Rules are checked strongest first and the first match wins, so a weaker
category is never evaluated once a stronger one has matched.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from .cards import Card, RANK_STR, ensure_unique, parse_cards
from .models import HandCategory

MIN_CARDS = 5
MAX_CARDS = 7


@dataclass(frozen=True)
class EvaluatedHand:
    """The best hand found in a set of cards."""
    category: HandCategory
    cards: tuple[Card, ...]  # Primary selection for the category
    kickers: tuple[Card, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def rank(self) -> int:
        return int(self.category)

    @property
    def best_five(self) -> tuple[Card, ...]:
        """The five cards that make the hand."""
        return self.cards + self.kickers

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class _Match:
    cards: tuple[Card, ...]
    kickers: tuple[Card, ...]
    description: str
    category: Optional[HandCategory] = None


Rule = Callable[[list[Card]], Optional[_Match]]


def _sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Highest rank first; suit breaks ties so ordering is total."""
    return sorted(cards, key=lambda c: (c.rank, c.suit), reverse=True)


def group_by_rank(cards: list[Card]) -> dict[int, list[Card]]:
    """Partition sorted cards by rank, highest rank first."""
    groups: dict[int, list[Card]] = defaultdict(list)
    for card in cards:
        groups[card.rank].append(card)
    return dict(sorted(groups.items(), reverse=True))


def group_by_suit(cards: list[Card]) -> dict[int, list[Card]]:
    """Partition sorted cards by suit; each group stays ordered by rank."""
    groups: dict[int, list[Card]] = defaultdict(list)
    for card in cards:
        groups[card.suit].append(card)
    return dict(groups)


def _plural(rank: int) -> str:
    return f"{RANK_STR[rank]}s"


def _others(cards: list[Card], *ranks: int) -> list[Card]:
    return [c for c in cards if c.rank not in ranks]


def find_straight(cards: list[Card]) -> Optional[tuple[Card, ...]]:
    """
    Highest five-card straight in sorted cards, or None.

    Slides a five-value window over the distinct ranks (highest first).
    The wheel (A-2-3-4-5) is checked last and returned five-high.
    """
    by_rank: dict[int, Card] = {}
    for card in cards:
        by_rank.setdefault(card.rank, card)
    values = sorted(by_rank, reverse=True)

    for i in range(len(values) - 4):
        window = values[i:i + 5]
        if window[0] - window[4] == 4:
            return tuple(by_rank[v] for v in window)

    if all(v in by_rank for v in (14, 5, 4, 3, 2)):
        return tuple(by_rank[v] for v in (5, 4, 3, 2, 14))
    return None


def _straight_flush(cards: list[Card]) -> Optional[_Match]:
    for suited in group_by_suit(cards).values():
        if len(suited) < 5:
            continue
        straight = find_straight(suited)
        if straight is None:
            continue
        if straight[0].rank == 14 and straight[-1].rank == 10:
            return _Match(straight, (), "Royal Flush", HandCategory.ROYAL_FLUSH)
        return _Match(
            straight, (),
            f"Straight Flush, {straight[0].rank_char} high",
            HandCategory.STRAIGHT_FLUSH,
        )
    return None


def _four_of_a_kind(cards: list[Card]) -> Optional[_Match]:
    for rank, group in group_by_rank(cards).items():
        if len(group) >= 4:
            kickers = _others(cards, rank)[:1]
            return _Match(tuple(group[:4]), tuple(kickers), f"Four of a Kind, {_plural(rank)}")
    return None


def _full_house(cards: list[Card]) -> Optional[_Match]:
    groups = group_by_rank(cards)
    trips = next((r for r, g in groups.items() if len(g) >= 3), None)
    if trips is None:
        return None
    pair = next((r for r, g in groups.items() if r != trips and len(g) >= 2), None)
    if pair is None:
        return None
    selected = groups[trips][:3] + groups[pair][:2]
    return _Match(tuple(selected), (), f"Full House, {_plural(trips)} over {_plural(pair)}")


def _flush(cards: list[Card]) -> Optional[_Match]:
    for suited in group_by_suit(cards).values():
        if len(suited) >= 5:
            top = suited[:5]
            return _Match(tuple(top), (), f"Flush, {top[0].rank_char} high")
    return None


def _straight(cards: list[Card]) -> Optional[_Match]:
    straight = find_straight(cards)
    if straight is None:
        return None
    return _Match(straight, (), f"Straight, {straight[0].rank_char} high")


def _three_of_a_kind(cards: list[Card]) -> Optional[_Match]:
    for rank, group in group_by_rank(cards).items():
        if len(group) >= 3:
            kickers = _others(cards, rank)[:2]
            return _Match(tuple(group[:3]), tuple(kickers), f"Three of a Kind, {_plural(rank)}")
    return None


def _two_pair(cards: list[Card]) -> Optional[_Match]:
    pairs = [(r, g) for r, g in group_by_rank(cards).items() if len(g) >= 2]
    if len(pairs) < 2:
        return None
    (high, high_group), (low, low_group) = pairs[:2]
    kickers = _others(cards, high, low)[:1]
    return _Match(
        tuple(high_group[:2] + low_group[:2]),
        tuple(kickers),
        f"Two Pair, {_plural(high)} and {_plural(low)}",
    )


def _pair(cards: list[Card]) -> Optional[_Match]:
    for rank, group in group_by_rank(cards).items():
        if len(group) >= 2:
            kickers = _others(cards, rank)[:3]
            return _Match(tuple(group[:2]), tuple(kickers), f"Pair of {_plural(rank)}")
    return None


def _high_card(cards: list[Card]) -> Optional[_Match]:
    return _Match((cards[0],), tuple(cards[1:5]), f"High Card, {cards[0].rank_char}")


# Strongest first. The straight flush rule also covers royal flushes.
CLASSIFIER_RULES: tuple[tuple[HandCategory, Rule], ...] = (
    (HandCategory.STRAIGHT_FLUSH, _straight_flush),
    (HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    (HandCategory.FULL_HOUSE, _full_house),
    (HandCategory.FLUSH, _flush),
    (HandCategory.STRAIGHT, _straight),
    (HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    (HandCategory.TWO_PAIR, _two_pair),
    (HandCategory.PAIR, _pair),
    (HandCategory.HIGH_CARD, _high_card),
)


def classify(cards: Iterable) -> EvaluatedHand:
    """
    Classify the best five-card hand.

    Args:
        cards: 5-7 unique cards (Card objects or strings like 'As')

    Returns:
        EvaluatedHand for the strongest category present
    """
    parsed = parse_cards(cards)
    if not MIN_CARDS <= len(parsed) <= MAX_CARDS:
        raise ValueError(
            f"Classification needs {MIN_CARDS}-{MAX_CARDS} cards, got {len(parsed)}"
        )
    ensure_unique(parsed)

    ordered = _sort_cards(parsed)
    for category, rule in CLASSIFIER_RULES:
        match = rule(ordered)
        if match is not None:
            return EvaluatedHand(
                category=match.category or category,
                cards=match.cards,
                kickers=match.kickers,
                description=match.description,
            )

    # _high_card always matches
    raise AssertionError("no classifier rule matched")


def paired_rank(hand: EvaluatedHand) -> Optional[int]:
    """
    Highest rank appearing at least twice in a grouped hand.

    Only pair, two pair, trips, full house and quads have one;
    straights and flushes return None even if a pair sits underneath.
    """
    if hand.category not in _GROUPED_CATEGORIES:
        return None
    counts: dict[int, int] = defaultdict(int)
    for card in hand.cards:
        counts[card.rank] += 1
    ranks = [r for r, n in counts.items() if n >= 2]
    return max(ranks) if ranks else None


_GROUPED_CATEGORIES = frozenset({
    HandCategory.PAIR,
    HandCategory.TWO_PAIR,
    HandCategory.THREE_OF_A_KIND,
    HandCategory.FULL_HOUSE,
    HandCategory.FOUR_OF_A_KIND,
})
