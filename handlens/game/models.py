"""Table position, street and hand category models."""

from enum import Enum, IntEnum


class Position(Enum):
    """Abstract seat positions used for preflop adjustments."""
    EARLY = "early"
    MIDDLE = "middle"
    LATE = "late"
    BUTTON = "button"
    SMALL_BLIND = "small-blind"
    BIG_BLIND = "big-blind"

    @classmethod
    def from_string(cls, s: str) -> "Position":
        """Parse position from a tag or common seat abbreviation."""
        s = s.lower().strip().replace("_", "-")

        mapping = {
            "early": cls.EARLY,
            "utg": cls.EARLY,
            "utg+1": cls.EARLY,
            "ep": cls.EARLY,
            "middle": cls.MIDDLE,
            "mp": cls.MIDDLE,
            "hj": cls.MIDDLE,
            "hijack": cls.MIDDLE,
            "late": cls.LATE,
            "co": cls.LATE,
            "cutoff": cls.LATE,
            "button": cls.BUTTON,
            "btn": cls.BUTTON,
            "dealer": cls.BUTTON,
            "small-blind": cls.SMALL_BLIND,
            "small blind": cls.SMALL_BLIND,
            "sb": cls.SMALL_BLIND,
            "big-blind": cls.BIG_BLIND,
            "big blind": cls.BIG_BLIND,
            "bb": cls.BIG_BLIND,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown position: {s}")

    def __str__(self) -> str:
        return self.value


class Street(Enum):
    """Betting streets, derived from the number of community cards."""
    PREFLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3
    UNKNOWN = -1

    @classmethod
    def from_board_size(cls, n: int) -> "Street":
        """Map a community card count (0/3/4/5) to a street."""
        mapping = {
            0: cls.PREFLOP,
            3: cls.FLOP,
            4: cls.TURN,
            5: cls.RIVER,
        }
        return mapping.get(n, cls.UNKNOWN)

    def __str__(self) -> str:
        return self.name.lower()


class HandCategory(IntEnum):
    """Made-hand categories in strictly increasing strength."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        """Hyphenated key, e.g. 'three-of-a-kind'."""
        return self.name.lower().replace("_", "-")

    @property
    def title(self) -> str:
        """Display name, e.g. 'Three of a Kind'."""
        return _CATEGORY_TITLES[self]

    def __str__(self) -> str:
        return self.label


_CATEGORY_TITLES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}
