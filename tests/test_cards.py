"""Tests for cards, card parsing, hole cards and the deck."""

import pytest

from handlens.game.cards import (
    Card, CardError, HoleCards, Rank, Suit,
    RANK_STR, STR_RANK, ensure_unique, full_deck, get_all_hands,
    parse_cards, remaining_deck,
)


class TestCard:
    @pytest.mark.parametrize("text,rank,suit", [
        ("As", Rank.ACE, Suit.SPADES),
        ("Th", Rank.TEN, Suit.HEARTS),
        ("10h", Rank.TEN, Suit.HEARTS),
        ("kd", Rank.KING, Suit.DIAMONDS),
        ("2c", Rank.TWO, Suit.CLUBS),
        ("Q♠", Rank.QUEEN, Suit.SPADES),
        ("2♥", Rank.TWO, Suit.HEARTS),
        ("7♣", Rank.SEVEN, Suit.CLUBS),
        ("J♦", Rank.JACK, Suit.DIAMONDS),
    ])
    def test_from_string(self, text, rank, suit):
        assert Card.from_string(text) == Card(rank, suit)

    @pytest.mark.parametrize("text", ["Xs", "Ax", "A", "", "100s"])
    def test_from_string_rejects(self, text):
        with pytest.raises(CardError):
            Card.from_string(text)

    def test_card_error_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_string("1s")

    def test_str_uses_ten_character(self):
        assert str(Card.from_string("10d")) == "Td"
        assert Card.from_string("10d").rank_char == "T"

    def test_from_dict(self):
        assert Card.from_dict({"rank": "A", "suit": "♠"}) == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_dict({"rank": "10", "suit": "hearts"}) == Card(Rank.TEN, Suit.HEARTS)

    def test_from_dict_missing_suit(self):
        with pytest.raises(CardError, match="suit"):
            Card.from_dict({"rank": "A"})

    def test_from_dict_missing_rank(self):
        with pytest.raises(CardError, match="rank"):
            Card.from_dict({"rank": "", "suit": "h"})

    def test_from_dict_not_a_record(self):
        with pytest.raises(CardError):
            Card.from_dict("As")

    def test_hashable(self):
        assert len({Card.from_string("As"), Card.from_string("A♠"), Card(14, 3)}) == 1

    def test_to_treys_matches_treys_parser(self):
        from treys import Card as TreysCard
        assert Card.from_string("Kd").to_treys() == TreysCard.new("Kd")

    def test_rank_tables_invert(self):
        for rank, char in RANK_STR.items():
            assert STR_RANK[char] == rank


class TestParseCards:
    def test_compact_string(self):
        assert [str(c) for c in parse_cards("AsKh7d")] == ["As", "Kh", "7d"]

    def test_separators(self):
        assert [str(c) for c in parse_cards("As Kh, 7d")] == ["As", "Kh", "7d"]

    def test_symbols(self):
        assert [str(c) for c in parse_cards("Q♠7♠2♥")] == ["Qs", "7s", "2h"]

    @pytest.mark.parametrize("text,expected", [
        ("10s10h", ["Ts", "Th"]),
        ("10sAh", ["Ts", "Ah"]),
        ("Ah10s", ["Ah", "Ts"]),
        ("Q♠10♥", ["Qs", "Th"]),
        ("10c 10d", ["Tc", "Td"]),
        ("9s8s7s6d2c", ["9s", "8s", "7s", "6d", "2c"]),
    ])
    def test_joined_tens(self, text, expected):
        assert [str(c) for c in parse_cards(text)] == expected

    @pytest.mark.parametrize("text", ["100s", "AsK", "1s0h", "XsKh"])
    def test_bad_joined_strings(self, text):
        with pytest.raises(CardError):
            parse_cards(text)

    def test_mixed_list(self):
        parsed = parse_cards(["As", Card(Rank.KING, Suit.HEARTS), {"rank": "7", "suit": "d"}])
        assert [str(c) for c in parsed] == ["As", "Kh", "7d"]

    def test_none_is_empty(self):
        assert parse_cards(None) == []
        assert parse_cards("") == []

    def test_unknown_item(self):
        with pytest.raises(CardError):
            parse_cards([42])

    def test_ensure_unique(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ensure_unique(parse_cards("As Kh As"))
        ensure_unique(parse_cards("As Kh Ad"))


class TestHoleCards:
    def test_high_card_first(self):
        hand = HoleCards.from_string("7dKs")
        assert hand.card1 == Card.from_string("Ks")
        assert hand.card2 == Card.from_string("7d")
        assert hand.gap == 6

    def test_frozen(self):
        hand = HoleCards.from_string("AsKh")
        with pytest.raises(AttributeError):
            hand.card1 = Card.from_string("2c")

    @pytest.mark.parametrize("text,canonical,pair,suited", [
        ("8s8h", "88", True, False),
        ("AsKs", "AKs", False, True),
        ("AsKh", "AKo", False, False),
        ("KsAs", "AKs", False, True),
        ("QQ", "QQ", True, False),
        ("T9s", "T9s", False, True),
        ("72o", "72o", False, False),
        ("As Kh", "AKo", False, False),
    ])
    def test_notation(self, text, canonical, pair, suited):
        hand = HoleCards.from_string(text)
        assert hand.canonical == canonical
        assert hand.is_pair == pair
        assert hand.is_suited == suited

    def test_connectors_have_gap_one(self):
        assert HoleCards.from_string("9h8c").gap == 1
        assert HoleCards.from_string("Ah2c").gap == 12

    @pytest.mark.parametrize("text", ["AK", "AKx", "AsKhQd", "As"])
    def test_bad_strings(self, text):
        with pytest.raises(ValueError):
            HoleCards.from_string(text)

    def test_duplicate_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            HoleCards(Card.from_string("As"), Card.from_string("As"))

    def test_from_cards_wrong_count(self):
        with pytest.raises(ValueError, match="exactly 2"):
            HoleCards.from_cards(["As"])

    def test_str(self):
        assert str(HoleCards.from_string("KhAs")) == "AsKh"


class TestRemainingDeck:
    def test_full_deck(self):
        assert len(set(full_deck())) == 52

    def test_excludes_hole_and_board(self):
        hole = parse_cards("As Kh")
        board = parse_cards("Qs 7s 2h")
        remaining = remaining_deck(hole, board)

        assert len(remaining) == 47
        assert not set(hole + board) & set(remaining)

    def test_extra_visible_cards(self):
        remaining = remaining_deck(parse_cards("As Kh"), [], parse_cards("2c 3c"))
        assert len(remaining) == 48


def test_all_starting_hands():
    hands = get_all_hands()
    assert len(hands) == len(set(hands)) == 169
    assert hands[0] == "AA"
    assert {"AKs", "AKo", "72o", "22"} <= set(hands)
    assert sum(1 for h in hands if h.endswith("s")) == 78
