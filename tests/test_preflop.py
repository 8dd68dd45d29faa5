"""Tests for preflop scoring and chart lookups."""

import pytest

from handlens.game import charts
from handlens.game.cards import HoleCards, get_all_hands, parse_cards
from handlens.game.charts import (
    ChartTier, PREFLOP_CHART, PREFLOP_RANKINGS, PREFLOP_WIN_PERCENTAGES,
    adjusted_rank, check_player_count,
)
from handlens.game.models import HandCategory, Position
from handlens.game.preflop import (
    PreflopCategory,
    canonical_notation,
    chart_suggestion,
    evaluate_preflop,
    preflop_win_percentage,
    strength_percent,
)


class TestEvaluatePreflop:
    def test_aces_heads_up(self):
        result = evaluate_preflop(HoleCards.from_string("AsAh"), 2, Position.MIDDLE)
        assert result.notation == "AA"
        assert result.category == PreflopCategory.PAIR
        assert result.preflop_rank == 1
        assert result.score == pytest.approx(-0.18)
        assert result.description.startswith("Pair of As")

    def test_suited_connector_boost(self):
        result = evaluate_preflop(parse_cards("8h 7h"), 6, Position.LATE)
        assert result.category == PreflopCategory.CONNECTORS
        assert result.score == pytest.approx(0.4032)
        assert result.description == "Suited Connectors 87s (40% strength)"

    def test_unlisted_hand_uses_default_rank(self):
        result = evaluate_preflop(parse_cards("7c 2d"), 2, Position.EARLY)
        assert result.preflop_rank == 100
        assert result.normalized_rank == pytest.approx(2.0)
        assert result.score == pytest.approx(1.4)
        assert result.chart.tier == ChartTier.FOLD

    def test_defaults(self):
        result = evaluate_preflop(parse_cards("As Kd"))
        assert result.player_count == 6
        assert result.position == Position.MIDDLE
        assert result.high_card == 14
        assert result.low_card == 13
        assert not result.suited

    @pytest.mark.parametrize("hand,category,label", [
        ("KsQd", PreflopCategory.CONNECTORS, "Connectors KQo"),
        ("AsJd", PreflopCategory.BROADWAY, "Broadway AJo"),
        ("As5s", PreflopCategory.SUITED, "Suited A5s"),
        ("9c4d", PreflopCategory.HIGH_CARD, "94o"),
        ("TsTd", PreflopCategory.PAIR, "Pair of Ts"),
    ])
    def test_categories(self, hand, category, label):
        result = evaluate_preflop(HoleCards.from_string(hand), 2)
        assert result.category == category
        assert result.description.startswith(label + " (")

    @pytest.mark.parametrize("score,percent", [
        (0.125, 13),
        (0.625, 63),
        (0.4032, 40),
        (-0.125, -12),
        (-0.18, -18),
    ])
    def test_strength_percent_rounds_halves_up(self, score, percent):
        assert strength_percent(score) == percent

    def test_invalid_player_count(self):
        with pytest.raises(ValueError, match="between 2 and 9"):
            evaluate_preflop(parse_cards("As Kd"), 10)

    def test_wrong_card_count(self):
        with pytest.raises(ValueError):
            evaluate_preflop(parse_cards("As Kd Qh"))

    def test_better_position_scales_score(self):
        early = evaluate_preflop(parse_cards("Ks Qs"), 2, Position.EARLY)
        button = evaluate_preflop(parse_cards("Ks Qs"), 2, Position.BUTTON)
        assert early.score != button.score


class TestChart:
    @pytest.mark.parametrize("hand,tier", [
        ("AsAh", ChartTier.STRONG_RAISE),
        ("KsTd", ChartTier.RAISE_OR_CALL),
        ("6s6h", ChartTier.RAISE_OR_CALL),
        ("As5s", ChartTier.SPECULATIVE_CALL),
        ("7s2d", ChartTier.FOLD),
    ])
    def test_tiers(self, hand, tier):
        assert chart_suggestion(HoleCards.from_string(hand)).tier == tier

    def test_fold_suggestion(self):
        suggestion = chart_suggestion(parse_cards("9d 3c"))
        assert suggestion.notation == "93o"
        assert suggestion.action == "Fold"
        assert suggestion.color == "green"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            PREFLOP_RANKINGS["AA"] = 2

    def test_pairs_have_no_suffix(self):
        assert all(len(hand) == 2 for hand in PREFLOP_CHART if hand[0] == hand[1])

    @pytest.mark.parametrize("table", [PREFLOP_RANKINGS, PREFLOP_WIN_PERCENTAGES, PREFLOP_CHART])
    def test_table_keys_are_canonical_hands(self, table):
        assert set(table) <= set(get_all_hands())

    def test_non_canonical_key_rejected(self, monkeypatch):
        monkeypatch.setattr(charts, "PREFLOP_CHART", {"KAs": ChartTier.RAISE_OR_CALL})
        with pytest.raises(RuntimeError, match="KAs"):
            charts._check_tables()

    def test_tier_from_color(self):
        assert ChartTier.from_color("blue") == ChartTier.SPECULATIVE_CALL
        with pytest.raises(ValueError):
            ChartTier.from_color("purple")


class TestWinPercentages:
    def test_listed(self):
        assert preflop_win_percentage("AA") == 85.3
        assert preflop_win_percentage("AKs") == 67.0

    def test_default(self):
        assert preflop_win_percentage("72o") == 50.0

    def test_canonical_notation(self):
        ace, king = parse_cards("Kh Ah")
        assert canonical_notation(ace, king) == "AKs"


class TestAdjustedRank:
    def test_heads_up_flush(self):
        assert adjusted_rank(HandCategory.FLUSH, 2) == pytest.approx(6.2)

    def test_multiway_high_card(self):
        assert adjusted_rank(HandCategory.HIGH_CARD, 6) == pytest.approx(0.1)

    def test_nine_players(self):
        assert adjusted_rank(HandCategory.ROYAL_FLUSH, 9) == pytest.approx(9.9)

    @pytest.mark.parametrize("count", [1, 10])
    def test_out_of_range(self, count):
        with pytest.raises(ValueError):
            adjusted_rank(HandCategory.PAIR, count)
        with pytest.raises(ValueError):
            check_player_count(count)
