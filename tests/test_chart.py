"""Tests for chart display."""

import io

from rich.console import Console

from handlens.game.charts import ChartTier
from handlens.viz import HAND_MATRIX, ChartDisplay, display_chart


class TestHandMatrix:
    def test_layout(self):
        assert len(HAND_MATRIX) == 13
        assert all(len(row) == 13 for row in HAND_MATRIX)
        assert HAND_MATRIX[0][0] == "AA"
        assert HAND_MATRIX[0][1] == "AKs"
        assert HAND_MATRIX[1][0] == "AKo"
        assert HAND_MATRIX[12][12] == "22"

    def test_all_hands_once(self):
        hands = [hand for row in HAND_MATRIX for hand in row]
        assert len(set(hands)) == 169


class TestChartDisplay:
    def test_tier_matrix(self):
        matrix = ChartDisplay().tier_matrix()
        assert matrix.shape == (13, 13)
        assert matrix[0, 0] == 0  # AA strong raise
        assert matrix[12, 0] == 3  # A2o fold

    def test_tier_lookup(self):
        assert ChartDisplay.tier("KTo") == ChartTier.RAISE_OR_CALL

    def test_win_matrix(self):
        matrix = ChartDisplay().win_matrix()
        assert matrix[0, 0] == 85.3
        assert matrix.min() >= 45

    def test_terminal_output(self):
        buffer = io.StringIO()
        display = ChartDisplay(Console(file=buffer, width=120))
        display.display_terminal(highlight="AKs")
        output = buffer.getvalue()
        assert "Preflop Chart" in output
        assert "AKs" in output
        assert "Fold" in output

    def test_plot_saves_image(self, tmp_path):
        path = tmp_path / "chart.png"
        ChartDisplay().plot(save_path=str(path))
        assert path.exists()

    def test_plot_win_percentages(self, tmp_path):
        path = tmp_path / "win.png"
        ChartDisplay().plot(show_win_percentages=True, save_path=str(path))
        assert path.stat().st_size > 0


def test_display_chart_prints(capsys):
    display_chart(highlight="72o", title="Opening Chart")
    assert "Opening Chart" in capsys.readouterr().out
