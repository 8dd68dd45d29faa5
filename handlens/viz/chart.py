"""Preflop chart rendering on the 13x13 starting-hand grid."""

from typing import Callable, Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from handlens.game.charts import (
    ChartTier,
    DEFAULT_CHART_TIER,
    PREFLOP_CHART,
)
from handlens.game.preflop import preflop_win_percentage

RANKS = "AKQJT98765432"


def _cell_notation(row: int, col: int) -> str:
    """Pairs on the diagonal, suited hands above it, offsuit below."""
    if row == col:
        return RANKS[row] * 2
    high, low = sorted((row, col))
    suffix = "s" if row < col else "o"
    return RANKS[high] + RANKS[low] + suffix


HAND_MATRIX: list[list[str]] = [
    [_cell_notation(row, col) for col in range(len(RANKS))]
    for row in range(len(RANKS))
]

# Strongest tier first; index doubles as the heatmap value
TIER_ORDER = (
    ChartTier.STRONG_RAISE,
    ChartTier.RAISE_OR_CALL,
    ChartTier.SPECULATIVE_CALL,
    ChartTier.FOLD,
)

_TERMINAL_STYLES = {
    ChartTier.STRONG_RAISE: Style(bgcolor="red", color="white"),
    ChartTier.RAISE_OR_CALL: Style(bgcolor="yellow", color="black"),
    ChartTier.SPECULATIVE_CALL: Style(bgcolor="blue", color="white"),
    ChartTier.FOLD: Style(bgcolor="green", color="white"),
}


def _grid(value: Callable[[str], float], dtype=float) -> np.ndarray:
    return np.array([[value(hand) for hand in row] for row in HAND_MATRIX], dtype=dtype)


class ChartDisplay:
    """
    Preflop chart as a starting-hand grid.

    Prints tier-colored cells with rich, or draws a matplotlib heatmap of
    either the chart tiers or the heads-up win percentages.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @staticmethod
    def tier(hand: str) -> ChartTier:
        return PREFLOP_CHART.get(hand, DEFAULT_CHART_TIER)

    def tier_matrix(self) -> np.ndarray:
        """Tier index per cell (0 = strong raise, 3 = fold)."""
        return _grid(lambda hand: TIER_ORDER.index(self.tier(hand)), dtype=int)

    def win_matrix(self) -> np.ndarray:
        """Heads-up win percentage per cell."""
        return _grid(preflop_win_percentage)

    def display_terminal(self, title: str = "Preflop Chart", highlight: Optional[str] = None) -> None:
        """Print the chart, reversing the style of the highlighted hand."""
        table = Table(title=title, header_style="bold")
        table.add_column("", style="bold")
        for rank in RANKS:
            table.add_column(rank, justify="center")

        for rank, hands in zip(RANKS, HAND_MATRIX):
            cells = []
            for hand in hands:
                style = _TERMINAL_STYLES[self.tier(hand)]
                if hand == highlight:
                    style += Style(bold=True, reverse=True)
                cells.append(Text(f"{hand:^3}", style=style))
            table.add_row(rank, *cells)

        self.console.print(table)
        legend = "  ".join(f"[{tier.color}]{tier.action}[/]" for tier in TIER_ORDER)
        self.console.print(f"Legend: {legend}")

    def plot(
        self,
        title: str = "Preflop Chart",
        figsize: tuple[int, int] = (10, 10),
        show_win_percentages: bool = False,
        save_path: Optional[str] = None,
    ) -> None:
        """
        Draw the grid as a heatmap.

        Args:
            title: Plot title
            figsize: Figure size in inches
            show_win_percentages: Color by heads-up win % instead of chart tier
            save_path: Write the image here instead of opening a window
        """
        fig, ax = plt.subplots(figsize=figsize)

        if show_win_percentages:
            im = ax.imshow(self.win_matrix(), cmap="RdYlGn", vmin=45, vmax=90)
            fig.colorbar(im, ax=ax, label="Heads-up win %")
        else:
            cmap = ListedColormap([tier.color for tier in TIER_ORDER])
            ax.imshow(self.tier_matrix(), cmap=cmap, vmin=0, vmax=len(TIER_ORDER) - 1)

        ticks = np.arange(len(RANKS))
        ax.set_xticks(ticks, labels=list(RANKS))
        ax.set_yticks(ticks, labels=list(RANKS))

        for (row, col), hand in np.ndenumerate(np.array(HAND_MATRIX)):
            # Yellow cells need dark text
            dark = self.tier(hand) is ChartTier.RAISE_OR_CALL
            ax.text(col, row, hand, ha="center", va="center",
                    color="black" if dark else "white", fontsize=8)

        ax.set_title(title)

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches="tight")
        else:
            plt.show()
        plt.close(fig)


def display_chart(highlight: Optional[str] = None, title: str = "Preflop Chart") -> None:
    """Print the chart to stdout, optionally marking one hand."""
    ChartDisplay().display_terminal(title=title, highlight=highlight)
