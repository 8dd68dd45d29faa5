#!/usr/bin/env python3
"""Show the preflop opening chart."""

import argparse
import sys
from pathlib import Path

from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handlens.game.cards import HoleCards
from handlens.game.preflop import chart_suggestion
from handlens.viz import ChartDisplay


def main():
    parser = argparse.ArgumentParser(
        description="Display the preflop chart in the terminal or as an image"
    )
    parser.add_argument(
        "hand",
        nargs="?",
        help="Highlight a hand (e.g., 'AKs' or 'AsKh')",
    )
    parser.add_argument(
        "-o", "--output",
        help="Save a heatmap image instead of printing",
    )
    parser.add_argument(
        "--win",
        action="store_true",
        help="Color the image by heads-up win percentage",
    )

    args = parser.parse_args()
    console = Console()
    display = ChartDisplay(console)

    notation = None
    if args.hand:
        try:
            hole = HoleCards.from_string(args.hand)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            return 1
        suggestion = chart_suggestion(hole)
        notation = suggestion.notation
        console.print(
            f"[bold]{notation}:[/] [{suggestion.color}]{suggestion.action}[/]"
        )
        console.print()

    if args.output:
        title = "Heads-up Win %" if args.win else "Preflop Chart"
        display.plot(title=title, show_win_percentages=args.win, save_path=args.output)
        console.print(f"[bold]Chart saved to:[/] {args.output}")
    else:
        display.display_terminal(highlight=notation)

    return 0


if __name__ == "__main__":
    sys.exit(main())
