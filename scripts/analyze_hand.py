#!/usr/bin/env python3
"""Analyze a hand in progress.

Classify the made hand, count outs, compute pot and implied odds, and
estimate the win probability for a given set of hole and board cards.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handlens.analysis import AnalysisError, HandAnalysis, HandAnalyzer
from handlens.config import AnalyzerConfig
from handlens.game.models import Position
from handlens.game.odds import format_ratio


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate hand strength, odds and win probability"
    )
    parser.add_argument(
        "hole",
        help="Hole cards (e.g., 'AsKh' or 'As Kh')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Community cards (e.g., 'Qs7s2h'); omit for preflop",
    )
    parser.add_argument(
        "-p", "--pot",
        type=float,
        default=0.0,
        help="Current pot (default: 0)",
    )
    parser.add_argument(
        "-c", "--call",
        type=float,
        default=0.0,
        help="Amount to call (default: 0)",
    )
    parser.add_argument(
        "-n", "--players",
        type=int,
        default=2,
        help="Players in the hand, 2-9 (default: 2)",
    )
    parser.add_argument(
        "--position",
        choices=[p.value for p in Position],
        default=Position.MIDDLE.value,
        help="Hero's position (default: middle)",
    )
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=1000,
        help="Monte Carlo trials (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible results",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )

    args = parser.parse_args()
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    config = AnalyzerConfig(num_trials=args.trials, seed=args.seed)
    analyzer = HandAnalyzer(config)

    result = analyzer.analyze_record({
        "holeCards": args.hole,
        "communityCards": args.board,
        "pot": args.pot,
        "currentBet": args.call,
        "playerCount": args.players,
        "position": args.position,
    })

    if args.json:
        console.print_json(json.dumps(result.to_dict()))
        return 0 if not isinstance(result, AnalysisError) else 1

    if isinstance(result, AnalysisError):
        console.print(f"[red]Cannot analyze hand: {result.message}[/]")
        return 1

    _display_summary(console, result, args.hole, args.board)
    if result.is_complete:
        console.print()
        _display_odds(console, result)
    return 0


def _display_summary(console: Console, analysis: HandAnalysis, hole: str, board: str) -> None:
    """Display the hand summary panel."""
    lines = [
        f"[bold]Hole:[/] {hole}",
        f"[bold]Board:[/] {board or 'No board'} [dim]({analysis.street})[/]",
        f"[bold]Players:[/] {analysis.player_count} | [bold]Position:[/] {analysis.position}",
        f"[bold]Hand:[/] {analysis.description}",
    ]

    if analysis.hand is not None:
        cards = " ".join(str(c) for c in analysis.hand.cards)
        kickers = " ".join(str(c) for c in analysis.hand.kickers) or "-"
        lines.append(f"[bold]Cards:[/] {cards} [dim]kickers: {kickers}[/]")

    if analysis.preflop is not None:
        chart = analysis.preflop.chart
        lines.append(f"[bold]Chart:[/] [{chart.color}]{chart.action}[/] ({chart.notation})")

    console.print(Panel("\n".join(lines), title="Hand Summary", border_style="blue"))


def _display_odds(console: Console, analysis: HandAnalysis) -> None:
    """Display odds and equity."""
    table = Table(
        title="Odds",
        show_header=True,
        header_style="bold",
        box=box.SIMPLE,
    )
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Pot odds", format_ratio(analysis.pot_odds))
    table.add_row("Implied odds", format_ratio(analysis.implied_odds))

    outs = analysis.outs
    detail = []
    if outs.flush:
        detail.append(f"flush {outs.flush}")
    if outs.straight:
        detail.append(f"{outs.straight_draw} {outs.straight}")
    if outs.overcards:
        detail.append(f"overcards {outs.overcards}")
    outs_str = str(outs.total)
    if detail:
        outs_str += f" [dim]({', '.join(detail)})[/]"
    table.add_row("Outs", outs_str)
    table.add_row("Drawing odds", f"{analysis.drawing_odds:.1%}")

    equity = analysis.equity
    if equity is not None:
        win = equity.win_probability
        color = "green" if win >= 0.5 else "yellow" if win >= 0.3 else "red"
        win_str = f"[{color}]{win:.1%}[/]"
        if equity.capped:
            win_str += " [dim](capped)[/]"
        table.add_row("Win probability", win_str)
        table.add_row("Method", str(equity.method))

    console.print(table)


if __name__ == "__main__":
    sys.exit(main())
