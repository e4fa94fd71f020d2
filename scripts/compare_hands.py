#!/usr/bin/env python3
"""Decide a heads-up showdown on a complete board."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from holdem.errors import HoldemError
from holdem.game.cards import parse_cards
from holdem.game.evaluator import Winner, determine_winner, evaluate_best_hand


def main():
    parser = argparse.ArgumentParser(
        description="Compare two players' hands on a 5-card board"
    )
    parser.add_argument("--p1", required=True, help="Player 1 hole cards (e.g., 'HAHK')")
    parser.add_argument("--p2", required=True, help="Player 2 hole cards (e.g., 'DQCQ')")
    parser.add_argument(
        "-b", "--board",
        required=True,
        help="Five community cards (e.g., 'C2 D7 SK H9 S3')",
    )

    args = parser.parse_args()
    console = Console()

    try:
        p1 = parse_cards(args.p1)
        p2 = parse_cards(args.p2)
        board = parse_cards(args.board)
        winner = determine_winner(p1, p2, board)
    except HoldemError as e:
        console.print(f"[red]{e}[/]")
        return 1

    p1_value = evaluate_best_hand(p1 + board)
    p2_value = evaluate_best_hand(p2 + board)

    lines = [
        f"[cyan]Player 1[/] {' '.join(map(str, p1))}: {p1_value.describe()}",
        f"[cyan]Player 2[/] {' '.join(map(str, p2))}: {p2_value.describe()}",
    ]
    if winner is Winner.TIE:
        result = "[yellow]Tie[/]"
    else:
        result = f"[green]{winner.value} wins[/]"

    console.print(Panel("\n".join(lines), title=f"[bold]Board {' '.join(map(str, board))}[/]"))
    console.print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
