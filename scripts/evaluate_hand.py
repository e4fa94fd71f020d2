#!/usr/bin/env python3
"""Show the best five-card hand for hole cards plus a full board."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from holdem.errors import HoldemError, InvalidCommunityCount, InvalidHoleCount
from holdem.game.cards import parse_cards
from holdem.game.evaluator import evaluate_best_hand


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate the best hand from 2 hole cards and 5 community cards"
    )
    parser.add_argument(
        "--hole",
        required=True,
        help="Hole cards (e.g., 'HAHK' or 'HA KH')",
    )
    parser.add_argument(
        "-b", "--board",
        required=True,
        help="Five community cards (e.g., 'HQ HJ HT S2 S3')",
    )

    args = parser.parse_args()
    console = Console()

    try:
        hole = parse_cards(args.hole)
        board = parse_cards(args.board)
        if len(hole) != 2:
            raise InvalidHoleCount(f"Need exactly 2 hole cards, got {len(hole)}")
        if len(board) != 5:
            raise InvalidCommunityCount(f"Need exactly 5 community cards, got {len(board)}")
        value = evaluate_best_hand(hole + board)
    except HoldemError as e:
        console.print(f"[red]{e}[/]")
        return 1

    table = Table(title="Best Hand", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Cards", " ".join(str(c) for c in hole + board))
    table.add_row("Category", f"[bold]{value.category.display_name}[/]")
    table.add_row("Kickers", " ".join(value.kicker_symbols))

    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
