#!/usr/bin/env python3
"""Estimate hand equity against random opponents."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from holdem.errors import HoldemError
from holdem.game.cards import parse_cards
from holdem.game.equity import EXECUTORS, SimulationConfig, simulate_equity


def main():
    parser = argparse.ArgumentParser(
        description="Monte Carlo equity of a hand against random opponents"
    )
    parser.add_argument(
        "--hole",
        required=True,
        help="Hero hole cards (e.g., 'HAHK' or 'HA HK')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Known community cards: 0, 3, 4 or 5 (e.g., 'HQ HJ D2')",
    )
    parser.add_argument(
        "-n", "--opponents",
        type=int,
        default=1,
        help="Number of opponents (default: 1)",
    )
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=10000,
        help="Number of simulated deals (default: 10000)",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=4,
        help="Maximum number of workers (default: 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible runs",
    )
    parser.add_argument(
        "--executor",
        choices=EXECUTORS,
        default="process",
        help="How workers run (default: process)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )

    try:
        hole = parse_cards(args.hole)
        board = parse_cards(args.board)
        config = SimulationConfig(
            num_workers=args.workers,
            seed=args.seed,
            executor=args.executor,
        )

        console.print(f"[bold]Hero:[/] {' '.join(map(str, hole))}")
        console.print(f"[bold]Board:[/] {' '.join(map(str, board)) or '(none)'}")
        console.print(f"[bold]Opponents:[/] {args.opponents}")
        console.print()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task(f"Simulating {args.trials} deals...")
            result = simulate_equity(hole, board, args.opponents, args.trials, config)
    except HoldemError as e:
        console.print(f"[red]{e}[/]")
        return 1

    pct = result.percentages()

    table = Table(title="Equity")
    table.add_column("Outcome", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Percent", justify="right")
    table.add_row("Hero wins", str(result.hero_wins), f"[green]{pct.hero_win_pct:.2f}%[/]")
    table.add_row("Villain wins", str(result.villain_wins), f"[red]{pct.villain_win_pct:.2f}%[/]")
    table.add_row("Ties", str(result.ties), f"[yellow]{pct.tie_pct:.2f}%[/]")

    console.print(table)
    console.print(f"\n[dim]Trials run: {result.trials_run}[/]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
