"""
Monte Carlo equity simulation.

Each trial shuffles the unseen cards, completes the board, deals two
cards to every opponent and compares everybody's best hand against the
hero's. Trials are split across a small worker pool; each worker owns
its own random generator and returns a partial tally which the caller
sums into the final result.
"""

from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence
import logging

import numpy as np

from holdem.errors import (
    ConfigurationError,
    InsufficientCardsError,
    InvalidCommunityCount,
    InvalidHoleCount,
    InvalidOpponentCount,
)
from .cards import Card, Deck, ensure_distinct
from .evaluator import evaluate_best_hand
from .hand_value import compare_hand_values

logger = logging.getLogger(__name__)

BOARD_SIZE = 5
HOLE_SIZE = 2
VALID_COMMUNITY_SIZES = (0, 3, 4, 5)
EXECUTORS = ("process", "thread", "serial")


class Outcome(Enum):
    """Result of a single trial from the hero's point of view."""
    HERO_WIN = auto()
    VILLAIN_WIN = auto()
    TIE = auto()


@dataclass
class SimulationConfig:
    """Configuration for the equity simulator."""
    num_workers: int = 4           # Upper bound, never more workers than trials
    seed: Optional[int] = None     # None draws fresh OS entropy per run
    executor: str = "process"      # "process", "thread" or "serial"

    def __post_init__(self):
        if self.num_workers < 1:
            raise ConfigurationError(f"num_workers must be >= 1, got {self.num_workers}")
        if self.executor not in EXECUTORS:
            raise ConfigurationError(
                f"Unknown executor {self.executor!r}, expected one of {', '.join(EXECUTORS)}"
            )


@dataclass(frozen=True)
class EquityPercentages:
    """Outcome frequencies in percent."""
    hero_win_pct: float
    villain_win_pct: float
    tie_pct: float


@dataclass
class SimulationResult:
    """Outcome counters for a batch of trials."""
    hero_wins: int = 0
    villain_wins: int = 0
    ties: int = 0
    trials_run: int = 0

    def record(self, outcome: Outcome) -> None:
        """Count one finished trial."""
        if outcome is Outcome.HERO_WIN:
            self.hero_wins += 1
        elif outcome is Outcome.VILLAIN_WIN:
            self.villain_wins += 1
        else:
            self.ties += 1
        self.trials_run += 1

    def merge(self, other: "SimulationResult") -> "SimulationResult":
        """Sum two tallies into a new result."""
        return SimulationResult(
            hero_wins=self.hero_wins + other.hero_wins,
            villain_wins=self.villain_wins + other.villain_wins,
            ties=self.ties + other.ties,
            trials_run=self.trials_run + other.trials_run,
        )

    def __add__(self, other: "SimulationResult") -> "SimulationResult":
        if not isinstance(other, SimulationResult):
            return NotImplemented
        return self.merge(other)

    def percentages(self) -> EquityPercentages:
        """
        Convert counts to percentages of trials run.

        Every percentage is 0.0 when no trials were run.
        """
        if self.trials_run == 0:
            return EquityPercentages(0.0, 0.0, 0.0)
        total = float(self.trials_run)
        return EquityPercentages(
            hero_win_pct=self.hero_wins / total * 100.0,
            villain_win_pct=self.villain_wins / total * 100.0,
            tie_pct=self.ties / total * 100.0,
        )


def split_trials(trials: int, max_workers: int) -> list[int]:
    """
    Divide trials across workers.

    Uses at most max_workers workers and never more than there are
    trials; the first worker also takes the remainder.
    """
    if trials <= 0:
        return []
    workers = min(max_workers, trials)
    per_worker, remainder = divmod(trials, workers)
    counts = [per_worker] * workers
    counts[0] += remainder
    return counts


def simulate_once(
    rng: np.random.Generator,
    hole: Sequence[Card],
    community: Sequence[Card],
    deck: Sequence[Card],
    num_opponents: int,
) -> Outcome:
    """
    Play out one random deal.

    Args:
        rng: Worker-local random generator
        hole: Hero's hole cards
        community: Known community cards
        deck: Cards not yet seen, never modified
        num_opponents: Number of opponents to deal in

    Returns:
        Trial outcome for the hero
    """
    to_draw = BOARD_SIZE - len(community)
    needed = to_draw + HOLE_SIZE * num_opponents
    if needed > len(deck):
        raise InsufficientCardsError(
            f"Trial needs {needed} cards but only {len(deck)} remain in the deck"
        )

    order = rng.permutation(len(deck))
    board = list(community) + [deck[i] for i in order[:to_draw]]
    hero_best = evaluate_best_hand([*hole, *board])

    tied = False
    idx = to_draw
    for _ in range(num_opponents):
        opp_hole = [deck[order[idx]], deck[order[idx + 1]]]
        idx += HOLE_SIZE

        cmp = compare_hand_values(evaluate_best_hand([*opp_hole, *board]), hero_best)
        if cmp > 0:
            # One better opponent is enough to lose the trial
            return Outcome.VILLAIN_WIN
        if cmp == 0:
            tied = True

    return Outcome.TIE if tied else Outcome.HERO_WIN


def run_trials(
    hole: Sequence[Card],
    community: Sequence[Card],
    deck: Sequence[Card],
    num_opponents: int,
    trials: int,
    seed: np.random.SeedSequence,
) -> SimulationResult:
    """Worker entry point: run a batch of trials with its own generator."""
    rng = np.random.default_rng(seed)
    result = SimulationResult()
    for _ in range(trials):
        result.record(simulate_once(rng, hole, community, deck, num_opponents))
    return result


class EquitySimulator:
    """
    Estimates hero equity against random opponents.

    Trials fan out over a fixed-size pool of workers; each worker gets
    an independent seed spawned from one SeedSequence, so a configured
    seed makes whole runs reproducible.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()

    def simulate(
        self,
        hole: Sequence[Card],
        community: Sequence[Card],
        num_opponents: int,
        trials: int,
    ) -> SimulationResult:
        """
        Estimate equity by random sampling.

        Args:
            hole: Hero's 2 hole cards
            community: 0, 3, 4 or 5 known community cards
            num_opponents: Number of opponents (1+)
            trials: Number of trials; zero or less gives an empty result

        Returns:
            Summed outcome counts across all workers
        """
        hole = list(hole)
        community = list(community)

        if len(hole) != HOLE_SIZE:
            raise InvalidHoleCount(f"Hero must have exactly 2 hole cards, got {len(hole)}")
        if len(community) not in VALID_COMMUNITY_SIZES:
            raise InvalidCommunityCount(
                f"Community must be 0, 3, 4, or 5 cards, got {len(community)}"
            )
        if num_opponents < 1:
            raise InvalidOpponentCount(f"num_opponents must be >= 1, got {num_opponents}")
        ensure_distinct(hole + community)

        deck = Deck(exclude=hole + community).cards
        needed = BOARD_SIZE - len(community) + HOLE_SIZE * num_opponents
        if needed > len(deck):
            raise InsufficientCardsError(
                f"{num_opponents} opponents need {needed} cards but only {len(deck)} remain"
            )

        batches = split_trials(trials, self.config.num_workers)
        if not batches:
            return SimulationResult()

        seeds = np.random.SeedSequence(self.config.seed).spawn(len(batches))
        logger.debug(
            "Running %d trials on %d %s worker(s): %s",
            trials, len(batches), self.config.executor, batches,
        )

        if self.config.executor == "serial":
            partials = [
                run_trials(hole, community, deck, num_opponents, n, seed)
                for n, seed in zip(batches, seeds)
            ]
        else:
            with self._make_executor(len(batches)) as ex:
                futures = [
                    ex.submit(run_trials, hole, community, deck, num_opponents, n, seed)
                    for n, seed in zip(batches, seeds)
                ]
                partials = [f.result() for f in as_completed(futures)]

        final = SimulationResult()
        for partial in partials:
            final = final.merge(partial)

        logger.debug(
            "Finished %d trials: %d hero wins, %d villain wins, %d ties",
            final.trials_run, final.hero_wins, final.villain_wins, final.ties,
        )
        return final

    def _make_executor(self, workers: int) -> Executor:
        if self.config.executor == "thread":
            return ThreadPoolExecutor(max_workers=workers)
        return ProcessPoolExecutor(max_workers=workers)


def simulate_equity(
    hole: Sequence[Card],
    community: Sequence[Card],
    num_opponents: int = 1,
    trials: int = 10000,
    config: Optional[SimulationConfig] = None,
) -> SimulationResult:
    """
    Estimate hero's win/lose/tie frequencies against random opponents.

    Args:
        hole: Hero's hole cards
        community: Known board cards
        num_opponents: Number of opponents
        trials: Number of random trials
        config: Worker pool and seeding options

    Returns:
        SimulationResult with counts summed across workers
    """
    return EquitySimulator(config).simulate(hole, community, num_opponents, trials)
