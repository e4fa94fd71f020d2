"""Hand ranking and equity simulation."""

from .cards import Card, Deck, Rank, Suit, full_deck, parse_card, parse_cards
from .hand_value import HandCategory, HandValue, compare_hand_values
from .evaluator import Winner, determine_winner, evaluate_best_hand, evaluate_five
from .equity import (
    EquityPercentages,
    EquitySimulator,
    SimulationConfig,
    SimulationResult,
    simulate_equity,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "full_deck",
    "parse_card",
    "parse_cards",
    "HandCategory",
    "HandValue",
    "compare_hand_values",
    "Winner",
    "determine_winner",
    "evaluate_best_hand",
    "evaluate_five",
    "EquityPercentages",
    "EquitySimulator",
    "SimulationConfig",
    "SimulationResult",
    "simulate_equity",
]
