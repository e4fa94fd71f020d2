"""Exceptions raised by the hand evaluator and equity simulator."""


class HoldemError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(HoldemError, ValueError):
    """Malformed input detected at the boundary of an operation."""


class InvalidCardFormat(InvalidInputError):
    """Card code is not exactly two characters."""


class InvalidRank(InvalidInputError):
    """Unknown rank symbol in a card code."""


class InvalidSuit(InvalidInputError):
    """Unknown suit letter in a card code."""


class InvalidHandSize(InvalidInputError):
    """Best-hand evaluation needs exactly seven cards."""


class InvalidHoleCount(InvalidInputError):
    """A player must hold exactly two hole cards."""


class InvalidCommunityCount(InvalidInputError):
    """Board must have 0, 3, 4 or 5 cards."""


class InvalidOpponentCount(InvalidInputError):
    """At least one opponent is required."""


class DuplicateCardError(InvalidInputError):
    """The same card appears more than once."""

    def __init__(self, codes: list[str]):
        self.codes = codes
        super().__init__(f"Duplicate cards: {', '.join(codes)}")


class ConfigurationError(HoldemError):
    """Simulation cannot run as configured."""


class InsufficientCardsError(ConfigurationError):
    """Not enough cards left to complete the board and deal every opponent."""


class DeckExhausted(ConfigurationError):
    """Tried to deal more cards than the deck holds."""
