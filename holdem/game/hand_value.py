"""Comparable hand strength values."""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

from .cards import Rank, RANK_STR


class HandCategory(IntEnum):
    """Hand categories, higher is better."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]

    @property
    def kicker_count(self) -> int:
        """Number of kickers a value of this category carries."""
        return KICKER_COUNTS[self]


CATEGORY_NAMES = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

KICKER_COUNTS = {
    HandCategory.STRAIGHT_FLUSH: 1,
    HandCategory.FOUR_OF_A_KIND: 2,
    HandCategory.FULL_HOUSE: 2,
    HandCategory.FLUSH: 5,
    HandCategory.STRAIGHT: 1,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.TWO_PAIR: 3,
    HandCategory.ONE_PAIR: 4,
    HandCategory.HIGH_CARD: 5,
}


def rank_symbol(rank: int) -> str:
    """Display symbol for a rank: 2-9, T, J, Q, K, A."""
    return RANK_STR.get(int(rank), "?")


def compare_hand_values(a: "HandValue", b: "HandValue") -> int:
    """
    Compare two hand values.

    Category decides first, then kickers element by element in stored
    order. If one kicker sequence is a prefix of the other, the longer
    one wins; valid values of the same category never differ in length.

    Returns:
        1 if a is stronger, -1 if b is stronger, 0 if equal
    """
    if a.category != b.category:
        return 1 if a.category > b.category else -1

    for ka, kb in zip(a.kickers, b.kickers):
        if ka > kb:
            return 1
        if ka < kb:
            return -1

    if len(a.kickers) == len(b.kickers):
        return 0
    return 1 if len(a.kickers) > len(b.kickers) else -1


@total_ordering
@dataclass(frozen=True)
class HandValue:
    """
    Strength of a five-card hand.

    Kickers are ranks ordered by how decisive they are, e.g. a full
    house stores (trip rank, pair rank) and one pair stores the pair
    rank followed by three kickers in descending order.
    """
    category: HandCategory
    kickers: tuple[Rank, ...]

    def __lt__(self, other: "HandValue") -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return compare_hand_values(self, other) < 0

    @property
    def kicker_symbols(self) -> list[str]:
        return [rank_symbol(r) for r in self.kickers]

    def describe(self) -> str:
        """Human readable form, e.g. 'Two Pair (3, 2, 7)'."""
        return f"{self.category.display_name} ({', '.join(self.kicker_symbols)})"

    def __str__(self) -> str:
        return self.describe()
