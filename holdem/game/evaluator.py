"""
Best-hand evaluation.

Seven cards are searched exhaustively: every one of the C(7,5) = 21
five-card subsets is classified and the strongest value is kept.
"""

from enum import Enum
from typing import Optional, Sequence

from holdem.errors import InvalidCommunityCount, InvalidHandSize, InvalidHoleCount
from .cards import Card, Rank, Suit, ensure_distinct
from .hand_value import HandCategory, HandValue, compare_hand_values

HAND_SIZE = 7
FIVE = 5


class Winner(Enum):
    """Outcome of a two-player showdown."""
    PLAYER1 = "player1"
    PLAYER2 = "player2"
    TIE = "tie"


def next_combination(indexes: list[int], n: int) -> bool:
    """
    Advance indexes in place to the next k-combination of range(n).

    Combinations are produced in lexicographic order. Returns False
    once the last combination has been passed.
    """
    k = len(indexes)
    for i in range(k - 1, -1, -1):
        if indexes[i] != i + n - k:
            indexes[i] += 1
            for j in range(i + 1, k):
                indexes[j] = indexes[j - 1] + 1
            return True
    return False


def evaluate_best_hand(cards: Sequence[Card]) -> HandValue:
    """
    Find the best five-card hand within exactly seven cards.

    Args:
        cards: Seven distinct cards (2 hole + 5 community)

    Returns:
        The strongest HandValue of any five-card subset
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(f"Best hand evaluation requires exactly 7 cards, got {len(cards)}")
    ensure_distinct(cards)

    indexes = list(range(FIVE))
    best = evaluate_five([cards[i] for i in indexes])
    while next_combination(indexes, HAND_SIZE):
        value = evaluate_five([cards[i] for i in indexes])
        # Strictly greater, so ties keep the first subset found
        if compare_hand_values(value, best) > 0:
            best = value
    return best


def evaluate_five(cards: Sequence[Card]) -> HandValue:
    """Classify exactly five cards."""
    ordered = sorted(cards, key=lambda c: c.rank, reverse=True)
    ranks = [c.rank for c in ordered]

    flush_suit = detect_flush(ordered)
    straight_top = detect_straight(ordered)

    if flush_suit is not None:
        suited = [c for c in ordered if c.suit == flush_suit]
        suited_top = detect_straight(suited)
        if suited_top is not None:
            return HandValue(HandCategory.STRAIGHT_FLUSH, (suited_top,))
        return HandValue(HandCategory.FLUSH, tuple(c.rank for c in suited[:FIVE]))

    if straight_top is not None:
        return HandValue(HandCategory.STRAIGHT, (straight_top,))

    groups = _rank_groups(ranks)
    top_rank, top_count = groups[0]
    second_count = groups[1][1] if len(groups) > 1 else 0

    if top_count == 4:
        kicker = _kickers(ranks, {top_rank}, 1)
        return HandValue(HandCategory.FOUR_OF_A_KIND, (top_rank, *kicker))

    if top_count == 3 and second_count >= 2:
        return HandValue(HandCategory.FULL_HOUSE, (top_rank, groups[1][0]))

    if top_count == 3:
        kickers = _kickers(ranks, {top_rank}, 2)
        return HandValue(HandCategory.THREE_OF_A_KIND, (top_rank, *kickers))

    if top_count == 2 and second_count == 2:
        high_pair = max(top_rank, groups[1][0])
        low_pair = min(top_rank, groups[1][0])
        kicker = _kickers(ranks, {high_pair, low_pair}, 1)
        return HandValue(HandCategory.TWO_PAIR, (high_pair, low_pair, *kicker))

    if top_count == 2:
        kickers = _kickers(ranks, {top_rank}, 3)
        return HandValue(HandCategory.ONE_PAIR, (top_rank, *kickers))

    return HandValue(HandCategory.HIGH_CARD, tuple(ranks[:FIVE]))


def detect_flush(cards: Sequence[Card]) -> Optional[Suit]:
    """Return the suit shared by at least five cards, if any."""
    counts = [0] * len(Suit)
    for c in cards:
        counts[c.suit] += 1
    for suit in Suit:
        if counts[suit] >= FIVE:
            return suit
    return None


def detect_straight(cards: Sequence[Card]) -> Optional[Rank]:
    """
    Return the top rank of the best straight among the cards, if any.

    The wheel (A-2-3-4-5) counts as a straight topped by the Five.
    """
    seen = [False] * (Rank.ACE + 1)
    for c in cards:
        seen[c.rank] = True

    # Ace is encoded as 14, so the wheel never shows up as a plain
    # consecutive window and has to be checked on its own.
    if seen[Rank.ACE] and all(seen[r] for r in range(Rank.TWO, Rank.FIVE + 1)):
        return Rank.FIVE

    for top in range(Rank.ACE, Rank.FIVE - 1, -1):
        if all(seen[top - offset] for offset in range(FIVE)):
            return Rank(top)
    return None


def _rank_groups(ranks: Sequence[Rank]) -> list[tuple[Rank, int]]:
    """(rank, count) pairs sorted by count desc, then rank desc."""
    counts = [0] * (Rank.ACE + 1)
    for r in ranks:
        counts[r] += 1
    groups = [(Rank(r), counts[r]) for r in range(Rank.ACE, Rank.TWO - 1, -1) if counts[r]]
    groups.sort(key=lambda g: g[1], reverse=True)
    return groups


def _kickers(ranks: Sequence[Rank], exclude: set, n: int) -> list[Rank]:
    """Highest n ranks not in exclude, ranks already sorted descending."""
    return [r for r in ranks if r not in exclude][:n]


def determine_winner(
    hole1: Sequence[Card],
    hole2: Sequence[Card],
    board: Sequence[Card],
) -> Winner:
    """
    Decide a heads-up showdown on a complete board.

    Args:
        hole1: Player 1's two hole cards
        hole2: Player 2's two hole cards
        board: Five community cards

    Returns:
        Which player wins, or TIE
    """
    if len(hole1) != 2 or len(hole2) != 2:
        raise InvalidHoleCount("Each player needs exactly 2 hole cards")
    if len(board) != 5:
        raise InvalidCommunityCount("Showdown requires 5 community cards")
    ensure_distinct([*hole1, *hole2, *board])

    p1 = evaluate_best_hand([*hole1, *board])
    p2 = evaluate_best_hand([*hole2, *board])

    cmp = compare_hand_values(p1, p2)
    if cmp > 0:
        return Winner.PLAYER1
    if cmp < 0:
        return Winner.PLAYER2
    return Winner.TIE
