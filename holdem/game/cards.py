"""Card and deck representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional
import re

from treys import Card as TreysCard

from holdem.errors import (
    DeckExhausted,
    DuplicateCardError,
    InvalidCardFormat,
    InvalidRank,
    InvalidSuit,
)


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. Only used for flush detection, never to break ties."""
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "H", 1: "D", 2: "C", 3: "S"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Card:
    """A playing card, written suit first: 'HA' is the Ace of Hearts."""
    suit: Suit
    rank: Rank

    @property
    def code(self) -> str:
        return f"{SUIT_STR[self.suit]}{RANK_STR[self.rank]}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return self.code

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Parse card from a two-character code like 'HA', 'CT', 'S7'.

        The suit letter comes first, then the rank symbol. Parsing is
        case-sensitive.
        """
        if not isinstance(s, str) or len(s) != 2:
            raise InvalidCardFormat(f"Invalid card format: {s!r}")
        suit_char, rank_char = s[0], s[1]

        if rank_char not in STR_RANK:
            raise InvalidRank(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise InvalidSuit(f"Invalid suit: {suit_char}")

        return cls(suit=Suit(STR_SUIT[suit_char]), rank=Rank(STR_RANK[rank_char]))

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(f"{RANK_STR[self.rank]}{SUIT_STR[self.suit].lower()}")


def parse_card(code: str) -> Card:
    """Parse a single card code."""
    return Card.from_string(code)


def parse_cards(cards: str | Iterable[str]) -> list[Card]:
    """
    Parse several cards at once.

    Accepts either a sequence of codes or one string such as
    'HA KD', 'HA,KD' or 'HAKD'.
    """
    if isinstance(cards, str):
        text = _SEPARATORS.sub("", cards)
        if len(text) % 2:
            raise InvalidCardFormat(f"Invalid card list: {cards!r}")
        codes = [text[i:i + 2] for i in range(0, len(text), 2)]
    else:
        codes = list(cards)
    return [Card.from_string(code) for code in codes]


def full_deck() -> list[Card]:
    """All 52 cards, suit-major then rank ascending."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def ensure_distinct(cards: Iterable[Card]) -> None:
    """Raise DuplicateCardError if any card appears twice."""
    seen = set()
    duplicates = []
    for card in cards:
        if card in seen and card.code not in duplicates:
            duplicates.append(card.code)
        seen.add(card)
    if duplicates:
        raise DuplicateCardError(duplicates)


class Deck:
    """A standard 52-card deck, optionally with known cards removed."""

    def __init__(self, exclude: Optional[Iterable[Card]] = None):
        self.cards: list[Card] = []
        self.reset()
        if exclude is not None:
            self.remove(exclude)

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self.cards = full_deck()

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n > len(self.cards):
            raise DeckExhausted(f"Cannot deal {n} cards, only {len(self.cards)} remaining")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt

    def remove(self, cards: Iterable[Card]) -> None:
        """Remove specific cards from the deck."""
        gone = set(cards)
        self.cards = [c for c in self.cards if c not in gone]

    def __contains__(self, card: Card) -> bool:
        return card in self.cards

    def __len__(self) -> int:
        return len(self.cards)
