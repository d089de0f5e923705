"""Card and Hand models."""

from enum import IntEnum
from typing import Iterable, Iterator

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (value order is the hand-sort tie-break)."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


class Rank(IntEnum):
    """Card rank.

    Strength order: 3 < 4 < ... < K < A < 2
    """

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
    TWO = 15


# Map rank to display string
RANK_NAMES = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.TWO: "2",
}

SUIT_SYMBOLS = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: Rank

    def strength(self) -> int:
        """Get card strength for comparison. Suit never matters."""
        return int(self.rank)

    def sort_key(self) -> tuple[int, int]:
        """Key for ordering a hand: rank first, then suit."""
        return (int(self.rank), int(self.suit))

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Return cards sorted by rank, then suit."""
    return sorted(cards, key=Card.sort_key)


class Hand:
    """Ordered cards held by one player.

    A card may appear at most once. Cards enter by dealing or drawing
    and leave only by playing or discarding the exact cards.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards.
        """
        self._cards: list[Card] = []
        if cards:
            self.extend(cards)

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        assert card not in self._cards, f"Duplicate card in hand: {card}"
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Add several cards to the hand."""
        for card in cards:
            self.add(card)

    def remove(self, card: Card) -> None:
        """Remove a card from the hand."""
        assert card in self._cards, f"Card not in hand: {card}"
        self._cards.remove(card)

    def remove_cards(self, cards: Iterable[Card]) -> None:
        """Remove the exact cards played or discarded."""
        for card in cards:
            self.remove(card)

    def contains(self, card: Card) -> bool:
        """Check if card is in the hand."""
        return card in self._cards

    def contains_all(self, cards: Iterable[Card]) -> bool:
        """Check if every card is in the hand."""
        return all(card in self._cards for card in cards)

    def clear(self) -> None:
        """Remove all cards."""
        self._cards.clear()

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return len(self._cards) == 0

    def sort(self) -> None:
        """Sort the hand in place by rank, then suit."""
        self._cards = sort_cards(self._cards)

    def to_list(self) -> list[Card]:
        """Get cards as a list in hand order."""
        return list(self._cards)

    def copy(self) -> "Hand":
        """Create a copy of this hand."""
        return Hand(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        if not self._cards:
            return "[]"
        return "[" + ", ".join(str(c) for c in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"


def create_full_deck() -> list[Card]:
    """Create the 52-card deck, no jokers."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]
