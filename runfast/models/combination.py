"""Combination models."""

from dataclasses import dataclass
from enum import Enum

from .card import RANK_NAMES, Card, Rank

MIN_SEQUENCE_LEN = 5
MAX_SEQUENCE_LEN = 12


class Shape(str, Enum):
    """Shape of a card combination."""

    SINGLE = "single"
    PAIR = "pair"
    TRIPLET = "triplet"
    BOMB = "bomb"  # Four of a kind
    SEQUENCE = "sequence"  # 5-12 consecutive ranks
    CONSECUTIVE_PAIRS = "consecutive_pairs"  # e.g. 6-6-7-7
    TRIPLET_WITH_PAIR = "triplet_with_pair"  # e.g. 9-9-9-4-4


@dataclass(frozen=True)
class Combination:
    """A playable group of cards.

    Attributes:
        cards: Cards sorted by rank, then suit
        shape: Recognized shape
        key: Rank compared against combinations of the same shape
    """

    cards: tuple[Card, ...]
    shape: Shape
    key: Rank

    @property
    def arity(self) -> int:
        """Number of cards in the combination."""
        return len(self.cards)

    @property
    def is_bomb(self) -> bool:
        return self.shape == Shape.BOMB

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards = " ".join(str(c) for c in self.cards)
        return f"{self.shape.value}({RANK_NAMES[self.key]}): {cards}"
