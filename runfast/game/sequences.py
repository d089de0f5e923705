"""Sequence detection in a hand."""

from typing import Iterable, Iterator

from runfast.models.card import Card, sort_cards
from runfast.models.combination import (
    MAX_SEQUENCE_LEN,
    MIN_SEQUENCE_LEN,
    Combination,
    Shape,
)

from .analyzer import classify


def iter_sequences(hand: Iterable[Card]) -> Iterator[Combination]:
    """Yield every sequence window of the rank-sorted hand.

    Windows are contiguous slices of the sorted hand, so overlapping
    runs are all reported: a 7-card run yields windows of length 5, 6
    and 7. Order is window length ascending, then start index ascending.

    Args:
        hand: Cards to search

    Yields:
        Each window that classifies as a sequence
    """
    cards = sort_cards(hand)
    for length in range(MIN_SEQUENCE_LEN, MAX_SEQUENCE_LEN + 1):
        for start in range(len(cards) - length + 1):
            combination = classify(cards[start:start + length])
            if combination is not None and combination.shape == Shape.SEQUENCE:
                yield combination


def find_sequences(hand: Iterable[Card]) -> list[Combination]:
    """Find all sequences in the hand, recomputed on each call."""
    return list(iter_sequences(hand))
