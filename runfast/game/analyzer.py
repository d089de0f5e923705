"""Combination analysis for submitted cards."""

from collections import Counter
from typing import Iterable

from runfast.models.card import Card, sort_cards
from runfast.models.combination import (
    MAX_SEQUENCE_LEN,
    MIN_SEQUENCE_LEN,
    Combination,
    Shape,
)

# Shape of a single rank group by its size
GROUP_SHAPES = {
    2: Shape.PAIR,
    3: Shape.TRIPLET,
    4: Shape.BOMB,
}


def is_consecutive(ranks: list[int]) -> bool:
    """Check if sorted rank values step by exactly one."""
    for i in range(len(ranks) - 1):
        if ranks[i + 1] - ranks[i] != 1:
            return False
    return True


def classify(cards: Iterable[Card]) -> Combination | None:
    """Classify cards into a combination.

    Suit and input order never affect the result.

    Args:
        cards: Cards to classify

    Returns:
        The combination, or None if the cards form no recognized shape
    """
    ordered = tuple(sort_cards(cards))
    n = len(ordered)
    if n == 0:
        return None

    counter = Counter(c.rank for c in ordered)
    ranks = sorted(counter)
    sizes = sorted(counter.values())

    # Single
    if n == 1:
        return Combination(ordered, Shape.SINGLE, ordered[0].rank)

    # Pair, triplet or bomb: a single rank group
    if len(counter) == 1 and n in GROUP_SHAPES:
        return Combination(ordered, GROUP_SHAPES[n], ranks[0])

    # Consecutive pairs: two pairs one rank apart
    if n == 4:
        if sizes == [2, 2] and ranks[1] - ranks[0] == 1:
            return Combination(ordered, Shape.CONSECUTIVE_PAIRS, ranks[0])
        return None

    # Triplet with pair
    if n == 5 and sizes == [2, 3]:
        triplet_rank = next(r for r, count in counter.items() if count == 3)
        return Combination(ordered, Shape.TRIPLET_WITH_PAIR, triplet_rank)

    # Sequence: no repeats, consecutive ranks
    if MIN_SEQUENCE_LEN <= n <= MAX_SEQUENCE_LEN and len(counter) == n:
        if is_consecutive([c.strength() for c in ordered]):
            return Combination(ordered, Shape.SEQUENCE, ranks[0])

    return None


class CardAnalyzer:
    """Analyzes submitted card combinations."""

    def analyze(self, cards: Iterable[Card]) -> Combination | None:
        """Classify cards, see `classify`."""
        return classify(cards)
