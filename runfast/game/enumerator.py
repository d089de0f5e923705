"""Enumeration of the combinations a hand can form.

Rank groups are taken by exact size: a pair is a rank held exactly
twice, a triplet exactly three times and a bomb all four. Three Nines
therefore offer a triplet but no pair.
"""

from typing import Callable, Iterable

from runfast.models.card import Card, Rank, sort_cards
from runfast.models.combination import Combination, Shape
from runfast.models.game_state import TableState

from .sequences import find_sequences
from .validator import is_legal


def group_by_rank(hand: Iterable[Card]) -> dict[Rank, list[Card]]:
    """Group the sorted hand by rank, lowest rank first."""
    groups: dict[Rank, list[Card]] = {}
    for card in sort_cards(hand):
        groups.setdefault(card.rank, []).append(card)
    return groups


def _groups_of_size(
    groups: dict[Rank, list[Card]], size: int
) -> list[tuple[Rank, list[Card]]]:
    return [(rank, cards) for rank, cards in groups.items() if len(cards) == size]


def _group_combinations(hand: Iterable[Card], size: int, shape: Shape) -> list[Combination]:
    groups = group_by_rank(hand)
    return [
        Combination(tuple(cards), shape, rank)
        for rank, cards in _groups_of_size(groups, size)
    ]


def find_bombs(hand: Iterable[Card]) -> list[Combination]:
    """Find all four-of-a-kind groups."""
    return _group_combinations(hand, 4, Shape.BOMB)


def find_triplets(hand: Iterable[Card]) -> list[Combination]:
    """Find all ranks held exactly three times."""
    return _group_combinations(hand, 3, Shape.TRIPLET)


def find_pairs(hand: Iterable[Card]) -> list[Combination]:
    """Find all ranks held exactly twice."""
    return _group_combinations(hand, 2, Shape.PAIR)


def find_triplets_with_pair(hand: Iterable[Card]) -> list[Combination]:
    """Combine every triplet with every pair of another rank."""
    groups = group_by_rank(hand)
    result = []
    for triplet_rank, triplet in _groups_of_size(groups, 3):
        for pair_rank, pair in _groups_of_size(groups, 2):
            if pair_rank == triplet_rank:
                continue
            cards = tuple(sort_cards(triplet + pair))
            result.append(Combination(cards, Shape.TRIPLET_WITH_PAIR, triplet_rank))
    return result


def find_consecutive_pairs(hand: Iterable[Card]) -> list[Combination]:
    """Find every two pairs whose ranks differ by one."""
    pairs = _groups_of_size(group_by_rank(hand), 2)
    result = []
    for (low_rank, low), (high_rank, high) in zip(pairs, pairs[1:]):
        if high_rank - low_rank == 1:
            result.append(
                Combination(tuple(low + high), Shape.CONSECUTIVE_PAIRS, low_rank)
            )
    return result


def find_singles(hand: Iterable[Card]) -> list[Combination]:
    """Every card of the sorted hand as a single."""
    return [Combination((card,), Shape.SINGLE, card.rank) for card in sort_cards(hand)]


# Reference order for responses
RESPONSE_FINDERS: tuple[Callable[[Iterable[Card]], list[Combination]], ...] = (
    find_bombs,
    find_triplets,
    find_pairs,
    find_sequences,
    find_triplets_with_pair,
    find_consecutive_pairs,
    find_singles,
)


def enumerate_all(hand: Iterable[Card]) -> list[Combination]:
    """Every combination the hand can form, in reference order."""
    cards = list(hand)
    result: list[Combination] = []
    for finder in RESPONSE_FINDERS:
        result.extend(finder(cards))
    return result


def enumerate_responses(hand: Iterable[Card], table: TableState) -> list[Combination]:
    """Every combination in the hand that may be played on the table.

    Order: bombs, triplets, pairs, sequences, triplets with pair,
    consecutive pairs, singles; each ascending by rank.

    Args:
        hand: Cards to choose from
        table: Current table state

    Returns:
        Legal combinations (empty means the player must pass)
    """
    return [c for c in enumerate_all(hand) if is_legal(c, table)]
