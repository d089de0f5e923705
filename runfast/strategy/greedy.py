"""Greedy single-ply strategy.

Strategy:
- Lead: first shape found in fixed priority
  bomb > triplet > pair > sequence (shortest first) > triplet with pair
  > consecutive pairs, lowest rank of that shape; else the lowest card
- Follow: first legal response in reference order (a bomb if one is
  held, else the lowest same-shape combination that beats the table);
  pass if none

There is no lookahead and no attempt to keep runs or groups intact.
"""

import logging

from runfast.game.enumerator import (
    enumerate_responses,
    find_bombs,
    find_consecutive_pairs,
    find_pairs,
    find_singles,
    find_triplets,
    find_triplets_with_pair,
)
from runfast.game.sequences import iter_sequences
from runfast.models.card import Hand
from runfast.models.combination import Combination
from runfast.models.game_state import TableState

from .base import Strategy

logger = logging.getLogger(__name__)


class GreedyStrategy(Strategy):
    """Plays the first combination found under a fixed priority."""

    def select_lead(self, hand: Hand, table: TableState) -> Combination:
        """Select cards when leading (table is open)."""
        cards = list(hand)
        assert cards, "Cannot lead from an empty hand"

        for finder in (find_bombs, find_triplets, find_pairs):
            found = finder(cards)
            if found:
                logger.debug(f"Leading {found[0]}")
                return found[0]

        sequence = next(iter_sequences(cards), None)
        if sequence is not None:
            logger.debug(f"Leading {sequence}")
            return sequence

        for finder in (find_triplets_with_pair, find_consecutive_pairs):
            found = finder(cards)
            if found:
                logger.debug(f"Leading {found[0]}")
                return found[0]

        # Lowest single card
        lowest = find_singles(cards)[0]
        logger.debug(f"Leading {lowest}")
        return lowest

    def select_follow(self, hand: Hand, table: TableState) -> Combination | None:
        """Select the first legal response, or pass."""
        responses = enumerate_responses(hand, table)
        if not responses:
            logger.debug(f"No response to {table.current}, passing")
            return None
        logger.debug(f"Responding to {table.current} with {responses[0]}")
        return responses[0]


_default_strategy = GreedyStrategy()


def select_play(hand: Hand, table: TableState) -> Combination | None:
    """Select a play with the greedy strategy (None means pass)."""
    return _default_strategy.select_play(hand, table)
