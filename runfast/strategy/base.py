"""Base strategy class.

Defines the interface that all computer opponents must implement.
"""

from abc import ABC, abstractmethod

from runfast.models.card import Hand
from runfast.models.combination import Combination
from runfast.models.game_state import TableState


class Strategy(ABC):
    """Abstract base class for play selection.

    Strategies are pure: they read the hand and table and never mutate
    either.
    """

    @abstractmethod
    def select_lead(self, hand: Hand, table: TableState) -> Combination:
        """Select cards to play when leading (table is open).

        Args:
            hand: Current hand
            table: Current table state

        Returns:
            Combination to lead with
        """
        pass

    @abstractmethod
    def select_follow(self, hand: Hand, table: TableState) -> Combination | None:
        """Select cards to beat the combination on the table.

        Args:
            hand: Current hand
            table: Current table state

        Returns:
            Combination to play, or None to pass
        """
        pass

    def select_play(self, hand: Hand, table: TableState) -> Combination | None:
        """Select cards to play based on current table.

        Dispatches to select_lead or select_follow on whether the table
        is open.

        Args:
            hand: Current hand
            table: Current table state

        Returns:
            Combination to play, or None to pass
        """
        if table.is_empty():
            return self.select_lead(hand, table)
        else:
            return self.select_follow(hand, table)
