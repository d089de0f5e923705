"""Deck of cards."""

import random

from runfast.models.card import Card, create_full_deck


class Deck:
    """The 52-card deck, dealt from the top."""

    def __init__(self) -> None:
        self._cards: list[Card] = create_full_deck()

    @property
    def remaining(self) -> int:
        """Number of cards left in the deck."""
        return len(self._cards)

    def reset(self) -> None:
        """Refill the deck with all 52 cards."""
        self._cards = create_full_deck()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the remaining cards uniformly."""
        (rng or random).shuffle(self._cards)

    def deal(self, num_cards: int) -> list[Card]:
        """Remove and return cards from the top of the deck.

        Args:
            num_cards: Number of cards to deal

        Returns:
            The dealt cards

        Raises:
            ValueError: If fewer cards remain than requested.
        """
        if num_cards < 0 or num_cards > len(self._cards):
            raise ValueError(
                f"Cannot deal {num_cards} cards from a deck of {len(self._cards)}"
            )
        dealt = self._cards[:num_cards]
        del self._cards[:num_cards]
        return dealt
