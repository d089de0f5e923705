"""Player model."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .card import Card, Hand


class Player(BaseModel):
    """Player state. The hand is owned exclusively by its player."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_id: int  # 0-1
    name: str = "Player"
    is_computer: bool = False

    hand: Hand = Field(default_factory=Hand)
    wins: int = 0  # Games won this session

    def receive_cards(self, cards: Iterable[Card]) -> None:
        """Add dealt or drawn cards to the hand."""
        self.hand.extend(cards)

    def discard_cards(self, cards: Iterable[Card]) -> None:
        """Remove played or discarded cards from the hand."""
        self.hand.remove_cards(cards)

    def sort_hand(self) -> None:
        """Sort the hand by rank, then suit."""
        self.hand.sort()

    def has_emptied_hand(self) -> bool:
        return self.hand.is_empty()

    def reset_game_state(self) -> None:
        """Reset game-related state (called at start of new game)."""
        self.hand.clear()

    def __str__(self) -> str:
        kind = "CPU" if self.is_computer else "Human"
        return f"Player{self.player_id}[{self.name}] ({kind})"

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, name={self.name!r}, "
            f"computer={self.is_computer}, cards={self.hand.count()})"
        )
