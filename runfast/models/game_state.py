"""Game state models."""

from pydantic import BaseModel, Field

from .combination import Combination


class TableState(BaseModel):
    """State of the table.

    `is_open` means there is nothing to beat and any shape may be led.
    """

    current: Combination | None = None  # Most recent legal play
    is_open: bool = True

    def place(self, combination: Combination) -> None:
        """Put a legally played combination on the table."""
        self.current = combination
        self.is_open = False

    def clear(self) -> None:
        """Clear the table after a pass."""
        self.current = None
        self.is_open = True

    def is_empty(self) -> bool:
        """Check if nothing has to be beaten."""
        return self.is_open or self.current is None

    def __str__(self) -> str:
        if self.is_empty():
            return "Table: [open]"
        return f"Table: {self.current}"


class GameState(BaseModel):
    """Overall game state."""

    game_number: int = 1
    turn_number: int = 0

    current_player: int = 0  # Player ID whose turn it is
    winner: int | None = None  # Player ID who emptied their hand

    table: TableState = Field(default_factory=TableState)

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def reset_for_new_game(self) -> None:
        """Reset state for a new game."""
        self.turn_number = 0
        self.current_player = 0
        self.winner = None
        self.table.clear()

    def __str__(self) -> str:
        parts = [f"Game {self.game_number}, Turn {self.turn_number}"]
        if self.is_over:
            parts.append(f"[WINNER: Player {self.winner}]")
        else:
            parts.append(f"Player {self.current_player}'s turn")
        return " ".join(parts)
