"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from runfast.models.combination import Combination
    from runfast.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show player hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_move(self, player: "Player", combination: "Combination | None") -> None:
        """Print player's move."""
        if combination is None:
            print(f"  {player.name} -> PASS")
        else:
            print(f"  {player.name} -> Played: {combination}")

    def print_hands(self, players: list["Player"]) -> None:
        """Print hands for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("\nHands:")
        for player in players:
            print(f"  P{player.player_id}: {player.hand}")

    def print_game_end(self, game_number: int, winner: "Player") -> None:
        """Print game end results."""
        print(f"\nGame {game_number} finished! Winner: {winner.name}")

    def print_final_results(self, wins: dict[int, int], players: list["Player"]) -> None:
        """Print final session results."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        # Sort by wins descending
        sorted_players = sorted(wins.items(), key=lambda x: x[1], reverse=True)

        for rank, (player_id, won) in enumerate(sorted_players, 1):
            player = players[player_id]
            print(f"  #{rank}: Player {player_id} ({player.name}) - {won} wins")
