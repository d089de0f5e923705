"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, TextIO

from pydantic import BaseModel

from runfast.models.card import Card
from runfast.models.combination import Combination
from runfast.models.game_state import TableState
from runfast.models.player import Player

from .formatters import format_cards, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    directory: str = "logs"  # Session file names are generated here
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, players: list[Player]) -> None:
        """Log session start with player information.

        Args:
            players: List of players in the session.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "players": [
                {"id": p.player_id, "name": p.name, "computer": p.is_computer}
                for p in players
            ],
        })

    def log_game_start(
        self,
        game_num: int,
        players: list[Player],
        first_player: int,
        pile_size: int,
    ) -> None:
        """Log game start with initial hands.

        Args:
            game_num: Game number.
            players: Players with their dealt hands.
            first_player: Player ID who plays first.
            pile_size: Cards left in the draw pile.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "hands": format_hands([p.hand for p in players]),
            "first_player": first_player,
            "pile_size": pile_size,
        })

    def log_redraw(
        self,
        game_num: int,
        player_id: int,
        discarded: Iterable[Card],
        drawn: Iterable[Card],
    ) -> None:
        """Log a discard-and-draw exchange with the pile."""
        self._write({
            "type": "redraw",
            "game": game_num,
            "player": player_id,
            "discarded": format_cards(discarded),
            "drawn": format_cards(drawn),
        })

    def log_turn(
        self,
        game_num: int,
        turn_num: int,
        player_id: int,
        combination: Combination | None,
        table: TableState,
        players: list[Player],
    ) -> None:
        """Log a single turn.

        Args:
            game_num: Game number.
            turn_num: Turn number within the game.
            player_id: Player who took the action.
            combination: Combination played (None if pass).
            table: Table state after the action.
            players: All players, with hands after the action.
        """
        self._write({
            "type": "turn",
            "game": game_num,
            "turn": turn_num,
            "player": player_id,
            "action": "pass" if combination is None else "play",
            "cards": format_cards(combination),
            "shape": combination.shape.value if combination else None,
            "table": format_cards(table.current),
            "hands": format_hands([p.hand for p in players]),
        })

    def log_game_end(
        self,
        game_num: int,
        winner: int,
        players: list[Player],
    ) -> None:
        """Log game end with results.

        Args:
            game_num: Game number.
            winner: Player ID who emptied their hand.
            players: Players with their remaining cards.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "winner": winner,
            "cards_left": {str(p.player_id): p.hand.count() for p in players},
        })

    def log_session_end(self, total_games: int, wins: dict[int, int]) -> None:
        """Log session end with final results.

        Args:
            total_games: Total number of games played.
            wins: Dict mapping player_id to games won.
        """
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "wins": {str(k): v for k, v in wins.items()},
        })
