"""Main entry point: computer-vs-computer matches."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from runfast.config import Config, load_config
from runfast.game.engine import GameEngine
from runfast.logging import GameLogger
from runfast.models.combination import Combination
from runfast.models.player import Player
from runfast.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, config: Config) -> str:
    """Generate log filename with timestamp and player names.

    Format: {timestamp}_{player1}_{player2}.jsonl

    Args:
        log_dir: Directory for log files.
        config: Configuration holding the seats.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(seat.name for seat in config.players)
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Two-player shedding card game, computer vs computer"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for shuffling (overrides config)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        help="Seconds the computer waits before each play (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show player hands in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.num_games:
        config.game.num_games = args.num_games
    if args.seed is not None:
        config.game.seed = args.seed
    if args.delay is not None:
        config.game.ai_delay = args.delay
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    # No input collection here: every seat is played by the computer
    for seat in config.players:
        seat.computer = True

    game_log_config = config.game_log
    if args.game_log is not None:
        game_log_config.enabled = True
        game_log_config.directory = str(args.game_log)

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    if game_log_config.enabled:
        game_log_config.output_path = generate_log_filename(
            game_log_config.directory, config
        )
        print(f"Game log: {game_log_config.output_path}")

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(config, game_logger)

            def on_play(player: Player, combination: Combination) -> None:
                display.print_move(player, combination)

            def on_pass(player: Player) -> None:
                display.print_move(player, None)

            def on_game_end(game_num: int, winner: Player) -> None:
                display.print_hands(engine.players)
                display.print_game_end(game_num, winner)

            engine.set_callbacks(on_play=on_play, on_pass=on_pass, on_game_end=on_game_end)

            print(f"Starting {config.game.num_games} games...")
            display.print_separator()

            wins = engine.run_games()
            display.print_final_results(wins, engine.players)

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
