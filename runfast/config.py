"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from runfast.logging.game_logger import GameLogConfig


class GameConfig(BaseModel):
    """Game configuration."""

    num_games: int = 10
    hand_size: int = 17
    max_redraw: int = 9  # Most cards exchanged with the pile at once
    ai_delay: float = 0.0  # Seconds the computer "thinks" before playing
    seed: int | None = None


class PlayerConfig(BaseModel):
    """Seat configuration."""

    name: str = "Player"
    computer: bool = False


def default_players() -> list[PlayerConfig]:
    return [
        PlayerConfig(name="Player", computer=False),
        PlayerConfig(name="Computer", computer=True),
    ]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    players: list[PlayerConfig] = Field(default_factory=default_players)
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
