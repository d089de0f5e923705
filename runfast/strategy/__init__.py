"""Computer opponent strategies."""

from runfast.strategy.base import Strategy
from runfast.strategy.greedy import GreedyStrategy, select_play

__all__ = ["Strategy", "GreedyStrategy", "select_play"]
