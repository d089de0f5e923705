"""Game logic.

The engine depends on the strategies, which depend on this package;
import it from `runfast.game.engine`.
"""

from .analyzer import CardAnalyzer, classify
from .deck import Deck
from .enumerator import enumerate_all, enumerate_responses
from .sequences import find_sequences
from .validator import MoveValidator, PlayError, ValidationResult, is_legal

__all__ = [
    "CardAnalyzer",
    "classify",
    "Deck",
    "enumerate_all",
    "enumerate_responses",
    "find_sequences",
    "MoveValidator",
    "PlayError",
    "ValidationResult",
    "is_legal",
]
