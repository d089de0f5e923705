"""Game models."""

from .card import Card, Hand, Rank, Suit, create_full_deck, sort_cards
from .combination import MAX_SEQUENCE_LEN, MIN_SEQUENCE_LEN, Combination, Shape
from .game_state import GameState, TableState
from .player import Player

__all__ = [
    "Card",
    "Hand",
    "Rank",
    "Suit",
    "create_full_deck",
    "sort_cards",
    "Combination",
    "Shape",
    "MIN_SEQUENCE_LEN",
    "MAX_SEQUENCE_LEN",
    "Player",
    "GameState",
    "TableState",
]
