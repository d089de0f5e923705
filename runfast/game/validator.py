"""Legality checks and validation for submitted plays."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from runfast.models.card import Card, Hand
from runfast.models.combination import Combination, Shape
from runfast.models.game_state import TableState

from .analyzer import CardAnalyzer


class PlayError(IntEnum):
    """Reasons a submission is rejected."""

    NONE = 0
    CARD_NOT_IN_HAND = 1
    DUPLICATE_CARD = 2
    UNRECOGNIZED_SHAPE = 3
    TOO_MANY_CARDS = 4
    ILLEGAL_PLAY = 5

    @property
    def is_malformed(self) -> bool:
        """Rejected before reaching the comparator."""
        return self not in (PlayError.NONE, PlayError.ILLEGAL_PLAY)


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: PlayError = PlayError.NONE
    error_message: str = ""
    combination: Combination | None = None
    is_pass: bool = False


def is_legal(candidate: Combination | None, table: TableState) -> bool:
    """Check whether a combination may be played on the table.

    Bombs beat any non-bomb of any size; a bomb on the table is only
    beaten by a higher bomb. Every other shape must match the table's
    shape and length and have a strictly higher key.

    Args:
        candidate: Classified combination (None if it did not classify)
        table: Current table state

    Returns:
        True if the play is legal
    """
    if candidate is None:
        return False

    # Free lead: any recognized shape
    if table.is_empty():
        return True

    current = table.current

    if candidate.is_bomb:
        if not current.is_bomb:
            return True
        return candidate.key > current.key

    if candidate.shape != current.shape:
        return False

    if candidate.shape == Shape.SEQUENCE and candidate.arity != current.arity:
        return False

    return candidate.key > current.key


class MoveValidator:
    """Validates submitted card plays."""

    def __init__(self, analyzer: CardAnalyzer | None = None):
        """Initialize validator.

        Args:
            analyzer: CardAnalyzer instance (creates one if not provided)
        """
        self.analyzer = analyzer or CardAnalyzer()

    def validate(
        self,
        hand: Hand,
        cards: Iterable[Card],
        table: TableState,
    ) -> ValidationResult:
        """Validate a submitted play.

        An empty submission is a pass when there is something to beat.

        Args:
            hand: Player's current hand
            cards: The cards being submitted
            table: Current table state

        Returns:
            ValidationResult
        """
        cards = list(cards)

        # Check for pass
        if not cards and not table.is_empty():
            return ValidationResult(is_valid=True, is_pass=True)

        selection = self.check_selection(hand, cards)
        if not selection.is_valid:
            return selection

        combination = self.analyzer.analyze(cards)
        if combination is None:
            return ValidationResult(
                is_valid=False,
                error=PlayError.UNRECOGNIZED_SHAPE,
                error_message="Cards do not form a recognized combination",
            )

        if not is_legal(combination, table):
            return ValidationResult(
                is_valid=False,
                error=PlayError.ILLEGAL_PLAY,
                error_message=f"{combination} does not beat {table.current}",
                combination=combination,
            )

        return ValidationResult(is_valid=True, combination=combination)

    def validate_pass(self, table: TableState) -> ValidationResult:
        """Validate a pass. The leader must play."""
        if table.is_empty():
            return ValidationResult(
                is_valid=False,
                error=PlayError.ILLEGAL_PLAY,
                error_message="Cannot pass on an open table",
            )
        return ValidationResult(is_valid=True, is_pass=True)

    def check_selection(self, hand: Hand, cards: list[Card]) -> ValidationResult:
        """Check that every selected card is held, and held once.

        Args:
            hand: Player's current hand
            cards: Selected cards

        Returns:
            ValidationResult
        """
        if len(set(cards)) != len(cards):
            return ValidationResult(
                is_valid=False,
                error=PlayError.DUPLICATE_CARD,
                error_message="Selection contains the same card twice",
            )

        for card in cards:
            if card not in hand:
                return ValidationResult(
                    is_valid=False,
                    error=PlayError.CARD_NOT_IN_HAND,
                    error_message=f"Player does not have {card}",
                )

        return ValidationResult(is_valid=True)

    def validate_redraw(
        self,
        hand: Hand,
        cards: Iterable[Card],
        max_cards: int,
        pile_size: int,
    ) -> ValidationResult:
        """Validate a discard-and-draw selection.

        Args:
            hand: Player's hand
            cards: Cards selected for discard
            max_cards: Most cards that may be exchanged
            pile_size: Cards available in the pile

        Returns:
            ValidationResult
        """
        cards = list(cards)

        if len(cards) > max_cards:
            return ValidationResult(
                is_valid=False,
                error=PlayError.TOO_MANY_CARDS,
                error_message=f"Cannot redraw more than {max_cards} cards",
            )

        if len(cards) > pile_size:
            return ValidationResult(
                is_valid=False,
                error=PlayError.TOO_MANY_CARDS,
                error_message=f"Only {pile_size} cards left in the pile",
            )

        return self.check_selection(hand, cards)
