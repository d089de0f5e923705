"""Formatters for game log output."""

from typing import Iterable

from runfast.models.card import Card, Rank, Suit
from runfast.models.combination import Combination

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.CLUB: "C",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
    Suit.SPADE: "S",
}

# Rank codes for log output
RANK_CODES: dict[Rank, str] = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.TWO: "2",
}

CODE_SUITS = {code: suit for suit, code in SUIT_CODES.items()}
CODE_RANKS = {code: rank for rank, code in RANK_CODES.items()}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S3" for Spade 3, "H10" for Heart 10).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_cards(cards: Iterable[Card] | Combination | None) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards or a combination to format.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    if cards is None:
        return ""
    if isinstance(cards, Combination):
        cards = cards.cards
    return ",".join(format_card(c) for c in cards)


def format_hands(hands: list[Iterable[Card]]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        hands: List of hands indexed by player_id.

    Returns:
        Dict mapping player_id (as string) to formatted hand string.
    """
    return {str(i): format_cards(h) for i, h in enumerate(hands)}


def parse_card(code: str) -> Card:
    """Parse a card code such as "S3" or "H10".

    Raises:
        ValueError: If the code names no card.
    """
    code = code.strip().upper()
    suit = CODE_SUITS.get(code[:1])
    rank = CODE_RANKS.get(code[1:])
    if suit is None or rank is None:
        raise ValueError(f"Invalid card code: {code!r}")
    return Card(suit=suit, rank=rank)


def parse_cards(codes: str) -> list[Card]:
    """Parse comma- or space-separated card codes, e.g. "C3,D3 H5"."""
    return [parse_card(c) for c in codes.replace(",", " ").split()]
