"""Game engine: turn order, dealing and applying committed plays."""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING, Callable, Iterable

from runfast.config import Config
from runfast.logging import GameLogger
from runfast.models.card import Card, Rank, Suit
from runfast.models.game_state import GameState
from runfast.models.player import Player
from runfast.strategy import GreedyStrategy, Strategy

from .deck import Deck
from .validator import MoveValidator, PlayError, ValidationResult

if TYPE_CHECKING:
    from runfast.models.combination import Combination

logger = logging.getLogger(__name__)

# Holder of this card leads the first turn
OPENING_CARD = Card(suit=Suit.SPADE, rank=Rank.THREE)

NUM_PLAYERS = 2

# Asked for a non-computer player's selection; an empty list means pass
CardSelector = Callable[[Player, GameState], list[Card]]


class GameEngine:
    """Two-player game engine.

    Turns strictly alternate and each committed play or pass is applied
    in full before the next turn is evaluated.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        strategy: Strategy | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            strategy: Strategy for computer players (greedy if not provided)
            rng: Random source for shuffling (seeded from config if not provided)
        """
        self.config = config or Config()
        self.game_logger = game_logger
        self.strategy = strategy or GreedyStrategy()
        self.rng = rng or random.Random(self.config.game.seed)

        self.validator = MoveValidator()
        self.deck = Deck()
        self.pile: list[Card] = []  # Undealt cards, drawn from the front

        seats = self.config.players
        if len(seats) != NUM_PLAYERS:
            raise ValueError(f"Exactly {NUM_PLAYERS} players are required, got {len(seats)}")
        self.players: list[Player] = [
            Player(player_id=i, name=seat.name, is_computer=seat.computer)
            for i, seat in enumerate(seats)
        ]

        self.state = GameState()

        self._on_play: Callable[[Player, Combination], None] | None = None
        self._on_pass: Callable[[Player], None] | None = None
        self._on_game_end: Callable[[int, Player], None] | None = None

    def set_callbacks(
        self,
        on_play: Callable[[Player, Combination], None] | None = None,
        on_pass: Callable[[Player], None] | None = None,
        on_game_end: Callable[[int, Player], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_play: Called when a combination is played (player, combination)
            on_pass: Called when a player passes and the table opens
            on_game_end: Called when a hand is emptied (game_number, winner)
        """
        self._on_play = on_play
        self._on_pass = on_pass
        self._on_game_end = on_game_end

    @property
    def current_player(self) -> Player:
        return self.players[self.state.current_player]

    def run_games(
        self,
        num_games: int | None = None,
        select_cards: CardSelector | None = None,
    ) -> dict[int, int]:
        """Run multiple games.

        Args:
            num_games: Number of games (uses config if not specified)
            select_cards: Selection source for non-computer players

        Returns:
            Dict of player_id -> games won
        """
        if num_games is None:
            num_games = self.config.game.num_games
        wins: dict[int, int] = {p.player_id: 0 for p in self.players}

        if self.game_logger:
            self.game_logger.log_session_start(self.players)

        for game_num in range(1, num_games + 1):
            self.state.game_number = game_num
            logger.info(f"Starting game {game_num}/{num_games}")

            winner = self.run_game(select_cards)
            wins[winner] += 1

        if self.game_logger:
            self.game_logger.log_session_end(num_games, wins)

        return wins

    def run_game(self, select_cards: CardSelector | None = None) -> int:
        """Run a single game to completion.

        Computer players choose through the strategy. Other players are
        asked through `select_cards` and re-prompted until a submission
        is accepted.

        Args:
            select_cards: Selection source for non-computer players

        Returns:
            Winner's player ID
        """
        self.new_game()

        while not self.state.is_over:
            player = self.current_player
            if player.is_computer:
                self.play_computer_turn()
                continue

            if select_cards is None:
                raise ValueError(f"No card selector given for {player}")

            while True:
                cards = select_cards(player, self.state)
                if cards:
                    result = self.submit_play(player.player_id, cards)
                else:
                    result = self.submit_pass(player.player_id)
                if result.is_valid:
                    break
                logger.info(f"Rejected submission from {player.name}: {result.error_message}")

        return self.state.winner

    def new_game(self) -> None:
        """Reset state, shuffle and deal, and pick the starting player."""
        self.state.reset_for_new_game()
        for player in self.players:
            player.reset_game_state()

        self.pile = []
        self.deck.reset()
        self.deck.shuffle(self.rng)
        for player in self.players:
            self.deal(player.player_id, self.deck.deal(self.config.game.hand_size))
            player.sort_hand()
        self.pile = self.deck.deal(self.deck.remaining)

        self.state.current_player = self._starting_player()

        logger.info(
            f"Game {self.state.game_number} initialized, "
            f"first player: {self.current_player.name}"
        )

        if self.game_logger:
            self.game_logger.log_game_start(
                self.state.game_number,
                self.players,
                self.state.current_player,
                len(self.pile),
            )

    def _starting_player(self) -> int:
        """Holder of the Three of Spades, else a random player."""
        for player in self.players:
            if OPENING_CARD in player.hand:
                return player.player_id
        return self.rng.randrange(NUM_PLAYERS)

    def deal(self, player_id: int, cards: Iterable[Card]) -> None:
        """Add cards to a player's hand.

        Args:
            player_id: Receiving player
            cards: Cards held by no player and not in the pile
        """
        cards = list(cards)
        for card in cards:
            assert not any(card in p.hand for p in self.players), f"{card} dealt twice"
            assert card not in self.pile, f"{card} is still in the pile"
        self.players[player_id].receive_cards(cards)
        logger.debug(f"Dealt {len(cards)} cards to player {player_id}")

    def redraw(self, player_id: int, cards: Iterable[Card]) -> ValidationResult:
        """Return cards to the end of the pile and draw as many from the front.

        Args:
            player_id: Player exchanging cards
            cards: Cards to give up

        Returns:
            ValidationResult
        """
        cards = list(cards)
        player = self.players[player_id]
        assert not self.state.is_over, "Game is already over"

        result = self.validator.validate_redraw(
            player.hand, cards, self.config.game.max_redraw, len(self.pile)
        )
        if not result.is_valid:
            return result

        player.discard_cards(cards)
        self.pile.extend(cards)
        drawn = self.pile[:len(cards)]
        del self.pile[:len(cards)]
        player.receive_cards(drawn)
        player.sort_hand()

        logger.info(f"{player.name} redrew {len(cards)} cards")
        if self.game_logger:
            self.game_logger.log_redraw(self.state.game_number, player_id, cards, drawn)

        return result

    def submit_play(self, player_id: int, cards: Iterable[Card]) -> ValidationResult:
        """Validate and apply a selection from the current player.

        An empty selection is treated as a pass.

        Args:
            player_id: Submitting player
            cards: Selected cards

        Returns:
            ValidationResult (state is unchanged when rejected)
        """
        self._check_turn(player_id)
        cards = list(cards)
        if not cards:
            return self.submit_pass(player_id)

        player = self.players[player_id]
        result = self.validator.validate(player.hand, cards, self.state.table)
        if not result.is_valid:
            return result

        combination = result.combination
        player.discard_cards(combination.cards)
        self.state.table.place(combination)
        self.state.turn_number += 1

        logger.info(f"{player.name} plays {combination}")
        self._log_turn(player_id, combination)
        if self._on_play:
            self._on_play(player, combination)

        if player.has_emptied_hand():
            self._finish_game(player)
        else:
            self._advance_player()

        return result

    def submit_pass(self, player_id: int) -> ValidationResult:
        """Pass the turn; the table opens for the opponent.

        Args:
            player_id: Passing player

        Returns:
            ValidationResult (rejected when the table is already open)
        """
        self._check_turn(player_id)
        result = self.validator.validate_pass(self.state.table)
        if not result.is_valid:
            return result

        player = self.players[player_id]
        self.state.table.clear()
        self.state.turn_number += 1

        logger.info(f"{player.name} passes")
        self._log_turn(player_id, None)
        if self._on_pass:
            self._on_pass(player)

        self._advance_player()
        return result

    def play_computer_turn(self) -> Combination | None:
        """Let the strategy choose for the current player and apply it.

        Returns:
            The combination played, or None for a pass
        """
        player = self.current_player
        combination = self.strategy.select_play(player.hand, self.state.table)

        if self.config.game.ai_delay > 0:
            time.sleep(self.config.game.ai_delay)

        if combination is None:
            result = self.submit_pass(player.player_id)
        else:
            result = self.submit_play(player.player_id, combination.cards)
        assert result.is_valid, f"Strategy chose an invalid play: {result.error_message}"

        return combination

    def _check_turn(self, player_id: int) -> None:
        assert not self.state.is_over, "Game is already over"
        assert player_id == self.state.current_player, (
            f"Player {player_id} acted out of turn"
        )

    def _advance_player(self) -> None:
        """Move to the next player."""
        self.state.current_player = (self.state.current_player + 1) % NUM_PLAYERS

    def _finish_game(self, winner: Player) -> None:
        """Record the winner of the current game."""
        self.state.winner = winner.player_id
        winner.wins += 1
        logger.info(f"{winner.name} emptied their hand and wins game {self.state.game_number}")

        if self.game_logger:
            self.game_logger.log_game_end(self.state.game_number, winner.player_id, self.players)
        if self._on_game_end:
            self._on_game_end(self.state.game_number, winner)

    def _log_turn(self, player_id: int, combination: Combination | None) -> None:
        if self.game_logger:
            self.game_logger.log_turn(
                self.state.game_number,
                self.state.turn_number,
                player_id,
                combination,
                self.state.table,
                self.players,
            )
