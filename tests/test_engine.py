"""Tests for the game engine."""

import json
import random

import pytest

from runfast.config import Config, GameConfig, PlayerConfig
from runfast.game.analyzer import classify
from runfast.game.engine import OPENING_CARD, GameEngine
from runfast.game.validator import PlayError
from runfast.logging import GameLogConfig, GameLogger
from runfast.logging.formatters import parse_cards
from runfast.models.card import Hand
from runfast.strategy import select_play


def computer_config(**game) -> Config:
    return Config(
        game=GameConfig(**game),
        players=[
            PlayerConfig(name="North", computer=True),
            PlayerConfig(name="South", computer=True),
        ],
    )


@pytest.fixture
def engine():
    """Engine with a seeded shuffle and both seats played by the computer."""
    return GameEngine(computer_config(seed=7))


def set_hands(engine: GameEngine, first: str, second: str, current: int = 0) -> None:
    """Replace both hands and hand the turn to `current`."""
    engine.players[0].hand = Hand(parse_cards(first))
    engine.players[1].hand = Hand(parse_cards(second))
    engine.state.current_player = current


class TestSetup:
    """Tests for engine construction and dealing."""

    def test_requires_two_players(self):
        """Test that only two seats are accepted."""
        config = Config(players=[PlayerConfig(name=f"P{i}") for i in range(3)])
        with pytest.raises(ValueError):
            GameEngine(config)

    def test_new_game_deals(self, engine):
        """Test dealing 17 cards each and leaving 18 in the pile."""
        engine.new_game()

        assert [p.hand.count() for p in engine.players] == [17, 17]
        assert len(engine.pile) == 18

        all_cards = [c for p in engine.players for c in p.hand] + engine.pile
        assert len(set(all_cards)) == 52

    def test_hands_sorted(self, engine):
        """Test that dealt hands are sorted."""
        engine.new_game()
        for player in engine.players:
            cards = player.hand.to_list()
            assert cards == sorted(cards, key=lambda c: c.sort_key())

    def test_starting_player(self):
        """Test that the holder of the Three of Spades leads."""
        for seed in range(10):
            engine = GameEngine(computer_config(seed=seed))
            engine.new_game()

            holders = [p.player_id for p in engine.players if OPENING_CARD in p.hand]
            if holders:
                assert engine.state.current_player == holders[0]
            assert engine.state.table.is_empty()

    def test_deal_twice_asserts(self, engine):
        """Test that a card cannot be held by two players."""
        engine.deal(0, parse_cards("S3"))
        with pytest.raises(AssertionError):
            engine.deal(1, parse_cards("S3"))

    def test_deal_from_pile_asserts(self, engine):
        """Test that a card left in the pile cannot also be dealt."""
        engine.new_game()
        with pytest.raises(AssertionError):
            engine.deal(0, engine.pile[:1])

    def test_second_game_deals(self, engine):
        """Test that a new game starts from a fresh pile."""
        engine.new_game()
        engine.new_game()

        assert [p.hand.count() for p in engine.players] == [17, 17]
        assert len(engine.pile) == 18

    def test_same_seed_same_deal(self):
        """Test that a seeded shuffle is reproducible."""
        first = GameEngine(computer_config(seed=42))
        second = GameEngine(computer_config(seed=42))
        first.new_game()
        second.new_game()

        assert first.players[0].hand.to_list() == second.players[0].hand.to_list()


class TestRedraw:
    """Tests for exchanging cards with the pile."""

    def test_redraw(self, engine):
        """Test that discards go to the end and draws come from the front."""
        engine.new_game()
        player = engine.players[0]
        discards = player.hand.to_list()[:3]
        expected = engine.pile[:3]

        result = engine.redraw(0, discards)

        assert result.is_valid
        assert player.hand.count() == 17
        assert all(card in player.hand for card in expected)
        assert not any(card in player.hand for card in discards)
        assert engine.pile[-3:] == discards
        assert len(engine.pile) == 18

    def test_redraw_too_many(self, engine):
        """Test the exchange limit."""
        engine.new_game()
        discards = engine.players[0].hand.to_list()[:10]

        result = engine.redraw(0, discards)

        assert result.error == PlayError.TOO_MANY_CARDS
        assert engine.players[0].hand.count() == 17

    def test_redraw_card_not_held(self, engine):
        """Test redrawing a card from the pile is rejected."""
        engine.new_game()

        result = engine.redraw(0, engine.pile[:1])

        assert result.error == PlayError.CARD_NOT_IN_HAND

    def test_redraw_after_game_over_asserts(self, engine):
        """Test that the loser cannot exchange cards once the game is won."""
        winner = engine.run_game()
        loser = engine.players[1 - winner]

        with pytest.raises(AssertionError):
            engine.redraw(loser.player_id, loser.hand.to_list()[:1])


class TestSubmitPlay:
    """Tests for applying plays and passes."""

    def test_valid_play(self, engine):
        """Test that a valid play moves cards to the table and passes the turn."""
        set_hands(engine, "S5 H5 S9", "S7 H7 SK")

        result = engine.submit_play(0, parse_cards("S5 H5"))

        assert result.is_valid
        assert engine.state.table.current == classify(parse_cards("S5 H5"))
        assert engine.players[0].hand.count() == 1
        assert engine.state.current_player == 1
        assert engine.state.turn_number == 1

    def test_invalid_play_leaves_state(self, engine):
        """Test that a rejected play changes nothing."""
        set_hands(engine, "S5 H5 S9", "S7 H7 SK")
        engine.submit_play(0, parse_cards("S9"))

        result = engine.submit_play(1, parse_cards("S7 H7"))

        assert result.error == PlayError.ILLEGAL_PLAY
        assert engine.state.current_player == 1
        assert engine.players[1].hand.count() == 3
        assert engine.state.table.current == classify(parse_cards("S9"))

    def test_lower_single_rejected(self, engine):
        """Test that a lower single is an illegal play."""
        set_hands(engine, "S9 S3", "S7 H7 SK")
        engine.submit_play(0, parse_cards("S9"))

        result = engine.submit_play(1, parse_cards("S7"))

        assert result.error == PlayError.ILLEGAL_PLAY
        assert engine.state.current_player == 1

    def test_pass_opens_table(self, engine):
        """Test that after a pass the opponent leads freely."""
        set_hands(engine, "S9 S3", "S7 H7 SK")
        engine.submit_play(0, parse_cards("S9"))

        result = engine.submit_pass(1)

        assert result.is_valid
        assert engine.state.table.is_empty()
        assert engine.state.current_player == 0

        # Any shape may now be led
        assert engine.submit_play(0, parse_cards("S3")).is_valid

    def test_empty_submission_is_pass(self, engine):
        """Test that submitting no cards passes."""
        set_hands(engine, "S9 S3", "S7 H7 SK")
        engine.submit_play(0, parse_cards("S9"))

        result = engine.submit_play(1, [])

        assert result.is_pass
        assert engine.state.table.is_empty()

    def test_pass_on_open_table_rejected(self, engine):
        """Test that the leader cannot pass."""
        set_hands(engine, "S9 S3", "S7 H7 SK")

        result = engine.submit_pass(0)

        assert result.error == PlayError.ILLEGAL_PLAY
        assert engine.state.current_player == 0

    def test_out_of_turn_asserts(self, engine):
        """Test that acting out of turn is a fault."""
        set_hands(engine, "S9 S3", "S7 H7 SK")
        with pytest.raises(AssertionError):
            engine.submit_play(1, parse_cards("SK"))

    def test_emptied_hand_wins(self, engine):
        """Test that playing the last card ends the game."""
        ended = []
        played = []
        engine.set_callbacks(
            on_play=lambda player, combination: played.append(combination),
            on_game_end=lambda game_num, winner: ended.append((game_num, winner.player_id)),
        )
        set_hands(engine, "S9 H9", "S7 H7 SK")

        engine.submit_play(0, parse_cards("S9 H9"))

        assert engine.state.is_over
        assert engine.state.winner == 0
        assert engine.players[0].wins == 1
        assert played == [classify(parse_cards("S9 H9"))]
        assert ended == [(1, 0)]

        with pytest.raises(AssertionError):
            engine.submit_play(1, parse_cards("SK"))

    def test_pass_callback(self, engine):
        """Test that passes are reported."""
        passed = []
        engine.set_callbacks(on_pass=lambda player: passed.append(player.player_id))
        set_hands(engine, "S9 S3", "S7 H7 SK")
        engine.submit_play(0, parse_cards("S9"))

        engine.submit_pass(1)

        assert passed == [1]


class TestComputerTurn:
    """Tests for strategy-driven turns."""

    def test_computer_leads(self, engine):
        """Test that the computer plays its greedy lead."""
        set_hands(engine, "C3 D3 H5", "S7 H7 SK")

        played = engine.play_computer_turn()

        assert played == classify(parse_cards("C3 D3"))
        assert engine.state.current_player == 1

    def test_computer_passes(self, engine):
        """Test that the computer passes without a response."""
        set_hands(engine, "S4 H5", "S3 H4")
        engine.state.table.place(classify(parse_cards("S2")))

        played = engine.play_computer_turn()

        assert played is None
        assert engine.state.table.is_empty()


class TestRunGames:
    """Tests for complete games."""

    def test_run_game_terminates(self, engine):
        """Test that a computer-vs-computer game ends with a winner."""
        winner = engine.run_game()

        assert winner in (0, 1)
        assert engine.players[winner].has_emptied_hand()
        assert not engine.players[1 - winner].has_emptied_hand()

    def test_run_games(self):
        """Test that every game produces one win."""
        engine = GameEngine(computer_config(seed=1, num_games=5))

        wins = engine.run_games()

        assert sum(wins.values()) == 5
        assert [p.wins for p in engine.players] == [wins[0], wins[1]]

    def test_run_zero_games(self):
        """Test that an explicit zero plays no games."""
        engine = GameEngine(computer_config(seed=1, num_games=5))

        wins = engine.run_games(0)

        assert wins == {0: 0, 1: 0}
        assert engine.state.turn_number == 0

    def test_human_reprompted(self):
        """Test that a rejected selection is asked for again."""
        config = Config(
            game=GameConfig(seed=3),
            players=[
                PlayerConfig(name="Human", computer=False),
                PlayerConfig(name="Computer", computer=True),
            ],
        )
        engine = GameEngine(config)
        calls = []

        def select_cards(player, state):
            calls.append(player.player_id)
            if len(calls) == 1:
                card = player.hand.to_list()[0]
                return [card, card]
            combination = select_play(player.hand, state.table)
            return list(combination.cards) if combination else []

        winner = engine.run_game(select_cards)

        assert winner in (0, 1)
        assert len(calls) >= 2
        assert set(calls) == {0}

    def test_human_without_selector(self):
        """Test that a human seat needs a selection source."""
        engine = GameEngine(Config(game=GameConfig(seed=3)))
        with pytest.raises(ValueError):
            engine.run_game()

    def test_strategy_rng_injected(self):
        """Test passing an explicit random source."""
        engine = GameEngine(computer_config(), rng=random.Random(5))
        assert engine.run_game() in (0, 1)

    def test_game_log_written(self, tmp_path):
        """Test that a session writes JSONL events."""
        path = tmp_path / "logs" / "session.jsonl"
        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            engine = GameEngine(computer_config(seed=2, num_games=2), game_logger)
            engine.run_games()

        events = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        types = [e["type"] for e in events]

        assert types[0] == "session_start"
        assert types[-1] == "session_end"
        assert types.count("game_start") == 2
        assert types.count("game_end") == 2
        assert "turn" in types
