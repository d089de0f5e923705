"""Tests for computer strategies."""

import pytest

from runfast.game.analyzer import classify
from runfast.logging.formatters import parse_cards
from runfast.models.card import Hand, Rank
from runfast.models.combination import Shape
from runfast.models.game_state import TableState
from runfast.strategy import GreedyStrategy, select_play


def table_with(codes: str) -> TableState:
    table = TableState()
    table.place(classify(parse_cards(codes)))
    return table


def hand_of(codes: str) -> Hand:
    return Hand(parse_cards(codes))


@pytest.fixture
def strategy():
    return GreedyStrategy()


class TestGreedyLead:
    """Tests for leading on an open table."""

    def test_pair_before_single(self, strategy):
        """Test that a pair is led ahead of the lowest single."""
        play = strategy.select_play(hand_of("C3 D3 H5"), TableState())
        assert play == classify(parse_cards("C3 D3"))

    def test_bomb_first(self, strategy):
        """Test that a bomb is led before anything else."""
        play = strategy.select_play(hand_of("S3 H3 D3 SK HK DK CK"), TableState())

        assert play.shape == Shape.BOMB
        assert play.key == Rank.KING

    def test_triplet_before_pair(self, strategy):
        """Test that a triplet outranks a pair when leading."""
        play = strategy.select_play(hand_of("S9 H9 D9 S4 H4"), TableState())

        assert play.shape == Shape.TRIPLET
        assert play.key == Rank.NINE

    def test_lowest_pair(self, strategy):
        """Test that the lowest pair is chosen."""
        play = strategy.select_play(hand_of("SQ HQ S6 H6 D2"), TableState())
        assert play.key == Rank.SIX

    def test_first_sequence_window(self, strategy):
        """Test leading the first five-card window of a six-card run."""
        play = strategy.select_play(hand_of("S5 S6 S7 S8 S9 S10"), TableState())
        assert play == classify(parse_cards("S5 S6 S7 S8 S9"))

    def test_lowest_single(self, strategy):
        """Test falling back to the lowest card."""
        play = strategy.select_play(hand_of("S9 H4 DK S2"), TableState())
        assert play == classify(parse_cards("H4"))

    def test_empty_hand_asserts(self, strategy):
        """Test that leading from nothing is a fault."""
        with pytest.raises(AssertionError):
            strategy.select_lead(Hand(), TableState())


class TestGreedyFollow:
    """Tests for answering the table."""

    def test_lowest_beating_pair(self, strategy):
        """Test answering with the lowest higher pair."""
        hand = hand_of("S9 H9 SJ HJ S5 H5")

        play = strategy.select_play(hand, table_with("S7 H7"))

        assert play == classify(parse_cards("S9 H9"))

    def test_bomb_spent_on_single(self, strategy):
        """Test that a held bomb is played even over a low single."""
        hand = hand_of("S8 H8 D8 C8 SA")

        play = strategy.select_play(hand, table_with("S3"))

        assert play.is_bomb

    def test_pass_when_nothing_beats(self, strategy):
        """Test that None is returned when no response exists."""
        play = strategy.select_play(hand_of("S3 H4 D5"), table_with("S2"))
        assert play is None

    def test_sequence_response(self, strategy):
        """Test answering a run with a run of the same length."""
        hand = hand_of("S10 HJ DQ CK SA S4")

        play = strategy.select_play(hand, table_with("S9 H10 DJ CQ SK"))

        assert play == classify(parse_cards("S10 HJ DQ CK SA"))

    def test_hand_not_mutated(self, strategy):
        """Test that choosing a play leaves the hand intact."""
        hand = hand_of("S9 H9 S5")

        strategy.select_play(hand, table_with("S7 H7"))

        assert hand.count() == 3


def test_module_select_play():
    """Test the module-level shortcut."""
    play = select_play(hand_of("C3 D3 H5"), TableState())
    assert play.shape == Shape.PAIR
