"""Tests for sequence detection."""

import random

from runfast.game.sequences import find_sequences, iter_sequences
from runfast.logging.formatters import parse_cards
from runfast.models.card import Rank
from runfast.models.combination import Shape


class TestFindSequences:
    """Tests for find_sequences."""

    def test_no_sequences(self):
        """Test a hand without a five-card run."""
        hand = parse_cards("S3 H4 D5 C6 S8 H9")
        assert find_sequences(hand) == []

    def test_six_card_run(self):
        """Test that a six-card run yields two 5-windows and one 6-window."""
        hand = parse_cards("S5 H6 D7 C8 S9 H10")

        sequences = find_sequences(hand)

        assert [s.arity for s in sequences] == [5, 5, 6]
        assert sequences[0].cards == tuple(parse_cards("S5 H6 D7 C8 S9"))
        assert sequences[1].cards == tuple(parse_cards("H6 D7 C8 S9 H10"))
        assert sequences[2].key == Rank.FIVE
        assert all(s.shape == Shape.SEQUENCE for s in sequences)

    def test_seven_card_run_windows(self):
        """Test that every sliding window inside a run is reported."""
        hand = parse_cards("S3 H4 D5 C6 S7 H8 D9")

        sequences = find_sequences(hand)

        assert [s.arity for s in sequences] == [5, 5, 5, 6, 6, 7]
        assert [s.key for s in sequences[:3]] == [Rank.THREE, Rank.FOUR, Rank.FIVE]

    def test_windows_over_sorted_hand(self):
        """Test that windows are slices of the sorted hand, repeats included."""
        # Sorted: 5 5 6 7 8 9; the only clean window starts at the second Five
        hand = parse_cards("S9 H5 D6 C7 S8 C5")

        sequences = find_sequences(hand)

        assert len(sequences) == 1
        assert sequences[0].cards == tuple(parse_cards("H5 D6 C7 S8 S9"))

    def test_repeated_rank_breaks_window(self):
        """Test that a duplicated rank in the middle hides the run."""
        # Sorted: 3 4 5 5 6 7; every 5-window holds both Fives or misses a rank
        hand = parse_cards("S3 S4 S5 H5 S6 S7")
        assert find_sequences(hand) == []

    def test_order_independent(self):
        """Test that the input order never changes the result."""
        hand = parse_cards("S3 H4 D5 C6 S7 H8 D9 CJ SQ")
        expected = find_sequences(hand)

        rng = random.Random(3)
        for _ in range(5):
            shuffled = hand[:]
            rng.shuffle(shuffled)
            assert find_sequences(shuffled) == expected

    def test_input_not_mutated(self):
        """Test that the hand is left untouched."""
        hand = parse_cards("S9 H5 D6 C7 S8")
        before = list(hand)

        find_sequences(hand)

        assert hand == before

    def test_iter_is_lazy(self):
        """Test that iter_sequences yields the shortest window first."""
        hand = parse_cards("S3 H4 D5 C6 S7 H8")

        first = next(iter_sequences(hand))

        assert first.arity == 5
        assert first.key == Rank.THREE
