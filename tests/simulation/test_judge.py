"""Unit tests for scoring a final door."""

import pytest

from monty_hall.exceptions import InvalidInputError
from monty_hall.simulation.core.game_state import Label, Outcome
from monty_hall.simulation.core.judge import determine_winner


class TestDetermineWinner:
    """Test determine_winner."""

    def test_win_iff_car(self, all_arrangements):
        """Test that only the car door wins."""
        for arrangement in all_arrangements:
            for door in (1, 2, 3):
                expected = Outcome.WIN if arrangement[door] is Label.PRIZE else Outcome.LOSE
                assert determine_winner(door, arrangement) is expected

    def test_goat_loses(self, prize_last):
        """Test a goat door."""
        assert determine_winner(1, prize_last) is Outcome.LOSE

    def test_car_wins(self, prize_last):
        """Test the car door."""
        assert determine_winner(3, prize_last) is Outcome.WIN

    def test_repeatable(self, prize_first):
        """Test that the same inputs give the same outcome."""
        assert determine_winner(1, prize_first) is determine_winner(1, prize_first)

    def test_accepts_plain_sequence(self):
        """Test passing labels instead of an Arrangement."""
        assert determine_winner(2, ("goat", "car", "goat")) is Outcome.WIN

    @pytest.mark.parametrize("door", [0, 4, -3, "3"])
    def test_out_of_range_door(self, prize_first, door):
        """Test that invalid doors are rejected."""
        with pytest.raises(InvalidInputError):
            determine_winner(door, prize_first)

    def test_malformed_arrangement(self):
        """Test that malformed arrangements are rejected."""
        with pytest.raises(InvalidInputError):
            determine_winner(1, [Label.PRIZE, Label.DECOY])
