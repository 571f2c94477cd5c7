"""Scoring of a final door choice."""

from typing import Any, Sequence, Union

from monty_hall.simulation.core.game_state import Arrangement, Label, Outcome, validate_door


def determine_winner(
    final_pick: int, arrangement: Union[Arrangement, Sequence[Any]]
) -> Outcome:
    """Return WIN if the final door hides the car, LOSE otherwise.

    Raises:
        InvalidInputError: If the door is out of range or the arrangement is malformed
    """
    arrangement = Arrangement.coerce(arrangement)
    final_pick = validate_door(final_pick, "final_pick")
    if arrangement[final_pick] is Label.PRIZE:
        return Outcome.WIN
    return Outcome.LOSE
