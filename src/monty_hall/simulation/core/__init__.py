"""Core game models and the per-game decision steps."""

from monty_hall.simulation.core.contestant import change_door, select_door
from monty_hall.simulation.core.game_state import (
    DOORS,
    Arrangement,
    Label,
    Outcome,
    Strategy,
    TrialRecord,
    create_game,
    validate_door,
)
from monty_hall.simulation.core.host import open_goat_door
from monty_hall.simulation.core.judge import determine_winner

__all__ = [
    "DOORS",
    "Arrangement",
    "Label",
    "Outcome",
    "Strategy",
    "TrialRecord",
    "create_game",
    "validate_door",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
]
