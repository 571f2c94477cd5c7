"""Monty Hall probability puzzle simulator."""

from monty_hall.exceptions import InvalidInputError, MontyHallError
from monty_hall.simulation import (
    Arrangement,
    Label,
    Outcome,
    ResultSet,
    Strategy,
    TrialRecord,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    play_game,
    play_n_games,
    render_summary,
    select_door,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "MontyHallError",
    "Arrangement",
    "Label",
    "Outcome",
    "ResultSet",
    "Strategy",
    "TrialRecord",
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "play_n_games",
    "render_summary",
    "select_door",
    "summarize",
]
