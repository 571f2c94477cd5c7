"""Monty Hall game simulation.

Main Components:
- Core: door arrangement, contestant, host and judge
- Engine: single-game and batch runners, result collection
- Analysis: strategy x outcome proportion tables
"""

from monty_hall.simulation.analysis.summary import render_summary, summarize
from monty_hall.simulation.core.contestant import change_door, select_door
from monty_hall.simulation.core.game_state import (
    Arrangement,
    Label,
    Outcome,
    Strategy,
    TrialRecord,
    create_game,
)
from monty_hall.simulation.core.host import open_goat_door
from monty_hall.simulation.core.judge import determine_winner
from monty_hall.simulation.engine.results import ResultSet
from monty_hall.simulation.engine.runner import play_game, play_n_games

__all__ = [
    # Core models
    "Arrangement",
    "Label",
    "Outcome",
    "Strategy",
    "TrialRecord",
    # Game steps
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    # Engine
    "ResultSet",
    "play_game",
    "play_n_games",
    # Analysis
    "render_summary",
    "summarize",
]
