"""Game runners and result collection."""

from monty_hall.simulation.engine.results import ResultSet
from monty_hall.simulation.engine.runner import play_game, play_n_games

__all__ = [
    "ResultSet",
    "play_game",
    "play_n_games",
]
