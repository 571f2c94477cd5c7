"""Single-game and batch runners for the Monty Hall simulation."""

from numbers import Integral
from typing import Optional

import numpy as np
from rich.console import Console
import structlog

from monty_hall.config import validate_random_state
from monty_hall.exceptions import InvalidInputError
from monty_hall.logging_config import log_performance
from monty_hall.simulation.analysis.summary import render_summary
from monty_hall.simulation.core.contestant import change_door, select_door
from monty_hall.simulation.core.game_state import (
    Strategy,
    TrialRecord,
    create_game,
    resolve_rng,
)
from monty_hall.simulation.core.host import open_goat_door
from monty_hall.simulation.core.judge import determine_winner
from monty_hall.simulation.engine.results import ResultSet

logger = structlog.get_logger(__name__)


def play_game(
    rng: Optional[np.random.RandomState] = None, game_id: int = 0
) -> tuple[TrialRecord, TrialRecord]:
    """Play one game and score both strategies against it.

    The arrangement, the first pick and the opened door are drawn once and
    shared, so STAY and SWITCH are judged on the same game.

    Args:
        rng: Random source; an unseeded one is used when omitted
        game_id: Index stored on both records

    Returns:
        Tuple of the STAY record followed by the SWITCH record
    """
    rng = resolve_rng(rng)

    game = create_game(rng)
    first_pick = select_door(rng)
    opened = open_goat_door(game, first_pick, rng)

    stay_pick = change_door(Strategy.STAY, opened, first_pick)
    switch_pick = change_door(Strategy.SWITCH, opened, first_pick)

    return (
        TrialRecord(Strategy.STAY, determine_winner(stay_pick, game), game_id),
        TrialRecord(Strategy.SWITCH, determine_winner(switch_pick, game), game_id),
    )


@log_performance()
def play_n_games(
    n: int = 100,
    rng: Optional[np.random.RandomState] = None,
    random_state: Optional[int] = None,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> ResultSet:
    """Play ``n`` games and collect both strategies' records.

    Args:
        n: Number of games, at least 1
        rng: Random source; takes precedence over ``random_state``
        random_state: Seed for a new random source when ``rng`` is omitted
        show_summary: Print the strategy x outcome proportion table
        console: Rich console for the table (stdout when omitted)

    Returns:
        ResultSet with ``2 * n`` records in play order

    Raises:
        InvalidInputError: If ``n`` is not a positive integer or the seed is
            outside 0..2**32 - 1
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidInputError(f"Number of games must be an integer, got {n!r}")
    if n < 1:
        raise InvalidInputError(f"Number of games must be at least 1, got {n}")

    random_state = validate_random_state(random_state)
    if rng is None:
        rng = np.random.RandomState(random_state)

    logger.info("batch_started", n_games=n, random_state=random_state)

    results = ResultSet()
    report_every = max(1, n // 10)
    for i in range(n):
        results.extend(play_game(rng, game_id=i))
        if (i + 1) % report_every == 0:
            logger.debug("batch_progress", completed=i + 1, n_games=n)

    proportions = results.win_proportions()
    logger.info(
        "batch_completed",
        n_games=n,
        n_records=len(results),
        win_proportions={s.value: round(p, 4) for s, p in proportions.items()},
    )

    if show_summary:
        render_summary(results, console=console)

    return results
