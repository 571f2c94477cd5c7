"""Contestant decisions: the first pick and the stay/switch choice."""

from typing import Optional, Union

import numpy as np

from monty_hall.exceptions import InvalidInputError
from monty_hall.simulation.core.game_state import DOORS, Strategy, resolve_rng, validate_door


def select_door(rng: Optional[np.random.RandomState] = None) -> int:
    """Pick one of the three doors uniformly at random.

    Args:
        rng: Random source; an unseeded one is used when omitted

    Returns:
        Door number between 1 and 3
    """
    rng = resolve_rng(rng)
    return int(rng.randint(DOORS[0], DOORS[-1] + 1))


def change_door(strategy: Union[Strategy, str], revealed: int, pick: int) -> int:
    """Derive the final door from the first pick and the door the host opened.

    Args:
        strategy: STAY keeps the pick, SWITCH moves to the remaining closed door
        revealed: Door opened by the host
        pick: Contestant's first pick

    Returns:
        Final door number

    Raises:
        InvalidInputError: If either door is out of range, the doors coincide,
            or the strategy is unknown
    """
    try:
        strategy = Strategy(strategy)
    except ValueError as e:
        raise InvalidInputError(f"Unknown strategy: {strategy!r}") from e

    revealed = validate_door(revealed, "revealed")
    pick = validate_door(pick, "pick")
    if revealed == pick:
        raise InvalidInputError(f"Host cannot open the picked door ({pick})")

    if strategy is Strategy.STAY:
        return pick

    (remaining,) = [door for door in DOORS if door not in (revealed, pick)]
    return remaining
