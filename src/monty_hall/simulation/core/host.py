"""Host behaviour: opening a goat door after the contestant's pick."""

from typing import Any, Optional, Sequence, Union

import numpy as np
import structlog

from monty_hall.simulation.core.game_state import (
    DOORS,
    Arrangement,
    Label,
    resolve_rng,
    validate_door,
)

logger = structlog.get_logger(__name__)


def open_goat_door(
    arrangement: Union[Arrangement, Sequence[Any]],
    pick: int,
    rng: Optional[np.random.RandomState] = None,
) -> int:
    """Open a door hiding a goat that the contestant did not pick.

    If the contestant picked the car, both other doors hide goats and the host
    opens one of them at random. If the contestant picked a goat, the host has
    exactly one choice: the other goat door.

    Args:
        arrangement: Hidden door labels for the game
        pick: Contestant's first pick
        rng: Random source, only consumed when the pick holds the car

    Returns:
        Number of the opened door, never equal to ``pick``

    Raises:
        InvalidInputError: If the arrangement is malformed or the pick is out of range
    """
    arrangement = Arrangement.coerce(arrangement)
    pick = validate_door(pick, "pick")

    if arrangement[pick] is Label.PRIZE:
        goat_doors = [door for door in DOORS if door != pick]
        opened = int(resolve_rng(rng).choice(goat_doors))
    else:
        (opened,) = [
            door
            for door in DOORS
            if door != pick and arrangement[door] is Label.DECOY
        ]

    logger.debug("goat_door_opened", pick=pick, opened=opened)
    return opened
