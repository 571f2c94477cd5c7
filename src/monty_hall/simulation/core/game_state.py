"""Game state models for a single Monty Hall game.

The game replicates the "Let's Make a Deal" setup: three doors, a car behind
one of them and goats behind the other two. Doors are addressed 1..3.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Iterator, Optional, Sequence, Union

import numpy as np

from monty_hall.exceptions import InvalidInputError

DOORS: tuple[int, int, int] = (1, 2, 3)


class Label(str, Enum):
    """What sits behind a door."""

    PRIZE = "car"
    DECOY = "goat"


class Strategy(str, Enum):
    """Contestant policy after the host opens a door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of a final door choice."""

    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class Arrangement:
    """Hidden mapping of doors to prize/decoy for one game.

    Attributes:
        labels: Labels for doors 1, 2 and 3, in door order
    """

    labels: tuple[Label, ...]

    def __post_init__(self) -> None:
        """Validate arrangement shape."""
        if isinstance(self.labels, (str, bytes)) or not isinstance(self.labels, Sequence):
            raise InvalidInputError(f"Arrangement must be a sequence, got {self.labels!r}")
        if len(self.labels) != len(DOORS):
            raise InvalidInputError(
                f"Arrangement must have {len(DOORS)} doors, got {len(self.labels)}"
            )
        try:
            labels = tuple(Label(label) for label in self.labels)
        except ValueError as e:
            raise InvalidInputError(f"Unknown door label in {self.labels!r}") from e
        if labels.count(Label.PRIZE) != 1:
            raise InvalidInputError("Arrangement must hold exactly one prize")
        object.__setattr__(self, "labels", labels)

    def __getitem__(self, door: int) -> Label:
        """Label behind a door (1-based)."""
        return self.labels[validate_door(door) - 1]

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def prize_door(self) -> int:
        """Door hiding the prize."""
        return self.labels.index(Label.PRIZE) + 1

    @classmethod
    def coerce(cls, value: Union["Arrangement", Sequence[Any]]) -> "Arrangement":
        """Build an arrangement from an existing one or a sequence of labels.

        Raises:
            InvalidInputError: If the value is not a valid three-door arrangement
        """
        if isinstance(value, cls):
            return value
        return cls(value)


@dataclass(frozen=True)
class TrialRecord:
    """One (strategy, outcome) pair produced by a single game.

    Attributes:
        strategy: Policy the contestant followed
        outcome: Whether the final door held the prize
        game_id: Zero-based index of the game within a batch
    """

    strategy: Strategy
    outcome: Outcome
    game_id: int = 0


def validate_door(door: Any, name: str = "door") -> int:
    """Check that a value is a DoorIndex and return it as a plain int.

    Raises:
        InvalidInputError: If the value is not an integer in 1..3
    """
    if isinstance(door, bool) or not isinstance(door, Integral):
        raise InvalidInputError(f"{name} must be an integer, got {door!r}")
    if int(door) not in DOORS:
        raise InvalidInputError(f"{name} must be one of {DOORS}, got {door}")
    return int(door)


def resolve_rng(rng: Optional[np.random.RandomState]) -> np.random.RandomState:
    """Return the given random source or a fresh unseeded one."""
    return rng if rng is not None else np.random.RandomState()


def create_game(rng: Optional[np.random.RandomState] = None) -> Arrangement:
    """Create a new game with two goats and one car behind random doors.

    Args:
        rng: Random source; an unseeded one is used when omitted

    Returns:
        Arrangement with the labels in a uniformly random order
    """
    rng = resolve_rng(rng)
    order = rng.permutation(len(DOORS))
    pool = (Label.DECOY, Label.DECOY, Label.PRIZE)
    return Arrangement(tuple(pool[i] for i in order))
