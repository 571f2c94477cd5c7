"""Run configuration for the Monty Hall simulator."""

from dataclasses import asdict, dataclass, fields
from numbers import Integral
from typing import Any, Mapping, Optional

from monty_hall.exceptions import InvalidInputError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")
MAX_SEED = 2**32 - 1


def validate_random_state(random_state: Any) -> Optional[int]:
    """Check that a seed is usable by numpy's RandomState.

    Raises:
        InvalidInputError: If the seed is not None or an integer in 0..2**32 - 1
    """
    if random_state is None:
        return None
    if isinstance(random_state, bool) or not isinstance(random_state, Integral):
        raise InvalidInputError("random_state must be an integer or None")
    if not 0 <= random_state <= MAX_SEED:
        raise InvalidInputError(f"random_state must be between 0 and {MAX_SEED}")
    return int(random_state)


@dataclass
class SimulationConfig:
    """Settings for one batch run.

    Attributes:
        n_games: Number of games to play
        random_state: Seed for the random source (None for unseeded)
        show_summary: Whether to print the proportion table
        log_level: Logging level name
        log_format: 'console' or 'json'
    """

    n_games: int = 100
    random_state: Optional[int] = None
    show_summary: bool = True
    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if isinstance(self.n_games, bool) or not isinstance(self.n_games, int):
            raise InvalidInputError("n_games must be an integer")
        if self.n_games < 1:
            raise InvalidInputError("n_games must be >= 1")
        validate_random_state(self.random_state)
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise InvalidInputError(f"log_level must be one of {LOG_LEVELS}")
        if self.log_format not in LOG_FORMATS:
            raise InvalidInputError(f"log_format must be one of {LOG_FORMATS}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """Create config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a plain dictionary."""
        return asdict(self)
