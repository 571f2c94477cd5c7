"""Accumulated trial records for a batch of games."""

from typing import Iterable, Iterator, Optional

import pandas as pd

from monty_hall.simulation.core.game_state import Outcome, Strategy, TrialRecord


class ResultSet:
    """Ordered, append-only collection of trial records.

    Records keep their insertion order; there is no way to remove or replace
    one once added.
    """

    def __init__(self, records: Optional[Iterable[TrialRecord]] = None) -> None:
        """Initialize result set.

        Args:
            records: Optional records to start with, in order
        """
        self._records: list[TrialRecord] = []
        for record in records or ():
            self.append(record)

    def append(self, record: TrialRecord) -> None:
        """Add a record at the end of the set."""
        if not isinstance(record, TrialRecord):
            raise TypeError(f"Expected TrialRecord, got {type(record).__name__}")
        self._records.append(record)

    def extend(self, records: Iterable[TrialRecord]) -> None:
        """Add several records at the end of the set, in order."""
        for record in records:
            self.append(record)

    @property
    def records(self) -> tuple[TrialRecord, ...]:
        """Snapshot of all records."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TrialRecord]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> TrialRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f"ResultSet(n_records={len(self._records)})"

    def for_strategy(self, strategy: Strategy) -> list[TrialRecord]:
        """Records produced under one strategy."""
        strategy = Strategy(strategy)
        return [r for r in self._records if r.strategy is strategy]

    def win_proportions(self) -> dict[Strategy, float]:
        """Share of WIN outcomes per strategy.

        Strategies without any record are left out.
        """
        proportions = {}
        for strategy in Strategy:
            records = self.for_strategy(strategy)
            if not records:
                continue
            wins = sum(1 for r in records if r.outcome is Outcome.WIN)
            proportions[strategy] = wins / len(records)
        return proportions

    def to_frame(self) -> pd.DataFrame:
        """Records as a DataFrame with ``game_id``, ``strategy`` and ``outcome`` columns."""
        return pd.DataFrame(
            {
                "game_id": [r.game_id for r in self._records],
                "strategy": [r.strategy.value for r in self._records],
                "outcome": [r.outcome.value for r in self._records],
            },
            columns=["game_id", "strategy", "outcome"],
        )
