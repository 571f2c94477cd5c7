"""Strategy x outcome proportion tables for a batch of games."""

from typing import TYPE_CHECKING, Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from monty_hall.simulation.core.game_state import Outcome, Strategy

if TYPE_CHECKING:
    from monty_hall.simulation.engine.results import ResultSet

OUTCOME_COLUMNS = [Outcome.LOSE.value, Outcome.WIN.value]


def summarize(results: "ResultSet", decimals: int = 2) -> pd.DataFrame:
    """Row-normalized outcome table per strategy.

    Args:
        results: Records from a batch of games
        decimals: Rounding applied to the proportions

    Returns:
        DataFrame indexed by strategy with LOSE and WIN columns, each row
        summing to 1 (up to rounding)
    """
    if len(results) == 0:
        empty = pd.DataFrame(columns=OUTCOME_COLUMNS, dtype=float)
        empty.index.name = "strategy"
        return empty

    frame = results.to_frame()
    table = pd.crosstab(frame["strategy"], frame["outcome"], normalize="index")
    present = [s.value for s in Strategy if s.value in table.index]
    table = table.reindex(index=present, columns=OUTCOME_COLUMNS, fill_value=0.0)
    table.index.name = "strategy"
    table.columns.name = None
    return table.round(decimals)


def render_summary(
    results: "ResultSet", console: Optional[Console] = None
) -> pd.DataFrame:
    """Print the proportion table and return it.

    Args:
        results: Records from a batch of games
        console: Rich console to print to (stdout when omitted)

    Returns:
        The table produced by :func:`summarize`
    """
    console = console or Console()
    summary = summarize(results)

    title = "Outcome proportions by strategy"
    table = Table(
        title=title,
        min_width=len(title) + 4,
        caption=f"{len(results)} records",
    )
    table.add_column("Strategy", style="cyan")
    for column in OUTCOME_COLUMNS:
        table.add_column(column, justify="right")

    for strategy, row in summary.iterrows():
        table.add_row(strategy, *(f"{row[column]:.2f}" for column in OUTCOME_COLUMNS))

    console.print(table)
    return summary
