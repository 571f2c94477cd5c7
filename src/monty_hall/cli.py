"""Command line interface for the Monty Hall simulator.

Built with Click for command structure and Rich for terminal output:
- ``play`` runs a batch of games and prints the outcome proportions
- ``game`` plays a single game and shows both strategies' results
"""

from dataclasses import replace
import json
import sys
from typing import Optional

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from monty_hall import __version__, logging_config
from monty_hall.config import LOG_FORMATS, SimulationConfig
from monty_hall.exceptions import MontyHallError
from monty_hall.simulation.engine.runner import play_game, play_n_games

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="monty-hall")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    default="console",
    help="Log output format",
)
@click.option("--log-file", type=click.Path(), default=None, help="Also write logs to file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_format: str, log_file: Optional[str]) -> None:
    """Monty Hall Simulator.

    Plays the three-door game repeatedly and compares the win rate of
    staying with the first pick against switching doors.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    config = SimulationConfig(
        log_level="DEBUG" if verbose else "INFO",
        log_format=log_format,
    )
    ctx.obj["config"] = config

    logging_config.configure_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=log_file,
        enable_colors=True,
    )


@cli.command()
@click.option("--games", "-n", type=int, default=100, show_default=True, help="Number of games")
@click.option("--seed", "-s", type=int, default=None, help="Random seed")
@click.option("--no-summary", is_flag=True, help="Do not print the proportion table")
@click.option("--json", "as_json", is_flag=True, help="Print win proportions as JSON")
@click.pass_context
def play(
    ctx: click.Context,
    games: int,
    seed: Optional[int],
    no_summary: bool,
    as_json: bool,
) -> None:
    """Play a batch of games.

    \b
    Examples:
        monty-hall play
        monty-hall play -n 10000 --seed 42
        monty-hall play -n 500 --json
    """
    try:
        config = replace(
            ctx.obj["config"],
            n_games=games,
            random_state=seed,
            show_summary=not (no_summary or as_json),
        )
        results = play_n_games(
            config.n_games,
            random_state=config.random_state,
            show_summary=config.show_summary,
            console=console,
        )
    except MontyHallError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    proportions = {s.value: p for s, p in results.win_proportions().items()}
    if as_json:
        click.echo(json.dumps({"n_games": config.n_games, "win_proportions": proportions}))
    else:
        console.print(
            f"[bold green]✓[/bold green] Played {config.n_games} games "
            f"({len(results)} records)"
        )


@cli.command()
@click.option("--seed", "-s", type=int, default=None, help="Random seed")
@click.pass_context
def game(ctx: click.Context, seed: Optional[int]) -> None:
    """Play a single game and show how each strategy fared.

    \b
    Example:
        monty-hall game --seed 7
    """
    try:
        config = replace(ctx.obj["config"], random_state=seed)
    except MontyHallError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    records = play_game(np.random.RandomState(config.random_state))

    table = Table(title="Single Game", show_header=True)
    table.add_column("Strategy", style="cyan")
    table.add_column("Outcome")
    for record in records:
        colour = "green" if record.outcome.value == "WIN" else "red"
        table.add_row(record.strategy.value, f"[{colour}]{record.outcome.value}[/{colour}]")

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
