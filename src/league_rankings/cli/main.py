#!/usr/bin/env python3
"""
League Rankings CLI - matchday-by-matchday top of the table.

Reads a results file, applies every matchday to the league table and prints
the leading teams after each matchday.
"""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from league_rankings.models import RankingSnapshot
from league_rankings.rankings.config import DEFAULT_TOP_N, RankingConfig
from league_rankings.rankings.engine import StandingsTable, run_league
from league_rankings.rankings.errors import InputError, ParseError
from league_rankings.rankings.reader import read_matchdays
from league_rankings.rankings.report import build_snapshot_table, format_snapshot
from league_rankings.utils.logger import rankings_logger

# Respect NO_COLOR for plain terminals and CI logs
use_rich = os.getenv("NO_COLOR") is None
console = Console(no_color=not use_rich)
err_console = Console(stderr=True, no_color=not use_rich)
app = typer.Typer(
    name="league-rankings",
    help="⚽ League Rankings - top of the table after every matchday",
    rich_markup_mode="rich",
    add_completion=False,
)


def setup_logging(verbose: bool = False) -> str:
    """Set the log level for the run and return it."""
    log_level = "DEBUG" if verbose else "ERROR"  # Only show errors unless verbose
    rankings_logger.set_level(log_level)
    return log_level


def create_config(
    input_path: Path,
    top: int = DEFAULT_TOP_N,
    detailed: bool = False,
    verbose: bool = False,
) -> RankingConfig:
    """Create the run configuration from CLI parameters."""
    return RankingConfig(
        input_path=input_path,
        top_n=top,
        detailed=detailed,
        log_level="DEBUG" if verbose else "ERROR",
    )


def handle_cli_error(e: Exception, verbose: bool = False) -> None:
    """Handle CLI errors with user-friendly messages."""
    error_message = escape(str(e))

    if isinstance(e, InputError):
        err_console.print(f"[red]❌ Cannot read input: {error_message}[/red]")
    elif isinstance(e, ParseError):
        err_console.print(f"[red]❌ Malformed match record, {error_message}[/red]")
    else:
        err_console.print(f"[red]❌ Error: {error_message}[/red]")

    if verbose:
        err_console.print("\n[dim]Full stack trace:[/dim]")
        err_console.print_exception()
    else:
        err_console.print("[dim]💡 Use --verbose/-v to see full error details[/dim]")


def display_snapshots(snapshots: Iterable[RankingSnapshot], detailed: bool) -> None:
    """Print each snapshot to stdout as soon as it is produced."""
    for index, snapshot in enumerate(snapshots):
        if not detailed:
            # Plain output, kept byte-for-byte stable for scripting and fixtures
            if index:
                print()
            print("\n".join(format_snapshot(snapshot)))
            continue

        if index:
            console.print()
        console.print(build_snapshot_table(snapshot))


def run_rankings(config: RankingConfig) -> Iterator[RankingSnapshot]:
    """Read the results file and yield one snapshot per matchday.

    The whole file is read and parsed before the first snapshot is yielded.

    Raises:
        InputError: If the results file cannot be read
        ParseError: If a line is malformed
    """
    rankings_logger.log_run_start(config.to_log_dict())

    matchdays = read_matchdays(config.input_path)
    table = StandingsTable()
    yield from run_league(matchdays, top_n=config.top_n, table=table)

    rankings_logger.log_run_complete(
        {
            "matchdays": len(matchdays),
            "matches": sum(len(matchday.matches) for matchday in matchdays),
            "teams": len(table),
            "points_awarded": table.total_points(),
        }
    )


@app.command()
def rank(
    input_file: Annotated[
        Path, typer.Argument(help="Results file, one match per line")
    ],
    top: Annotated[
        int,
        typer.Option("--top", "-n", min=1, help="Number of teams shown per matchday"),
    ] = DEFAULT_TOP_N,
    detailed: Annotated[
        bool,
        typer.Option(
            "--detailed", "-d", help="Show full statistics in a table per matchday"
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v", help="Show detailed logs and full error traces"
        ),
    ] = False,
) -> None:
    """
    ⚽ Print the top of the league table after every matchday.

    Matches are read in file order as "Home Team 2, Away Team 1". A line of
    dashes ("---") ends a matchday. In a file without dash lines, a team
    appearing twice starts a new matchday.
    """
    setup_logging(verbose)
    config = create_config(input_file, top, detailed, verbose)

    try:
        display_snapshots(run_rankings(config), config.detailed)
    except (InputError, ParseError) as e:
        handle_cli_error(e, verbose)
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
