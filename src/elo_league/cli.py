"""CLI for Elo League."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import pydantic
import structlog
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from elo_league import __version__
from elo_league.core.config import LeagueConfig, load_config
from elo_league.core.errors import LeagueError
from elo_league.models.match import Match
from elo_league.models.player import Player
from elo_league.ranking.elo import odds
from elo_league.services.league import League
from elo_league.services.storage.file_store import load_league, save_league

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="elo-league",
    help="Elo League - rate players and propose close matches",
    add_completion=False,
)
console = Console()


@dataclass
class State:
    """Settings shared by every command."""

    league_path: Path
    seed: int | None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"elo-league v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to config YAML file")
    ] = None,
    league_file: Annotated[
        Path | None, typer.Option("--league", "-l", help="League JSON file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Elo League CLI."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        config = load_config(config_path) if config_path else LeagueConfig()
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except (LeagueError, pydantic.ValidationError) as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e

    ctx.obj = State(league_path=league_file or config.league_path, seed=config.seed)


def _load(state: State) -> League:
    try:
        return load_league(state.league_path)
    except LeagueError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e


def _resolve(league: League, key: str) -> Player:
    """Find a player by id, or by name when the name is unique."""
    player = league.get_player(key)
    if player is not None:
        return player

    matches = [p for p in league.players if p.name == key]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        console.print(f"[red]Error:[/red] no player with id or name '{key}'")
    else:
        console.print(f"[red]Error:[/red] '{key}' is ambiguous, use the player id")
    raise typer.Exit(1)


def _pairing(first: Player, second: Player) -> Match:
    try:
        return Match(first=first, second=second)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def add(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Names of the players to add")],
) -> None:
    """Add players to the league."""
    league = _load(ctx.obj)
    for name in names:
        player = league.add_player(name)
        console.print(f"Added [bold]{player.name}[/bold] ({player.rating}) id={player.id}")
    save_league(league, ctx.obj.league_path)


@app.command()
def retire(
    ctx: typer.Context,
    player: Annotated[str, typer.Argument(help="Player id or name")],
) -> None:
    """Remove a player from the league."""
    league = _load(ctx.obj)
    target = _resolve(league, player)
    league.retire_player(target.id)
    save_league(league, ctx.obj.league_path)
    console.print(f"Retired [bold]{target.name}[/bold]")


@app.command()
def rename(
    ctx: typer.Context,
    player: Annotated[str, typer.Argument(help="Player id or name")],
    name: Annotated[str, typer.Argument(help="New display name")],
) -> None:
    """Change a player's display name."""
    league = _load(ctx.obj)
    target = _resolve(league, player)
    old_name = target.name
    league.rename_player(target.id, name)
    save_league(league, ctx.obj.league_path)
    console.print(f"Renamed [bold]{old_name}[/bold] to [bold]{name}[/bold]")


@app.command(name="next")
def next_match(
    ctx: typer.Context,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """Propose the next match."""
    league = _load(ctx.obj)
    rng = random.Random(seed if seed is not None else ctx.obj.seed)  # noqa: S311
    match = league.next_match(rng)
    if match is None:
        console.print("[yellow]Add at least two players to propose a match.[/yellow]")
        return

    first, second = match.players
    chance = odds(first.rating, second.rating)
    console.print(
        f"[bold]{first.name}[/bold] ({first.rating}) vs "
        f"[bold]{second.name}[/bold] ({second.rating})"
    )
    console.print(f"  {first.name} wins {chance:.0%} / {second.name} wins {1 - chance:.0%}")


@app.command()
def win(
    ctx: typer.Context,
    winner: Annotated[str, typer.Argument(help="Winner id or name")],
    loser: Annotated[str, typer.Argument(help="Loser id or name")],
) -> None:
    """Record a win."""
    league = _load(ctx.obj)
    match = _pairing(_resolve(league, winner), _resolve(league, loser))
    league.start_match(match)
    league.finish_match(match.win(match.first.id))
    save_league(league, ctx.obj.league_path)
    _print_result(league, match)


@app.command()
def draw(
    ctx: typer.Context,
    first: Annotated[str, typer.Argument(help="First player id or name")],
    second: Annotated[str, typer.Argument(help="Second player id or name")],
) -> None:
    """Record a draw."""
    league = _load(ctx.obj)
    match = _pairing(_resolve(league, first), _resolve(league, second))
    league.start_match(match)
    league.finish_match(match.draw())
    save_league(league, ctx.obj.league_path)
    _print_result(league, match)


def _print_result(league: League, match: Match) -> None:
    for before in match.players:
        after = league.get_player(before.id)
        if after is not None:
            console.print(f"  {after.name}: {after.rating} ({after.matches} matches)")


@app.command()
def standings(ctx: typer.Context) -> None:
    """Show players sorted by rating."""
    league = _load(ctx.obj)
    table = Table(title="Standings")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Rating", justify="right")
    table.add_column("Matches", justify="right")
    table.add_column("Id", style="dim")
    for rank, player in enumerate(league.leaderboard(), start=1):
        table.add_row(str(rank), player.name, str(player.rating), str(player.matches), player.id)
    console.print(table)


@app.command()
def info() -> None:
    """Show tool information and example commands."""
    console.print("[bold]Elo League[/bold]")
    console.print(f"Version: {__version__}\n")

    console.print("[bold]Example Commands:[/bold]")
    console.print("  # Add players")
    console.print("  uv run elo-league add alice bob carol\n")

    console.print("  # Propose a match")
    console.print("  uv run elo-league next --seed 7\n")

    console.print("  # Record results")
    console.print("  uv run elo-league win alice bob")
    console.print("  uv run elo-league draw bob carol\n")

    console.print("  # Use another league file")
    console.print("  uv run elo-league --league office.json standings")


if __name__ == "__main__":
    app()
