"""Main CLI interface for the team matches viewer."""

import asyncio
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import get_settings
from ..scrapers import TeamMatchesFetcher
from ..views import TEAM_CLASS_MAP, TeamMatchesController
from ..views.state import Failed
from .render import render_state

# Initialize rich console
console = Console()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup loguru sinks: rich console output plus an optional file."""
    logger.remove()
    logger.add(
        RichHandler(console=Console(stderr=True), show_time=True, show_path=False),
        level=level.upper(),
        format="{message}",
    )
    if log_file:
        logger.add(
            log_file,
            level=level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message} {extra}",
        )


app = typer.Typer(
    name="team-matches",
    help="Team Matches - a team's match history, latest match and win/loss/draw statistics",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
):
    """Team Matches - a team's match history, latest match and win/loss/draw statistics."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)


@app.command()
def show(
    team_id: str = typer.Argument(..., help="Team identifier, e.g. RCB"),
    no_stats: bool = typer.Option(False, "--no-stats", help="Skip win/loss/draw statistics"),
    json_out: bool = typer.Option(False, "--json", help="Output the view state as JSON"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the match data API base URL"),
):
    """Fetch and display a team's matches."""
    settings = get_settings()
    fetcher = TeamMatchesFetcher.from_settings(settings)
    if base_url:
        fetcher.base_url = base_url

    controller = TeamMatchesController(
        team_id,
        fetcher,
        enable_statistics=settings.features.enable_statistics and not no_stats,
    )

    if json_out:
        state = asyncio.run(controller.mount())
        console.print_json(data=state.to_dict())
    else:
        with console.status(f"Loading matches for {team_id}..."):
            state = asyncio.run(controller.mount())
        style = controller.route_class_name
        console.print(f"\n[bold blue]🏏 {team_id}[/bold blue] {f'[dim]({style})[/dim]' if style else ''}")
        render_state(console, state)

    if isinstance(state, Failed):
        raise typer.Exit(1)


@app.command()
def teams():
    """List known team identifiers and their style tokens."""
    table = Table(title="Teams")
    table.add_column("Identifier", style="cyan")
    table.add_column("Style", style="green")
    for team_id, token in TEAM_CLASS_MAP.items():
        table.add_row(team_id, token)
    console.print(table)


if __name__ == "__main__":
    app()
