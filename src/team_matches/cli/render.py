"""Rich renderers for team match view states."""

from typing import Any

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..schemas import Match, Statistics, TeamSnapshot
from ..views.state import Failed, Ready, ViewState


def _value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def render_latest_match(match: Match) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan")
    table.add_column()
    table.add_row("Opponent", _value(match.competing_team))
    table.add_row("Date", _value(match.date))
    table.add_row("Venue", _value(match.venue))
    table.add_row("Result", _value(match.result))
    table.add_row("First Innings", _value(match.first_innings))
    table.add_row("Second Innings", _value(match.second_innings))
    table.add_row("Man Of The Match", _value(match.man_of_the_match))
    table.add_row("Umpires", _value(match.umpires))
    return Panel(table, title="Latest Matches", border_style="blue")


def render_recent_matches(snapshot: TeamSnapshot) -> Table:
    table = Table(title="Recent Matches")
    table.add_column("Opponent", style="cyan")
    table.add_column("Result")
    table.add_column("Status")
    styles = {"won": "green", "lost": "red"}
    for match in snapshot.recent_matches:
        status = _value(match.match_status)
        table.add_row(
            _value(match.competing_team),
            _value(match.result),
            Text(status, style=styles.get(match.outcome.value, "yellow")),
        )
    return table


def render_statistics(statistics: Statistics) -> Table:
    table = Table(title="Match Statistics")
    table.add_column("Outcome", style="cyan")
    table.add_column("Matches", justify="right")
    table.add_column("Share", justify="right")
    for label, value, color in statistics.as_chart_rows():
        share = f"{value / statistics.total:.0%}" if statistics.total else "-"
        table.add_row(Text(label, style=color), str(value), share)
    return table


def render_ready(state: Ready) -> Group:
    snapshot = state.snapshot
    parts = [Text(f"Banner: {_value(snapshot.team_banner_url)}", style="bold")]
    if snapshot.latest_match is not None:
        parts.append(render_latest_match(snapshot.latest_match))
    parts.append(render_recent_matches(snapshot))
    if state.statistics is not None:
        parts.append(render_statistics(state.statistics))
    return Group(*parts)


def render_state(console: Console, state: ViewState) -> None:
    """Print any view state; loading and failed states are shown distinctly."""
    if isinstance(state, Ready):
        console.print(render_ready(state))
    elif isinstance(state, Failed):
        console.print(f"[red]❌ {state.message}[/red]")
    else:
        console.print(f"[yellow]{state.status}...[/yellow]")
