"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables/panels are reused by `aggregate` and `compare`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AggregateResult
from core.services.styles import AggregationStyle


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in --json mode)."""

    title = Text("HOLOCRON", style="bold cyan")
    subtitle = Text("Person • Homeworld • Films", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_person_panel(result: AggregateResult) -> Panel:
    body = Text()
    body.append("Height: ", style="bold")
    body.append(f"{result.height}\n")
    body.append("Gender: ", style="bold")
    body.append(f"{result.gender.label()}\n")
    body.append("Homeworld: ", style="bold")
    body.append(result.homeworld)
    return Panel(body, title=Text(result.name, style="bold yellow"), border_style="yellow")


def build_films_table(result: AggregateResult) -> Table:
    table = Table(title=f"Films ({len(result.films)})")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan")
    table.add_column("Director", style="white")
    table.add_column("Released", style="magenta", no_wrap=True)
    for index, film in enumerate(result.films, start=1):
        table.add_row(str(index), escape(film.title), escape(film.director), escape(film.release_date))
    return table


def build_compare_table() -> Table:
    table = Table(title="Style comparison")
    table.add_column("Style", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Films", style="green")
    table.add_column("Details", style="dim")
    return table


def add_compare_row(
    table: Table,
    *,
    style: AggregationStyle,
    result: AggregateResult | None,
    error: str | None,
    matches: bool,
) -> None:
    if result is None:
        table.add_row(style.label(), "[red]FAIL[/red]", "-", escape(error or ""))
        return
    status = "OK" if matches else "[yellow]DIFF[/yellow]"
    detail = "identical to reference" if matches else "differs from reference"
    table.add_row(style.label(), status, str(len(result.films)), detail)
