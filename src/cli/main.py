"""Holocron command line interface (Typer).

Commands:
- `aggregate`: fetch a person with its homeworld and films and print it.
- `compare`: run the three control-flow styles and check they agree.
- `doctor`: configuration and connectivity diagnostics.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.http_client import HttpResourceFetcher, build_async_client
from adapters.json_exporter import export_result_json, result_to_json
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import (
    add_compare_row,
    build_compare_table,
    build_films_table,
    build_person_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import AggregateResult
from core.errors import AggregatorError
from core.services.runner import run_aggregation
from core.services.styles import AggregationStyle

app = typer.Typer(
    no_args_is_help=True,
    help="Fetch a person and its linked homeworld and films from a REST API.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def _aggregate(settings: AppSettings, url: str, style: AggregationStyle) -> AggregateResult:
    async with build_async_client(settings) as client:
        return await run_aggregation(HttpResourceFetcher(client), url, style)


async def _aggregate_all(
    settings: AppSettings,
    url: str,
) -> list[tuple[AggregationStyle, AggregateResult | None, str | None]]:
    outcomes: list[tuple[AggregationStyle, AggregateResult | None, str | None]] = []
    async with build_async_client(settings) as client:
        fetcher = HttpResourceFetcher(client)
        for style in AggregationStyle:
            try:
                result = await run_aggregation(fetcher, url, style)
            except AggregatorError as exc:
                outcomes.append((style, None, str(exc)))
            else:
                outcomes.append((style, result, None))
    return outcomes


@app.command()
def aggregate(
    url: str | None = typer.Argument(
        None,
        help="Root person URL (defaults to the configured resource).",
    ),
    style: AggregationStyle | None = typer.Option(
        None,
        "--style",
        "-s",
        case_sensitive=False,
        help="Control-flow style used for the aggregation.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the result as JSON to this path.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Fetch a person, its homeworld and its films, then print the merged record."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    target = url or settings.root_url
    chosen = style or settings.default_style

    try:
        result = asyncio.run(_aggregate(settings, target, chosen))
    except AggregatorError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(result_to_json(result))
    else:
        print_banner(_console)
        _console.print(build_person_panel(result))
        _console.print(build_films_table(result))

    if output is not None:
        path = export_result_json(result=result, output_path=output)
        if not as_json:
            _console.print(f"[green]Saved JSON to:[/green] {escape(str(path))}")


@app.command()
def compare(
    url: str | None = typer.Argument(
        None,
        help="Root person URL (defaults to the configured resource).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Run every control-flow style against the same URL and compare results."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    outcomes = asyncio.run(_aggregate_all(settings, url or settings.root_url))

    reference = next((result for _, result, _ in outcomes if result is not None), None)
    table = build_compare_table()
    consistent = True
    for style, result, error in outcomes:
        matches = result is not None and result == reference
        consistent = consistent and matches
        add_compare_row(table, style=style, result=result, error=error, matches=matches)
    _console.print(table)

    if not consistent:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
