"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__
    if not response.is_success:
        return False, f"HTTP {response.status_code}"
    return True, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show the effective configuration and check that the API is reachable."""

    settings = AppSettings()

    table = Table(title="Holocron Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base URL", "OK", escape(settings.api_base_url))
    table.add_row("Root resource", "OK", escape(settings.root_url))
    table.add_row("Default style", "OK", settings.default_style.label())
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    user_env = get_user_env_file()
    if user_env.exists():
        table.add_row("User config", "OK", escape(str(user_env)))
    else:
        table.add_row("User config", "OPTIONAL", escape(f"{user_env} (not found, using defaults/env vars)"))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings, settings.api_base_url))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", escape(detail_http))

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] set HOLOCRON_API_BASE_URL to point at a reachable mirror."
        )
        raise typer.Exit(code=1)
