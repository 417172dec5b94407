"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from adapters.ogame_parser import DataParser
from core.config import AppSettings, get_user_env_file
from core.errors import ParseError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_landing_page(url: str, settings: AppSettings) -> tuple[bool, str, str]:
    """Download `url` once; returns (http_ok, http_detail, parse_detail)."""

    try:
        with build_client(settings) as client:
            response = client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc), "skipped"

    http_detail = f"HTTP {response.status_code}"
    if response.status_code >= 400:
        return False, http_detail, "skipped"

    try:
        result = DataParser().parse(response.text)
    except ParseError as exc:
        return True, http_detail, f"FAIL: {exc}"
    if result.servers is None:
        return True, http_detail, "no universe selector found"
    return True, http_detail, f"{len(result.servers)} server entries"


@app.command()
def run(
    url: Optional[str] = typer.Argument(None, help="Landing page URL (defaults to LIBOGAME_URL)."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    url = url or settings.url

    table = Table(title="libogame Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("URL", "OK" if url else "MISSING", url or "set LIBOGAME_URL or pass URL")
    table.add_row("Username", "OK" if settings.username else "OPTIONAL", settings.username or "prompted at login")
    table.add_row(
        "Server index",
        "OK" if settings.server_index else "OPTIONAL",
        str(settings.server_index) if settings.server_index else "prompted at login",
    )
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    if url:
        ok_http, detail_http, detail_parse = _check_landing_page(url, settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
        table.add_row("Landing page", "OK" if detail_parse.endswith("entries") else "WARN", detail_parse)

    _console.print(table)

    if not url:
        _console.print("\n[yellow]Note:[/yellow] run `libogame setup` to store a default URL.")
