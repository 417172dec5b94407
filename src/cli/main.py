"""CLI de libogame (Typer + Rich).

Comandos:
- `servers URL`: descarga la landing page y lista los universos.
- `login URL`: inicia sesión y muestra planetas e investigación.
- `setup`: guarda valores por defecto en el .env del usuario.
- `doctor ...`: diagnósticos del entorno.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import STDOUT, export_snapshot_json, snapshot_to_json
from cli import doctor
from cli.ui_components import (
    build_planets_table,
    build_research_panel,
    build_servers_table,
    print_banner,
)
from core.client import LibOgame
from core.config import AppSettings, write_user_env_vars
from core.domain.models import ReturnCode
from core.errors import LibOgameError
from core.logging_config import setup_logging

app = typer.Typer(no_args_is_help=True, help="OGame login and game-state extraction.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _settings(verbose: bool) -> AppSettings:
    settings = _load_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_file)
    return settings


def _resolve_url(url: Optional[str], settings: AppSettings) -> str:
    resolved = url or settings.url
    if not resolved:
        raise typer.BadParameter("no URL given and LIBOGAME_URL is not configured", param_hint="URL")
    return resolved


def _fail(exc: LibOgameError) -> None:
    _console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


@app.command()
def servers(
    url: Optional[str] = typer.Argument(None, help="Landing page URL (defaults to LIBOGAME_URL)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """List the universes offered on the landing page."""

    settings = _settings(verbose)
    print_banner(_console)
    try:
        with LibOgame(_resolve_url(url, settings), settings=settings) as client:
            _console.print(build_servers_table(client.servers.entries()))
    except LibOgameError as exc:
        _fail(exc)


@app.command()
def login(
    url: Optional[str] = typer.Argument(None, help="Landing page URL (defaults to LIBOGAME_URL)."),
    server: Optional[int] = typer.Option(None, "--server", "-s", help="Universe index from `servers`."),
    username: Optional[str] = typer.Option(None, "--username", "-u"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Prompted when missing."),
    login_url: Optional[str] = typer.Option(None, "--login-url", help="Form endpoint if not the landing page."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write the resulting state as JSON (`-` for stdout)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Log in and print planets and research."""

    settings = _settings(verbose)
    server = server if server is not None else settings.server_index
    username = username or settings.username
    password = password or settings.password
    if json_path is None:
        print_banner(_console)

    try:
        with LibOgame(
            _resolve_url(url, settings),
            settings=settings,
            login_url=login_url or settings.login_url,
        ) as client:
            if server is None:
                _console.print(build_servers_table(client.servers.entries()))
                server = typer.prompt("Server index", type=int)
            if not username:
                username = typer.prompt("Username")
            if not password:
                password = typer.prompt("Password", hide_input=True)

            code = client.auth.login(server, username, password)
            if code is ReturnCode.REFUSED:
                raise typer.BadParameter(
                    f"refused: server index must be between 1 and {client.servers.count() - 1}, "
                    "username and password must not be empty"
                )

            if json_path == STDOUT:
                typer.echo(snapshot_to_json(client.snapshot()), nl=False)
                return
            if json_path is not None:
                out = export_snapshot_json(snapshot=client.snapshot(), output_path=json_path)
                _console.print(f"[green]Saved:[/green] {out}")
                return

            who = client.player_name or username
            _console.print(f"[green]Logged in[/green] as [bold]{who}[/bold] ({client.servers.get_name(server)})")
            _console.print(build_planets_table(client.planets))
            _console.print(build_research_panel(client.research))
    except LibOgameError as exc:
        _fail(exc)


@app.command()
def setup(
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Defaults to the user config .env."),
) -> None:
    """Interactive setup; stores defaults in the user config .env."""

    current = _load_settings()
    url = typer.prompt("Landing page URL", default=current.url or "", show_default=bool(current.url)).strip()
    username = typer.prompt("Username", default=current.username or "", show_default=bool(current.username)).strip()
    server = typer.prompt("Server index", default=current.server_index or 1, type=int)
    store_password = typer.confirm("Store the password in plain text?", default=False)
    password = typer.prompt("Password", hide_input=True).strip() if store_password else None

    if not url:
        raise typer.BadParameter("a landing page URL is required")
    if server < 1:
        raise typer.BadParameter("server index 0 is the placeholder entry; use 1 or higher")

    env_path = write_user_env_vars(
        {
            "LIBOGAME_URL": url,
            "LIBOGAME_USERNAME": username or None,
            "LIBOGAME_SERVER_INDEX": str(server),
            "LIBOGAME_PASSWORD": password or None,
        },
        env_path=env_file,
    )
    _console.print(f"[green]Saved config to:[/green] {env_path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
