"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Planet, Research, ServerEntry


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modo `--json` para no ensuciar la salida.
    """

    title = Text("libogame", style="bold cyan")
    subtitle = Text("Login • Universos • Planetas • Investigación", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_servers_table(servers: list[ServerEntry]) -> Table:
    table = Table(title="Servers")
    table.add_column("#", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Link", style="magenta")
    for index, entry in enumerate(servers):
        # El índice 0 es el placeholder del selector: no se puede elegir.
        style = "dim" if index == 0 else None
        table.add_row(str(index), entry.name, entry.link, style=style)
    return table


def build_planets_table(planets: list[Planet] | tuple[Planet, ...]) -> Table:
    table = Table(title="Planets")
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Coordinates", style="green")
    table.add_column("Moon", style="yellow")
    for planet in planets:
        table.add_row(
            planet.planet_id or "-",
            planet.name,
            f"[{planet.coordinates}]" if planet.coordinates else "-",
            "yes" if planet.has_moon else "",
        )
    return table


def build_research_panel(research: Research) -> Panel:
    body = Text()
    if not research.levels:
        body.append("No research data on this page.", style="dim")
    for tech, level in sorted(research.levels.items()):
        body.append(f"{tech.label():<32}", style="bold")
        body.append(f"{level}\n")
    return Panel(body, title=Text("Research", style="bold yellow"), border_style="yellow")
