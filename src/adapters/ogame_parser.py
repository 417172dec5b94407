"""Parser HTML -> dominio.

Por qué un parser sin estado:
- `parse(markup)` es una función pura: mismo HTML, mismo `ParseResult`.
- Quien aplica el resultado al modelo es el cliente, en un solo paso, así un
  HTML roto no deja el modelo a medio escribir.

Markup reconocido (solo el subconjunto que emite el juego):
- Landing page: `<select name="uni">` (o `#serverLogin`) con un `<option>`
  por universo; el primero es el placeholder "elige universo".
- Página de juego: `#planetList .smallplanet` con `.planet-name` y
  `.planet-koords`, elementos con `data-technology` para investigación y
  metas `ogame-player-name` / `ogame-universe`.

Secciones desconocidas se ignoran. Solo falla (`ParseError`) si la entrada
no es markup en absoluto.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

from core.domain.models import ParseResult, Planet, ServerEntry, Technology
from core.errors import ParseError

_COORDS_RE = re.compile(r"(\d+)\s*:\s*(\d+)\s*:\s*(\d+)")
_PLANET_ID_RE = re.compile(r"planet-(\d+)")
_DIGITS_RE = re.compile(r"-?\d[\d.,]*")


def _clean_int(text: str | None) -> int | None:
    if text is None:
        return None
    match = _DIGITS_RE.search(text)
    if match is None or match.group(0).startswith("-"):
        return None
    # El juego agrupa miles con "." o "," según idioma.
    return int(re.sub(r"[.,]", "", match.group(0)))


class DataParser:
    """Turns one page of game markup into a `ParseResult`."""

    features = "html.parser"

    def parse(self, markup: str) -> ParseResult:
        if not isinstance(markup, str):
            raise ParseError(f"expected markup text, got {type(markup).__name__}")
        if "\x00" in markup:
            raise ParseError("markup contains NUL bytes (binary payload?)")

        soup = BeautifulSoup(markup, self.features)
        if soup.find() is None:
            raise ParseError("document contains no markup elements")

        return ParseResult(
            servers=self.parse_servers(soup),
            planets=self.parse_planets(soup),
            research=self.parse_research(soup),
            player_name=self._meta(soup, "ogame-player-name"),
            universe=self._meta(soup, "ogame-universe"),
        )

    def parse_servers(self, soup: BeautifulSoup) -> list[ServerEntry] | None:
        """Universe options in document order, or None if there is no selector."""

        select = soup.find("select", attrs={"name": "uni"})
        if select is None:
            select = soup.find("select", id="serverLogin")
        if not isinstance(select, Tag):
            return None

        servers: list[ServerEntry] = []
        for option in select.find_all("option"):
            name = option.get_text(" ", strip=True)
            link = option.get("value")
            # Sin atributo value, HTML envía el texto del option.
            if link is None:
                link = name
            servers.append(ServerEntry(name=name, link=str(link).strip()))
        return servers

    def parse_planets(self, soup: BeautifulSoup) -> list[Planet]:
        container = soup.find(id="planetList")
        if not isinstance(container, Tag):
            container = soup

        planets: list[Planet] = []
        for node in container.find_all(class_="smallplanet"):
            planet = self._planet(node)
            if planet is not None:
                planets.append(planet)
        return planets

    def _planet(self, node: Tag) -> Planet | None:
        name_node = node.find(class_="planet-name")
        if name_node is None:
            return None
        name = name_node.get_text(" ", strip=True)
        if not name:
            return None

        planet_id = None
        id_match = _PLANET_ID_RE.search(str(node.get("id") or ""))
        if id_match:
            planet_id = id_match.group(1)

        coordinates = galaxy = system = position = None
        coords_node = node.find(class_="planet-koords")
        if coords_node is not None:
            coords_match = _COORDS_RE.search(coords_node.get_text(strip=True))
            parts = tuple(int(g) for g in coords_match.groups()) if coords_match else ()
            # Posiciones empiezan en 1; "0:x:y" no es una coordenada real.
            if parts and all(parts):
                galaxy, system, position = parts
                coordinates = f"{galaxy}:{system}:{position}"

        return Planet(
            planet_id=planet_id,
            name=name,
            coordinates=coordinates,
            galaxy=galaxy,
            system=system,
            position=position,
            has_moon=node.find(class_="moonlink") is not None,
        )

    def parse_research(self, soup: BeautifulSoup) -> dict[Technology, int]:
        levels: dict[Technology, int] = {}
        for node in soup.find_all(attrs={"data-technology": True}):
            try:
                technology = Technology(int(str(node["data-technology"]).strip()))
            except ValueError:
                continue
            level = self._research_level(node)
            if level is not None:
                levels[technology] = level
        return levels

    @staticmethod
    def _research_level(node: Tag) -> int | None:
        if node.get("data-level") is not None:
            return _clean_int(str(node["data-level"]))

        level_node = node.find(class_="level")
        if level_node is None:
            return None
        if level_node.get("data-value") is not None:
            return _clean_int(str(level_node["data-value"]))

        text = level_node.get_text(" ", strip=True)
        label = level_node.find(class_="textlabel")
        if label is not None:
            text = text.replace(label.get_text(" ", strip=True), "", 1)
        return _clean_int(text)

    @staticmethod
    def _meta(soup: BeautifulSoup, name: str) -> str | None:
        tag = soup.find("meta", attrs={"name": name})
        if tag is None or not tag.get("content"):
            return None
        return str(tag["content"]).strip() or None
