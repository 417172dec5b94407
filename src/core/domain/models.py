"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a httpx ni a BeautifulSoup.
- `model_dump(mode="json")` nos da la exportación JSON gratis.

Nota:
- Estos modelos describen *qué* es el estado de juego, no *cómo* se extrae.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ReturnCode(str, Enum):
    """Result signal for operations that report instead of raising."""

    SUCCESS = "success"
    REFUSED = "refused"
    FAILURE = "failure"


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    LOGGING_IN = "logging_in"
    AUTHENTICATED = "authenticated"


class Technology(IntEnum):
    """Research ids as the game exposes them in `data-technology`."""

    ESPIONAGE = 106
    COMPUTER = 108
    WEAPONS = 109
    SHIELDING = 110
    ARMOUR = 111
    ENERGY = 113
    HYPERSPACE = 114
    COMBUSTION_DRIVE = 115
    IMPULSE_DRIVE = 117
    HYPERSPACE_DRIVE = 118
    LASER = 120
    ION = 121
    PLASMA = 122
    INTERGALACTIC_RESEARCH_NETWORK = 123
    ASTROPHYSICS = 124
    GRAVITON = 199

    def label(self) -> str:
        """Human readable name (`IMPULSE_DRIVE` -> `Impulse Drive`)."""

        return self.name.replace("_", " ").title()


class ServerEntry(BaseModel):
    """One `<option>` of the universe selector on the landing page."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Texto visible del servidor (universo).")
    link: str = Field(..., description="Identificador enviado como campo `uni` del login.")


class Planet(BaseModel):
    """A planet listed in the empire sidebar."""

    model_config = ConfigDict(frozen=True)

    planet_id: str | None = Field(
        default=None,
        description="Id numérico del planeta (de `id=\"planet-<n>\"`).",
    )
    name: str = Field(..., description="Nombre del planeta.")
    coordinates: str | None = Field(
        default=None,
        description="Coordenadas normalizadas `galaxia:sistema:posición`.",
    )
    galaxy: int | None = Field(default=None, ge=1)
    system: int | None = Field(default=None, ge=1)
    position: int | None = Field(default=None, ge=1)
    has_moon: bool = Field(default=False, description="El planeta tiene luna en la barra lateral.")


class Research(BaseModel):
    """Research levels of the logged in player.

    The client keeps one instance for its whole life and overwrites `levels`
    wholesale after every successful parse.
    """

    levels: dict[Technology, int] = Field(default_factory=dict)

    def level(self, technology: Technology | int) -> int:
        """Level of `technology`, 0 when it was never seen."""

        return self.levels.get(Technology(technology), 0)

    def replace(self, levels: dict[Technology, int]) -> None:
        self.levels = dict(levels)


class ParseResult(BaseModel):
    """Everything the parser could read from one page.

    `servers` is None when the page carries no universe selector, so the
    registry is only rebuilt from pages that actually list servers.
    """

    servers: list[ServerEntry] | None = None
    planets: list[Planet] = Field(default_factory=list)
    research: dict[Technology, int] = Field(default_factory=dict)
    player_name: str | None = None
    universe: str | None = None

    @property
    def is_server_list(self) -> bool:
        return self.servers is not None


class EmpireSnapshot(BaseModel):
    """Serializable view of a client's state, used by the JSON exporter."""

    url: str
    authenticated: bool = False
    player_name: str | None = None
    universe: str | None = None
    servers: list[ServerEntry] = Field(default_factory=list)
    planets: list[Planet] = Field(default_factory=list)
    research: dict[str, int] = Field(
        default_factory=dict,
        description="Niveles de investigación indexados por nombre legible.",
    )
