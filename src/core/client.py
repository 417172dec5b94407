"""Entry point of the library: `LibOgame`.

The client owns every subsystem and wires them together. Each collaborator
can be injected (tests pass a fake transport); only the missing ones are
built with defaults.
"""

from __future__ import annotations

import logging

from adapters.http_client import HttpxTransport
from adapters.log_sink import StdlibLogSink
from adapters.ogame_parser import DataParser
from core.config import AppSettings
from core.domain.models import EmpireSnapshot, ParseResult, Planet, Research, ReturnCode
from core.domain.registry import ServerList
from core.errors import ConfigurationError
from core.interfaces.log_sink import LogSink
from core.interfaces.transport import Transport
from core.services.authentication import Authentication

logger = logging.getLogger(__name__)


class LibOgame:
    """Client for one game landing page.

    Construction fetches the landing page (unauthenticated) to fill the
    server registry. `auth.login(...)` then submits the login form and
    refreshes planets and research from the returned page.
    """

    def __init__(
        self,
        url: str | None,
        *,
        transport: Transport | None = None,
        parser: DataParser | None = None,
        log_sink: LogSink | None = None,
        settings: AppSettings | None = None,
        login_url: str | None = None,
    ) -> None:
        if url is None or not isinstance(url, str) or url.strip() == "":
            raise ConfigurationError("website URL not set")

        self.url = url
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(settings)
        self._parser = parser or DataParser()
        self._log: LogSink = log_sink or StdlibLogSink()

        self._planets: list[Planet] = []
        self.research = Research()
        self.servers = ServerList()
        self.player_name: str | None = None
        self.universe: str | None = None

        self.auth = Authentication(
            servers=self.servers,
            transport=self._transport,
            parse=self._parser.parse,
            apply=self._apply,
            log=self._log,
            login_url=login_url or url,
        )

        try:
            self.refresh()
        except BaseException:
            if self._owns_transport:
                self.close()
            raise

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None, **kwargs) -> "LibOgame":
        """Build a client from `LIBOGAME_*` settings (url, login_url)."""

        settings = settings or AppSettings()
        kwargs.setdefault("login_url", settings.login_url)
        return cls(settings.url, settings=settings, **kwargs)

    def planet(self, index: int) -> Planet:
        return self._planets[index]

    def planet_count(self) -> int:
        return len(self._planets)

    @property
    def planets(self) -> tuple[Planet, ...]:
        return tuple(self._planets)

    def refresh(self) -> ReturnCode:
        """GET the landing page and apply whatever it contains.

        A transport failure is logged and reported as `FAILURE`; the registry
        and model stay as they were. A `ParseError` propagates.
        """

        self._transport.set_url(self.url)
        if self._transport.run_request() is not ReturnCode.SUCCESS:
            logger.warning("could not download %s; server list left empty", self.url)
            return ReturnCode.FAILURE

        content = self._transport.returned_data
        if not content:
            logger.warning("%s returned no content", self.url)
            return ReturnCode.FAILURE

        self._log.println("LibOgame.refresh()", "data downloaded")
        self._apply(self._parser.parse(content))
        return ReturnCode.SUCCESS

    def _apply(self, result: ParseResult) -> None:
        if result.servers is not None:
            self.servers.clear()
            for entry in result.servers:
                self.servers.add(entry.name, entry.link)

        self._planets = list(result.planets)
        self.research.replace(result.research)
        self.player_name = result.player_name
        self.universe = result.universe
        logger.info(
            "parsed page: %d servers, %d planets, %d research levels",
            self.servers.count(),
            len(self._planets),
            len(result.research),
        )

    def snapshot(self) -> EmpireSnapshot:
        return EmpireSnapshot(
            url=self.url,
            authenticated=self.auth.is_authenticated(),
            player_name=self.player_name,
            universe=self.universe,
            servers=self.servers.entries(),
            planets=list(self._planets),
            research={tech.label(): level for tech, level in sorted(self.research.levels.items())},
        )

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "LibOgame":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
