"""Excepciones del Core.

Por qué una jerarquía propia:
- La CLI (u otro entrypoint) puede capturar `LibOgameError` sin conocer httpx
  ni BeautifulSoup.
- Los setters de credenciales NO lanzan: reportan `ReturnCode.REFUSED`.
  Estas excepciones son para fallos de red/login/parseo.
"""

from __future__ import annotations


class LibOgameError(Exception):
    """Base class for every error raised by the library."""


class ConfigurationError(LibOgameError):
    """The client was constructed with unusable input (e.g. no URL)."""


class PreconditionError(LibOgameError):
    """Login was attempted with incomplete credentials or server selection."""


class LoginError(LibOgameError):
    """The transport failed while submitting the login form."""


class EmptyResponseError(LoginError):
    """The transport succeeded but the server sent back no content."""


class ParseError(LibOgameError):
    """The returned markup could not be interpreted at all."""


class RegistryIndexError(LibOgameError, IndexError):
    """Server registry accessed outside of its bounds."""


class InvalidArgumentError(LibOgameError, ValueError):
    """A setter refused its input.

    Setters report refusals with `ReturnCode.REFUSED`; this exception exists
    for callers that prefer to turn the refusal into a raise.
    """
