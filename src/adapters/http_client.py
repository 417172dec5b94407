"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y cookies para todas las peticiones al juego.
- Implementa el contrato `core.interfaces.transport.Transport` para que el
  cliente no dependa de httpx directamente.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import ReturnCode

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    El cliente conserva cookies, así la sesión abierta por la landing page
    viaja con el POST de login.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`Transport` backed by a persistent `httpx.Client`.

    GET when no form fields are pending, form-encoded POST otherwise. Pending
    fields are consumed by every `run_request`, successful or not.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_client(self._settings)
        self._owns_client = client is None
        self._url: str | None = None
        self._post_data: dict[str, str] = {}
        self.returned_data: str | None = None
        self.status_code: int | None = None

    def set_url(self, url: str) -> None:
        self._url = url

    def add_post_data(self, key: str, value: str) -> None:
        self._post_data[key] = value

    def run_request(self) -> ReturnCode:
        self.returned_data = None
        self.status_code = None
        fields, self._post_data = self._post_data, {}

        if not self._url:
            logger.error("run_request called without a URL")
            return ReturnCode.FAILURE

        try:
            if fields:
                response = self._client.post(self._url, data=fields)
            else:
                response = self._client.get(self._url)
        except httpx.HTTPError as exc:
            logger.warning("request to %s failed: %s", self._url, exc)
            return ReturnCode.FAILURE

        self.status_code = response.status_code
        if response.status_code >= 400:
            logger.warning("request to %s returned HTTP %s", self._url, response.status_code)
            return ReturnCode.FAILURE

        self.returned_data = response.text
        logger.debug(
            "%s %s -> HTTP %s (%d chars)",
            "POST" if fields else "GET",
            response.url,
            response.status_code,
            len(self.returned_data),
        )
        return ReturnCode.SUCCESS

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
