"""Contrato de transporte HTTP.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- El cliente no sabe si habla con httpx, con un `MockTransport` o con un
  doble en memoria: solo usa estos cuatro miembros.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ReturnCode


@runtime_checkable
class Transport(Protocol):
    """Minimal request runner the session and the client drive.

    Reglas de diseño:
    - `add_post_data` acumula campos para la *siguiente* petición.
    - `run_request` consume esos campos y deja el cuerpo en `returned_data`
      (None o "" si falló o no hubo contenido).
    - Síncrono: bloquea hasta terminar o fallar.
    """

    returned_data: str | None

    def set_url(self, url: str) -> None:
        ...

    def add_post_data(self, key: str, value: str) -> None:
        ...

    def run_request(self) -> ReturnCode:
        """Run the request and return `SUCCESS` or `FAILURE`."""

        ...
