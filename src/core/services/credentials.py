"""Credential store: username, password and selected universe.

Every field goes through its validator. Setters never raise; they answer
`ReturnCode.SUCCESS` or `ReturnCode.REFUSED` and leave the store untouched
on refusal.
"""

from __future__ import annotations

from core.domain.models import ReturnCode
from core.domain.registry import ServerList


def _valid_text(value: object) -> bool:
    return isinstance(value, str) and value != ""


class CredentialStore:
    def __init__(self, servers: ServerList) -> None:
        self._servers = servers
        self._username: str | None = None
        self._password: str | None = None
        self._server_index: int | None = None

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def password(self) -> str | None:
        return self._password

    @property
    def server_index(self) -> int | None:
        return self._server_index

    def valid_server_index(self, index: object) -> bool:
        """`0 < index < count`: option 0 of the selector is the placeholder."""

        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 < index < self._servers.count()

    def set_username(self, username: str | None) -> ReturnCode:
        if not _valid_text(username):
            return ReturnCode.REFUSED
        self._username = username
        return ReturnCode.SUCCESS

    def set_password(self, password: str | None) -> ReturnCode:
        if not _valid_text(password):
            return ReturnCode.REFUSED
        self._password = password
        return ReturnCode.SUCCESS

    def set_server(self, server_index: int | None) -> ReturnCode:
        if not self.valid_server_index(server_index):
            return ReturnCode.REFUSED
        self._server_index = server_index
        return ReturnCode.SUCCESS

    def set_credentials(
        self,
        server_index: int | None,
        username: str | None,
        password: str | None,
    ) -> ReturnCode:
        """All-or-nothing: validate the three fields, then write them together."""

        if not (
            _valid_text(username)
            and _valid_text(password)
            and self.valid_server_index(server_index)
        ):
            return ReturnCode.REFUSED

        self._username = username
        self._password = password
        self._server_index = server_index
        return ReturnCode.SUCCESS

    def is_complete(self) -> bool:
        return (
            self._username is not None
            and self._password is not None
            and self.valid_server_index(self._server_index)
        )

    def clear(self) -> None:
        self._username = None
        self._password = None
        self._server_index = None

    def __repr__(self) -> str:
        return (
            f"CredentialStore(username={self._username!r}, "
            f"password={'***' if self._password else None}, "
            f"server_index={self._server_index!r})"
        )
