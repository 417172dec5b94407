"""Session state machine: turns stored credentials into an authenticated session.

States:

    UNAUTHENTICATED -> LOGGING_IN -> AUTHENTICATED
                           |
                           +-> UNAUTHENTICATED (on any failure, then raise)

No retries happen here. A failed login raises and the caller decides what to
do next.
"""

from __future__ import annotations

from typing import Callable

from core.domain.models import ParseResult, ReturnCode, SessionState
from core.domain.registry import ServerList
from core.errors import EmptyResponseError, LoginError, PreconditionError
from core.interfaces.log_sink import LogSink
from core.interfaces.transport import Transport
from core.services.credentials import CredentialStore

Parse = Callable[[str], ParseResult]
Apply = Callable[[ParseResult], None]


class Authentication:
    """Login driver plus the authenticated flag the rest of the client reads.

    `parse` is the pure markup parser and `apply` commits its result to the
    domain model; keeping them apart means a `ParseError` never touches the
    model or the state.
    """

    def __init__(
        self,
        *,
        servers: ServerList,
        transport: Transport,
        parse: Parse,
        apply: Apply,
        log: LogSink,
        login_url: str,
        credentials: CredentialStore | None = None,
    ) -> None:
        self._servers = servers
        self._transport = transport
        self._parse = parse
        self._apply = apply
        self._log = log
        self._login_url = login_url
        self.credentials = credentials or CredentialStore(servers)
        self._state = SessionState.UNAUTHENTICATED

    @property
    def state(self) -> SessionState:
        return self._state

    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    def set_username(self, username: str | None) -> ReturnCode:
        return self.credentials.set_username(username)

    def set_password(self, password: str | None) -> ReturnCode:
        return self.credentials.set_password(password)

    def set_server(self, server_index: int | None) -> ReturnCode:
        return self.credentials.set_server(server_index)

    def set_credentials(
        self,
        server_index: int | None,
        username: str | None,
        password: str | None,
    ) -> ReturnCode:
        return self.credentials.set_credentials(server_index, username, password)

    def login(
        self,
        server_index: int | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> ReturnCode:
        """Authenticate against the selected universe.

        Without arguments the stored credentials are used. With arguments they
        are stored first (all-or-nothing); if any is refused the call returns
        `ReturnCode.REFUSED` without touching the network.

        Raises:
            PreconditionError: credentials or server selection incomplete.
            LoginError: the transport failed.
            EmptyResponseError: the server answered with no content.
            ParseError: the answer could not be interpreted.
        """

        if server_index is not None or username is not None or password is not None:
            if self.set_credentials(server_index, username, password) is not ReturnCode.SUCCESS:
                self._log.println("auth.login()", "credentials refused, no request sent")
                return ReturnCode.REFUSED

        creds = self.credentials
        if not creds.is_complete():
            raise PreconditionError("server index, username or password are not set")

        link = self._servers.get_link(creds.server_index)  # type: ignore[arg-type]
        self._state = SessionState.LOGGING_IN
        self._log.println(
            "auth.login()",
            f"logging in as {creds.username!r} on {self._servers.get_name(creds.server_index)!r}",  # type: ignore[arg-type]
        )

        try:
            self._transport.set_url(self._login_url)
            self._transport.add_post_data("kid", "")
            self._transport.add_post_data("login", creds.username)  # type: ignore[arg-type]
            self._transport.add_post_data("pass", creds.password)  # type: ignore[arg-type]
            self._transport.add_post_data("uni", link)

            if self._transport.run_request() is not ReturnCode.SUCCESS:
                raise LoginError("login failed: transport reported a failure")

            content = self._transport.returned_data
            if not content:
                raise EmptyResponseError("login returned no HTML content to work with")

            self._log.println("auth.login()", f"received {len(content)} characters")
            result = self._parse(content)
        except Exception:
            self._state = SessionState.UNAUTHENTICATED
            raise

        self._apply(result)
        self._state = SessionState.AUTHENTICATED
        self._log.println("auth.login()", "authenticated")
        return ReturnCode.SUCCESS

    def logout(self) -> None:
        """Forget the authenticated state locally; no request is sent."""

        self._state = SessionState.UNAUTHENTICATED
