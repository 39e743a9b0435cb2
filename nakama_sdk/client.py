"""Nakama REST client.

`Client` and `AsyncClient` hold the connection settings and the current
session, and execute requests built by the classes in `nakama_sdk.requests`:

    with Client(server_key="defaultkey") as client:
        client.authenticate_device("e3c1ad4b-...", create=True)
        account = client.account()
        records = LeaderboardRecordsRequest("weekly").with_limit(10).do(client)

Every call is a single HTTP round trip. Sessions are never refreshed
behind the caller's back; call `session_refresh()` explicitly.
"""

import os
import sys
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Self

import httpx
from pydantic import BaseModel

from nakama_sdk._internal.dispatch import (
    QueryParams,
    RequestSpec,
    decode_body,
    encode_body,
    redact_payload,
)
from nakama_sdk._internal.http import (
    DEFAULT_TIMEOUT_MS,
    DEFAULT_URL,
    create_async_http_client,
    create_http_client,
)
from nakama_sdk.exceptions import (
    NakamaAPIError,
    NakamaAuthenticationRequired,
    NakamaConfigError,
    NakamaDecodeError,
    NakamaSessionError,
    NakamaTimeoutError,
    NakamaTransportError,
)
from nakama_sdk.models.account import Account, Session
from nakama_sdk.requests.account import (
    AccountRequest,
    AuthenticateCustomRequest,
    AuthenticateDeviceRequest,
    AuthenticateEmailRequest,
    HealthcheckRequest,
    SessionLogoutRequest,
    SessionRefreshRequest,
)
from nakama_sdk.requests._base import Request


class AuthMode(StrEnum):
    """How the session token is attached to authenticated calls."""

    HEADER = "header"
    QUERY = "query"


def _loggable(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


class _BaseClient:
    """Configuration, session state and request preparation shared by both clients."""

    def __init__(
        self,
        *,
        url: str = DEFAULT_URL,
        server_key: str | None = None,
        username: str | None = None,
        password: str | None = None,
        auth_mode: AuthMode | str = AuthMode.HEADER,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            url: Base URL of the Nakama server.
            server_key: Server key, sent as basic auth to the authenticate
                and session refresh endpoints.
            username: Basic auth username for other unauthenticated calls.
            password: Basic auth password paired with `username`.
            auth_mode: Attach the session token as a bearer header or as a
                `token` query parameter.
            timeout_ms: Default request timeout in milliseconds.
            debug: Enable debug logging to stderr.

        Raises:
            NakamaConfigError: If `auth_mode` or `timeout_ms` is invalid.
        """
        try:
            self._auth_mode = AuthMode(auth_mode)
        except ValueError as e:
            raise NakamaConfigError(f"unknown auth mode: {auth_mode!r}") from e
        if timeout_ms <= 0:
            raise NakamaConfigError(f"timeout_ms must be positive, got {timeout_ms}")

        self._url = url.rstrip("/")
        self._server_key = server_key
        self._username = username
        self._password = password
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._session: Session | None = None
        self._session_expiry: datetime | None = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> Self:
        """Create a client from environment variables.

        Environment variables:
            NAKAMA_URL: Server base URL (default http://127.0.0.1:7350).
            NAKAMA_SERVER_KEY: Server key for authenticate/refresh calls.
            NAKAMA_USERNAME: Basic auth username.
            NAKAMA_PASSWORD: Basic auth password.
            NAKAMA_AUTH_MODE: "header" (default) or "query".
            NAKAMA_TIMEOUT_MS: Request timeout in milliseconds.
            NAKAMA_DEBUG: Set to "1" to enable debug logging.

        Keyword arguments are passed through to the constructor (e.g.
        `http_client`).

        Raises:
            NakamaConfigError: If NAKAMA_AUTH_MODE is unknown.
            ValueError: If NAKAMA_TIMEOUT_MS is not an integer.
        """
        return cls(
            url=os.environ.get("NAKAMA_URL", DEFAULT_URL),
            server_key=os.environ.get("NAKAMA_SERVER_KEY"),
            username=os.environ.get("NAKAMA_USERNAME"),
            password=os.environ.get("NAKAMA_PASSWORD"),
            auth_mode=os.environ.get("NAKAMA_AUTH_MODE", AuthMode.HEADER.value).lower(),
            timeout_ms=int(os.environ.get("NAKAMA_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            debug=os.environ.get("NAKAMA_DEBUG", "") == "1",
            **kwargs,
        )

    @property
    def url(self) -> str:
        return self._url

    @property
    def auth_mode(self) -> AuthMode:
        return self._auth_mode

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[nakama-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Session
    # =========================================================================

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def session_token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def session_refresh_token(self) -> str | None:
        return self._session.refresh_token if self._session else None

    @property
    def session_expiry(self) -> datetime | None:
        return self._session_expiry

    @property
    def session_expired(self) -> bool:
        """True when there is no session or its token has expired."""
        if self._session_expiry is None:
            return True
        return self._session_expiry <= datetime.now(UTC)

    def session_start(self, session: Session) -> None:
        """Make `session` the current session.

        Raises:
            NakamaSessionError: If the token is empty, not a JWT, has no
                `exp` claim, or has already expired.
        """
        try:
            expiry = session.expires_at
        except ValueError as e:
            raise NakamaSessionError(f"cannot start session: {e}") from e
        if expiry <= datetime.now(UTC):
            raise NakamaSessionError(f"cannot start session: token expired at {expiry.isoformat()}")
        self._session = session
        self._session_expiry = expiry
        self._log_debug(f"Session started, expires {expiry.isoformat()}")

    def session_clear(self) -> None:
        """Forget the current session locally."""
        self._session = None
        self._session_expiry = None

    def _refresh_request(self) -> SessionRefreshRequest | None:
        """Request for `session_refresh`, or None when no refresh is needed."""
        if self._session is None:
            raise NakamaSessionError("no session to refresh")
        if not self.session_expired:
            return None
        if not self._session.refresh_token:
            raise NakamaSessionError("session has no refresh token")
        return SessionRefreshRequest(self._session.refresh_token)

    def _start_refreshed(self, refreshed: Session, previous: Session) -> Session:
        if refreshed.refresh_token is None:
            refreshed = refreshed.model_copy(update={"refresh_token": previous.refresh_token})
        self.session_start(refreshed)
        return refreshed

    # =========================================================================
    # Request preparation
    # =========================================================================

    def _prepare(
        self,
        http: httpx.Client | httpx.AsyncClient,
        method: str,
        path: str,
        *,
        requires_auth: bool,
        query: QueryParams | None,
        body: Any,
        timeout_ms: int | None,
    ) -> tuple[httpx.Request, Any]:
        """Build the httpx request and the auth to send it with for one call.

        Raises:
            NakamaAuthenticationRequired: If the call needs a session and
                there is none. Raised before any I/O.
        """
        token = self.session_token
        if requires_auth and not token:
            raise NakamaAuthenticationRequired(f"{method} {path} requires an authenticated session")

        params: dict[str, Any] = dict(query or {})
        headers: dict[str, str] = {"Accept": "application/json"}
        auth: Any = httpx.USE_CLIENT_DEFAULT

        if requires_auth:
            if self._auth_mode is AuthMode.QUERY:
                params["token"] = token
            else:
                headers["Authorization"] = f"Bearer {token}"
        elif self._server_key and ("authenticate" in path or "refresh" in path):
            auth = httpx.BasicAuth(self._server_key, "")
        elif self._username:
            auth = httpx.BasicAuth(self._username, self._password or "")

        content = encode_body(body)
        if content is not None:
            headers["Content-Type"] = "application/json"

        self._log_debug(
            f"{method} {path} query={redact_payload(params)} body={redact_payload(_loggable(body))}"
        )

        request = http.build_request(
            method,
            f"{self._url}/{path.lstrip('/')}",
            params=params,
            content=content,
            headers=headers,
            timeout=timeout_ms / 1000 if timeout_ms is not None else httpx.USE_CLIENT_DEFAULT,
        )
        return request, auth

    def _handle_response(self, response: httpx.Response, response_type: Any) -> Any:
        """Map a response to a decoded value or an exception."""
        request = response.request
        self._log_debug(f"{request.method} {request.url.path} -> {response.status_code}")

        if not response.is_success:
            raise self._api_error(response)
        if response_type is None:
            return None
        try:
            return decode_body(response.content, response_type)
        except NakamaDecodeError as e:
            self._log_debug(f"Decode failed: {e}")
            raise

    def _api_error(self, response: httpx.Response) -> NakamaAPIError:
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        message = None
        code = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("error")
            if isinstance(body.get("code"), int):
                code = body["code"]
        if not message:
            message = response.reason_phrase or f"HTTP {response.status_code}"
        return NakamaAPIError(str(message), status_code=response.status_code, body=body, code=code)

    def _transport_error(
        self, method: str, path: str, error: httpx.TransportError
    ) -> NakamaTransportError:
        if isinstance(error, httpx.TimeoutException):
            self._log_debug(f"{method} {path} timed out")
            return NakamaTimeoutError(f"{method} {path} timed out: {error}")
        self._log_debug(f"{method} {path} failed: {error}")
        return NakamaTransportError(f"{method} {path} failed: {error}")


class Client(_BaseClient):
    """Synchronous Nakama client.

    Use as a context manager, or call `close()` when done.
    """

    def __init__(self, *, http_client: httpx.Client | None = None, **kwargs: Any) -> None:
        """Initialize the client.

        Args:
            http_client: Pre-built httpx client. It is not closed by `close()`.
            **kwargs: Connection settings, see `_BaseClient.__init__`.
        """
        super().__init__(**kwargs)
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(
            base_url=self._url, timeout_ms=self._timeout_ms
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def dispatch(
        self,
        method: str,
        path: str,
        *,
        requires_auth: bool = False,
        query: QueryParams | None = None,
        body: Any = None,
        response_type: Any = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Perform one HTTP round trip against the server.

        Args:
            method: HTTP verb.
            path: Server-relative path (identifiers already escaped).
            requires_auth: Attach the session token; fail fast without one.
            query: Query parameters; list values become repeated keys.
            body: Payload (pydantic model or JSON-serializable value).
            response_type: Type to decode the response into; None discards it.
            timeout_ms: Per-call timeout overriding the client default.

        Returns:
            The decoded response, or None.

        Raises:
            NakamaAuthenticationRequired: Auth needed and no session.
            NakamaAPIError: Non-2xx response.
            NakamaTransportError: Connection failure (NakamaTimeoutError on timeout).
            NakamaDecodeError: Response does not match `response_type`.
        """
        request, auth = self._prepare(
            self._http,
            method,
            path,
            requires_auth=requires_auth,
            query=query,
            body=body,
            timeout_ms=timeout_ms,
        )
        try:
            response = self._http.send(request, auth=auth)
        except httpx.TransportError as e:
            raise self._transport_error(method, path, e) from e
        return self._handle_response(response, response_type)

    def send(self, spec: RequestSpec, *, timeout_ms: int | None = None) -> Any:
        """Dispatch a request built by `Request.build()`."""
        return self.dispatch(
            spec.method,
            spec.path,
            requires_auth=spec.requires_auth,
            query=spec.query,
            body=spec.body,
            response_type=spec.response_type,
            timeout_ms=timeout_ms,
        )

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def authenticate(self, request: Request) -> Session:
        """Run an Authenticate*Request and start the returned session."""
        session = request.do(self)
        self.session_start(session)
        return session

    def authenticate_device(
        self,
        id: str,
        *,
        create: bool | None = None,
        username: str | None = None,
        vars: dict[str, str] | None = None,
    ) -> Session:
        return self.authenticate(
            AuthenticateDeviceRequest(id, create=create, username=username, vars=vars)
        )

    def authenticate_email(
        self,
        email: str,
        password: str,
        *,
        create: bool | None = None,
        username: str | None = None,
        vars: dict[str, str] | None = None,
    ) -> Session:
        return self.authenticate(
            AuthenticateEmailRequest(email, password, create=create, username=username, vars=vars)
        )

    def authenticate_custom(
        self,
        id: str,
        *,
        create: bool | None = None,
        username: str | None = None,
        vars: dict[str, str] | None = None,
    ) -> Session:
        return self.authenticate(
            AuthenticateCustomRequest(id, create=create, username=username, vars=vars)
        )

    def session_refresh(self) -> Session:
        """Refresh the session if its token has expired.

        Returns:
            The current session (unchanged when it had not expired).

        Raises:
            NakamaSessionError: No session, or no refresh token.
        """
        previous = self._session
        request = self._refresh_request()
        if request is None:
            return previous  # type: ignore[return-value]
        return self._start_refreshed(request.do(self), previous)  # type: ignore[arg-type]

    def session_logout(self) -> None:
        """Log the session out server-side and clear it locally.

        The local session is cleared even when the server call fails.
        """
        if self._session is None:
            return
        request = SessionLogoutRequest(self._session.token, self._session.refresh_token)
        try:
            request.do(self)
        finally:
            self.session_clear()

    def healthcheck(self) -> None:
        HealthcheckRequest().do(self)

    def account(self) -> Account:
        return AccountRequest().do(self)


class AsyncClient(_BaseClient):
    """Asynchronous Nakama client.

    Same API as `Client` with awaitable calls. Cancelling the awaiting
    task (e.g. via `asyncio.wait_for`) aborts the in-flight request.
    """

    def __init__(self, *, http_client: httpx.AsyncClient | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._owns_http = http_client is None
        self._http = http_client or create_async_http_client(
            base_url=self._url, timeout_ms=self._timeout_ms
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def dispatch(
        self,
        method: str,
        path: str,
        *,
        requires_auth: bool = False,
        query: QueryParams | None = None,
        body: Any = None,
        response_type: Any = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Awaitable twin of `Client.dispatch`."""
        request, auth = self._prepare(
            self._http,
            method,
            path,
            requires_auth=requires_auth,
            query=query,
            body=body,
            timeout_ms=timeout_ms,
        )
        try:
            response = await self._http.send(request, auth=auth)
        except httpx.TransportError as e:
            raise self._transport_error(method, path, e) from e
        return self._handle_response(response, response_type)

    async def send(self, spec: RequestSpec, *, timeout_ms: int | None = None) -> Any:
        return await self.dispatch(
            spec.method,
            spec.path,
            requires_auth=spec.requires_auth,
            query=spec.query,
            body=spec.body,
            response_type=spec.response_type,
            timeout_ms=timeout_ms,
        )

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    async def authenticate(self, request: Request) -> Session:
        session = await request.do(self)
        self.session_start(session)
        return session

    async def authenticate_device(
        self,
        id: str,
        *,
        create: bool | None = None,
        username: str | None = None,
        vars: dict[str, str] | None = None,
    ) -> Session:
        return await self.authenticate(
            AuthenticateDeviceRequest(id, create=create, username=username, vars=vars)
        )

    async def authenticate_email(
        self,
        email: str,
        password: str,
        *,
        create: bool | None = None,
        username: str | None = None,
        vars: dict[str, str] | None = None,
    ) -> Session:
        return await self.authenticate(
            AuthenticateEmailRequest(email, password, create=create, username=username, vars=vars)
        )

    async def authenticate_custom(
        self,
        id: str,
        *,
        create: bool | None = None,
        username: str | None = None,
        vars: dict[str, str] | None = None,
    ) -> Session:
        return await self.authenticate(
            AuthenticateCustomRequest(id, create=create, username=username, vars=vars)
        )

    async def session_refresh(self) -> Session:
        previous = self._session
        request = self._refresh_request()
        if request is None:
            return previous  # type: ignore[return-value]
        return self._start_refreshed(await request.do(self), previous)  # type: ignore[arg-type]

    async def session_logout(self) -> None:
        if self._session is None:
            return
        request = SessionLogoutRequest(self._session.token, self._session.refresh_token)
        try:
            await request.do(self)
        finally:
            self.session_clear()

    async def healthcheck(self) -> None:
        await HealthcheckRequest().do(self)

    async def account(self) -> Account:
        return await AccountRequest().do(self)
