"""Tests for Client and AsyncClient."""

import asyncio
import base64
import json
import os
import time
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import httpx
import pytest
import respx
from pydantic import BaseModel, ValidationError

from nakama_sdk import (
    AsyncClient,
    AuthMode,
    Client,
    NakamaAPIError,
    NakamaAuthenticationRequired,
    NakamaConfigError,
    NakamaDecodeError,
    NakamaSessionError,
    NakamaTimeoutError,
    NakamaTransportError,
    Session,
)
from nakama_sdk._internal.http import DEFAULT_URL
from nakama_sdk.models import Account

BASE = "http://nakama.test:7350"


def basic(user: str, password: str) -> str:
    return "Basic " + base64.b64encode(f"{user}:{password}".encode()).decode()


def started_client(token_factory, **kwargs) -> Client:
    client = Client(url=BASE, **kwargs)
    client.session_start(
        Session(
            token=token_factory(int(time.time()) + 3600),
            refresh_token=token_factory(int(time.time()) + 7200),
        )
    )
    return client


class Greeting(BaseModel):
    message: str


class TestClientConfig:
    """Tests for client construction and Client.from_env()."""

    def test_defaults(self):
        """Should use the local server and header auth by default."""
        client = Client()
        assert client.url == DEFAULT_URL
        assert client.auth_mode is AuthMode.HEADER
        assert client.session is None
        assert client.session_expired is True

    def test_trailing_slash_is_stripped(self):
        """Should strip a trailing slash from the URL."""
        assert Client(url="http://host:7350/").url == "http://host:7350"

    def test_from_env_with_all_vars(self):
        """Should read every setting from the environment."""
        env = {
            "NAKAMA_URL": "http://game.example:7350/",
            "NAKAMA_SERVER_KEY": "secret-key",
            "NAKAMA_USERNAME": "console",
            "NAKAMA_PASSWORD": "pw",
            "NAKAMA_AUTH_MODE": "QUERY",
            "NAKAMA_TIMEOUT_MS": "2500",
            "NAKAMA_DEBUG": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            client = Client.from_env()
        assert client.url == "http://game.example:7350"
        assert client.auth_mode is AuthMode.QUERY
        assert client._server_key == "secret-key"
        assert client._username == "console"
        assert client._password == "pw"
        assert client._timeout_ms == 2500
        assert client._debug is True

    def test_from_env_empty(self):
        """Should fall back to defaults when nothing is set."""
        with patch.dict(os.environ, {}, clear=True):
            client = Client.from_env()
        assert client.url == DEFAULT_URL
        assert client._server_key is None
        assert client._debug is False

    def test_from_env_malformed_timeout_ms_raises(self):
        """Should raise ValueError when NAKAMA_TIMEOUT_MS is not an integer."""
        with patch.dict(os.environ, {"NAKAMA_TIMEOUT_MS": "soon"}, clear=True), pytest.raises(ValueError):
            Client.from_env()

    def test_from_env_unknown_auth_mode_raises(self):
        """Should raise NakamaConfigError for an unknown auth mode."""
        with patch.dict(os.environ, {"NAKAMA_AUTH_MODE": "cookie"}, clear=True), pytest.raises(
            NakamaConfigError
        ):
            Client.from_env()

    def test_non_positive_timeout_raises(self):
        with pytest.raises(NakamaConfigError):
            Client(timeout_ms=0)

    def test_injected_http_client_is_not_closed(self):
        """Should leave an injected httpx client open."""
        http = httpx.Client()
        with Client(http_client=http):
            pass
        assert http.is_closed is False
        http.close()


class TestDispatchCredentials:
    """Tests for how credentials are attached to requests."""

    @respx.mock
    def test_requires_auth_without_session_does_no_io(self):
        """Should fail before sending anything when no session is set."""
        client = Client(url=BASE)
        with pytest.raises(NakamaAuthenticationRequired):
            client.dispatch("GET", "v2/account", requires_auth=True)
        assert respx.calls.call_count == 0

    @respx.mock
    def test_bearer_header(self, token_factory):
        """Should attach the session token as a bearer header."""
        route = respx.get(f"{BASE}/v2/account").mock(return_value=httpx.Response(200))
        client = started_client(token_factory)

        client.dispatch("GET", "v2/account", requires_auth=True)

        request = route.calls.last.request
        assert request.headers["Authorization"] == f"Bearer {client.session_token}"
        assert "token" not in request.url.params

    @respx.mock
    def test_query_token(self, token_factory):
        """Should attach the session token as a query parameter in query mode."""
        route = respx.get(f"{BASE}/v2/account").mock(return_value=httpx.Response(200))
        client = started_client(token_factory, auth_mode="query")

        client.dispatch("GET", "v2/account", requires_auth=True)

        request = route.calls.last.request
        assert request.url.params["token"] == client.session_token
        assert "Authorization" not in request.headers

    @respx.mock
    def test_server_key_on_authenticate(self):
        """Should send the server key as basic auth to authenticate paths."""
        route = respx.post(f"{BASE}/v2/account/authenticate/device").mock(
            return_value=httpx.Response(200)
        )
        client = Client(url=BASE, server_key="defaultkey", username="admin", password="pw")

        client.dispatch("POST", "v2/account/authenticate/device", body={"id": "d"})

        assert route.calls.last.request.headers["Authorization"] == basic("defaultkey", "")

    @respx.mock
    def test_username_password_elsewhere(self):
        """Should send username/password basic auth to other unauthenticated paths."""
        route = respx.get(f"{BASE}/healthcheck").mock(return_value=httpx.Response(200))
        client = Client(url=BASE, server_key="defaultkey", username="admin", password="pw")

        client.dispatch("GET", "healthcheck")

        assert route.calls.last.request.headers["Authorization"] == basic("admin", "pw")

    @respx.mock
    def test_no_credentials(self):
        """Should send no Authorization header when nothing is configured."""
        route = respx.get(f"{BASE}/healthcheck").mock(return_value=httpx.Response(200))
        Client(url=BASE).dispatch("GET", "healthcheck")
        assert "Authorization" not in route.calls.last.request.headers


class TestDispatchRequest:
    """Tests for request encoding."""

    @respx.mock
    def test_json_body_and_headers(self):
        """Should send a compact JSON body with JSON content headers."""
        route = respx.post(f"{BASE}/v2/thing").mock(return_value=httpx.Response(200))
        Client(url=BASE).dispatch("POST", "v2/thing", body={"a": 1, "b": [True, None]})

        request = route.calls.last.request
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Accept"] == "application/json"
        assert request.content == b'{"a":1,"b":[true,null]}'

    @respx.mock
    def test_no_body(self):
        """Should send no body and no Content-Type when body is None."""
        route = respx.get(f"{BASE}/v2/thing").mock(return_value=httpx.Response(200))
        Client(url=BASE).dispatch("GET", "v2/thing")

        request = route.calls.last.request
        assert request.content == b""
        assert "Content-Type" not in request.headers

    @respx.mock
    def test_repeated_query_keys(self):
        """Should send list values as repeated query keys."""
        route = respx.get(f"{BASE}/v2/user").mock(return_value=httpx.Response(200))
        Client(url=BASE).dispatch("GET", "v2/user", query={"ids": ["a", "b"], "limit": "0"})

        params = route.calls.last.request.url.params
        assert params.get_list("ids") == ["a", "b"]
        assert params["limit"] == "0"

    @respx.mock
    def test_per_call_timeout(self):
        """Should apply the per-call timeout to the request."""
        route = respx.get(f"{BASE}/healthcheck").mock(return_value=httpx.Response(200))
        client = Client(url=BASE, timeout_ms=30_000)

        client.dispatch("GET", "healthcheck", timeout_ms=500)
        assert route.calls.last.request.extensions["timeout"]["read"] == 0.5

        client.dispatch("GET", "healthcheck")
        assert route.calls.last.request.extensions["timeout"]["read"] == 30.0


class TestDispatchResponses:
    """Tests for response handling and error mapping."""

    @respx.mock
    def test_decodes_response(self):
        respx.get(f"{BASE}/v2/greet").mock(
            return_value=httpx.Response(200, json={"message": "hi", "extra": 1})
        )
        result = Client(url=BASE).dispatch("GET", "v2/greet", response_type=Greeting)
        assert result == Greeting(message="hi")

    @respx.mock
    def test_discards_response_without_type(self):
        """Should return None when no response type is given."""
        respx.get(f"{BASE}/v2/greet").mock(return_value=httpx.Response(200, json={"x": 1}))
        assert Client(url=BASE).dispatch("GET", "v2/greet") is None

    @respx.mock
    def test_empty_body_decodes_to_none(self):
        respx.get(f"{BASE}/v2/greet").mock(return_value=httpx.Response(200, content=b""))
        assert Client(url=BASE).dispatch("GET", "v2/greet", response_type=Greeting) is None

    @respx.mock
    def test_decode_error(self):
        """Should raise NakamaDecodeError chaining the validation error."""
        respx.get(f"{BASE}/v2/greet").mock(return_value=httpx.Response(200, json={"nope": 1}))
        with pytest.raises(NakamaDecodeError) as exc_info:
            Client(url=BASE).dispatch("GET", "v2/greet", response_type=Greeting)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @respx.mock
    def test_api_error_from_payload(self):
        """Should map a non-2xx response to NakamaAPIError with the server message."""
        payload = {"error": "Account not found.", "message": "Account not found.", "code": 5}
        respx.get(f"{BASE}/v2/account").mock(return_value=httpx.Response(404, json=payload))
        with pytest.raises(NakamaAPIError) as exc_info:
            Client(url=BASE).dispatch("GET", "v2/account")

        error = exc_info.value
        assert str(error) == "Account not found."
        assert error.status_code == 404
        assert error.code == 5
        assert error.body == payload

    @respx.mock
    def test_api_error_error_field_fallback(self):
        respx.get(f"{BASE}/v2/account").mock(
            return_value=httpx.Response(401, json={"error": "Auth token invalid"})
        )
        with pytest.raises(NakamaAPIError) as exc_info:
            Client(url=BASE).dispatch("GET", "v2/account")
        assert str(exc_info.value) == "Auth token invalid"
        assert exc_info.value.code is None

    @respx.mock
    def test_api_error_non_json_body(self):
        """Should fall back to the reason phrase for non-JSON errors."""
        respx.get(f"{BASE}/v2/account").mock(return_value=httpx.Response(500, text="boom"))
        with pytest.raises(NakamaAPIError) as exc_info:
            Client(url=BASE).dispatch("GET", "v2/account")
        assert str(exc_info.value) == "Internal Server Error"
        assert exc_info.value.body == "boom"

    @respx.mock
    def test_connect_error(self):
        """Should wrap connection failures in NakamaTransportError."""
        respx.get(f"{BASE}/healthcheck").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(NakamaTransportError) as exc_info:
            Client(url=BASE).dispatch("GET", "healthcheck")
        assert not isinstance(exc_info.value, NakamaTimeoutError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout(self):
        """Should wrap timeouts in NakamaTimeoutError."""
        respx.get(f"{BASE}/healthcheck").mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(NakamaTimeoutError):
            Client(url=BASE).dispatch("GET", "healthcheck")


class TestDebugLogging:
    """Tests for the stderr debug channel."""

    @respx.mock
    def test_debug_redacts_secrets(self, capsys, session_json):
        respx.post(f"{BASE}/v2/account/authenticate/email").mock(
            return_value=httpx.Response(200, json=session_json)
        )
        client = Client(url=BASE, server_key="defaultkey", debug=True)
        client.authenticate_email("a@example.com", "hunter22")

        err = capsys.readouterr().err
        assert "[nakama-sdk] POST v2/account/authenticate/email" in err
        assert "hunter22" not in err
        assert "[REDACTED]" in err

    @respx.mock
    def test_no_output_without_debug(self, capsys):
        respx.get(f"{BASE}/healthcheck").mock(return_value=httpx.Response(200))
        Client(url=BASE).healthcheck()
        assert capsys.readouterr().err == ""


class TestSession:
    """Tests for session helpers."""

    def test_session_start(self, token_factory):
        exp = int(time.time()) + 600
        client = Client()
        client.session_start(Session(token=token_factory(exp)))
        assert client.session_expired is False
        assert client.session_expiry == datetime.fromtimestamp(exp, UTC)

    @pytest.mark.parametrize(
        "token",
        ["", "not-a-jwt", "a.!!!.c", "a." + base64.urlsafe_b64encode(b"[1]").decode() + ".c"],
    )
    def test_session_start_rejects_bad_tokens(self, token):
        with pytest.raises(NakamaSessionError):
            Client().session_start(Session(token=token))

    def test_session_start_rejects_missing_exp(self, token_factory):
        with pytest.raises(NakamaSessionError, match="expiry cannot be 0"):
            Client().session_start(Session(token=token_factory()))

    def test_session_start_rejects_expired(self, token_factory):
        with pytest.raises(NakamaSessionError, match="expired"):
            Client().session_start(Session(token=token_factory(int(time.time()) - 10)))

    @respx.mock
    def test_authenticate_device(self, session_json):
        """Should authenticate and start the returned session."""
        route = respx.post(f"{BASE}/v2/account/authenticate/device").mock(
            return_value=httpx.Response(200, json=session_json)
        )
        client = Client(url=BASE, server_key="defaultkey")

        session = client.authenticate_device("device-1234567890", create=True)

        request = route.calls.last.request
        assert request.url.params["create"] == "true"
        assert "username" not in request.url.params
        assert json.loads(request.content) == {"id": "device-1234567890"}
        assert session.created is True
        assert client.session_token == session_json["token"]
        assert client.session_refresh_token == session_json["refresh_token"]

    @respx.mock
    def test_account(self, token_factory):
        respx.get(f"{BASE}/v2/account").mock(
            return_value=httpx.Response(
                200, json={"user": {"id": "user-1", "username": "alice"}, "wallet": "{}"}
            )
        )
        account = started_client(token_factory).account()
        assert isinstance(account, Account)
        assert account.user.username == "alice"

    def test_refresh_without_session(self):
        with pytest.raises(NakamaSessionError):
            Client().session_refresh()

    @respx.mock
    def test_refresh_unexpired_is_noop(self, token_factory):
        client = started_client(token_factory)
        session = client.session
        assert client.session_refresh() is session
        assert respx.calls.call_count == 0

    @respx.mock
    def test_refresh_expired(self, token_factory, session_json):
        """Should exchange the refresh token and replace the session."""
        route = respx.post(f"{BASE}/v2/account/session/refresh").mock(
            return_value=httpx.Response(200, json={"token": session_json["token"]})
        )
        client = started_client(token_factory, server_key="defaultkey")
        old_refresh = client.session_refresh_token
        client._session_expiry = datetime.now(UTC) - timedelta(seconds=1)

        session = client.session_refresh()

        request = route.calls.last.request
        assert request.headers["Authorization"] == basic("defaultkey", "")
        assert json.loads(request.content) == {"token": old_refresh}
        assert session.token == session_json["token"]
        assert client.session_refresh_token == old_refresh
        assert client.session_expired is False

    @respx.mock
    def test_logout_clears_session_on_failure(self, token_factory):
        """Should clear the local session even when the server call fails."""
        route = respx.post(f"{BASE}/v2/session/logout").mock(return_value=httpx.Response(500))
        client = started_client(token_factory)
        token = client.session_token

        with pytest.raises(NakamaAPIError):
            client.session_logout()

        assert json.loads(route.calls.last.request.content)["token"] == token
        assert client.session is None
        assert client.session_expired is True

    def test_logout_without_session_is_noop(self):
        Client().session_logout()


class TestAsyncClient:
    """Tests for AsyncClient."""

    @respx.mock
    def test_async_dispatch(self, token_factory):
        route = respx.get(f"{BASE}/v2/greet").mock(
            return_value=httpx.Response(200, json={"message": "hi"})
        )

        async def main():
            async with AsyncClient(url=BASE) as client:
                client.session_start(Session(token=token_factory(int(time.time()) + 60)))
                return await client.dispatch(
                    "GET", "v2/greet", requires_auth=True, response_type=Greeting
                )

        assert asyncio.run(main()) == Greeting(message="hi")
        assert route.calls.last.request.headers["Authorization"].startswith("Bearer ")

    def test_async_requires_auth_without_session(self):
        async def main():
            async with AsyncClient(url=BASE) as client:
                await client.account()

        with pytest.raises(NakamaAuthenticationRequired):
            asyncio.run(main())

    @respx.mock
    def test_async_authenticate(self, session_json):
        respx.post(f"{BASE}/v2/account/authenticate/custom").mock(
            return_value=httpx.Response(200, json=session_json)
        )

        async def main():
            async with AsyncClient(url=BASE, server_key="defaultkey") as client:
                await client.authenticate_custom("custom-id", username="alice")
                return client.session_token

        assert asyncio.run(main()) == session_json["token"]

    def test_cancellation_aborts_in_flight_request(self):
        """Should propagate cancellation instead of wrapping it."""
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(10)
            return httpx.Response(200)

        async def main():
            http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
            async with AsyncClient(url=BASE, http_client=http) as client:
                with pytest.raises(TimeoutError):
                    await asyncio.wait_for(client.dispatch("GET", "healthcheck"), timeout=0.05)
            await http.aclose()

        asyncio.run(main())
