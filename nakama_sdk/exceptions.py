"""Public exceptions for the Nakama SDK."""

from typing import Any


class NakamaError(Exception):
    """Base exception for all Nakama SDK errors."""


class NakamaConfigError(NakamaError):
    """Configuration error (invalid env vars, unknown auth mode)."""


class NakamaAuthenticationRequired(NakamaError):
    """Raised when an endpoint needs a session token and none is available."""


class NakamaSessionError(NakamaError):
    """Session token could not be started, refreshed or used."""


class NakamaTransportError(NakamaError):
    """Network-level failure (DNS, connection refused, protocol error)."""


class NakamaTimeoutError(NakamaTransportError):
    """The request did not complete within its timeout."""


class NakamaAPIError(NakamaError):
    """Non-2xx response from the Nakama server.

    Attributes:
        status_code: HTTP status code of the response.
        body: Decoded error payload (dict when the server sent JSON,
            raw text otherwise).
        code: gRPC status code from the payload, when present.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.code = code


class NakamaDecodeError(NakamaError):
    """Response body could not be decoded into the expected shape."""


class NakamaRuntimeError(NakamaError):
    """Base for server-side runtime registry errors."""


class RuntimeRegistrationError(NakamaRuntimeError):
    """An RPC could not be registered (empty or duplicate id)."""


class RpcNotFoundError(NakamaRuntimeError):
    """No RPC is registered under the requested id."""
