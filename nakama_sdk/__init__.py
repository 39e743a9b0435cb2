"""Nakama SDK for Python.

Client for the Nakama game server REST API.

Public API:
    Client, AsyncClient - Connection settings, session and request dispatch
    nakama_sdk.requests - One request class per REST operation
    nakama_sdk.models - Response and nested input models
    nakama_sdk.runtime - Server-side RPC registry and sample module
"""

from nakama_sdk._version import __version__
from nakama_sdk.client import AsyncClient, AuthMode, Client
from nakama_sdk.exceptions import (
    NakamaAPIError,
    NakamaAuthenticationRequired,
    NakamaConfigError,
    NakamaDecodeError,
    NakamaError,
    NakamaRuntimeError,
    NakamaSessionError,
    NakamaTimeoutError,
    NakamaTransportError,
    RpcNotFoundError,
    RuntimeRegistrationError,
)
from nakama_sdk.models import Session

__all__ = [
    "__version__",
    "AsyncClient",
    "AuthMode",
    "Client",
    "NakamaAPIError",
    "NakamaAuthenticationRequired",
    "NakamaConfigError",
    "NakamaDecodeError",
    "NakamaError",
    "NakamaRuntimeError",
    "NakamaSessionError",
    "NakamaTimeoutError",
    "NakamaTransportError",
    "RpcNotFoundError",
    "RuntimeRegistrationError",
    "Session",
]
