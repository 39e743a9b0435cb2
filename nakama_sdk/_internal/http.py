"""Shared HTTP client configuration."""

import httpx

from nakama_sdk._version import __version__

DEFAULT_URL = "http://127.0.0.1:7350"
DEFAULT_TIMEOUT_MS = 30_000

USER_AGENT = f"nakama-sdk-python/{__version__}"


def create_http_client(
    *,
    base_url: str = DEFAULT_URL,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        base_url: Base URL of the Nakama server.
        timeout_ms: Default request timeout in milliseconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout_ms / 1000,
        base_url=base_url,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )


def create_async_http_client(
    *,
    base_url: str = DEFAULT_URL,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Same defaults as `create_http_client`.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        base_url=base_url,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )
