"""Transport-level description of a single Nakama API call."""

from dataclasses import dataclass, field
from typing import Any

QueryParams = dict[str, str | list[str]]


@dataclass(frozen=True)
class RequestSpec:
    """Everything the dispatcher needs for one round trip.

    Produced by `Request.build()`; consumed by `Client.dispatch()`.

    Fields:
        method: HTTP verb.
        path: Server-relative path, identifiers already URL-escaped.
        requires_auth: Whether the session token must be attached.
        query: Query parameters; list values are sent as repeated keys.
        body: Request payload, or None for no body.
        response_type: Type to decode the response into, or None to
            discard the response body.
    """

    method: str
    path: str
    requires_auth: bool = False
    query: QueryParams = field(default_factory=dict)
    body: Any = None
    response_type: Any = None
