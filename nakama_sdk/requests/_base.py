"""Base class shared by every endpoint request.

A request is a pydantic model whose fields are the operation's
parameters. Each field is one of three kinds, declared with an
`Annotated` marker:

    PathId                          identifier in the URL path, set once
    Annotated[T | None, Query()]    optional query parameter
    (no marker)                     body field

`build()` maps the model to a `RequestSpec`; `do()` hands the spec to a
client. Query and body fields left at None are omitted, so calling
`with_limit(0)` and never calling it are different requests.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Annotated, Any, ClassVar, Self
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo

from nakama_sdk._internal.dispatch.models import QueryParams, RequestSpec


@dataclass(frozen=True)
class Query:
    """Marks a field as an optional query parameter.

    Args:
        name: Wire name when it differs from the field name.
    """

    name: str | None = None


@dataclass(frozen=True)
class PathParam:
    """Marks a field as a path identifier."""


PathId = Annotated[str, PathParam(), Field(frozen=True, min_length=1)]


def _marker(info: FieldInfo, kind: type) -> Any:
    for item in info.metadata:
        if isinstance(item, kind):
            return item
    return None


def escape_path_value(value: Any) -> str:
    """Percent-encode a path identifier as a single segment.

    Dot-only values are encoded as `%2E` so URL normalisation cannot
    treat them as `.` or `..` segments.
    """
    escaped = quote(str(value), safe="")
    if escaped.strip(".") == "":
        return escaped.replace(".", "%2E")
    return escaped


def encode_query_value(value: Any) -> str | list[str]:
    """Encode a field value as a query string value.

    bool -> "true"/"false", IntEnum -> its integer, datetime -> ISO-8601,
    list/tuple -> one string per element (sent as repeated keys).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, IntEnum):
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [encode_query_value(item) for item in value]  # type: ignore[misc]
    return str(value)


class Request(BaseModel):
    """Base for all endpoint requests.

    Subclasses describe their endpoint through class variables:
        method: HTTP verb.
        path: Path template; `{name}` placeholders are filled from PathId
            fields.
        requires_auth: Whether the session token is attached.
        response_type: Model the response decodes into (None discards it).
        sends_body: Whether body fields are sent as a JSON object.
    """

    model_config = ConfigDict(validate_assignment=True)

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = ""
    requires_auth: ClassVar[bool] = True
    response_type: ClassVar[Any] = None
    sends_body: ClassVar[bool] = False

    def build(self) -> RequestSpec:
        """Map the request fields to a transport-level `RequestSpec`."""
        path_values: dict[str, str] = {}
        query: QueryParams = {}
        body_fields: set[str] = set()

        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if _marker(info, PathParam) is not None:
                path_values[name] = escape_path_value(value)
                continue
            query_marker = _marker(info, Query)
            if query_marker is not None:
                if value is not None:
                    query[query_marker.name or name] = encode_query_value(value)
                continue
            body_fields.add(name)

        body: Any = None
        if self.sends_body:
            body = {}
            if body_fields:
                body = self.model_dump(mode="json", include=body_fields, exclude_none=True)

        return RequestSpec(
            method=self.method,
            path=self.path.format(**path_values),
            requires_auth=self.requires_auth,
            query=query,
            body=body,
            response_type=self.response_type,
        )

    def do(self, client: Any, *, timeout_ms: int | None = None) -> Any:
        """Execute the request against a `Client` or `AsyncClient`.

        Returns the decoded response (None for operations without one).
        With an `AsyncClient` the return value must be awaited.
        """
        return client.send(self.build(), timeout_ms=timeout_ms)


class PageRequest(Request):
    """Request with `limit` and `cursor` query parameters."""

    limit: Annotated[int | None, Query()] = None
    cursor: Annotated[str | None, Query()] = None

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_cursor(self, cursor: str) -> Self:
        self.cursor = cursor
        return self


class VarsRequest(Request):
    """Request whose body carries session `vars`."""

    method = "POST"
    sends_body = True

    vars: dict[str, str] | None = None

    def with_vars(self, vars: dict[str, str]) -> Self:
        self.vars = vars
        return self
