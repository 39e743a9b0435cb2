"""Channel history, analytics event and match listing requests."""

from datetime import datetime
from typing import Annotated, Any, Self

from pydantic import AwareDatetime

from nakama_sdk.models.social import ChannelMessageList, MatchList
from nakama_sdk.requests._base import PageRequest, PathId, Query, Request


class ChannelMessagesRequest(PageRequest):
    path = "v2/channel/{channel_id}"
    response_type = ChannelMessageList

    channel_id: PathId
    forward: Annotated[bool | None, Query()] = None

    def __init__(self, channel_id: str, **data: Any) -> None:
        super().__init__(channel_id=channel_id, **data)

    def with_forward(self, forward: bool) -> Self:
        self.forward = forward
        return self


class EventRequest(Request):
    """Send a custom analytics event to the server's event pipeline."""

    method = "POST"
    path = "v2/event"
    sends_body = True

    name: str
    properties: dict[str, str] | None = None
    timestamp: AwareDatetime | None = None
    external: bool | None = None

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def with_properties(self, properties: dict[str, str]) -> Self:
        self.properties = properties
        return self

    def with_timestamp(self, timestamp: datetime) -> Self:
        self.timestamp = timestamp
        return self

    def with_external(self, external: bool) -> Self:
        self.external = external
        return self


class MatchesRequest(Request):
    """List running matches.

    `query` is a server-side label query and takes precedence over
    `label` when both are set.
    """

    path = "v2/match"
    response_type = MatchList

    limit: Annotated[int | None, Query()] = None
    authoritative: Annotated[bool | None, Query()] = None
    label: Annotated[str | None, Query()] = None
    min_size: Annotated[int | None, Query("minSize")] = None
    max_size: Annotated[int | None, Query("maxSize")] = None
    query: Annotated[str | None, Query()] = None

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_authoritative(self, authoritative: bool) -> Self:
        self.authoritative = authoritative
        return self

    def with_label(self, label: str) -> Self:
        self.label = label
        return self

    def with_min_size(self, min_size: int) -> Self:
        self.min_size = min_size
        return self

    def with_max_size(self, max_size: int) -> Self:
        self.max_size = max_size
        return self

    def with_query(self, query: str) -> Self:
        self.query = query
        return self
