"""Notification requests."""

from typing import Annotated, Self

from nakama_sdk.models.social import NotificationList
from nakama_sdk.requests._base import Query, Request


class NotificationsRequest(Request):
    """List notifications.

    Pass the `cacheable_cursor` from a previous response to only fetch
    notifications received since then.
    """

    path = "v2/notification"
    response_type = NotificationList

    limit: Annotated[int | None, Query()] = None
    cacheable_cursor: Annotated[str | None, Query("cacheableCursor")] = None

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_cacheable_cursor(self, cacheable_cursor: str) -> Self:
        self.cacheable_cursor = cacheable_cursor
        return self


class DeleteNotificationsRequest(Request):
    method = "DELETE"
    path = "v2/notification"

    ids: Annotated[list[str] | None, Query()] = None

    def with_ids(self, *ids: str) -> Self:
        self.ids = list(ids)
        return self
