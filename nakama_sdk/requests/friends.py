"""Friend list requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.enums import FriendState
from nakama_sdk.models.social import FriendList
from nakama_sdk.requests._base import PageRequest, Query, Request, VarsRequest


class FriendsRequest(PageRequest):
    """List the current user's friends, optionally filtered by state."""

    path = "v2/friend"
    response_type = FriendList

    state: Annotated[FriendState | None, Query()] = None

    def with_state(self, state: FriendState) -> Self:
        self.state = state
        return self


class _FriendIdsRequest(Request):
    method = "POST"
    path = "v2/friend"

    ids: Annotated[list[str] | None, Query()] = None
    usernames: Annotated[list[str] | None, Query()] = None

    def with_ids(self, *ids: str) -> Self:
        self.ids = list(ids)
        return self

    def with_usernames(self, *usernames: str) -> Self:
        self.usernames = list(usernames)
        return self


class AddFriendsRequest(_FriendIdsRequest):
    """Add friends by user id and/or username."""


class DeleteFriendsRequest(_FriendIdsRequest):
    method = "DELETE"


class BlockFriendsRequest(_FriendIdsRequest):
    path = "v2/friend/block"


class _ImportFriendsRequest(VarsRequest):
    reset: Annotated[bool | None, Query()] = None
    token: str

    def __init__(self, token: str, **data: Any) -> None:
        super().__init__(token=token, **data)

    def with_reset(self, reset: bool) -> Self:
        """Replace the existing imported friends instead of merging."""
        self.reset = reset
        return self


class ImportFacebookFriendsRequest(_ImportFriendsRequest):
    path = "v2/friend/facebook"


class ImportSteamFriendsRequest(_ImportFriendsRequest):
    path = "v2/friend/steam"
