"""User lookup requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.account import Users
from nakama_sdk.models.enums import UserRoleState
from nakama_sdk.models.social import UserGroupList
from nakama_sdk.requests._base import PageRequest, PathId, Query, Request


class UsersRequest(Request):
    """Fetch users by id, username and/or Facebook id."""

    path = "v2/user"
    response_type = Users

    ids: Annotated[list[str] | None, Query()] = None
    usernames: Annotated[list[str] | None, Query()] = None
    facebook_ids: Annotated[list[str] | None, Query("facebookIds")] = None

    def with_ids(self, *ids: str) -> Self:
        self.ids = list(ids)
        return self

    def with_usernames(self, *usernames: str) -> Self:
        self.usernames = list(usernames)
        return self

    def with_facebook_ids(self, *facebook_ids: str) -> Self:
        self.facebook_ids = list(facebook_ids)
        return self


class UserGroupsRequest(PageRequest):
    """List the groups a user belongs to."""

    path = "v2/user/{user_id}/group"
    response_type = UserGroupList

    user_id: PathId
    state: Annotated[UserRoleState | None, Query()] = None

    def __init__(self, user_id: str, **data: Any) -> None:
        super().__init__(user_id=user_id, **data)

    def with_state(self, state: UserRoleState) -> Self:
        self.state = state
        return self
