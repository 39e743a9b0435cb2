"""Group management requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.enums import UserRoleState
from nakama_sdk.models.social import Group, GroupList, GroupUserList
from nakama_sdk.requests._base import PageRequest, PathId, Query, Request


class GroupsRequest(PageRequest):
    """Search groups by name prefix, language, size or openness."""

    path = "v2/group"
    response_type = GroupList

    name: Annotated[str | None, Query()] = None
    lang_tag: Annotated[str | None, Query("langTag")] = None
    members: Annotated[int | None, Query()] = None
    open: Annotated[bool | None, Query()] = None

    def with_name(self, name: str) -> Self:
        self.name = name
        return self

    def with_lang_tag(self, lang_tag: str) -> Self:
        self.lang_tag = lang_tag
        return self

    def with_members(self, members: int) -> Self:
        self.members = members
        return self

    def with_open(self, open: bool) -> Self:
        self.open = open
        return self


class _GroupFieldsRequest(Request):
    sends_body = True

    name: str | None = None
    description: str | None = None
    lang_tag: str | None = None
    avatar_url: str | None = None
    open: bool | None = None

    def with_name(self, name: str) -> Self:
        self.name = name
        return self

    def with_description(self, description: str) -> Self:
        self.description = description
        return self

    def with_lang_tag(self, lang_tag: str) -> Self:
        self.lang_tag = lang_tag
        return self

    def with_avatar_url(self, avatar_url: str) -> Self:
        self.avatar_url = avatar_url
        return self

    def with_open(self, open: bool) -> Self:
        self.open = open
        return self


class CreateGroupRequest(_GroupFieldsRequest):
    method = "POST"
    path = "v2/group"
    response_type = Group

    name: str
    max_count: int | None = None

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def with_max_count(self, max_count: int) -> Self:
        self.max_count = max_count
        return self


class UpdateGroupRequest(_GroupFieldsRequest):
    method = "PUT"
    path = "v2/group/{group_id}"

    group_id: PathId

    def __init__(self, group_id: str, **data: Any) -> None:
        super().__init__(group_id=group_id, **data)


class _GroupRequest(Request):
    method = "POST"

    group_id: PathId

    def __init__(self, group_id: str, **data: Any) -> None:
        super().__init__(group_id=group_id, **data)


class DeleteGroupRequest(_GroupRequest):
    method = "DELETE"
    path = "v2/group/{group_id}"


class JoinGroupRequest(_GroupRequest):
    path = "v2/group/{group_id}/join"


class LeaveGroupRequest(_GroupRequest):
    path = "v2/group/{group_id}/leave"


class _GroupUserIdsRequest(_GroupRequest):
    user_ids: Annotated[list[str] | None, Query()] = None

    def with_user_ids(self, *user_ids: str) -> Self:
        self.user_ids = list(user_ids)
        return self


class AddGroupUsersRequest(_GroupUserIdsRequest):
    path = "v2/group/{group_id}/add"


class BanGroupUsersRequest(_GroupUserIdsRequest):
    path = "v2/group/{group_id}/ban"


class DemoteGroupUsersRequest(_GroupUserIdsRequest):
    path = "v2/group/{group_id}/demote"


class KickGroupUsersRequest(_GroupUserIdsRequest):
    path = "v2/group/{group_id}/kick"


class PromoteGroupUsersRequest(_GroupUserIdsRequest):
    path = "v2/group/{group_id}/promote"


class GroupUsersRequest(PageRequest):
    """List a group's members, optionally filtered by role."""

    path = "v2/group/{group_id}/user"
    response_type = GroupUserList

    group_id: PathId
    state: Annotated[UserRoleState | None, Query()] = None

    def __init__(self, group_id: str, **data: Any) -> None:
        super().__init__(group_id=group_id, **data)

    def with_state(self, state: UserRoleState) -> Self:
        self.state = state
        return self
