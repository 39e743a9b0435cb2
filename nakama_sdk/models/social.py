"""Pydantic models for friends, groups, channels, notifications and matches."""

from datetime import datetime

from pydantic import BaseModel, Field

from nakama_sdk.models.account import User
from nakama_sdk.models.enums import FriendState, UserRoleState

# =============================================================================
# Friends
# =============================================================================


class Friend(BaseModel):
    user: User
    state: FriendState = FriendState.FRIEND
    update_time: datetime | None = None


class FriendList(BaseModel):
    friends: list[Friend] = Field(default_factory=list)
    cursor: str | None = None


# =============================================================================
# Groups
# =============================================================================


class Group(BaseModel):
    id: str
    creator_id: str | None = None
    name: str | None = None
    description: str | None = None
    lang_tag: str | None = None
    metadata: str | None = None
    avatar_url: str | None = None
    open: bool = False
    edge_count: int = 0
    max_count: int = 0
    create_time: datetime | None = None
    update_time: datetime | None = None


class GroupList(BaseModel):
    groups: list[Group] = Field(default_factory=list)
    cursor: str | None = None


class GroupUser(BaseModel):
    user: User
    state: UserRoleState = UserRoleState.SUPERADMIN


class GroupUserList(BaseModel):
    group_users: list[GroupUser] = Field(default_factory=list)
    cursor: str | None = None


class UserGroup(BaseModel):
    group: Group
    state: UserRoleState = UserRoleState.SUPERADMIN


class UserGroupList(BaseModel):
    user_groups: list[UserGroup] = Field(default_factory=list)
    cursor: str | None = None


# =============================================================================
# Channels, notifications, matches
# =============================================================================


class ChannelMessage(BaseModel):
    channel_id: str
    message_id: str
    code: int = 0
    sender_id: str | None = None
    username: str | None = None
    content: str | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    persistent: bool = False
    room_name: str | None = None
    group_id: str | None = None
    user_id_one: str | None = None
    user_id_two: str | None = None


class ChannelMessageList(BaseModel):
    messages: list[ChannelMessage] = Field(default_factory=list)
    next_cursor: str | None = None
    prev_cursor: str | None = None
    cacheable_cursor: str | None = None


class Notification(BaseModel):
    id: str
    subject: str | None = None
    content: str | None = None
    code: int = 0
    sender_id: str | None = None
    create_time: datetime | None = None
    persistent: bool = False


class NotificationList(BaseModel):
    notifications: list[Notification] = Field(default_factory=list)
    cacheable_cursor: str | None = None


class Match(BaseModel):
    match_id: str
    authoritative: bool = False
    label: str | None = None
    size: int = 0
    tick_rate: int = 0
    handler_name: str | None = None


class MatchList(BaseModel):
    matches: list[Match] = Field(default_factory=list)
