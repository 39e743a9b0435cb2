"""Public pydantic models for Nakama API payloads."""

from nakama_sdk.models.account import Account, AccountDevice, Session, User, Users
from nakama_sdk.models.enums import (
    FriendState,
    Operator,
    ReadPermission,
    StoreEnvironment,
    StoreProvider,
    UserRoleState,
    WritePermission,
)
from nakama_sdk.models.leaderboards import (
    LeaderboardRecord,
    LeaderboardRecordList,
    Tournament,
    TournamentList,
    TournamentRecordList,
)
from nakama_sdk.models.purchases import (
    SubscriptionList,
    ValidatedPurchase,
    ValidatedSubscription,
    ValidatePurchaseResponse,
    ValidateSubscriptionResponse,
)
from nakama_sdk.models.social import (
    ChannelMessage,
    ChannelMessageList,
    Friend,
    FriendList,
    Group,
    GroupList,
    GroupUser,
    GroupUserList,
    Match,
    MatchList,
    Notification,
    NotificationList,
    UserGroup,
    UserGroupList,
)
from nakama_sdk.models.storage import (
    DeleteStorageObjectId,
    ReadStorageObjectId,
    StorageObject,
    StorageObjectAck,
    StorageObjectAcks,
    StorageObjectList,
    StorageObjects,
    WriteStorageObject,
)

__all__ = [
    "Account",
    "AccountDevice",
    "Session",
    "User",
    "Users",
    "FriendState",
    "Operator",
    "ReadPermission",
    "StoreEnvironment",
    "StoreProvider",
    "UserRoleState",
    "WritePermission",
    "LeaderboardRecord",
    "LeaderboardRecordList",
    "Tournament",
    "TournamentList",
    "TournamentRecordList",
    "SubscriptionList",
    "ValidatedPurchase",
    "ValidatedSubscription",
    "ValidatePurchaseResponse",
    "ValidateSubscriptionResponse",
    "ChannelMessage",
    "ChannelMessageList",
    "Friend",
    "FriendList",
    "Group",
    "GroupList",
    "GroupUser",
    "GroupUserList",
    "Match",
    "MatchList",
    "Notification",
    "NotificationList",
    "UserGroup",
    "UserGroupList",
    "DeleteStorageObjectId",
    "ReadStorageObjectId",
    "StorageObject",
    "StorageObjectAck",
    "StorageObjectAcks",
    "StorageObjectList",
    "StorageObjects",
    "WriteStorageObject",
]
