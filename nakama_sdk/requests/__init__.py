"""Endpoint requests, one class per Nakama REST operation.

Each request is built with its required identifiers, configured with
fluent `with_*` setters and executed with `do(client)`:

    FriendsRequest().with_limit(10).with_state(FriendState.FRIEND).do(client)
"""

from nakama_sdk.requests._base import PageRequest, PathId, PathParam, Query, Request
from nakama_sdk.requests.account import (
    AccountRequest,
    AuthenticateAppleRequest,
    AuthenticateCustomRequest,
    AuthenticateDeviceRequest,
    AuthenticateEmailRequest,
    AuthenticateFacebookInstantGameRequest,
    AuthenticateFacebookRequest,
    AuthenticateGameCenterRequest,
    AuthenticateGoogleRequest,
    AuthenticateSteamRequest,
    HealthcheckRequest,
    LinkAppleRequest,
    LinkCustomRequest,
    LinkDeviceRequest,
    LinkEmailRequest,
    LinkFacebookInstantGameRequest,
    LinkFacebookRequest,
    LinkGameCenterRequest,
    LinkGoogleRequest,
    LinkSteamRequest,
    SessionLogoutRequest,
    SessionRefreshRequest,
    UnlinkAppleRequest,
    UnlinkCustomRequest,
    UnlinkDeviceRequest,
    UnlinkEmailRequest,
    UnlinkFacebookInstantGameRequest,
    UnlinkFacebookRequest,
    UnlinkGameCenterRequest,
    UnlinkGoogleRequest,
    UnlinkSteamRequest,
    UpdateAccountRequest,
)
from nakama_sdk.requests.friends import (
    AddFriendsRequest,
    BlockFriendsRequest,
    DeleteFriendsRequest,
    FriendsRequest,
    ImportFacebookFriendsRequest,
    ImportSteamFriendsRequest,
)
from nakama_sdk.requests.groups import (
    AddGroupUsersRequest,
    BanGroupUsersRequest,
    CreateGroupRequest,
    DeleteGroupRequest,
    DemoteGroupUsersRequest,
    GroupsRequest,
    GroupUsersRequest,
    JoinGroupRequest,
    KickGroupUsersRequest,
    LeaveGroupRequest,
    PromoteGroupUsersRequest,
    UpdateGroupRequest,
)
from nakama_sdk.requests.leaderboards import (
    DeleteLeaderboardRecordRequest,
    LeaderboardRecordsAroundOwnerRequest,
    LeaderboardRecordsRequest,
    WriteLeaderboardRecordRequest,
)
from nakama_sdk.requests.misc import ChannelMessagesRequest, EventRequest, MatchesRequest
from nakama_sdk.requests.notifications import DeleteNotificationsRequest, NotificationsRequest
from nakama_sdk.requests.purchases import (
    SubscriptionRequest,
    SubscriptionsRequest,
    ValidatePurchaseAppleRequest,
    ValidatePurchaseGoogleRequest,
    ValidatePurchaseHuaweiRequest,
    ValidateSubscriptionAppleRequest,
    ValidateSubscriptionGoogleRequest,
)
from nakama_sdk.requests.rpc import RpcRequest
from nakama_sdk.requests.storage import (
    DeleteStorageObjectsRequest,
    ReadStorageObjectsRequest,
    StorageObjectsRequest,
    WriteStorageObjectsRequest,
)
from nakama_sdk.requests.tournaments import (
    JoinTournamentRequest,
    TournamentRecordsAroundOwnerRequest,
    TournamentRecordsRequest,
    TournamentsRequest,
    WriteTournamentRecordRequest,
)
from nakama_sdk.requests.users import UserGroupsRequest, UsersRequest

__all__ = [
    "PageRequest",
    "PathId",
    "PathParam",
    "Query",
    "Request",
    "AccountRequest",
    "AuthenticateAppleRequest",
    "AuthenticateCustomRequest",
    "AuthenticateDeviceRequest",
    "AuthenticateEmailRequest",
    "AuthenticateFacebookInstantGameRequest",
    "AuthenticateFacebookRequest",
    "AuthenticateGameCenterRequest",
    "AuthenticateGoogleRequest",
    "AuthenticateSteamRequest",
    "HealthcheckRequest",
    "LinkAppleRequest",
    "LinkCustomRequest",
    "LinkDeviceRequest",
    "LinkEmailRequest",
    "LinkFacebookInstantGameRequest",
    "LinkFacebookRequest",
    "LinkGameCenterRequest",
    "LinkGoogleRequest",
    "LinkSteamRequest",
    "SessionLogoutRequest",
    "SessionRefreshRequest",
    "UnlinkAppleRequest",
    "UnlinkCustomRequest",
    "UnlinkDeviceRequest",
    "UnlinkEmailRequest",
    "UnlinkFacebookInstantGameRequest",
    "UnlinkFacebookRequest",
    "UnlinkGameCenterRequest",
    "UnlinkGoogleRequest",
    "UnlinkSteamRequest",
    "UpdateAccountRequest",
    "AddFriendsRequest",
    "BlockFriendsRequest",
    "DeleteFriendsRequest",
    "FriendsRequest",
    "ImportFacebookFriendsRequest",
    "ImportSteamFriendsRequest",
    "AddGroupUsersRequest",
    "BanGroupUsersRequest",
    "CreateGroupRequest",
    "DeleteGroupRequest",
    "DemoteGroupUsersRequest",
    "GroupsRequest",
    "GroupUsersRequest",
    "JoinGroupRequest",
    "KickGroupUsersRequest",
    "LeaveGroupRequest",
    "PromoteGroupUsersRequest",
    "UpdateGroupRequest",
    "DeleteLeaderboardRecordRequest",
    "LeaderboardRecordsAroundOwnerRequest",
    "LeaderboardRecordsRequest",
    "WriteLeaderboardRecordRequest",
    "ChannelMessagesRequest",
    "EventRequest",
    "MatchesRequest",
    "DeleteNotificationsRequest",
    "NotificationsRequest",
    "SubscriptionRequest",
    "SubscriptionsRequest",
    "ValidatePurchaseAppleRequest",
    "ValidatePurchaseGoogleRequest",
    "ValidatePurchaseHuaweiRequest",
    "ValidateSubscriptionAppleRequest",
    "ValidateSubscriptionGoogleRequest",
    "RpcRequest",
    "DeleteStorageObjectsRequest",
    "ReadStorageObjectsRequest",
    "StorageObjectsRequest",
    "WriteStorageObjectsRequest",
    "JoinTournamentRequest",
    "TournamentRecordsAroundOwnerRequest",
    "TournamentRecordsRequest",
    "TournamentsRequest",
    "WriteTournamentRecordRequest",
    "UserGroupsRequest",
    "UsersRequest",
]
