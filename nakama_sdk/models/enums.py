"""Integer enumerations used on the wire."""

from enum import IntEnum


class FriendState(IntEnum):
    """Relationship between the current user and a friend."""

    FRIEND = 0
    INVITE_SENT = 1
    INVITE_RECEIVED = 2
    BLOCKED = 3


class UserRoleState(IntEnum):
    """Role of a user within a group."""

    SUPERADMIN = 0
    ADMIN = 1
    MEMBER = 2
    JOIN_REQUEST = 3


class Operator(IntEnum):
    """How a leaderboard/tournament score write is combined with the old one."""

    NO_OVERRIDE = 0
    BEST = 1
    SET = 2
    INCREMENTAL = 3
    DECREMENTAL = 4


class StoreProvider(IntEnum):
    APPLE_APP_STORE = 0
    GOOGLE_PLAY_STORE = 1
    HUAWEI_APP_GALLERY = 2


class StoreEnvironment(IntEnum):
    UNKNOWN = 0
    SANDBOX = 1
    PRODUCTION = 2


class ReadPermission(IntEnum):
    """Who may read a storage object."""

    NO_READ = 0
    OWNER_READ = 1
    PUBLIC_READ = 2


class WritePermission(IntEnum):
    """Who may write a storage object."""

    NO_WRITE = 0
    OWNER_WRITE = 1
