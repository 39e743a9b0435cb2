"""Account, authentication, link/unlink and session requests."""

from typing import Annotated, Any, Self

from pydantic import BaseModel

from nakama_sdk.models.account import Account, Session
from nakama_sdk.requests._base import Query, Request, VarsRequest


class HealthcheckRequest(Request):
    """Check that the server is reachable."""

    path = "healthcheck"
    requires_auth = False


class AccountRequest(Request):
    """Fetch the current user's account."""

    path = "v2/account"
    response_type = Account


class UpdateAccountRequest(Request):
    """Update fields of the current user's account.

    Only fields that were set are sent; setting a field to "" clears it.
    """

    method = "PUT"
    path = "v2/account"
    sends_body = True

    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    lang_tag: str | None = None
    location: str | None = None
    timezone: str | None = None

    def with_username(self, username: str) -> Self:
        self.username = username
        return self

    def with_display_name(self, display_name: str) -> Self:
        self.display_name = display_name
        return self

    def with_avatar_url(self, avatar_url: str) -> Self:
        self.avatar_url = avatar_url
        return self

    def with_lang_tag(self, lang_tag: str) -> Self:
        self.lang_tag = lang_tag
        return self

    def with_location(self, location: str) -> Self:
        self.location = location
        return self

    def with_timezone(self, timezone: str) -> Self:
        self.timezone = timezone
        return self


# =============================================================================
# Credentials
# =============================================================================


class _TokenCredentials(BaseModel):
    token: str

    def __init__(self, token: str, **data: Any) -> None:
        super().__init__(token=token, **data)


class _IdCredentials(BaseModel):
    id: str

    def __init__(self, id: str, **data: Any) -> None:
        super().__init__(id=id, **data)


class _EmailCredentials(BaseModel):
    email: str
    password: str

    def __init__(self, email: str, password: str, **data: Any) -> None:
        super().__init__(email=email, password=password, **data)


class _InstantGameCredentials(BaseModel):
    signed_player_info: str

    def __init__(self, signed_player_info: str, **data: Any) -> None:
        super().__init__(signed_player_info=signed_player_info, **data)


class _GameCenterCredentials(BaseModel):
    """Apple Game Center identity verification values, all set by setters."""

    player_id: str | None = None
    bundle_id: str | None = None
    timestamp_seconds: int | None = None
    salt: str | None = None
    signature: str | None = None
    public_key_url: str | None = None

    def with_player_id(self, player_id: str) -> Self:
        self.player_id = player_id
        return self

    def with_bundle_id(self, bundle_id: str) -> Self:
        self.bundle_id = bundle_id
        return self

    def with_timestamp_seconds(self, timestamp_seconds: int) -> Self:
        self.timestamp_seconds = timestamp_seconds
        return self

    def with_salt(self, salt: str) -> Self:
        self.salt = salt
        return self

    def with_signature(self, signature: str) -> Self:
        self.signature = signature
        return self

    def with_public_key_url(self, public_key_url: str) -> Self:
        self.public_key_url = public_key_url
        return self


class _SyncOption(BaseModel):
    sync: Annotated[bool | None, Query()] = None

    def with_sync(self, sync: bool) -> Self:
        """Import the account's friends after linking or authenticating."""
        self.sync = sync
        return self


# =============================================================================
# Authenticate
# =============================================================================


class _AuthenticateRequest(VarsRequest):
    requires_auth = False
    response_type = Session

    create: Annotated[bool | None, Query()] = None
    username: Annotated[str | None, Query()] = None

    def with_create(self, create: bool) -> Self:
        self.create = create
        return self

    def with_username(self, username: str) -> Self:
        self.username = username
        return self


class AuthenticateAppleRequest(_TokenCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/apple"


class AuthenticateCustomRequest(_IdCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/custom"


class AuthenticateDeviceRequest(_IdCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/device"


class AuthenticateEmailRequest(_EmailCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/email"


class AuthenticateFacebookRequest(_SyncOption, _TokenCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/facebook"


class AuthenticateFacebookInstantGameRequest(_InstantGameCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/facebookinstantgame"


class AuthenticateGameCenterRequest(_GameCenterCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/gamecenter"


class AuthenticateGoogleRequest(_TokenCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/google"


class AuthenticateSteamRequest(_SyncOption, _TokenCredentials, _AuthenticateRequest):
    path = "v2/account/authenticate/steam"


# =============================================================================
# Link / Unlink
# =============================================================================


class LinkAppleRequest(_TokenCredentials, VarsRequest):
    path = "v2/account/link/apple"


class LinkCustomRequest(_IdCredentials, VarsRequest):
    path = "v2/account/link/custom"


class LinkDeviceRequest(_IdCredentials, VarsRequest):
    path = "v2/account/link/device"


class LinkEmailRequest(_EmailCredentials, VarsRequest):
    path = "v2/account/link/email"


class LinkFacebookRequest(_SyncOption, _TokenCredentials, VarsRequest):
    path = "v2/account/link/facebook"


class LinkFacebookInstantGameRequest(_InstantGameCredentials, VarsRequest):
    path = "v2/account/link/facebookinstantgame"


class LinkGameCenterRequest(_GameCenterCredentials, VarsRequest):
    path = "v2/account/link/gamecenter"


class LinkGoogleRequest(_TokenCredentials, VarsRequest):
    path = "v2/account/link/google"


class LinkSteamRequest(_SyncOption, _TokenCredentials, VarsRequest):
    path = "v2/account/link/steam"


class UnlinkAppleRequest(_TokenCredentials, VarsRequest):
    path = "v2/account/unlink/apple"


class UnlinkCustomRequest(_IdCredentials, VarsRequest):
    path = "v2/account/unlink/custom"


class UnlinkDeviceRequest(_IdCredentials, VarsRequest):
    path = "v2/account/unlink/device"


class UnlinkEmailRequest(_EmailCredentials, VarsRequest):
    path = "v2/account/unlink/email"


class UnlinkFacebookRequest(_TokenCredentials, VarsRequest):
    path = "v2/account/unlink/facebook"


class UnlinkFacebookInstantGameRequest(_InstantGameCredentials, VarsRequest):
    path = "v2/account/unlink/facebookinstantgame"


class UnlinkGameCenterRequest(_GameCenterCredentials, VarsRequest):
    path = "v2/account/unlink/gamecenter"


class UnlinkGoogleRequest(_TokenCredentials, VarsRequest):
    path = "v2/account/unlink/google"


class UnlinkSteamRequest(_TokenCredentials, VarsRequest):
    path = "v2/account/unlink/steam"


# =============================================================================
# Session
# =============================================================================


class SessionRefreshRequest(_TokenCredentials, VarsRequest):
    """Exchange a refresh token for a new session.

    `token` is the refresh token, not the session token.
    """

    path = "v2/account/session/refresh"
    requires_auth = False
    response_type = Session


class SessionLogoutRequest(Request):
    """Invalidate a session token and its refresh token server-side."""

    method = "POST"
    path = "v2/session/logout"
    sends_body = True

    token: str
    refresh_token: str | None = None

    def __init__(self, token: str, refresh_token: str | None = None, **data: Any) -> None:
        super().__init__(token=token, refresh_token=refresh_token, **data)
