"""Pydantic models for accounts, users and sessions.

Field names follow the server's snake_case JSON. Unknown fields are
ignored so newer servers can add fields without breaking decoding.
"""

import base64
import json
from datetime import UTC, datetime

from pydantic import BaseModel, Field


class Session(BaseModel):
    """Session returned by the authenticate and refresh endpoints.

    Required fields:
        token: JWT used as the bearer credential

    Optional fields:
        refresh_token: JWT used to obtain a new session
        created: True when the authenticate call created the account
    """

    token: str
    refresh_token: str | None = None
    created: bool | None = None

    @property
    def expires_at(self) -> datetime:
        """Expiry from the token's `exp` claim.

        Raises:
            ValueError: If the token is not a JWT or has no usable `exp`.
        """
        claims = decode_jwt_claims(self.token)
        exp = claims.get("exp", 0)
        if isinstance(exp, bool) or not isinstance(exp, int):
            raise ValueError("exp claim is not an integer")
        if exp == 0:
            raise ValueError("expiry cannot be 0")
        return datetime.fromtimestamp(exp, UTC)


def decode_jwt_claims(token: str) -> dict:
    """Decode the (unverified) claims segment of a JWT."""
    if not token:
        raise ValueError("empty token")
    parts = token.split(".")
    if len(parts) != 3:
        raise ValueError("token is not jwt token")
    segment = parts[1]
    segment += "=" * (-len(segment) % 4)
    try:
        raw = base64.urlsafe_b64decode(segment)
    except ValueError as e:
        raise ValueError(f"invalid encoding: {e}") from e
    try:
        claims = json.loads(raw)
    except ValueError as e:
        raise ValueError(f"cannot decode token: {e}") from e
    if not isinstance(claims, dict):
        raise ValueError("cannot decode token: claims are not an object")
    return claims


class User(BaseModel):
    id: str
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    lang_tag: str | None = None
    location: str | None = None
    timezone: str | None = None
    metadata: str | None = None
    facebook_id: str | None = None
    google_id: str | None = None
    gamecenter_id: str | None = None
    steam_id: str | None = None
    apple_id: str | None = None
    facebook_instant_game_id: str | None = None
    online: bool = False
    edge_count: int = 0
    create_time: datetime | None = None
    update_time: datetime | None = None


class Users(BaseModel):
    users: list[User] = Field(default_factory=list)


class AccountDevice(BaseModel):
    id: str
    vars: dict[str, str] | None = None


class Account(BaseModel):
    """The current user's account."""

    user: User
    wallet: str | None = None
    email: str | None = None
    devices: list[AccountDevice] = Field(default_factory=list)
    custom_id: str | None = None
    verify_time: datetime | None = None
    disable_time: datetime | None = None
