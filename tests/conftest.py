"""Shared fixtures."""

import base64
import json
import time

import pytest


def _segment(obj: dict) -> str:
    return base64.urlsafe_b64encode(json.dumps(obj).encode()).rstrip(b"=").decode()


def make_token(exp: int | None = None, **claims) -> str:
    """Build an unsigned JWT with the given `exp` claim."""
    if exp is not None:
        claims["exp"] = exp
    return f"{_segment({'alg': 'HS256', 'typ': 'JWT'})}.{_segment(claims)}.signature"


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def session_json():
    """Session payload as returned by the authenticate endpoints."""
    now = int(time.time())
    return {
        "token": make_token(now + 3600, uid="user-1"),
        "refresh_token": make_token(now + 7200, uid="user-1"),
        "created": True,
    }
