"""Credential Helpers: password hashing and access token signing.

Invariants:
    - Plaintext passwords never leave this module except as bcrypt hashes
    - verify_password never raises: malformed input compares as False
    - Tokens carry sub (user id), username, iat, exp

Design Decisions:
    - bcrypt.checkpw for comparison: constant-time, salt embedded in the hash
    - dummy_password_hash() gives unknown-username logins a real hash to compare
      against, so both login failure paths cost one bcrypt check
"""

import time
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from ideaboard.config import get_settings
from ideaboard.core.errors import AuthTokenError


def hash_password(plain_password: str) -> str:
    """Hash a plaintext password with the configured bcrypt cost."""
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty.")
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a stored bcrypt hash."""
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


@lru_cache
def dummy_password_hash() -> str:
    return hash_password("ideaboard-dummy-password")


def verify_against_dummy(plain_password: str) -> bool:
    """Spend one bcrypt comparison on a login for an unknown username."""
    return verify_password(plain_password, dummy_password_hash())


def build_access_token(*, user_id: str, username: str) -> str:
    """Sign a JWT identifying the user."""
    settings = get_settings()
    issued_at = int(time.time())
    payload = {
        "sub": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry; return the claims."""
    raw = (token or "").strip()
    if not raw:
        raise AuthTokenError("Access token is empty.")

    settings = get_settings()
    try:
        return jwt.decode(raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise AuthTokenError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthTokenError("Invalid access token.") from exc
