"""Credential helpers: bcrypt hashing/verification and JWT round trip.

Tests cover:
    - Hashes are salted and never equal the plaintext
    - verify_password is False for wrong, empty or malformed input (never raises)
    - Tokens decode to the claims they were built with; tampering is rejected
"""

import time

import jwt
import pytest

from ideaboard.config import get_settings
from ideaboard.core import security
from ideaboard.core.errors import AuthTokenError


def test_hash_is_not_plaintext_and_is_salted():
    first = security.hash_password("hunter22")
    second = security.hash_password("hunter22")
    assert first != "hunter22"
    assert first != second
    assert first.startswith("$2")


def test_verify_accepts_correct_password():
    hashed = security.hash_password("correct horse")
    assert security.verify_password("correct horse", hashed)


def test_verify_rejects_wrong_password():
    hashed = security.hash_password("correct horse")
    assert not security.verify_password("battery staple", hashed)


def test_verify_rejects_empty_and_malformed_input():
    hashed = security.hash_password("secret")
    assert not security.verify_password("", hashed)
    assert not security.verify_password("secret", "")
    assert not security.verify_password("secret", "not-a-bcrypt-hash")


def test_hash_rejects_empty_password():
    with pytest.raises(ValueError):
        security.hash_password("")


def test_dummy_hash_is_cached_and_valid():
    assert security.dummy_password_hash() is security.dummy_password_hash()
    assert not security.verify_password("anything", security.dummy_password_hash())


def test_token_round_trip():
    token = security.build_access_token(user_id="abc-123", username="ada")
    claims = security.decode_access_token(token)
    assert claims["sub"] == "abc-123"
    assert claims["username"] == "ada"
    assert claims["exp"] > claims["iat"]


def test_token_lifetime_follows_settings():
    token = security.build_access_token(user_id="1", username="ada")
    claims = security.decode_access_token(token)
    expected = get_settings().access_token_expire_minutes * 60
    assert claims["exp"] - claims["iat"] == expected


def test_decode_rejects_foreign_signature():
    forged = jwt.encode({"sub": "1", "username": "ada"}, "other-secret", algorithm="HS256")
    with pytest.raises(AuthTokenError) as exc_info:
        security.decode_access_token(forged)
    assert exc_info.value.http_status == 401


def test_decode_rejects_expired_token():
    settings = get_settings()
    now = int(time.time())
    expired = jwt.encode(
        {"sub": "1", "username": "ada", "iat": now - 120, "exp": now - 60},
        settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(AuthTokenError, match="expired"):
        security.decode_access_token(expired)


def test_decode_rejects_empty_token():
    with pytest.raises(AuthTokenError):
        security.decode_access_token("   ")
