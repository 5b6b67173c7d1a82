"""User schemas: credentials validation and sanitized response shape.

Invariants:
    - username is stripped and must be non-empty
    - password is kept verbatim but must fit in 72 UTF-8 bytes
    - unknown fields are rejected
"""

import pytest
from pydantic import ValidationError

from ideaboard.schemas.user import UserCredentials, UserResponse


def test_username_is_stripped():
    creds = UserCredentials(username="  ada  ", password="pw")
    assert creds.username == "ada"


def test_password_is_not_stripped():
    creds = UserCredentials(username="ada", password=" pw ")
    assert creds.password == " pw "


def test_blank_username_rejected():
    with pytest.raises(ValidationError):
        UserCredentials(username="   ", password="pw")


def test_blank_password_rejected():
    with pytest.raises(ValidationError):
        UserCredentials(username="ada", password="   ")


def test_missing_password_rejected():
    with pytest.raises(ValidationError):
        UserCredentials(username="ada")


def test_password_over_72_bytes_rejected():
    with pytest.raises(ValidationError):
        UserCredentials(username="ada", password="é" * 37)


def test_extra_fields_rejected():
    with pytest.raises(ValidationError):
        UserCredentials(username="ada", password="pw", is_admin=True)


def test_user_response_has_no_credential_field():
    assert "password" not in UserResponse.model_fields
    assert "password_hash" not in UserResponse.model_fields
