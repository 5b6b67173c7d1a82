"""User Schemas: credentials DTO and the sanitized user response.

Invariants:
    - UserCredentials is shared by /login and /register
    - password is not stripped; its UTF-8 form must fit bcrypt's 72-byte limit
    - UserResponse has no credential field at all
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ideaboard.core.domain_types import PASSWORD_MAX_BYTES, USERNAME_MAX_LENGTH
from ideaboard.schemas.base import RequestBody, UtcDatetime, non_blank


Username = non_blank(USERNAME_MAX_LENGTH)


class UserCredentials(RequestBody):
    """Login / registration body."""
    username: Username
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password cannot be empty or whitespace")
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
        return v


class UserResponse(BaseModel):
    """Public-facing user data. token is only set on login and registration."""
    id: UUID
    username: str
    created_at: UtcDatetime
    token: str | None = None
