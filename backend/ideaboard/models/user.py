"""User ORM: registered account with a bcrypt credential.

Invariants:
    - username is unique (constraint + pre-insert check in UserService)
    - password_hash never appears in to_response() output
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ideaboard.core import security
from ideaboard.core.domain_types import USERNAME_MAX_LENGTH
from ideaboard.db.base import Base


class User(Base):
    """Application user."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def verify_password(self, plain_password: str) -> bool:
        """Compare a login attempt against the stored hash."""
        return security.verify_password(plain_password, self.password_hash)

    @property
    def token(self) -> str:
        return security.build_access_token(
            user_id=str(self.id), username=self.username,
        )

    def to_response(self, include_token: bool = True) -> dict:
        """Sanitized representation: no credential hash, token on request."""
        response = {
            "id": self.id,
            "username": self.username,
            "created_at": self.created_at,
        }
        if include_token:
            response["token"] = self.token
        return response

    def __repr__(self) -> str:
        return f"<User {self.username!r}>"
