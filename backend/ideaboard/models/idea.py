"""Idea ORM: a single idea with a short title and free-text description."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ideaboard.core.domain_types import IDEA_TITLE_MAX_LENGTH
from ideaboard.db.base import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Idea(Base):
    """Idea record: plain CRUD, no relationships."""
    __tablename__ = "ideas"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    idea: Mapped[str] = mapped_column(
        String(IDEA_TITLE_MAX_LENGTH), nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now,
    )
