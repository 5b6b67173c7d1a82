"""User persistence."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.core.errors import UsernameTakenError
from ideaboard.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at.asc()),
        )
        return list(result.scalars().all())

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def create(self, *, username: str, password_hash: str) -> User:
        """Insert a user. A unique-constraint hit means another request won the race."""
        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info(
                "Username taken at insert time", extra={"username": username},
            )
            raise UsernameTakenError(username)
        await self.db.refresh(user)
        return user
