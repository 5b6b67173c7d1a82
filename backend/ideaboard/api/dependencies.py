"""Service providers for route handlers: one request-scoped session per service."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.infrastructure.database import get_db
from ideaboard.repositories.idea_repository import SqlIdeaRepository
from ideaboard.repositories.user_repository import SqlUserRepository
from ideaboard.services.idea_service import IdeaService
from ideaboard.services.user_service import UserService


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlUserRepository(db))


async def get_idea_service(db: AsyncSession = Depends(get_db)) -> IdeaService:
    return IdeaService(SqlIdeaRepository(db))
