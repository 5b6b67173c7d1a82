"""Idea persistence."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.core.domain_types import IdeaId
from ideaboard.models.idea import Idea


class SqlIdeaRepository:
    """IdeaRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_recent(self, *, limit: int, offset: int) -> list[Idea]:
        result = await self.db.execute(
            select(Idea)
            .order_by(Idea.created_at.desc(), Idea.id.desc())
            .limit(limit)
            .offset(offset),
        )
        return list(result.scalars().all())

    async def get(self, idea_id: IdeaId) -> Idea | None:
        return await self.db.get(Idea, idea_id)

    async def create(self, *, idea: str, description: str) -> Idea:
        record = Idea(idea=idea, description=description)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def update(self, record: Idea, fields: dict) -> Idea:
        for name, value in fields.items():
            setattr(record, name, value)
        record.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def delete(self, record: Idea) -> None:
        await self.db.delete(record)
        await self.db.commit()
