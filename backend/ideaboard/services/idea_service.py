"""Idea Service: pass-through CRUD with not-found checks."""

import logging

from ideaboard.core.domain_types import IdeaId
from ideaboard.core.errors import ResourceNotFoundError
from ideaboard.core.repository_protocols import IdeaRepository
from ideaboard.models.idea import Idea
from ideaboard.schemas.idea import IdeaCreate, IdeaUpdate

logger = logging.getLogger(__name__)


class IdeaService:
    """Idea use cases."""

    def __init__(self, ideas: IdeaRepository):
        self.ideas = ideas

    async def show_all(self, *, limit: int = 100, offset: int = 0) -> list[Idea]:
        return await self.ideas.list_recent(limit=limit, offset=offset)

    async def create(self, data: IdeaCreate) -> Idea:
        record = await self.ideas.create(
            idea=data.idea, description=data.description,
        )
        logger.info("Idea created", extra={"idea_id": str(record.id)})
        return record

    async def read(self, idea_id: IdeaId) -> Idea:
        return await self._get_or_404(idea_id)

    async def update(self, idea_id: IdeaId, data: IdeaUpdate) -> Idea:
        record = await self._get_or_404(idea_id)
        return await self.ideas.update(record, data.changes())

    async def destroy(self, idea_id: IdeaId) -> dict:
        record = await self._get_or_404(idea_id)
        await self.ideas.delete(record)
        logger.info("Idea deleted", extra={"idea_id": str(idea_id)})
        return {"deleted": True}

    async def _get_or_404(self, idea_id: IdeaId) -> Idea:
        record = await self.ideas.get(idea_id)
        if record is None:
            raise ResourceNotFoundError("Idea", str(idea_id))
        return record
