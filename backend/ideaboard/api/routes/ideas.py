"""Idea Routes: CRUD under /api/ideas.

Invariants:
    - Create/update bodies are logged before being handed to the service
    - Unknown ids surface as 404 (ResourceNotFoundError)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ideaboard.api.dependencies import get_idea_service
from ideaboard.core.domain_types import IdeaId
from ideaboard.schemas.idea import IdeaCreate, IdeaDeleted, IdeaResponse, IdeaUpdate
from ideaboard.services.idea_service import IdeaService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/ideas", tags=["ideas"])


@router.get("", response_model=list[IdeaResponse])
async def show_all_ideas(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: IdeaService = Depends(get_idea_service),
):
    """List ideas, newest first."""
    return await service.show_all(limit=limit, offset=offset)


@router.post(
    "", response_model=IdeaResponse, status_code=status.HTTP_201_CREATED,
)
async def create_idea(
    body: IdeaCreate, service: IdeaService = Depends(get_idea_service),
):
    logger.info(f"Create idea: {body.model_dump_json()}")
    return await service.create(body)


@router.get("/{idea_id}", response_model=IdeaResponse)
async def read_idea(
    idea_id: UUID, service: IdeaService = Depends(get_idea_service),
):
    return await service.read(IdeaId(idea_id))


@router.put("/{idea_id}", response_model=IdeaResponse)
async def update_idea(
    idea_id: UUID,
    body: IdeaUpdate,
    service: IdeaService = Depends(get_idea_service),
):
    """Overwrite only the fields present in the body."""
    logger.info(
        f"Update idea: {body.model_dump_json(exclude_unset=True)}",
        extra={"idea_id": str(idea_id)},
    )
    return await service.update(IdeaId(idea_id), body)


@router.delete("/{idea_id}", response_model=IdeaDeleted)
async def destroy_idea(
    idea_id: UUID, service: IdeaService = Depends(get_idea_service),
):
    return await service.destroy(IdeaId(idea_id))
