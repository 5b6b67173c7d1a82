"""Idea Schemas: create/update DTOs and the idea response.

Invariants:
    - IdeaCreate requires both idea and description
    - IdeaUpdate accepts any subset, but not an empty body
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from ideaboard.core.domain_types import DESCRIPTION_MAX_LENGTH, IDEA_TITLE_MAX_LENGTH
from ideaboard.schemas.base import RequestBody, UtcDatetime, non_blank

IdeaTitle = non_blank(IDEA_TITLE_MAX_LENGTH)
IdeaDescription = non_blank(DESCRIPTION_MAX_LENGTH)


class IdeaCreate(RequestBody):
    """New idea body."""
    idea: IdeaTitle
    description: IdeaDescription


class IdeaUpdate(RequestBody):
    """Partial idea body: only provided fields are written."""
    idea: IdeaTitle | None = None
    description: IdeaDescription | None = None

    @model_validator(mode="after")
    def require_some_field(self) -> "IdeaUpdate":
        if not self.changes():
            raise ValueError("No body submitted")
        return self

    def changes(self) -> dict:
        """Fields the client actually sent with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class IdeaResponse(BaseModel):
    """Idea as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    idea: str
    description: str
    created_at: UtcDatetime
    updated_at: UtcDatetime


class IdeaDeleted(BaseModel):
    deleted: bool = True
