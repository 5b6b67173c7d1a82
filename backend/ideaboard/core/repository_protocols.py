"""Boundary Protocols: contracts between services and persistence.

Invariants:
    - Services depend on these Protocols, never on a concrete repository
    - Repositories own commits; services never touch the AsyncSession

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
"""

from typing import Protocol

from ideaboard.core.domain_types import IdeaId
from ideaboard.models.idea import Idea
from ideaboard.models.user import User


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def list_all(self) -> list[User]: ...
    async def get_by_username(self, username: str) -> User | None: ...
    async def create(self, *, username: str, password_hash: str) -> User: ...


class IdeaRepository(Protocol):
    """Contract for idea persistence."""
    async def list_recent(self, *, limit: int, offset: int) -> list[Idea]: ...
    async def get(self, idea_id: IdeaId) -> Idea | None: ...
    async def create(self, *, idea: str, description: str) -> Idea: ...
    async def update(self, record: Idea, fields: dict) -> Idea: ...
    async def delete(self, record: Idea) -> None: ...
