"""Domain Types: identity wrappers and field limits shared across layers.

Invariants:
    - UserId and IdeaId wrap UUIDs
    - Length limits live here so models, schemas and migrations agree
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
IdeaId = NewType("IdeaId", UUID)


# ─── Field Limits ────────────────────────────────────────────────

USERNAME_MAX_LENGTH = 64
IDEA_TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000
# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72
