"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
"""

from ideaboard.models.user import User  # noqa: F401
from ideaboard.models.idea import Idea  # noqa: F401
