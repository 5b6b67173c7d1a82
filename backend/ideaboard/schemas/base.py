"""Request Body Validation: the shared validator every request DTO builds on.

Invariants:
    - Unknown fields are rejected (extra="forbid")
    - Text fields declared with non_blank() are stripped and must stay non-empty
    - Any failure surfaces as RequestValidationError → 400 (api/error_handlers.py)
    - UtcDatetime response fields always carry an offset, whatever the backend returned
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints


def non_blank(max_length: int):
    """Stripped string type with 1..max_length characters."""
    return Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=max_length),
    ]


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are UTC, so naive means UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class RequestBody(BaseModel):
    """Base class for validated request bodies."""
    model_config = ConfigDict(extra="forbid")
