"""Idea schemas: create requires both fields, update requires at least one."""

import pytest
from pydantic import ValidationError

from ideaboard.schemas.idea import IdeaCreate, IdeaUpdate


def test_create_strips_fields():
    body = IdeaCreate(idea="  Build a thing ", description=" because ")
    assert body.idea == "Build a thing"
    assert body.description == "because"


def test_create_requires_description():
    with pytest.raises(ValidationError):
        IdeaCreate(idea="Build a thing")


def test_create_rejects_non_string():
    with pytest.raises(ValidationError):
        IdeaCreate(idea=12, description="x")


def test_create_rejects_overlong_title():
    with pytest.raises(ValidationError):
        IdeaCreate(idea="x" * 256, description="x")


def test_update_keeps_only_sent_fields():
    body = IdeaUpdate(description="new text")
    assert body.changes() == {"description": "new text"}


def test_update_empty_body_rejected():
    with pytest.raises(ValidationError, match="No body submitted"):
        IdeaUpdate()


def test_update_all_null_rejected():
    with pytest.raises(ValidationError, match="No body submitted"):
        IdeaUpdate(idea=None, description=None)


def test_update_blank_field_rejected():
    with pytest.raises(ValidationError):
        IdeaUpdate(idea="   ")


def test_response_treats_naive_timestamps_as_utc():
    import uuid
    from datetime import datetime, timedelta, timezone

    from ideaboard.schemas.idea import IdeaResponse

    naive = datetime(2026, 10, 17, 6, 3, 5)
    shifted = datetime(2026, 10, 17, 8, 3, 5, tzinfo=timezone(timedelta(hours=2)))
    resp = IdeaResponse(
        id=uuid.uuid4(), idea="x", description="y",
        created_at=naive, updated_at=shifted,
    )
    assert resp.created_at == datetime(2026, 10, 17, 6, 3, 5, tzinfo=timezone.utc)
    assert resp.updated_at.utcoffset() == timedelta(0)
    assert resp.updated_at == resp.created_at
